"""QR rendering — rasterisation, export names and request sequencing."""

from __future__ import annotations

from btc_qr.render.export import ExportMode, export_filename
from btc_qr.render.qr import ErrorCorrection, QRRenderer, RenderOptions
from btc_qr.render.sequencer import RequestSequencer
from btc_qr.render.service import QRImage, QRService

__all__ = [
    "ErrorCorrection",
    "ExportMode",
    "QRImage",
    "QRRenderer",
    "QRService",
    "RenderOptions",
    "RequestSequencer",
    "export_filename",
]
