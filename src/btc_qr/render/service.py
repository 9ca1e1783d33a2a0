"""Glue between encoders and the rasteriser.

``QRService.generate`` takes an encoder's :class:`EncodeResult`, raises the
matching :class:`QRError` when it failed, and otherwise renders the payload
into a named PNG while recording metrics.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from btc_qr.errors.qr_errors import RenderError
from btc_qr.render.export import ExportMode, export_filename

if TYPE_CHECKING:
    from btc_qr.encoders.results import EncodeResult
    from btc_qr.metrics.collector import QRMetrics
    from btc_qr.render.qr import ErrorCorrection, QRRenderer

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class QRImage:
    """A rendered QR code ready for export."""

    png: bytes
    filename: str
    mode: ExportMode
    error_correction: ErrorCorrection


class QRService:
    """Validate-then-render pipeline shared by the HTTP API and the desktop app."""

    def __init__(self, renderer: QRRenderer, metrics: QRMetrics | None = None) -> None:
        self._renderer = renderer
        self._metrics = metrics

    @property
    def renderer(self) -> QRRenderer:
        return self._renderer

    def generate(
        self,
        mode: ExportMode,
        result: EncodeResult,
        error_correction: ErrorCorrection,
    ) -> QRImage:
        """Render *result*'s payload for *mode*.

        Raises:
            QRError: If *result* is a validation failure.
            RenderError: If rasterisation fails.
        """
        if result.error is not None and self._metrics is not None:
            self._metrics.record_validation_failure(mode, result.error)
        payload = result.unwrap()

        options = self._renderer.defaults.with_error_correction(error_correction)
        try:
            if self._metrics is not None:
                with self._metrics.track_render(mode):
                    png = self._renderer.render(payload, options)
            else:
                png = self._renderer.render(payload, options)
        except RenderError as exc:
            if self._metrics is not None:
                self._metrics.record_render_failure(mode, exc.code)
            raise

        if self._metrics is not None:
            self._metrics.record_generated(mode)
        logger.debug("Rendered %s QR (%d bytes)", mode, len(png))
        return QRImage(
            png=png,
            filename=export_filename(mode),
            mode=mode,
            error_correction=error_correction,
        )
