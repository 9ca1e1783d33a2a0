"""Error types for btc-qr-tools."""

from __future__ import annotations

from btc_qr.errors.qr_errors import QRError, RenderError

__all__ = ["QRError", "RenderError"]
