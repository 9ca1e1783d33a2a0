"""QR code rasteriser built on ``qrcode`` with the Pillow image factory.

Payload contents are never logged: seed phrases are wallet secrets.
"""

from __future__ import annotations

import enum
import io
import logging
from dataclasses import dataclass, replace

import qrcode
from PIL import Image
from qrcode.constants import ERROR_CORRECT_H, ERROR_CORRECT_L, ERROR_CORRECT_M, ERROR_CORRECT_Q
from qrcode.exceptions import DataOverflowError
from qrcode.image.pil import PilImage

from btc_qr.errors.qr_errors import RenderError

logger = logging.getLogger(__name__)

MSG_TOO_LARGE = "Failed to generate QR code. The data might be too long for a QR code."
MSG_FAILED = "Failed to generate QR code"


class ErrorCorrection(enum.StrEnum):
    """QR error-correction levels (roughly 7 / 15 / 25 / 30 % recovery)."""

    L = "L"
    M = "M"
    Q = "Q"
    H = "H"

    @property
    def qrcode_constant(self) -> int:
        return _QRCODE_LEVELS[self]


_QRCODE_LEVELS = {
    ErrorCorrection.L: ERROR_CORRECT_L,
    ErrorCorrection.M: ERROR_CORRECT_M,
    ErrorCorrection.Q: ERROR_CORRECT_Q,
    ErrorCorrection.H: ERROR_CORRECT_H,
}


@dataclass(frozen=True, slots=True)
class RenderOptions:
    """Rasterisation parameters passed alongside each payload."""

    width_px: int = 400
    margin_modules: int = 2
    foreground: str = "#1e1e1e"
    background: str = "#ffffff"
    error_correction: ErrorCorrection = ErrorCorrection.M

    def with_error_correction(self, level: ErrorCorrection) -> RenderOptions:
        return replace(self, error_correction=level)


class QRRenderer:
    """Render payload strings into PNG bytes."""

    def __init__(self, defaults: RenderOptions | None = None) -> None:
        self._defaults = defaults or RenderOptions()

    @property
    def defaults(self) -> RenderOptions:
        return self._defaults

    def render(self, payload: str, options: RenderOptions | None = None) -> bytes:
        """Encode *payload* as a square PNG ``options.width_px`` wide.

        Raises:
            RenderError: ``too_large=True`` when the payload exceeds the
                capacity of QR version 40 at the requested level; otherwise
                for any other rasterisation failure.
        """
        opts = options or self._defaults
        qr = qrcode.QRCode(
            version=None,
            error_correction=opts.error_correction.qrcode_constant,
            box_size=1,
            border=opts.margin_modules,
            image_factory=PilImage,
        )
        try:
            qr.add_data(payload)
        except ValueError as exc:
            logger.warning("QR encoding failed for %d char payload: %s", len(payload), exc)
            raise RenderError(MSG_FAILED) from exc
        try:
            qr.make(fit=True)
        except (DataOverflowError, ValueError) as exc:
            # qrcode >= 8 reports overflow as a ValueError from its version check.
            logger.warning(
                "Payload of %d chars exceeds QR capacity at level %s",
                len(payload),
                opts.error_correction,
            )
            raise RenderError(MSG_TOO_LARGE, too_large=True) from exc

        modules = qr.modules_count + 2 * opts.margin_modules
        qr.box_size = max(1, opts.width_px // modules)
        try:
            img = qr.make_image(fill_color=opts.foreground, back_color=opts.background)
            pil_img = img.get_image().convert("RGB")
            if pil_img.width != opts.width_px:
                pil_img = pil_img.resize(
                    (opts.width_px, opts.width_px), Image.Resampling.NEAREST
                )
            buf = io.BytesIO()
            pil_img.save(buf, format="PNG")
        except (OSError, ValueError) as exc:
            logger.warning("QR rasterisation failed: %s", exc)
            raise RenderError(MSG_FAILED) from exc
        return buf.getvalue()
