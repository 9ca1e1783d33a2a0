"""QRError — base exception class for all btc-qr-tools errors."""

from __future__ import annotations


class QRError(Exception):
    """Base error for payload validation and QR generation.

    Attributes:
        message: Human-readable error description.
        status_code: Suggested HTTP status code.
        code: Machine-readable error code string.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int = 400,
        code: str = "qr-error",
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code


class RenderError(QRError):
    """Error from the QR rasteriser.

    ``too_large`` is set when the payload exceeds the capacity of the largest
    QR version at the requested error-correction level.
    """

    def __init__(self, message: str, *, too_large: bool = False) -> None:
        super().__init__(
            message,
            status_code=413 if too_large else 500,
            code="payload-too-large" if too_large else "render-failed",
        )
        self.too_large = too_large
