"""Shared response builders for QR image endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from starlette.responses import Response

if TYPE_CHECKING:
    from btc_qr.render.service import QRImage

PNG_RESPONSE = {200: {"content": {"image/png": {}}, "description": "QR code image"}}


def png_response(image: QRImage) -> Response:
    """Wrap a rendered QR as a downloadable PNG attachment."""
    return Response(
        content=image.png,
        media_type="image/png",
        headers={
            "Content-Disposition": f'attachment; filename="{image.filename}"',
            "X-QR-Error-Correction": str(image.error_correction),
            "Cache-Control": "no-store",
        },
    )
