"""Seed phrase QR endpoint.

The phrase is rendered and returned as an image only; it is never echoed back
as text or logged.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends
from starlette.responses import Response  # noqa: TC002

from btc_qr.api.dependencies import get_qr_service
from btc_qr.api.schemas import SeedPhraseRequest
from btc_qr.api.v1.responses import PNG_RESPONSE, png_response
from btc_qr.encoders.results import ErrorKind
from btc_qr.encoders.seed import SeedPhraseEncoder
from btc_qr.errors.definitions import error_for
from btc_qr.render.export import ExportMode
from btc_qr.render.service import QRService  # noqa: TC001

router = APIRouter(tags=["seed-phrase"])


def _load_encoder(body: SeedPhraseRequest) -> SeedPhraseEncoder:
    """Fill a fresh encoder from either the pasted phrase or the slot list."""
    encoder = SeedPhraseEncoder(body.word_count)
    if body.phrase is not None:
        pasted = encoder.paste_bulk(body.phrase, 0)
        if not pasted:
            raise pasted.to_error()
    elif body.words is not None:
        if len(body.words) != body.word_count:
            raise error_for(
                ErrorKind.WRONG_WORD_COUNT,
                f"Expected {body.word_count} words, got {len(body.words)}",
            )
        for index, word in enumerate(body.words):
            encoder.set_word(index, word)
    return encoder


@router.post("/seed-phrase/qr", response_class=Response, responses=PNG_RESPONSE)
def seed_phrase_qr(
    body: SeedPhraseRequest,
    service: Annotated[QRService, Depends(get_qr_service)],
) -> Response:
    """Render a 12 or 24 word seed phrase as a QR code."""
    encoder = _load_encoder(body)
    image = service.generate(
        ExportMode.SEED_PHRASE, encoder.encode(), encoder.error_correction
    )
    return png_response(image)
