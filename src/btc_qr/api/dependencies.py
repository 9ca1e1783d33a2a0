"""FastAPI dependency injection helpers.

Provides ``Depends()``-compatible callables for the shared services stored on
``app.state`` during app construction.
"""

from __future__ import annotations

from fastapi import Request

from btc_qr.encoders.wordlist import WordlistMatcher  # noqa: TC001
from btc_qr.render.service import QRService  # noqa: TC001


def get_qr_service(request: Request) -> QRService:
    """Retrieve the validate-then-render service from ``app.state``."""
    return request.app.state.qr_service


def get_matcher(request: Request) -> WordlistMatcher:
    """Retrieve the shared BIP-39 matcher from ``app.state``."""
    return request.app.state.matcher
