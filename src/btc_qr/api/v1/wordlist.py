"""Seed-word autocomplete endpoint."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from btc_qr.api.dependencies import get_matcher
from btc_qr.api.schemas import SuggestResponse
from btc_qr.encoders.wordlist import WordlistMatcher  # noqa: TC001

router = APIRouter(tags=["wordlist"])


@router.get("/wordlist/suggest")
def suggest_words(
    matcher: Annotated[WordlistMatcher, Depends(get_matcher)],
    prefix: Annotated[str, Query(max_length=16)] = "",
) -> SuggestResponse:
    """Up to 10 BIP-39 words starting with *prefix*, in list order."""
    return SuggestResponse(prefix=prefix, suggestions=matcher.suggest(prefix))
