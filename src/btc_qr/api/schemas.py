"""API request/response schemas (Pydantic models)."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from btc_qr.encoders.descriptor import DescriptorVariant  # noqa: TC001 - Pydantic needs this at runtime
from btc_qr.encoders.transaction import TransactionFormat  # noqa: TC001
from btc_qr.render.qr import ErrorCorrection  # noqa: TC001

# ---------------------------------------------------------------------------
# Common
# ---------------------------------------------------------------------------


class ErrorResponse(BaseModel):
    """Standard error response."""

    code: str
    message: str


# ---------------------------------------------------------------------------
# Wordlist
# ---------------------------------------------------------------------------


class SuggestResponse(BaseModel):
    """Autocomplete suggestions for a seed-word prefix."""

    prefix: str
    suggestions: list[str]


# ---------------------------------------------------------------------------
# Seed phrase
# ---------------------------------------------------------------------------


class SeedPhraseRequest(BaseModel):
    """Seed phrase as individual slot values or as one pasted string."""

    word_count: Literal[12, 24] = Field(12, alias="wordCount")
    words: list[str] | None = Field(None, description="One entry per slot, empty for unfilled")
    phrase: str | None = Field(None, description="Whitespace-separated phrase, as if pasted")

    model_config = {"populate_by_name": True}


# ---------------------------------------------------------------------------
# Descriptor
# ---------------------------------------------------------------------------


class DescriptorRequest(BaseModel):
    """Wallet output descriptor text."""

    descriptor: str = ""


class DescriptorClassification(BaseModel):
    """Detected descriptor type."""

    variant: DescriptorVariant
    label: str
    valid: bool


# ---------------------------------------------------------------------------
# Transaction
# ---------------------------------------------------------------------------


class TransactionRequest(BaseModel):
    """Form fields for a transaction payload; unused fields are ignored."""

    format: TransactionFormat = TransactionFormat.PAYMENT_URI
    address: str = ""
    amount: str = ""
    label: str = ""
    message: str = ""
    data: str = Field("", description="PSBT (base64) or raw transaction (hex)")


class TransactionPayloadResponse(BaseModel):
    """Payload string that would be encoded into the QR."""

    format: TransactionFormat
    payload: str
    error_correction: ErrorCorrection = Field(alias="errorCorrection")

    model_config = {"populate_by_name": True}
