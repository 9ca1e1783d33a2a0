"""Predefined error instances, one per validation failure kind."""

from __future__ import annotations

from btc_qr.encoders.results import ErrorKind
from btc_qr.errors.qr_errors import QRError

# -- Validation ------------------------------------------------------------

ErrIncompleteInput = QRError(
    "required input is missing", status_code=400, code=ErrorKind.INCOMPLETE_INPUT
)
ErrWrongWordCount = QRError(
    "wrong number of words", status_code=400, code=ErrorKind.WRONG_WORD_COUNT
)
ErrInvalidDescriptor = QRError(
    "Invalid descriptor format. Expected format: pkh(...), wpkh(...), sh(wpkh(...)), tr(...), etc.",
    status_code=400,
    code=ErrorKind.INVALID_DESCRIPTOR,
)
ErrInvalidAddress = QRError(
    "Invalid Bitcoin address format", status_code=400, code=ErrorKind.INVALID_ADDRESS
)
ErrInvalidAmount = QRError("Invalid amount", status_code=400, code=ErrorKind.INVALID_AMOUNT)
ErrInvalidEncoding = QRError(
    "invalid transaction encoding", status_code=400, code=ErrorKind.INVALID_ENCODING
)

# -- Rendering -------------------------------------------------------------

ErrPayloadTooLarge = QRError(
    "Failed to generate QR code. The data might be too long for a QR code.",
    status_code=413,
    code=ErrorKind.PAYLOAD_TOO_LARGE,
)
ErrRenderFailed = QRError("Failed to generate QR code", status_code=500, code="render-failed")

_BY_KIND: dict[ErrorKind, QRError] = {
    ErrorKind.INCOMPLETE_INPUT: ErrIncompleteInput,
    ErrorKind.WRONG_WORD_COUNT: ErrWrongWordCount,
    ErrorKind.INVALID_DESCRIPTOR: ErrInvalidDescriptor,
    ErrorKind.INVALID_ADDRESS: ErrInvalidAddress,
    ErrorKind.INVALID_AMOUNT: ErrInvalidAmount,
    ErrorKind.INVALID_ENCODING: ErrInvalidEncoding,
    ErrorKind.PAYLOAD_TOO_LARGE: ErrPayloadTooLarge,
}


def error_for(kind: ErrorKind, message: str | None = None) -> QRError:
    """Return the error for *kind*, optionally with a context-specific message.

    Without *message* the shared singleton is returned; with one, a fresh
    ``QRError`` carrying the same status and code.
    """
    base = _BY_KIND[kind]
    if message is None:
        return base
    return QRError(message, status_code=base.status_code, code=base.code)
