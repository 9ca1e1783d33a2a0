"""Transaction payloads: BIP21 payment URI, base64 PSBT or hex raw transaction.

Validation and payload building are pure functions over
:class:`TransactionFields`; :class:`TransactionPayloadBuilder` only adds the
selected format and the destructive reset on format change.
"""

from __future__ import annotations

import base64
import binascii
import enum
import re
from dataclasses import dataclass, replace
from decimal import Decimal, InvalidOperation

from btc_qr.encoders.address import validate_address
from btc_qr.encoders.results import EncodeResult, ErrorKind, ValidationResult
from btc_qr.encoders.uri import build_payment_uri
from btc_qr.render.qr import ErrorCorrection

_HEX = re.compile(r"[0-9a-fA-F]+")
# Plain ASCII decimal, optional exponent; no digit separators or non-ASCII digits.
_AMOUNT = re.compile(r"(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


class TransactionFormat(enum.StrEnum):
    """Payload formats offered for transactions."""

    PAYMENT_URI = "payment-uri"
    PSBT = "psbt"
    RAW_TX = "raw"

    @property
    def error_correction(self) -> ErrorCorrection:
        # Large PSBT / raw payloads need the densest codes to fit.
        if self is TransactionFormat.PAYMENT_URI:
            return ErrorCorrection.M
        return ErrorCorrection.L


@dataclass(frozen=True, slots=True)
class TransactionFields:
    """Raw form input for every transaction format."""

    address: str = ""
    amount: str = ""
    label: str = ""
    message: str = ""
    data: str = ""


EXAMPLES: dict[TransactionFormat, TransactionFields] = {
    TransactionFormat.PAYMENT_URI: TransactionFields(
        address="bc1qxy2kgdygjrsqtzq2n0yrf2493p83kkfjhx0wlh",
        amount="0.001",
        label="Coffee Payment",
        message="Thanks for the coffee!",
    ),
    TransactionFormat.PSBT: TransactionFields(
        data=(
            "cHNidP8BAHECAAAAAeVj0LhXaN8SLlGHGcqZpz8pKXVKVlGUCqFALNqC9m2qAAAAAAD/////AkBCDwAA"
            "AAAAFgAUxkgHzf0wgZwLmKG3LggTvqo0gR6w4gEAAAAAABYAFPfEVfn7fG74VR/fS1GYfvpRVRcDAAAA"
            "AAEBKwDh9QUAAAAAIgAgi9NlGq47iScWGxrKT5Z+6EXJCxwz8+2XWnWw9LxEWW0AAA=="
        ),
    ),
    TransactionFormat.RAW_TX: TransactionFields(
        data=(
            "0200000001e563d0b8576adf122e51871cea19a73f2929754a56519402a1402cdaa2f66daa00000000"
            "00ffffffff0240420f0000000000160014c64807cdfd30819c0b98a1b72e0813bea3348116b0e2010"
            "00000000016001477c455f9fb7c6ef8551fdf4b51987efc51551703"
        ),
    ),
}


# ---------------------------------------------------------------------------
# Field checks
# ---------------------------------------------------------------------------


def is_valid_amount(amount: str) -> bool:
    """True if *amount* is ASCII decimal text for a finite value strictly above zero."""
    text = amount.strip()
    if _AMOUNT.fullmatch(text) is None:
        return False
    try:
        value = Decimal(text)
    except InvalidOperation:
        return False
    return value.is_finite() and value > 0


def is_valid_base64(text: str) -> bool:
    """True if *text* survives a strict base64 decode/encode round trip unchanged."""
    try:
        decoded = base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError):
        return False
    return base64.b64encode(decoded).decode("ascii") == text


def is_valid_hex(text: str) -> bool:
    """True if *text* is non-empty and made only of hex digits (any length)."""
    return _HEX.fullmatch(text) is not None


# ---------------------------------------------------------------------------
# Pure validation / payload building
# ---------------------------------------------------------------------------


def validate_transaction(fmt: TransactionFormat, fields: TransactionFields) -> ValidationResult:
    """Validate *fields* for the given format."""
    if fmt is TransactionFormat.PAYMENT_URI:
        if not fields.address.strip():
            return ValidationResult.failure(
                ErrorKind.INCOMPLETE_INPUT, "Please enter a Bitcoin address"
            )
        if not validate_address(fields.address):
            return ValidationResult.failure(
                ErrorKind.INVALID_ADDRESS, "Invalid Bitcoin address format"
            )
        if fields.amount and not is_valid_amount(fields.amount):
            return ValidationResult.failure(ErrorKind.INVALID_AMOUNT, "Invalid amount")
        return ValidationResult.success()

    data = fields.data.strip()
    if fmt is TransactionFormat.PSBT:
        if not data:
            return ValidationResult.failure(ErrorKind.INCOMPLETE_INPUT, "Please enter a PSBT")
        if not is_valid_base64(data):
            return ValidationResult.failure(
                ErrorKind.INVALID_ENCODING,
                "Invalid PSBT format. Expected base64 encoded data.",
            )
        return ValidationResult.success()

    if not data:
        return ValidationResult.failure(
            ErrorKind.INCOMPLETE_INPUT, "Please enter a raw transaction"
        )
    if not is_valid_hex(data):
        return ValidationResult.failure(
            ErrorKind.INVALID_ENCODING,
            "Invalid raw transaction format. Expected hexadecimal data.",
        )
    return ValidationResult.success()


def build_transaction_payload(fmt: TransactionFormat, fields: TransactionFields) -> EncodeResult:
    """Validate then build the QR payload string for *fmt*."""
    check = validate_transaction(fmt, fields)
    if not check:
        return EncodeResult.from_validation(check)
    if fmt is TransactionFormat.PAYMENT_URI:
        return EncodeResult.success(
            build_payment_uri(
                fields.address,
                amount=fields.amount or None,
                label=fields.label or None,
                message=fields.message or None,
            )
        )
    return EncodeResult.success(fields.data.strip())


# ---------------------------------------------------------------------------
# Stateful form wrapper
# ---------------------------------------------------------------------------


class TransactionPayloadBuilder:
    """Selected format plus its field state.

    Switching the format wipes every field; it is not a reversible tab switch.
    """

    def __init__(self, fmt: TransactionFormat = TransactionFormat.PAYMENT_URI) -> None:
        self._format = fmt
        self.fields = TransactionFields()

    @property
    def format(self) -> TransactionFormat:
        return self._format

    @property
    def error_correction(self) -> ErrorCorrection:
        return self._format.error_correction

    def set_format(self, fmt: TransactionFormat) -> None:
        self._format = fmt
        self.clear()

    def clear(self) -> None:
        self.fields = TransactionFields()

    def update(self, **changes: str) -> None:
        """Replace individual fields, e.g. ``update(address="bc1...")``."""
        self.fields = replace(self.fields, **changes)

    def load_example(self) -> None:
        self.fields = EXAMPLES[self._format]

    def validate(self) -> ValidationResult:
        return validate_transaction(self._format, self.fields)

    def build_payload(self) -> EncodeResult:
        return build_transaction_payload(self._format, self.fields)
