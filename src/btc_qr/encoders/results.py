"""Result types shared by every encoder.

Encoders never raise for bad user input. They hand back a
:class:`ValidationResult` or :class:`EncodeResult` naming the problem, and the
caller decides how to surface it (inline message, HTTP error, ...).
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from btc_qr.errors.qr_errors import QRError


class ErrorKind(enum.StrEnum):
    """Closed set of expected validation failures."""

    INCOMPLETE_INPUT = "incomplete-input"
    WRONG_WORD_COUNT = "wrong-word-count"
    INVALID_DESCRIPTOR = "invalid-descriptor"
    INVALID_ADDRESS = "invalid-address"
    INVALID_AMOUNT = "invalid-amount"
    INVALID_ENCODING = "invalid-encoding"
    PAYLOAD_TOO_LARGE = "payload-too-large"

    # A seed phrase with empty slots is the seed-phrase flavour of missing input.
    INCOMPLETE_PHRASE = "incomplete-input"


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of a validation step.

    Attributes:
        ok: True when the input is acceptable.
        reason: The failure kind, ``None`` on success.
        message: User-facing text naming the problem.
    """

    ok: bool
    reason: ErrorKind | None = None
    message: str = ""

    @classmethod
    def success(cls) -> ValidationResult:
        return cls(ok=True)

    @classmethod
    def failure(cls, reason: ErrorKind, message: str = "") -> ValidationResult:
        return cls(ok=False, reason=reason, message=message)

    def __bool__(self) -> bool:
        return self.ok

    def to_error(self) -> QRError:
        """Convert a failed result into the matching ``QRError``."""
        from btc_qr.errors.definitions import error_for  # noqa: PLC0415

        if self.ok or self.reason is None:
            msg = "cannot convert a successful result into an error"
            raise ValueError(msg)
        return error_for(self.reason, self.message or None)


@dataclass(frozen=True, slots=True)
class EncodeResult:
    """Outcome of an encode step: either a QR payload or a failure kind."""

    payload: str | None = None
    error: ErrorKind | None = None
    message: str = ""

    @classmethod
    def success(cls, payload: str) -> EncodeResult:
        return cls(payload=payload)

    @classmethod
    def failure(cls, error: ErrorKind, message: str = "") -> EncodeResult:
        return cls(error=error, message=message)

    @classmethod
    def from_validation(cls, result: ValidationResult) -> EncodeResult:
        """Lift a failed validation into an encode failure."""
        if result.ok or result.reason is None:
            msg = "cannot lift a successful validation into an encode failure"
            raise ValueError(msg)
        return cls(error=result.reason, message=result.message)

    @property
    def ok(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.ok

    def unwrap(self) -> str:
        """Return the payload or raise the matching ``QRError``.

        Raises:
            QRError: If the result is a failure.
        """
        if self.error is not None:
            from btc_qr.errors.definitions import error_for  # noqa: PLC0415

            raise error_for(self.error, self.message or None)
        if self.payload is None:
            msg = "encode result carries neither a payload nor an error"
            raise ValueError(msg)
        return self.payload
