"""Output descriptor classification by prefix pattern.

Classification is advisory: it looks at the script wrapper only and never
parses keys, derivation paths or the checksum suffix.
"""

from __future__ import annotations

import enum

from btc_qr.encoders.results import EncodeResult, ErrorKind, ValidationResult
from btc_qr.render.qr import ErrorCorrection

EXAMPLE_DESCRIPTOR = (
    "wpkh([d34db33f/84h/0h/0h]xpub6ERApfZwUNrhLCkDtcHTcxd75RbzS1ed54G1LkBUHQVHQKqhMkhgbmJb"
    "ZRkrgZw4koxb5JaHWkY4ALHY2grBGRjaDMzQLcgJvLJuZZvRcEL/0/*)"
)


class DescriptorVariant(enum.StrEnum):
    """Closed set of descriptor types."""

    P2PKH = "P2PKH"
    P2WPKH = "P2WPKH"
    P2SH_P2WPKH = "P2SH-P2WPKH"
    P2WSH = "P2WSH"
    P2SH_P2WSH = "P2SH-P2WSH"
    P2TR = "P2TR"
    COMBO = "Combo"
    MULTISIG = "Multisig"
    ADDRESS = "Address"
    RAW = "Raw"
    UNKNOWN = "Unknown"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    DescriptorVariant.P2PKH: "Legacy (P2PKH)",
    DescriptorVariant.P2WPKH: "Native SegWit (P2WPKH)",
    DescriptorVariant.P2SH_P2WPKH: "Nested SegWit (P2SH-P2WPKH)",
    DescriptorVariant.P2WSH: "Native SegWit (P2WSH)",
    DescriptorVariant.P2SH_P2WSH: "Nested SegWit (P2SH-P2WSH)",
    DescriptorVariant.P2TR: "Taproot (P2TR)",
    DescriptorVariant.COMBO: "Combo",
    DescriptorVariant.MULTISIG: "Multisig",
    DescriptorVariant.ADDRESS: "Address",
    DescriptorVariant.RAW: "Raw",
    DescriptorVariant.UNKNOWN: "Unknown",
}

# Checked top to bottom; the first matching prefix wins.
_PATTERNS: tuple[tuple[tuple[str, ...], DescriptorVariant], ...] = (
    (("pkh(",), DescriptorVariant.P2PKH),
    (("wpkh(",), DescriptorVariant.P2WPKH),
    (("sh(wpkh(",), DescriptorVariant.P2SH_P2WPKH),
    (("wsh(",), DescriptorVariant.P2WSH),
    (("sh(wsh(",), DescriptorVariant.P2SH_P2WSH),
    (("tr(",), DescriptorVariant.P2TR),
    (("combo(",), DescriptorVariant.COMBO),
    (("multi(", "sortedmulti("), DescriptorVariant.MULTISIG),
    (("addr(",), DescriptorVariant.ADDRESS),
    (("raw(",), DescriptorVariant.RAW),
)


def classify(text: str) -> DescriptorVariant:
    """Return the variant of the first prefix matching the trimmed *text*."""
    candidate = text.strip().lower()
    for prefixes, variant in _PATTERNS:
        if candidate.startswith(prefixes):
            return variant
    return DescriptorVariant.UNKNOWN


def is_valid_descriptor(text: str) -> bool:
    """True if the trimmed, non-empty *text* matches any known prefix."""
    candidate = text.strip().lower()
    if not candidate:
        return False
    return any(candidate.startswith(prefixes) for prefixes, _ in _PATTERNS)


class DescriptorClassifier:
    """Object form of :func:`classify` and :func:`is_valid_descriptor`."""

    def classify(self, text: str) -> DescriptorVariant:
        return classify(text)

    def validate(self, text: str) -> bool:
        return is_valid_descriptor(text)


class DescriptorEncoder:
    """Holds the descriptor text being composed."""

    error_correction = ErrorCorrection.H

    def __init__(self, text: str = "") -> None:
        self.text = text

    @property
    def detected(self) -> DescriptorVariant | None:
        """Live classification, ``None`` while the input is blank."""
        if not self.text.strip():
            return None
        return classify(self.text)

    def load_example(self) -> None:
        self.text = EXAMPLE_DESCRIPTOR

    def clear(self) -> None:
        self.text = ""

    def validate(self) -> ValidationResult:
        if not self.text.strip():
            return ValidationResult.failure(
                ErrorKind.INVALID_DESCRIPTOR, "Please enter a wallet descriptor"
            )
        if not is_valid_descriptor(self.text):
            return ValidationResult.failure(
                ErrorKind.INVALID_DESCRIPTOR,
                "Invalid descriptor format. Expected format: pkh(...), wpkh(...), "
                "sh(wpkh(...)), tr(...), etc.",
            )
        return ValidationResult.success()

    def build_payload(self) -> str:
        return self.text.strip()

    def encode(self) -> EncodeResult:
        """The trimmed descriptor, verbatim, once it passes validation."""
        check = self.validate()
        if not check:
            return EncodeResult.from_validation(check)
        return EncodeResult.success(self.build_payload())
