"""Encoders — turn raw user text into QR-ready payload strings."""

from __future__ import annotations

from btc_qr.encoders.address import validate_address
from btc_qr.encoders.descriptor import (
    DescriptorClassifier,
    DescriptorEncoder,
    DescriptorVariant,
    classify,
    is_valid_descriptor,
)
from btc_qr.encoders.results import EncodeResult, ErrorKind, ValidationResult
from btc_qr.encoders.seed import SeedPhraseEncoder
from btc_qr.encoders.transaction import (
    TransactionFields,
    TransactionFormat,
    TransactionPayloadBuilder,
    build_transaction_payload,
    validate_transaction,
)
from btc_qr.encoders.uri import PaymentURIBuilder, build_payment_uri
from btc_qr.encoders.wordlist import SuggestionCursor, WordlistMatcher, load_wordlist, suggest

__all__ = [
    "DescriptorClassifier",
    "DescriptorEncoder",
    "DescriptorVariant",
    "EncodeResult",
    "ErrorKind",
    "PaymentURIBuilder",
    "SeedPhraseEncoder",
    "SuggestionCursor",
    "TransactionFields",
    "TransactionFormat",
    "TransactionPayloadBuilder",
    "ValidationResult",
    "WordlistMatcher",
    "build_payment_uri",
    "build_transaction_payload",
    "classify",
    "is_valid_descriptor",
    "load_wordlist",
    "suggest",
    "validate_address",
    "validate_transaction",
]
