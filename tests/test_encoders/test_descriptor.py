"""Tests for descriptor classification — encoders/descriptor.py."""

from __future__ import annotations

import pytest

from btc_qr.encoders.descriptor import (
    EXAMPLE_DESCRIPTOR,
    DescriptorClassifier,
    DescriptorEncoder,
    DescriptorVariant,
    classify,
    is_valid_descriptor,
)
from btc_qr.encoders.results import ErrorKind
from btc_qr.render.qr import ErrorCorrection

_XPUB = "xpub6ERApfZwUNrhLCkDtcHTcxd75RbzS1ed54G1LkBUHQVHQKqhMkhgbmJbZRkrgZw4koxb5JaHWkY4ALHY2grBGRjaDMzQLcgJvLJuZZvRcEL"


class TestClassify:
    @pytest.mark.parametrize(
        ("text", "variant"),
        [
            (f"pkh({_XPUB}/0/*)", DescriptorVariant.P2PKH),
            (f"wpkh({_XPUB}/0/*)", DescriptorVariant.P2WPKH),
            (f"sh(wpkh({_XPUB}/0/*))", DescriptorVariant.P2SH_P2WPKH),
            (f"wsh(multi(2,{_XPUB},{_XPUB}))", DescriptorVariant.P2WSH),
            (f"sh(wsh(sortedmulti(2,{_XPUB},{_XPUB})))", DescriptorVariant.P2SH_P2WSH),
            (f"tr({_XPUB}/0/*)", DescriptorVariant.P2TR),
            (f"combo({_XPUB})", DescriptorVariant.COMBO),
            (f"multi(1,{_XPUB})", DescriptorVariant.MULTISIG),
            (f"sortedmulti(1,{_XPUB})", DescriptorVariant.MULTISIG),
            ("addr(bc1qxy2kgdygjrsqtzq2n0yrf2493p83kkfjhx0wlh)", DescriptorVariant.ADDRESS),
            ("raw(deadbeef)", DescriptorVariant.RAW),
        ],
    )
    def test_variants(self, text: str, variant: DescriptorVariant) -> None:
        assert classify(text) is variant

    def test_nested_segwit_not_generic(self) -> None:
        assert classify("sh(wsh(xpub...))") is DescriptorVariant.P2SH_P2WSH
        assert classify("sh(wpkh(xpub...))") is DescriptorVariant.P2SH_P2WPKH

    def test_unknown(self) -> None:
        assert classify("foo(bar)") is DescriptorVariant.UNKNOWN
        assert classify("sh(pk(xpub...))") is DescriptorVariant.UNKNOWN
        assert classify("") is DescriptorVariant.UNKNOWN

    def test_trims_and_ignores_case(self) -> None:
        assert classify("  WPKH(xpub...)\n") is DescriptorVariant.P2WPKH
        assert classify("Tr(xpub...)") is DescriptorVariant.P2TR

    def test_labels(self) -> None:
        assert DescriptorVariant.P2WPKH.label == "Native SegWit (P2WPKH)"
        assert DescriptorVariant.P2SH_P2WSH.label == "Nested SegWit (P2SH-P2WSH)"
        assert DescriptorVariant.P2TR.label == "Taproot (P2TR)"
        assert all(v.label for v in DescriptorVariant)


class TestIsValid:
    def test_accepts_known_prefix(self) -> None:
        assert is_valid_descriptor(EXAMPLE_DESCRIPTOR)

    @pytest.mark.parametrize("text", ["", "   ", "\n\t", "foo(bar)", "xpub6ERA..."])
    def test_rejects(self, text: str) -> None:
        assert not is_valid_descriptor(text)


class TestDescriptorEncoder:
    def test_payload_is_trimmed_verbatim(self) -> None:
        text = f"  wpkh([d34db33f/84h/0h/0h]{_XPUB}/0/*)#abcd1234 \n"
        result = DescriptorEncoder(text).encode()
        assert result.payload == text.strip()

    def test_empty_is_invalid_descriptor(self) -> None:
        result = DescriptorEncoder("   ").encode()
        assert result.error is ErrorKind.INVALID_DESCRIPTOR
        assert result.message == "Please enter a wallet descriptor"

    def test_unknown_prefix_is_invalid(self) -> None:
        result = DescriptorEncoder("foo(bar)").encode()
        assert result.error is ErrorKind.INVALID_DESCRIPTOR
        assert result.message.startswith("Invalid descriptor format")

    def test_detected(self) -> None:
        enc = DescriptorEncoder()
        assert enc.detected is None
        enc.load_example()
        assert enc.detected is DescriptorVariant.P2WPKH
        enc.clear()
        assert enc.text == ""

    def test_error_correction(self) -> None:
        assert DescriptorEncoder.error_correction is ErrorCorrection.H


class TestDescriptorClassifier:
    def test_delegates(self) -> None:
        classifier = DescriptorClassifier()
        assert classifier.classify("sh(wsh(xpub...))") is DescriptorVariant.P2SH_P2WSH
        assert classifier.validate("tr(xpub...)")
        assert not classifier.validate("foo(bar)")
