"""Tests for BIP21 payment URIs — encoders/uri.py."""

from __future__ import annotations

from btc_qr.encoders.uri import PaymentURIBuilder, build_payment_uri

_ADDR = "bc1qxy2kgdygjrsqtzq2n0yrf2493p83kkfjhx0wlh"


class TestBuildPaymentURI:
    def test_address_only(self) -> None:
        assert build_payment_uri(_ADDR) == f"bitcoin:{_ADDR}"

    def test_amount_and_label(self) -> None:
        uri = PaymentURIBuilder().build(_ADDR, "0.001", "Coffee", None)
        assert uri == f"bitcoin:{_ADDR}?amount=0.001&label=Coffee"

    def test_all_fields_in_fixed_order(self) -> None:
        uri = build_payment_uri(_ADDR, "0.001", "Coffee Payment", "Thanks for the coffee!")
        assert uri == (
            f"bitcoin:{_ADDR}?amount=0.001&label=Coffee%20Payment"
            "&message=Thanks%20for%20the%20coffee!"
        )

    def test_message_only(self) -> None:
        assert build_payment_uri(_ADDR, message="hi") == f"bitcoin:{_ADDR}?message=hi"

    def test_empty_values_are_absent(self) -> None:
        assert build_payment_uri(_ADDR, "", "", "") == f"bitcoin:{_ADDR}"
        assert build_payment_uri(_ADDR, None, "", "x") == f"bitcoin:{_ADDR}?message=x"

    def test_amount_not_reformatted(self) -> None:
        assert build_payment_uri(_ADDR, "1.50000000").endswith("?amount=1.50000000")
        assert build_payment_uri(_ADDR, "1e-3").endswith("?amount=1e-3")

    def test_reserved_characters_escaped(self) -> None:
        uri = build_payment_uri(_ADDR, label="A&B=C?D/E#F", message="50% off + tax")
        assert "label=A%26B%3DC%3FD%2FE%23F" in uri
        assert "message=50%25%20off%20%2B%20tax" in uri

    def test_unicode_label(self) -> None:
        assert build_payment_uri(_ADDR, label="café").endswith("label=caf%C3%A9")

    def test_address_trimmed(self) -> None:
        assert build_payment_uri(f"  {_ADDR} ") == f"bitcoin:{_ADDR}"
