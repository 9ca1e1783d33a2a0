"""Tests for error classes and pre-defined error instances."""

from __future__ import annotations

import pytest

from btc_qr.encoders.results import ErrorKind
from btc_qr.errors import QRError, RenderError
from btc_qr.errors import definitions as defs

# ---------------------------------------------------------------------------
# QRError base class
# ---------------------------------------------------------------------------


class TestQRError:
    def test_default_attributes(self) -> None:
        err = QRError("something broke")
        assert str(err) == "something broke"
        assert err.message == "something broke"
        assert err.status_code == 400
        assert err.code == "qr-error"

    def test_custom_attributes(self) -> None:
        err = QRError("gone", status_code=410, code="gone")
        assert err.status_code == 410
        assert err.code == "gone"

    def test_is_exception(self) -> None:
        with pytest.raises(QRError, match="boom"):
            raise QRError("boom")


# ---------------------------------------------------------------------------
# RenderError
# ---------------------------------------------------------------------------


class TestRenderError:
    def test_generic_failure(self) -> None:
        err = RenderError("Failed to generate QR code")
        assert isinstance(err, QRError)
        assert err.too_large is False
        assert err.status_code == 500
        assert err.code == "render-failed"

    def test_too_large(self) -> None:
        err = RenderError("too long", too_large=True)
        assert err.too_large is True
        assert err.status_code == 413
        assert err.code == "payload-too-large"


# ---------------------------------------------------------------------------
# Definitions
# ---------------------------------------------------------------------------


class TestDefinitions:
    @pytest.mark.parametrize(
        "err",
        [
            defs.ErrIncompleteInput,
            defs.ErrWrongWordCount,
            defs.ErrInvalidDescriptor,
            defs.ErrInvalidAddress,
            defs.ErrInvalidAmount,
            defs.ErrInvalidEncoding,
        ],
    )
    def test_validation_errors_are_400(self, err: QRError) -> None:
        assert isinstance(err, QRError)
        assert err.status_code == 400
        assert err.code in set(ErrorKind)

    def test_render_errors(self) -> None:
        assert defs.ErrPayloadTooLarge.status_code == 413
        assert defs.ErrRenderFailed.status_code == 500
        assert defs.ErrRenderFailed.code == "render-failed"

    def test_address_message(self) -> None:
        assert defs.ErrInvalidAddress.message == "Invalid Bitcoin address format"


class TestErrorFor:
    def test_every_kind_mapped(self) -> None:
        for kind in ErrorKind:
            assert defs.error_for(kind).code == kind

    def test_singleton_without_message(self) -> None:
        assert defs.error_for(ErrorKind.INVALID_AMOUNT) is defs.ErrInvalidAmount

    def test_fresh_instance_with_message(self) -> None:
        err = defs.error_for(ErrorKind.WRONG_WORD_COUNT, "Please paste exactly 12 words")
        assert err is not defs.ErrWrongWordCount
        assert err.message == "Please paste exactly 12 words"
        assert err.status_code == 400
        assert err.code == ErrorKind.WRONG_WORD_COUNT
