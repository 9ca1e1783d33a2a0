"""Tests for the validate-then-render pipeline — render/service.py."""

from __future__ import annotations

import pytest

from btc_qr.encoders.results import EncodeResult, ErrorKind
from btc_qr.errors import QRError, RenderError
from btc_qr.metrics.collector import QRMetrics
from btc_qr.render.export import ExportMode
from btc_qr.render.qr import ErrorCorrection, QRRenderer
from btc_qr.render.service import QRService


@pytest.fixture
def metrics() -> QRMetrics:
    return QRMetrics()


@pytest.fixture
def service(metrics: QRMetrics) -> QRService:
    return QRService(QRRenderer(), metrics)


class TestQRService:
    def test_generate(self, service: QRService, metrics: QRMetrics) -> None:
        image = service.generate(
            ExportMode.WALLET_DESCRIPTOR, EncodeResult.success("wpkh(xpub)"), ErrorCorrection.H
        )
        assert image.png.startswith(b"\x89PNG")
        assert image.filename == "wallet-descriptor-qr.png"
        assert image.error_correction is ErrorCorrection.H
        assert (
            metrics.registry.get_sample_value(
                "btcqr_qr_generated_total", {"mode": "wallet-descriptor"}
            )
            == 1.0
        )
        assert (
            metrics.registry.get_sample_value(
                "btcqr_render_duration_seconds_count", {"mode": "wallet-descriptor"}
            )
            == 1.0
        )

    def test_validation_failure_raises(self, service: QRService, metrics: QRMetrics) -> None:
        result = EncodeResult.failure(ErrorKind.INCOMPLETE_PHRASE, "Please enter all 12 words")
        with pytest.raises(QRError, match="Please enter all 12 words"):
            service.generate(ExportMode.SEED_PHRASE, result, ErrorCorrection.H)
        assert (
            metrics.registry.get_sample_value(
                "btcqr_validation_failures_total",
                {"mode": "seed-phrase", "reason": "incomplete-input"},
            )
            == 1.0
        )

    def test_render_failure_recorded(self, service: QRService, metrics: QRMetrics) -> None:
        with pytest.raises(RenderError) as info:
            service.generate(
                ExportMode.RAW_TX, EncodeResult.success("ab" * 4000), ErrorCorrection.L
            )
        assert info.value.too_large
        assert (
            metrics.registry.get_sample_value(
                "btcqr_render_failures_total",
                {"mode": "raw", "reason": "payload-too-large"},
            )
            == 1.0
        )

    def test_without_metrics(self) -> None:
        image = QRService(QRRenderer()).generate(
            ExportMode.PSBT, EncodeResult.success("cHNidP8="), ErrorCorrection.L
        )
        assert image.filename == "psbt-qr.png"
