"""Metrics — Prometheus metrics collection and exposure."""

from __future__ import annotations

from btc_qr.metrics.collector import MetricsCollector, QRMetrics

__all__ = ["MetricsCollector", "QRMetrics"]
