"""Metrics collector — Prometheus counters and histograms.

- ``btcqr_qr_generated_total`` counter-vec (mode)
- ``btcqr_validation_failures_total`` counter-vec (mode, reason)
- ``btcqr_render_failures_total`` counter-vec (mode, reason)
- ``btcqr_render_duration_seconds`` histogram-vec (mode)
"""

from __future__ import annotations

import time
from contextlib import contextmanager
from typing import TYPE_CHECKING

from prometheus_client import CollectorRegistry, Counter, Histogram

if TYPE_CHECKING:
    from collections.abc import Iterator

_PREFIX = "btcqr"


class MetricsCollector:
    """Low-level Prometheus collector that owns the registry.

    Use :class:`QRMetrics` for the high-level tracking interface.
    """

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        self._registry = registry or CollectorRegistry()

    @property
    def registry(self) -> CollectorRegistry:
        """Return the underlying Prometheus registry."""
        return self._registry

    def histogram(self, name: str, doc: str, labels: tuple[str, ...] = ()) -> Histogram:
        """Register and return a Histogram."""
        return Histogram(name, doc, labels, registry=self._registry)

    def counter(self, name: str, doc: str, labels: tuple[str, ...] = ()) -> Counter:
        """Register and return a Counter."""
        return Counter(name, doc, labels, registry=self._registry)


class QRMetrics:
    """High-level QR generation metrics.

    Labels never carry payload contents, only the export mode and the
    failure kind.
    """

    def __init__(self, collector: MetricsCollector | None = None) -> None:
        self._collector = collector or MetricsCollector()

        self._generated = self._collector.counter(
            f"{_PREFIX}_qr_generated",
            "QR images generated successfully",
            ("mode",),
        )
        self._validation_failures = self._collector.counter(
            f"{_PREFIX}_validation_failures",
            "Payload validation failures",
            ("mode", "reason"),
        )
        self._render_failures = self._collector.counter(
            f"{_PREFIX}_render_failures",
            "QR rasterisation failures",
            ("mode", "reason"),
        )
        self._render_duration = self._collector.histogram(
            f"{_PREFIX}_render_duration_seconds",
            "Duration of QR rasterisation",
            ("mode",),
        )

    @property
    def registry(self) -> CollectorRegistry:
        """Return the underlying Prometheus registry."""
        return self._collector.registry

    def record_generated(self, mode: str) -> None:
        self._generated.labels(mode=mode).inc()

    def record_validation_failure(self, mode: str, reason: str) -> None:
        self._validation_failures.labels(mode=mode, reason=reason).inc()

    def record_render_failure(self, mode: str, reason: str) -> None:
        self._render_failures.labels(mode=mode, reason=reason).inc()

    @contextmanager
    def track_render(self, mode: str) -> Iterator[None]:
        """Track the duration of one rasterisation."""
        start = time.monotonic()
        try:
            yield
        finally:
            self._render_duration.labels(mode=mode).observe(time.monotonic() - start)
