"""
Prometheus metrics for signing activity.

Each Metrics instance owns its own CollectorRegistry, so several clients
(or tests) can coexist in one process.
"""

from typing import Optional
import logging

from prometheus_client import CollectorRegistry, Counter, start_http_server

logger = logging.getLogger(__name__)


class Metrics:
    """
    Prometheus metrics collector.

    Tracks:
    - Requests signed (by method)
    - Order payloads built (by side)
    - Signing failures (by kind and error type)
    """

    def __init__(self, enabled: bool = True, registry: Optional[CollectorRegistry] = None):
        """
        Initialize metrics.

        Args:
            enabled: Enable metrics collection
            registry: Collector registry (a private one is created if None)
        """
        self.enabled = enabled
        self.registry = registry or CollectorRegistry()

        if not self.enabled:
            return

        self.requests_signed = Counter(
            'starkex_requests_signed_total',
            'Total REST requests signed',
            ['method'],
            registry=self.registry
        )

        self.payloads_built = Counter(
            'starkex_order_payloads_built_total',
            'Total order signature payloads built',
            ['side'],
            registry=self.registry
        )

        self.failures = Counter(
            'starkex_signing_failures_total',
            'Signing failures',
            ['kind', 'error'],
            registry=self.registry
        )

    def start_server(self, port: int = 9090) -> None:
        """Expose this registry over HTTP."""
        if not self.enabled:
            return
        start_http_server(port, registry=self.registry)
        logger.info(f"Metrics server started on port {port}")

    def track_request_signed(self, method: str) -> None:
        """Record a signed request."""
        if self.enabled:
            self.requests_signed.labels(method=method).inc()

    def track_payload_built(self, side: str) -> None:
        """Record a built order payload."""
        if self.enabled:
            self.payloads_built.labels(side=side).inc()

    def track_failure(self, kind: str, error: str) -> None:
        """Record a signing failure."""
        if self.enabled:
            self.failures.labels(kind=kind, error=error).inc()

    def sample(self, name: str, **labels) -> float:
        """Current value of a sample, 0.0 if never recorded."""
        value = self.registry.get_sample_value(name, labels)
        return value if value is not None else 0.0
