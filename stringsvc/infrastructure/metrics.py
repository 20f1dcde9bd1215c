"""Metrics — Prometheus instruments for the string service.

Invariants:
    - Instruments are created once per registry and shared by all requests
    - Counter/Histogram/Summary updates are thread safe (prometheus_client locks)
    - request_count and request_latency carry the labels {method, error}

Design Decisions:
    - Registry injected (create_app / tests) so each test owns its own
      CollectorRegistry; production uses the process-wide REGISTRY
    - Summary for count_result: accepts the negative failure sentinel
"""

from dataclasses import dataclass

from prometheus_client import REGISTRY, CollectorRegistry, Counter, Histogram, Summary

LABELS = ("method", "error")


@dataclass(frozen=True)
class StringServiceInstruments:
    """The three instruments recorded by InstrumentingMiddleware."""
    request_count: Counter
    request_latency: Histogram
    count_result: Summary


def create_instruments(
    registry: CollectorRegistry = REGISTRY,
    namespace: str = "my_group",
    subsystem: str = "string_service",
) -> StringServiceInstruments:
    """Register the request counter, latency and count result instruments."""
    return StringServiceInstruments(
        request_count=Counter(
            "request_count", "Number of requests received.",
            LABELS, namespace=namespace, subsystem=subsystem, registry=registry,
        ),
        request_latency=Histogram(
            "request_latency_seconds", "Total duration of requests in seconds.",
            LABELS, namespace=namespace, subsystem=subsystem, registry=registry,
        ),
        count_result=Summary(
            "count_result", "The result of each count method.",
            namespace=namespace, subsystem=subsystem, registry=registry,
        ),
    )
