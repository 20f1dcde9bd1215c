"""Instrumenting Middleware — StringService decorator recording request metrics.

Invariants:
    - Return values and exceptions of the wrapped service pass through unchanged
    - Every call adds 1 to request_count and observes latency, labelled {method, error}
    - count additionally observes its result (COUNT_ON_ERROR on failure)
    - Metrics recorded in `finally`, on every exit path
"""

import time

from stringsvc.core.domain_types import COUNT_ON_ERROR, Method
from stringsvc.core.string_service import StringService
from stringsvc.infrastructure.metrics import StringServiceInstruments


class InstrumentingMiddleware:
    """Wrap a StringService and record counter/histogram metrics per call."""

    def __init__(
        self, instruments: StringServiceInstruments, next_service: StringService,
    ):
        self._instruments = instruments
        self._next = next_service

    def uppercase(self, s: str) -> str:
        begin = time.monotonic()
        failed = True
        try:
            output = self._next.uppercase(s)
            failed = False
            return output
        finally:
            self._record(Method.UPPERCASE, failed, begin)

    def count(self, s: str) -> int:
        begin = time.monotonic()
        n, failed = COUNT_ON_ERROR, True
        try:
            n = self._next.count(s)
            failed = False
            return n
        finally:
            self._record(Method.COUNT, failed, begin)
            self._instruments.count_result.observe(n)

    def _record(self, method: Method, failed: bool, begin: float) -> None:
        labels = {"method": method.value, "error": "true" if failed else "false"}
        self._instruments.request_count.labels(**labels).inc()
        self._instruments.request_latency.labels(**labels).observe(
            time.monotonic() - begin,
        )
