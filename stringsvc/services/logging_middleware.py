"""Logging Middleware — StringService decorator emitting one log line per call.

Invariants:
    - Return values and exceptions of the wrapped service pass through unchanged
    - Exactly one record per call, emitted in `finally` (success and failure paths)
    - Record fields: method, input, output, err, took (seconds)

Design Decisions:
    - Logger injected through the constructor: tests capture a dedicated logger,
      production uses the process-wide handlers from setup_logging
"""

import logging
import time

from stringsvc.core.domain_types import COUNT_ON_ERROR, Method
from stringsvc.core.string_service import StringService


class LoggingMiddleware:
    """Wrap a StringService and log every call."""

    def __init__(self, logger: logging.Logger, next_service: StringService):
        self._logger = logger
        self._next = next_service

    def uppercase(self, s: str) -> str:
        begin = time.monotonic()
        output, err = "", None
        try:
            output = self._next.uppercase(s)
            return output
        except Exception as exc:
            err = exc
            raise
        finally:
            self._log(Method.UPPERCASE, s, output, err, begin)

    def count(self, s: str) -> int:
        begin = time.monotonic()
        n, err = COUNT_ON_ERROR, None
        try:
            n = self._next.count(s)
            return n
        except Exception as exc:
            err = exc
            raise
        finally:
            self._log(Method.COUNT, s, n, err, begin)

    def _log(
        self, method: Method, s: str, output: object,
        err: Exception | None, begin: float,
    ) -> None:
        self._logger.info(
            "%s called", method.value,
            extra={
                "method": method.value,
                "input": s,
                "output": output,
                "err": str(err) if err is not None else None,
                "took": time.monotonic() - begin,
            },
        )
