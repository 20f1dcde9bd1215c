"""Endpoints — transport-agnostic adapters from typed requests to service calls.

Invariants:
    - An Endpoint takes a request schema and returns a response schema
    - StringServiceError raised by the service becomes the in-band `err` field;
      it never propagates to the transport
    - Any other exception propagates (handled as 500 by the API layer)

Design Decisions:
    - In-band error encoding with HTTP 200 is part of the external contract
"""

import logging
from typing import Any, Callable

from stringsvc.core.domain_types import COUNT_ON_ERROR
from stringsvc.core.errors import StringServiceError
from stringsvc.core.string_service import StringService
from stringsvc.infrastructure.metrics import StringServiceInstruments
from stringsvc.schemas.strings import (
    CountRequest, CountResponse, UppercaseRequest, UppercaseResponse,
)
from stringsvc.services.instrumenting_middleware import InstrumentingMiddleware
from stringsvc.services.logging_middleware import LoggingMiddleware

Endpoint = Callable[[Any], Any]


def make_uppercase_endpoint(svc: StringService) -> Endpoint:
    def uppercase_endpoint(request: UppercaseRequest) -> UppercaseResponse:
        try:
            v = svc.uppercase(request.s)
        except StringServiceError as exc:
            return UppercaseResponse(v="", err=exc.message)
        return UppercaseResponse(v=v)
    return uppercase_endpoint


def make_count_endpoint(svc: StringService) -> Endpoint:
    def count_endpoint(request: CountRequest) -> CountResponse:
        try:
            v = svc.count(request.s)
        except StringServiceError as exc:
            return CountResponse(v=COUNT_ON_ERROR, err=exc.message)
        return CountResponse(v=v)
    return count_endpoint


def compose_service(
    svc: StringService,
    logger: logging.Logger,
    instruments: StringServiceInstruments,
) -> StringService:
    """Decorate svc as Service -> Logging -> Instrumenting (outermost)."""
    svc = LoggingMiddleware(logger, svc)
    svc = InstrumentingMiddleware(instruments, svc)
    return svc
