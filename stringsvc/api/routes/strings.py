"""String Routes — POST /uppercase and POST /count.

Invariants:
    - Each route is a decode/endpoint/encode triple from api/transport.py
    - Routes never contain business logic (delegate to endpoints)
"""

from fastapi import APIRouter

from stringsvc.api.transport import (
    decode_count_request, decode_uppercase_request, encode_response, make_handler,
)
from stringsvc.core.string_service import StringService
from stringsvc.services.endpoints import make_count_endpoint, make_uppercase_endpoint


def create_router(svc: StringService) -> APIRouter:
    """Build the router serving both operations of svc."""
    router = APIRouter(tags=["strings"])
    router.add_api_route(
        "/uppercase",
        make_handler(
            make_uppercase_endpoint(svc), decode_uppercase_request, encode_response,
        ),
        methods=["POST"],
        name="uppercase",
    )
    router.add_api_route(
        "/count",
        make_handler(
            make_count_endpoint(svc), decode_count_request, encode_response,
        ),
        methods=["POST"],
        name="count",
    )
    return router
