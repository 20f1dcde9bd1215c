"""HTTP Transport — decode/endpoint/encode triples bound into request handlers.

Invariants:
    - decode reads the raw body and raises DecodeError on malformed input;
      the endpoint is never invoked for a body that failed to decode
    - encode writes the response schema as JSON with HTTP 200, omitting `err`
      when it is None
    - Handlers hold no state between requests

Design Decisions:
    - Explicit decode over FastAPI body injection: the decode step and its error
      (DecodeError, not RequestValidationError) stay owned by the transport
"""

from typing import Awaitable, Callable, TypeVar

from fastapi import Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError

from stringsvc.core.errors import DecodeError, ErrorContext
from stringsvc.schemas.strings import CountRequest, UppercaseRequest
from stringsvc.services.endpoints import Endpoint

RequestModel = TypeVar("RequestModel", bound=BaseModel)

DecodeRequestFunc = Callable[[Request], Awaitable[BaseModel]]
EncodeResponseFunc = Callable[[BaseModel], JSONResponse]


async def _decode_json(request: Request, model: type[RequestModel]) -> RequestModel:
    body = await request.body()
    try:
        return model.model_validate_json(body)
    except ValidationError as exc:
        raise DecodeError(
            "; ".join(e["msg"] for e in exc.errors()),
            ErrorContext(path=request.url.path),
        ) from exc


async def decode_uppercase_request(request: Request) -> UppercaseRequest:
    return await _decode_json(request, UppercaseRequest)


async def decode_count_request(request: Request) -> CountRequest:
    return await _decode_json(request, CountRequest)


def encode_response(response: BaseModel) -> JSONResponse:
    return JSONResponse(content=response.model_dump(exclude_none=True))


def make_handler(
    endpoint: Endpoint,
    decode: DecodeRequestFunc,
    encode: EncodeResponseFunc = encode_response,
) -> Callable[[Request], Awaitable[JSONResponse]]:
    """Bind an endpoint to its decoder and encoder."""

    async def handle(request: Request) -> JSONResponse:
        typed_request = await decode(request)
        return encode(endpoint(typed_request))

    return handle
