"""String Schemas — typed request/response shapes for the uppercase and count operations.

Invariants:
    - Requests: `s` is "" when absent or null; the key matches as "s" or "S";
      unknown keys are ignored
    - Responses: `err` is None on success, the error message on failure
    - CountResponse.v is -1 whenever err is set

Design Decisions:
    - Pydantic models double as the decode target and the encode source,
      so decode(encode(request)) is the identity for valid requests
"""

from pydantic import AliasChoices, BaseModel, Field, field_validator


class _StringRequest(BaseModel):
    s: str = Field("", validation_alias=AliasChoices("s", "S"))

    @field_validator("s", mode="before")
    @classmethod
    def null_as_empty(cls, v: object) -> object:
        return "" if v is None else v


class UppercaseRequest(_StringRequest):
    pass


class UppercaseResponse(BaseModel):
    v: str
    err: str | None = None


class CountRequest(_StringRequest):
    pass


class CountResponse(BaseModel):
    v: int
    err: str | None = None
