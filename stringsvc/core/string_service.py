"""String Service — the capability contract and its pure implementation.

Invariants:
    - Empty input raises EmptyInputError for both operations
    - No IO, no state, no logging: decorators add those from the outside

Design Decisions:
    - Protocol over ABC: middleware satisfy the contract structurally and compose
      by construction, not by inheritance
"""

from typing import Protocol

from stringsvc.core.errors import EmptyInputError


class StringService(Protocol):
    """Operations on strings — implemented by the service and every decorator."""
    def uppercase(self, s: str) -> str: ...
    def count(self, s: str) -> int: ...


class BasicStringService:
    """Plain implementation of StringService."""

    def uppercase(self, s: str) -> str:
        if s == "":
            raise EmptyInputError()
        return s.upper()

    def count(self, s: str) -> int:
        if s == "":
            raise EmptyInputError()
        return len(s)
