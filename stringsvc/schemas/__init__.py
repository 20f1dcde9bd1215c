"""Pydantic Schemas — request/response shapes exchanged with endpoints.

Invariants:
    - Schemas are the only types crossing the transport/endpoint boundary
"""
