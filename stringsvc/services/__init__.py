"""Services Layer — middleware decorators and endpoint adapters around the core service.

Invariants:
    - Every decorator implements the StringService protocol
    - Endpoints are the only callers of the decorated service

Design Decisions:
    - One file per decorator for locality; composition lives in endpoints.py
"""
