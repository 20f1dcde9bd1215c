"""Core Layer — pure domain logic, no IO, no HTTP, no metrics.

Invariants:
    - No module in core/ imports from services/, api/ or infrastructure/
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from the observability shell
"""
