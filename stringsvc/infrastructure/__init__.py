"""Infrastructure Layer — logging and metrics plumbing.

Invariants:
    - Infrastructure never imports from core/ domain logic
    - Process-wide sinks are created once at startup and injected downward
"""
