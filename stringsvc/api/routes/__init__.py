"""Route Modules — one file per resource/concern.

Invariants:
    - Routes never contain business logic (delegate to endpoints)

Design Decisions:
    - Explicit registration in main.py over auto-discovery
"""
