"""stringsvc — uppercase/count string microservice.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
