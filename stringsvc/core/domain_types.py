"""Domain Types — names shared by the service, its middleware and its metrics.

Invariants:
    - Method values are the labels used in log lines and metric attributes
    - COUNT_ON_ERROR is the count result reported for a failed call

Design Decisions:
    - str Enum: serializes to JSON/logfmt without custom encoders
"""

from enum import Enum


class Method(str, Enum):
    """Operations exposed by the string service."""
    UPPERCASE = "uppercase"
    COUNT = "count"


COUNT_ON_ERROR = -1
