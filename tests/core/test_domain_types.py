"""Domain Types — verifies method names and the count failure sentinel.

Tests:
    - Method has exactly the two exposed operations
    - Enum values are the labels used in logs and metrics
"""

from stringsvc.core.domain_types import COUNT_ON_ERROR, Method


def test_method_has_two_operations():
    assert set(Method) == {Method.UPPERCASE, Method.COUNT}


def test_method_values_are_labels():
    assert Method.UPPERCASE.value == "uppercase"
    assert Method.COUNT.value == "count"


def test_count_sentinel():
    assert COUNT_ON_ERROR == -1
