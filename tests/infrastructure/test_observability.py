"""Structured Logging — logfmt and JSON formatter output.

Tests cover:
    - logfmt renders call fields as key=value, quoting values with spaces
    - None renders as null in logfmt and JSON
    - JSON output is one parseable object per record
    - setup_logging applies level/format even when other handlers exist,
      and swaps only the handler it installed
"""

import json
import logging

import pytest

from stringsvc.infrastructure import observability
from stringsvc.infrastructure.observability import JSONFormatter, LogfmtFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "stringsvc.calls", logging.INFO, __file__, 1, "uppercase called", (), None,
    )
    record.__dict__.update(extra)
    return record


def test_logfmt_renders_call_fields():
    line = LogfmtFormatter().format(_record(
        method="uppercase", input="hello world", output="HELLO WORLD",
        err=None, took=0.5,
    ))
    assert "level=info" in line
    assert "logger=stringsvc.calls" in line
    assert 'msg="uppercase called"' in line
    assert "method=uppercase" in line
    assert 'input="hello world"' in line
    assert "err=null" in line
    assert "took=0.5" in line


def test_logfmt_quotes_empty_and_escapes_quotes():
    line = LogfmtFormatter().format(_record(input="", output='say "hi"'))
    assert 'input=""' in line
    assert r'output="say \"hi\""' in line


def test_logfmt_omits_absent_fields():
    line = LogfmtFormatter().format(_record())
    assert "method=" not in line


def test_json_formatter_includes_fields():
    payload = json.loads(JSONFormatter().format(_record(
        method="count", input="abc", output=3, err=None, took=0.1,
    )))
    assert payload["level"] == "INFO"
    assert payload["message"] == "uppercase called"
    assert payload["method"] == "count"
    assert payload["output"] == 3
    assert payload["err"] is None


@pytest.fixture
def clean_root():
    """Restore root handlers, level and the installed-handler marker after a test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    installed = observability._installed_handler
    yield root
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
    observability._installed_handler = installed


def test_setup_logging_applies_level_next_to_foreign_handler(clean_root):
    foreign = logging.NullHandler()
    clean_root.addHandler(foreign)
    observability.setup_logging("DEBUG", "json")
    assert clean_root.level == logging.DEBUG
    assert foreign in clean_root.handlers
    assert isinstance(observability._installed_handler.formatter, JSONFormatter)
    assert observability._installed_handler in clean_root.handlers


def test_setup_logging_replaces_its_own_handler(clean_root):
    observability.setup_logging("INFO", "json")
    first = observability._installed_handler
    observability.setup_logging("WARNING", "logfmt")
    second = observability._installed_handler
    assert first not in clean_root.handlers
    assert second in clean_root.handlers
    assert isinstance(second.formatter, LogfmtFormatter)
    assert clean_root.level == logging.WARNING
