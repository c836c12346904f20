"""Tests for logging configuration."""

import logging
from types import SimpleNamespace

from app.utils.logging import StructuredFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "app.services", logging.ERROR, __file__, 1, 'failed "add"', (), None
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_structured_formatter_includes_extra_fields():
    """Extra context is rendered as key="value" pairs."""
    output = StructuredFormatter().format(_record(backend="local", id="abc"))

    assert 'level="ERROR"' in output
    assert 'logger="app.services"' in output
    assert 'backend="local"' in output
    assert 'id="abc"' in output


def test_structured_formatter_escapes_quotes():
    """Quotes inside values do not break the key="value" format."""
    output = StructuredFormatter().format(_record())

    assert 'message="failed \\"add\\""' in output


def test_setup_logging_uses_structured_formatter_in_production():
    """Production logging installs the structured formatter."""
    settings = SimpleNamespace(
        log_level="INFO",
        is_production=True,
        environment="production",
        storage_backend="remote",
    )

    setup_logging(settings)

    handlers = logging.getLogger().handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0].formatter, StructuredFormatter)
