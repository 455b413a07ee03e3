"""Pytest configuration and shared fixtures for klaw-outcome tests."""

import logging

import pytest
import structlog

from klaw_outcome import _config, clear_log_hooks


@pytest.fixture
def sample_present():
    """Sample present value for testing."""
    from klaw_outcome import present

    return present('hello')


@pytest.fixture
def sample_absent():
    """Sample absent value for testing."""
    from klaw_outcome import absent

    return absent()


@pytest.fixture
def sample_success():
    """Sample success value for testing."""
    from klaw_outcome import success

    return success(42)


@pytest.fixture
def sample_failure():
    """Sample failure value for testing."""
    from klaw_outcome import failure

    return failure(ValueError('test error'))


@pytest.fixture
def call_log():
    """A list plus a recording callback, for asserting callbacks ran or not."""
    calls: list[tuple] = []

    def record(*args):
        calls.append(args)
        return len(calls)

    record.calls = calls
    return record


@pytest.fixture
def reset_logging():
    """Undo configure_logging(), hooks and init() after a test that uses them."""
    root = logging.getLogger()
    level = root.level
    clear_log_hooks()
    yield
    clear_log_hooks()
    for handler in list(root.handlers):
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(handler)
    root.setLevel(level)
    _config._config = None
