"""Tests for logging configuration, hooks and the unwrap failure events."""

from __future__ import annotations

import logging
from typing import Any

import pytest

from klaw_outcome import (
    UnwrapFailure,
    absent,
    add_log_hook,
    configure_logging,
    failure,
    get_logger,
    remove_log_hook,
    success,
)

pytestmark = pytest.mark.usefixtures('reset_logging')


def _capture() -> list[dict[str, Any]]:
    received: list[dict[str, Any]] = []
    add_log_hook(received.append)
    return received


class TestLogHooks:
    """Tests for logging hooks functionality."""

    def test_hook_receives_log_events(self) -> None:
        """Registered hooks receive log entry dicts."""
        configure_logging(level='DEBUG', json_output=True)
        received = _capture()

        get_logger('test').info('Test message', extra_field='extra_value')

        entries = [e for e in received if e.get('event') == 'Test message']
        assert len(entries) == 1
        assert entries[0]['extra_field'] == 'extra_value'
        assert entries[0]['logger'] == 'test'

    def test_remove_hook(self) -> None:
        """remove_log_hook() stops hook from being called."""
        calls: list[str] = []

        def hook(event_dict: dict[str, Any]) -> None:
            calls.append('called')

        configure_logging(level='DEBUG')
        add_log_hook(hook)
        logger = get_logger('test')
        logger.info('First')
        remove_log_hook(hook)
        logger.info('Second')

        assert calls == ['called']

    def test_failing_hook_does_not_break_logging(self) -> None:
        """An exception inside a hook does not stop later hooks."""

        def broken(event_dict: dict[str, Any]) -> None:
            raise RuntimeError('hook failure')

        configure_logging(level='DEBUG')
        add_log_hook(broken)
        received = _capture()

        get_logger('test').warning('still logged')

        assert [e['event'] for e in received] == ['still logged']

    def test_levels_below_threshold_are_dropped(self) -> None:
        configure_logging(level='WARNING')
        received = _capture()

        get_logger('test').debug('hidden')

        assert received == []


class TestUnwrapFailureEvents:
    """The raising helpers emit a debug event right before raising."""

    def test_unwrap_failure_event(self) -> None:
        configure_logging(level='DEBUG')
        received = _capture()

        with pytest.raises(UnwrapFailure):
            absent().unwrap()

        events = [e for e in received if e['event'] == 'unwrap_failure']
        assert len(events) == 1
        assert events[0]['operation'] == 'unwrap()'
        assert events[0]['variant'] == 'absent'
        assert events[0]['custom_error'] is False
        assert events[0]['logger'] == 'klaw_outcome.errors'

    def test_expect_with_error_event(self) -> None:
        configure_logging(level='DEBUG')
        received = _capture()

        with pytest.raises(KeyError):
            success(1).expect_failure(KeyError('k'))

        assert received[-1]['event'] == 'unwrap_failure'
        assert received[-1]['custom_error'] is True
        assert received[-1]['variant'] == 'success'

    def test_payload_raised_event(self) -> None:
        configure_logging(level='DEBUG')
        received = _capture()

        with pytest.raises(ValueError):
            failure(ValueError('bad')).unwrap_or_raise()

        assert received[-1]['event'] == 'payload_raised'
        assert received[-1]['error_type'] == 'ValueError'

    def test_silent_without_configuration(self) -> None:
        """Nothing reaches hooks until logging is configured for DEBUG."""
        logging.getLogger().setLevel(logging.WARNING)
        received = _capture()

        with pytest.raises(UnwrapFailure):
            absent().unwrap()

        assert received == []

    def test_successful_operations_do_not_log(self) -> None:
        configure_logging(level='DEBUG')
        received = _capture()

        present_value = success(2).map(lambda x: x * 2).unwrap()

        assert present_value == 4
        assert received == []
