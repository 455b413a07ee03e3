"""Factory functions for Outcome.

Import the module as a namespace:

    from klaw_outcome import outcome

    outcome.success(42)
    outcome.failure(ValueError('bad input'))
    outcome.all_successful([outcome.success(1), outcome.success(2)])
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeVar

from klaw_outcome.types.outcome import Outcome

__all__ = ['all_successful', 'failure', 'success']

T = TypeVar('T')
E = TypeVar('E')


def success(value: T) -> Outcome[T, Any]:
    """Return the success variant wrapping ``value``."""
    return Outcome.success(value)


def failure(error: E) -> Outcome[Any, E]:
    """Return the failure variant wrapping ``error``."""
    return Outcome.failure(error)


def all_successful(outcomes: Iterable[Outcome[T, E]]) -> Outcome[list[T], E]:
    """Collect an iterable of Outcomes into an Outcome of a list.

    Short-circuits on the first failure encountered.

    Args:
        outcomes: Outcomes, scanned left to right.

    Returns:
        ``success(values)`` in input order if every element succeeded,
        otherwise the first failure instance itself.

    Examples:
        >>> all_successful([success(1), success(2), success(3)])
        success([1, 2, 3])
        >>> all_successful([success(1), failure('x'), failure('y')])
        failure('x')
    """
    values: list[T] = []
    for item in outcomes:
        if item.is_failure():
            return item
        values.append(item.unwrap())
    return Outcome.success(values)
