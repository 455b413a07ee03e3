"""Factory functions for OptionalValue.

Import the module as a namespace:

    from klaw_outcome import optional

    optional.present(42)
    optional.from_nullable(os.environ.get('HOME'))
    optional.all_present([optional.present(1), optional.present(2)])
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeVar

from klaw_outcome.types.optional_value import OptionalValue

__all__ = ['absent', 'all_present', 'from_nullable', 'present']

T = TypeVar('T')


def present(value: T) -> OptionalValue[T]:
    """Return the present variant wrapping ``value``."""
    return OptionalValue.present(value)


def absent() -> OptionalValue[Any]:
    """Return the absent variant."""
    return OptionalValue.absent()


def from_nullable(value: T | None) -> OptionalValue[T]:
    """Return absent if ``value`` is None, otherwise ``present(value)``.

    Only None counts as missing; falsy values such as ``0``, ``''`` and
    ``False`` are present.
    """
    if value is None:
        return OptionalValue.absent()
    return OptionalValue.present(value)


def all_present(options: Iterable[OptionalValue[T]]) -> OptionalValue[list[T]]:
    """Collect an iterable of OptionalValues into an OptionalValue of a list.

    Short-circuits on the first absent element; the rest of the iterable is
    not consumed.

    Args:
        options: OptionalValues, scanned left to right.

    Returns:
        ``present(values)`` in input order if every element is present,
        otherwise absent.

    Examples:
        >>> all_present([present(1), present(2)])
        present([1, 2])
        >>> all_present([present(1), absent(), present(3)])
        absent()
    """
    values: list[T] = []
    for option in options:
        if option.is_absent():
            return OptionalValue.absent()
        values.append(option.unwrap())
    return OptionalValue.present(values)
