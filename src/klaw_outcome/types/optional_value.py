"""OptionalValue type: a value that is either present or absent."""

from __future__ import annotations

from collections.abc import Callable
from enum import StrEnum
from typing import TYPE_CHECKING, Any, Generic, TypeVar

import msgspec
from msgspec.structs import force_setattr

from klaw_outcome.errors import raise_unwrap_failure

if TYPE_CHECKING:
    from klaw_outcome.types.outcome import Outcome

__all__ = ['OptionalKind', 'OptionalValue']

T = TypeVar('T')
U = TypeVar('U')
R = TypeVar('R')
D = TypeVar('D')
E = TypeVar('E')
N = TypeVar('N')
S = TypeVar('S')

UNWRAP_ABSENT_MESSAGE = 'Tried to call unwrap() on absent'


class OptionalKind(StrEnum):
    """Discriminant of an OptionalValue."""

    ABSENT = 'absent'
    PRESENT = 'present'


class OptionalValue(msgspec.Struct, Generic[T], frozen=True, gc=False):
    """A value of type T that may be missing.

    An OptionalValue is exactly one of two variants: present (wrapping a
    value) or absent. The discriminant and payload are fixed at construction;
    every operation returns a new instance or the shared absent instance.

    Build instances with :meth:`present` and :meth:`absent` (or the functions
    in :mod:`klaw_outcome.optional`) rather than calling the constructor.

    Every operation below is written in terms of :meth:`match`, so a callback
    meant for one variant is never invoked on the other.

    Examples:
        >>> present(21).map(lambda x: x * 2)
        present(42)
        >>> absent().unwrap_or(0)
        0
        >>> present(3).filter(lambda x: x > 5)
        absent()
    """

    kind: OptionalKind
    payload: Any = None

    def __post_init__(self) -> None:
        kind = OptionalKind(self.kind)
        if kind is OptionalKind.ABSENT and self.payload is not None:
            msg = f'an absent OptionalValue cannot carry a payload, got {self.payload!r}'
            raise ValueError(msg)
        force_setattr(self, 'kind', kind)

    @classmethod
    def present(cls, value: T) -> OptionalValue[T]:
        """Wrap ``value`` in the present variant."""
        return cls(OptionalKind.PRESENT, value)

    @classmethod
    def absent(cls) -> OptionalValue[Any]:
        """Return the absent variant (a shared instance)."""
        return _ABSENT

    def __repr__(self) -> str:
        return self.match(
            absent=lambda: 'absent()',
            present=lambda value: f'present({value!r})',
        )

    def match(self, *, absent: Callable[[], N], present: Callable[[T], S]) -> N | S:
        """Dispatch to exactly one branch and return its result.

        Args:
            absent: Called with no arguments if this is absent.
            present: Called with the wrapped value if this is present.

        Returns:
            The return value of whichever callback was called.
        """
        if self.kind is OptionalKind.PRESENT:
            return present(self.payload)
        return absent()

    def is_absent(self) -> bool:
        return self.match(absent=lambda: True, present=lambda _: False)

    def is_present(self) -> bool:
        return self.match(absent=lambda: False, present=lambda _: True)

    def map(self, f: Callable[[T], R]) -> OptionalValue[R]:
        """Apply ``f`` to the wrapped value.

        Returns:
            ``present(f(value))`` if present, otherwise absent (``f`` is not called).
        """
        return self.match(
            absent=lambda: self,
            present=lambda value: OptionalValue.present(f(value)),
        )

    def if_present(self, f: Callable[[T], Any]) -> None:
        """Call ``f`` with the wrapped value if present. The result is discarded."""
        self.match(absent=lambda: None, present=f)

    def if_absent(self, f: Callable[[], Any]) -> None:
        """Call ``f`` if absent. The result is discarded."""
        self.match(absent=f, present=lambda _: None)

    def unwrap(self) -> T:
        """Return the wrapped value.

        Raises:
            UnwrapFailure: If this is absent.
        """
        return self.match(
            absent=lambda: raise_unwrap_failure(
                UNWRAP_ABSENT_MESSAGE, operation='unwrap()', variant='absent'
            ),
            present=_identity,
        )

    def expect(self, message_or_error: str | BaseException) -> T:
        """Return the wrapped value, or raise the caller's failure if absent.

        Args:
            message_or_error: Message for the UnwrapFailure, or an exception
                instance to raise unchanged.

        Raises:
            UnwrapFailure: If absent and ``message_or_error`` is a message.
            BaseException: ``message_or_error`` itself, if absent and it is an exception.
        """
        return self.match(
            absent=lambda: raise_unwrap_failure(
                message_or_error, operation='expect()', variant='absent'
            ),
            present=_identity,
        )

    def unwrap_or(self, default: D) -> T | D:
        """Return the wrapped value, or ``default`` if absent."""
        return self.match(absent=lambda: default, present=_identity)

    def unwrap_or_else(self, thunk: Callable[[], D]) -> T | D:
        """Return the wrapped value, or the result of ``thunk()`` if absent.

        ``thunk`` is only called when absent.
        """
        return self.match(absent=thunk, present=_identity)

    def and_(self, other: OptionalValue[U]) -> OptionalValue[U]:
        """Return ``other`` if this is present, otherwise absent."""
        return self.match(absent=lambda: self, present=lambda _: other)

    def and_then(self, f: Callable[[T], OptionalValue[U]]) -> OptionalValue[U]:
        """Chain an OptionalValue-returning function.

        Also known as flatmap or bind. ``f`` is not called when absent.
        """
        return self.match(absent=lambda: self, present=f)

    def or_(self, other: OptionalValue[U]) -> OptionalValue[T | U]:
        """Return self if present, otherwise ``other``."""
        return self.match(absent=lambda: other, present=lambda _: self)

    def or_else(self, thunk: Callable[[], OptionalValue[U]]) -> OptionalValue[T | U]:
        """Return self if present, otherwise the result of ``thunk()``.

        ``thunk`` is only called when absent.
        """
        return self.match(absent=thunk, present=lambda _: self)

    def filter(self, predicate: Callable[[T], bool]) -> OptionalValue[T]:
        """Keep the wrapped value only if ``predicate`` accepts it.

        Args:
            predicate: Called with the wrapped value if present.

        Returns:
            Self if present and ``predicate(value)`` is true, otherwise absent.
        """
        return self.and_then(lambda value: self if predicate(value) else _ABSENT)

    def flatten(self: OptionalValue[OptionalValue[U]]) -> OptionalValue[U]:
        """Remove one level of nesting.

        ``present(present(x))`` becomes ``present(x)``; ``present(absent())``
        and ``absent()`` become ``absent()``.

        Raises:
            TypeError: If the wrapped value is not an OptionalValue.
        """
        return self.and_then(lambda inner: _require_optional(inner, 'flatten()'))

    def to_sequence(self) -> list[T]:
        """Return ``[]`` if absent, else a one-element list of the wrapped value."""
        return self.match(absent=lambda: [], present=lambda value: [value])

    def xor(self, other: OptionalValue[U]) -> OptionalValue[T | U]:
        """Return whichever of self and ``other`` is present, if exactly one is.

        If both or neither are present, returns absent.
        """
        return self.match(
            absent=lambda: other,
            present=lambda _: other.match(absent=lambda: self, present=lambda _: _ABSENT),
        )

    def transpose(self: OptionalValue[Outcome[U, E]]) -> Outcome[OptionalValue[U], E]:
        """Turn an OptionalValue of an Outcome into an Outcome of an OptionalValue.

        - ``absent()`` becomes ``success(absent())``
        - ``present(success(u))`` becomes ``success(present(u))``
        - ``present(failure(e))`` becomes ``failure(e)``

        This is the inverse of :meth:`Outcome.transpose`.

        Raises:
            TypeError: If the wrapped value is not an Outcome.
        """
        from klaw_outcome.types.outcome import Outcome

        def transpose_present(wrapped: Any) -> Outcome[OptionalValue[U], E]:
            if not isinstance(wrapped, Outcome):
                msg = f'transpose() requires a present value that is an Outcome, got {type(wrapped).__name__}'
                raise TypeError(msg)
            return wrapped.match(
                success=lambda value: Outcome.success(OptionalValue.present(value)),
                failure=Outcome.failure,
            )

        return self.match(
            absent=lambda: Outcome.success(_ABSENT),
            present=transpose_present,
        )

    def equals_present(self, other: T) -> bool:
        """Return True if this is present and the wrapped value equals ``other``.

        Both must be of the same type, so ``present(1).equals_present(True)``
        is False even though ``1 == True``.
        """
        return self.match(
            absent=lambda: False,
            present=lambda value: type(value) is type(other) and value == other,
        )

    def present_satisfies(self, predicate: Callable[[T], bool]) -> bool:
        """Return False if absent, else ``predicate(value)``."""
        return self.match(absent=lambda: False, present=predicate)


_ABSENT: OptionalValue[Any] = OptionalValue(OptionalKind.ABSENT)


def _identity(value: T) -> T:
    return value


def _require_optional(value: Any, operation: str) -> OptionalValue[Any]:
    if not isinstance(value, OptionalValue):
        msg = f'{operation} requires a present value that is an OptionalValue, got {type(value).__name__}'
        raise TypeError(msg)
    return value
