"""Outcome type: success with a value, or failure with an error value."""

from __future__ import annotations

from collections.abc import Callable
from enum import StrEnum
from typing import Any, Generic, NoReturn, TypeVar

import msgspec
from msgspec.structs import force_setattr

from klaw_outcome.errors import raise_payload, raise_unwrap_failure
from klaw_outcome.types.optional_value import OptionalValue

__all__ = ['Outcome', 'OutcomeKind']

T = TypeVar('T')
E = TypeVar('E')
T2 = TypeVar('T2')
E2 = TypeVar('E2')
U = TypeVar('U')
D = TypeVar('D')
S = TypeVar('S')
F = TypeVar('F')

UNWRAP_FAILURE_MESSAGE = 'Tried to call unwrap() on failure'
UNWRAP_FAILURE_ON_SUCCESS_MESSAGE = 'Tried to call unwrap_failure() on success'


class OutcomeKind(StrEnum):
    """Discriminant of an Outcome."""

    SUCCESS = 'success'
    FAILURE = 'failure'


class Outcome(msgspec.Struct, Generic[T, E], frozen=True, gc=False):
    """The outcome of an operation: success with a T, or failure with an E.

    Failure is ordinary data here. It propagates by return value through
    ``map``/``and_then``/``or_else`` chains and is only raised when the caller
    opts in through the unwrap/expect family or :meth:`unwrap_or_raise`.

    Build instances with :meth:`success` and :meth:`failure` (or the
    functions in :mod:`klaw_outcome.outcome`) rather than calling the
    constructor.

    Examples:
        >>> success(2).map(lambda x: x + 1)
        success(3)
        >>> failure('boom').map_failure(str.upper)
        failure('BOOM')
        >>> failure('boom').unwrap_or(0)
        0
    """

    kind: OutcomeKind
    payload: Any = None

    def __post_init__(self) -> None:
        force_setattr(self, 'kind', OutcomeKind(self.kind))

    @classmethod
    def success(cls, value: T) -> Outcome[T, Any]:
        """Wrap ``value`` in the success variant."""
        return cls(OutcomeKind.SUCCESS, value)

    @classmethod
    def failure(cls, error: E) -> Outcome[Any, E]:
        """Wrap ``error`` in the failure variant."""
        return cls(OutcomeKind.FAILURE, error)

    def __repr__(self) -> str:
        return self.match(
            success=lambda value: f'success({value!r})',
            failure=lambda error: f'failure({error!r})',
        )

    def match(self, *, success: Callable[[T], S], failure: Callable[[E], F]) -> S | F:
        """Dispatch to exactly one branch and return its result.

        Args:
            success: Called with the value if this is a success.
            failure: Called with the error if this is a failure.

        Returns:
            The return value of whichever callback was called.
        """
        if self.kind is OutcomeKind.SUCCESS:
            return success(self.payload)
        return failure(self.payload)

    def is_success(self) -> bool:
        return self.match(success=lambda _: True, failure=lambda _: False)

    def is_failure(self) -> bool:
        return self.match(success=lambda _: False, failure=lambda _: True)

    def to_optional_on_success(self) -> OptionalValue[T]:
        """Return ``present(value)`` on success, absent on failure."""
        return self.match(success=OptionalValue.present, failure=lambda _: OptionalValue.absent())

    def to_optional_on_failure(self) -> OptionalValue[E]:
        """Return ``present(error)`` on failure, absent on success."""
        return self.match(success=lambda _: OptionalValue.absent(), failure=OptionalValue.present)

    def map(self, f: Callable[[T], T2]) -> Outcome[T2, E]:
        """Apply ``f`` to the success value, leaving a failure untouched."""
        return self.match(
            success=lambda value: Outcome.success(f(value)),
            failure=lambda _: self,
        )

    def map_failure(self, f: Callable[[E], E2]) -> Outcome[T, E2]:
        """Apply ``f`` to the failure payload, leaving a success untouched."""
        return self.match(
            success=lambda _: self,
            failure=lambda error: Outcome.failure(f(error)),
        )

    def if_success(self, f: Callable[[T], Any]) -> None:
        """Call ``f`` with the value on success. The result is discarded."""
        self.match(success=f, failure=lambda _: None)

    def if_failure(self, f: Callable[[E], Any]) -> None:
        """Call ``f`` with the error on failure. The result is discarded."""
        self.match(success=lambda _: None, failure=f)

    def unwrap(self) -> T:
        """Return the success value.

        Raises:
            UnwrapFailure: If this is a failure.
        """
        return self.match(
            success=_identity,
            failure=lambda _: raise_unwrap_failure(
                UNWRAP_FAILURE_MESSAGE, operation='unwrap()', variant='failure'
            ),
        )

    def unwrap_failure(self) -> E:
        """Return the failure payload.

        Raises:
            UnwrapFailure: If this is a success.
        """
        return self.match(
            success=lambda _: raise_unwrap_failure(
                UNWRAP_FAILURE_ON_SUCCESS_MESSAGE, operation='unwrap_failure()', variant='success'
            ),
            failure=_identity,
        )

    def unwrap_only_success_possible(self: Outcome[T, NoReturn]) -> T:
        """Return the success value of an Outcome whose error type is ``NoReturn``.

        The annotation lets a type checker prove the failure variant is
        impossible. If that precondition is broken at runtime, an
        UnwrapFailure is raised rather than returning the error.
        """
        return self.match(
            success=_identity,
            failure=lambda _: raise_unwrap_failure(
                'Tried to call unwrap_only_success_possible() on failure',
                operation='unwrap_only_success_possible()',
                variant='failure',
            ),
        )

    def unwrap_only_failure_possible(self: Outcome[NoReturn, E]) -> E:
        """Return the failure payload of an Outcome whose value type is ``NoReturn``."""
        return self.match(
            success=lambda _: raise_unwrap_failure(
                'Tried to call unwrap_only_failure_possible() on success',
                operation='unwrap_only_failure_possible()',
                variant='success',
            ),
            failure=_identity,
        )

    def unwrap_or_raise(self: Outcome[T, BaseException]) -> T:
        """Return the success value, or raise the failure payload itself.

        For outcomes whose error type is an exception. This is the explicit
        escape hatch from value-level failures back to raised ones.

        Raises:
            BaseException: The wrapped error, if this is a failure.
        """
        return self.match(
            success=_identity,
            failure=lambda error: raise_payload(
                error, operation='unwrap_or_raise()', variant='failure'
            ),
        )

    def unwrap_failure_or_raise_success(self: Outcome[BaseException, E]) -> E:
        """Return the failure payload, or raise the success value itself.

        Dual of :meth:`unwrap_or_raise`, for outcomes whose value type is an
        exception.
        """
        return self.match(
            success=lambda value: raise_payload(
                value, operation='unwrap_failure_or_raise_success()', variant='success'
            ),
            failure=_identity,
        )

    def expect(self, message_or_error: str | BaseException) -> T:
        """Return the success value, or raise the caller's failure.

        Args:
            message_or_error: Message for the UnwrapFailure, or an exception
                instance to raise unchanged.

        Raises:
            UnwrapFailure: If a failure and ``message_or_error`` is a message.
            BaseException: ``message_or_error`` itself, if a failure and it is an exception.
        """
        return self.match(
            success=_identity,
            failure=lambda _: raise_unwrap_failure(
                message_or_error, operation='expect()', variant='failure'
            ),
        )

    def expect_failure(self, message_or_error: str | BaseException) -> E:
        """Return the failure payload, or raise the caller's failure on success."""
        return self.match(
            success=lambda _: raise_unwrap_failure(
                message_or_error, operation='expect_failure()', variant='success'
            ),
            failure=_identity,
        )

    def unwrap_or(self, default: D) -> T | D:
        """Return the success value, or ``default`` on failure."""
        return self.match(success=_identity, failure=lambda _: default)

    def unwrap_or_else(self, f: Callable[[E], D]) -> T | D:
        """Return the success value, or ``f(error)`` on failure.

        ``f`` is only called on failure.
        """
        return self.match(success=_identity, failure=f)

    def and_(self, other: Outcome[T2, E2]) -> Outcome[T2, E | E2]:
        """Return ``other`` on success; on failure return self unchanged."""
        return self.match(success=lambda _: other, failure=lambda _: self)

    def and_then(self, f: Callable[[T], Outcome[T2, E2]]) -> Outcome[T2, E | E2]:
        """Chain an Outcome-returning function.

        Also known as flatmap or bind. On failure, ``f`` is not called and
        self is returned unchanged.
        """
        return self.match(success=f, failure=lambda _: self)

    def or_(self, other: Outcome[T2, E2]) -> Outcome[T | T2, E2]:
        """Return self on success, otherwise ``other``."""
        return self.match(success=lambda _: self, failure=lambda _: other)

    def or_else(self, f: Callable[[E], Outcome[T2, E2]]) -> Outcome[T | T2, E2]:
        """Recover from a failure.

        Args:
            f: Called with the error on failure; returns the replacement Outcome.

        Returns:
            Self on success (``f`` is not called), otherwise ``f(error)``.
        """
        return self.match(success=lambda _: self, failure=f)

    def to_sequence(self) -> list[T]:
        """Return ``[value]`` on success, ``[]`` on failure."""
        return self.match(success=lambda value: [value], failure=lambda _: [])

    def transpose(self: Outcome[OptionalValue[U], E]) -> OptionalValue[Outcome[U, E]]:
        """Turn an Outcome of an OptionalValue into an OptionalValue of an Outcome.

        - ``success(absent())`` becomes ``absent()``
        - ``success(present(u))`` becomes ``present(success(u))``
        - ``failure(e)`` becomes ``present(failure(e))``

        This is the inverse of :meth:`OptionalValue.transpose`.

        Raises:
            TypeError: If the success value is not an OptionalValue.
        """

        def transpose_success(wrapped: Any) -> OptionalValue[Outcome[U, E]]:
            if not isinstance(wrapped, OptionalValue):
                msg = f'transpose() requires a success value that is an OptionalValue, got {type(wrapped).__name__}'
                raise TypeError(msg)
            return wrapped.match(
                absent=OptionalValue.absent,
                present=lambda value: OptionalValue.present(Outcome.success(value)),
            )

        return self.match(
            success=transpose_success,
            failure=lambda error: OptionalValue.present(Outcome.failure(error)),
        )

    def success_satisfies(self, predicate: Callable[[T], bool]) -> bool:
        """Return ``predicate(value)`` on success, False on failure."""
        return self.to_optional_on_success().present_satisfies(predicate)

    def failure_satisfies(self, predicate: Callable[[E], bool]) -> bool:
        """Return ``predicate(error)`` on failure, False on success."""
        return self.to_optional_on_failure().present_satisfies(predicate)

    def reverse(self) -> Outcome[E, T]:
        """Swap the variants, keeping the payload: success(t) <-> failure(t)."""
        return self.match(success=Outcome.failure, failure=Outcome.success)


def _identity(value: T) -> T:
    return value
