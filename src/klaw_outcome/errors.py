"""Unwrap failure type and the raising helpers shared by both wrapper types."""

from __future__ import annotations

from typing import Any, NoReturn

from klaw_outcome._logging import get_logger

__all__ = [
    'UnwrapFailure',
    'raise_payload',
    'raise_unwrap_failure',
]

logger = get_logger(__name__)


class UnwrapFailure(Exception):  # noqa: N818
    """Raised when a wrapper's value is accessed through the wrong variant.

    Raised by ``unwrap()``, ``expect()``, ``unwrap_failure()`` and
    ``expect_failure()`` (and the ``unwrap_only_*_possible()`` accessors when
    their precondition does not hold). Failure values of an Outcome are plain
    data; this is the only exception the library raises on its own behalf.

    Attributes:
        message: Human readable description of the mismatch.
        operation: The accessor that was called, e.g. ``'unwrap()'``.
        variant: The variant the accessor was called on, e.g. ``'absent'``.
    """

    def __init__(
        self,
        message: str,
        *,
        operation: str | None = None,
        variant: str | None = None,
    ) -> None:
        self.message = message
        self.operation = operation
        self.variant = variant
        super().__init__(message)


def raise_unwrap_failure(
    message_or_error: str | BaseException,
    *,
    operation: str,
    variant: str,
) -> NoReturn:
    """Raise for an accessor called on the wrong variant.

    A pre-built exception is raised as-is, so callers of ``expect`` get back
    the exact object they passed in. Anything else becomes the message of an
    :class:`UnwrapFailure`.

    Args:
        message_or_error: Failure message, or the exception to raise.
        operation: Name of the accessor, recorded on the failure and the log event.
        variant: Variant the accessor was called on.

    Raises:
        UnwrapFailure: If ``message_or_error`` is not an exception.
        BaseException: ``message_or_error`` itself, when it is one.
    """
    custom_error = isinstance(message_or_error, BaseException)
    logger.debug(
        'unwrap_failure',
        operation=operation,
        variant=variant,
        custom_error=custom_error,
    )
    if isinstance(message_or_error, BaseException):
        raise message_or_error
    raise UnwrapFailure(str(message_or_error), operation=operation, variant=variant)


def raise_payload(payload: Any, *, operation: str, variant: str) -> NoReturn:
    """Raise a wrapped payload as the propagated exception.

    Used by ``Outcome.unwrap_or_raise()`` and its dual, which deliberately turn
    a data-level failure into a raised one. A payload that is not an exception
    surfaces as Python's own ``TypeError``.
    """
    logger.debug(
        'payload_raised',
        operation=operation,
        variant=variant,
        error_type=type(payload).__name__,
    )
    raise payload
