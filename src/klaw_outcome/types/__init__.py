"""Core types: OptionalValue and Outcome."""

from klaw_outcome.types.optional_value import OptionalKind, OptionalValue
from klaw_outcome.types.outcome import Outcome, OutcomeKind

__all__ = [
    'OptionalKind',
    'OptionalValue',
    'Outcome',
    'OutcomeKind',
]
