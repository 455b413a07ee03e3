"""klaw-outcome: immutable OptionalValue and Outcome types for Python 3.11+.

Flat imports (preferred):
    from klaw_outcome import OptionalValue, Outcome, present, absent, success, failure

Namespace imports:
    from klaw_outcome import optional, outcome
    optional.from_nullable(x)
    outcome.all_successful(results)
"""

# Configuration and logging
from klaw_outcome._config import OutcomeConfig, get_config, init
from klaw_outcome._logging import (
    add_log_hook,
    clear_log_hooks,
    configure_logging,
    get_logger,
    remove_log_hook,
)

# Errors
from klaw_outcome.errors import UnwrapFailure

# Types
from klaw_outcome.types import OptionalKind, OptionalValue, Outcome, OutcomeKind

# Factory namespaces
from klaw_outcome import optional, outcome
from klaw_outcome.optional import absent, all_present, from_nullable, present
from klaw_outcome.outcome import all_successful, failure, success

__all__ = [
    'OptionalKind',
    'OptionalValue',
    'Outcome',
    'OutcomeConfig',
    'OutcomeKind',
    'UnwrapFailure',
    'absent',
    'add_log_hook',
    'all_present',
    'all_successful',
    'clear_log_hooks',
    'configure_logging',
    'failure',
    'from_nullable',
    'get_config',
    'get_logger',
    'init',
    'optional',
    'outcome',
    'present',
    'remove_log_hook',
    'success',
]
