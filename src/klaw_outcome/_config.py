"""Library configuration: OutcomeConfig and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from klaw_outcome._logging import configure_logging

__all__ = [
    'OutcomeConfig',
    'get_config',
    'init',
]


@dataclass(frozen=True)
class OutcomeConfig:
    """Configuration for klaw-outcome.

    The wrapper types themselves are pure and never read this; it only
    controls how the library's diagnostic logging is rendered.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_output: Render log events as JSON (True) or console text (False).
    """

    log_level: str | None = None
    json_output: bool = True


# Global configuration (set by init())
_config: OutcomeConfig | None = None


def _detect_log_level() -> str | None:
    """Read the log level from KLAW_OUTCOME_LOG_LEVEL, if set."""
    level = os.environ.get('KLAW_OUTCOME_LOG_LEVEL', '').strip()
    return level.upper() or None


def _detect_json_output() -> bool:
    """Read the log format from KLAW_OUTCOME_LOG_FORMAT ("json" or "console")."""
    fmt = os.environ.get('KLAW_OUTCOME_LOG_FORMAT', '').lower()
    if fmt == 'console':
        return False
    if fmt and fmt != 'json':
        logging.warning("Unknown KLAW_OUTCOME_LOG_FORMAT value '%s', defaulting to json", fmt)
    return True


def init(
    log_level: str | None = None,
    json_output: bool | None = None,
) -> OutcomeConfig:
    """Initialize klaw-outcome's configuration.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). Read from the
            environment if None; None there too means silent.
        json_output: JSON or console rendering. Read from the environment if None.

    Returns:
        The OutcomeConfig that was set.

    Example:
        ```python
        from klaw_outcome import init

        # Environment driven
        init()

        # Explicit configuration
        init(log_level="DEBUG", json_output=False)
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = log_level.upper() if log_level is not None else _detect_log_level()
    resolved_json = json_output if json_output is not None else _detect_json_output()

    _config = OutcomeConfig(log_level=resolved_level, json_output=resolved_json)

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=resolved_json)

    return _config


def get_config() -> OutcomeConfig:
    """Get the current configuration.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = 'klaw-outcome not initialized. Call klaw_outcome.init() first.'
        raise RuntimeError(msg)
    return _config
