"""
Timeout durations and canonical UI error messages.

Both are read from the ``timeouts`` and ``error_messages`` configuration
sections once at import time. Timeouts are in milliseconds, as Playwright
expects them.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, Final, Optional

from loguru import logger

from e2e_tools.common import ConfigurationError, GlobalConfig


@dataclass(frozen=True)
class Timeouts:
    """Named wait durations in milliseconds."""
    SHORT: int = 5000
    MEDIUM: int = 10000
    LONG: int = 30000


@dataclass(frozen=True)
class ErrorMessages:
    """User-visible error texts rendered by the shop frontend."""
    INVALID_LOGIN: str = "Invalid email or password"


def _known(cls, section: Dict[str, Any]) -> Dict[str, Any]:
    names = {f.name for f in fields(cls)}
    ignored = sorted(set(section) - names)
    if ignored:
        logger.debug(f"Ignoring unknown {cls.__name__} keys: {ignored}")
    return {k: v for k, v in section.items() if k in names}


def load_timeouts(section: Optional[Dict[str, Any]] = None) -> Timeouts:
    """
    Build Timeouts from a config section (defaults to ``timeouts``).

    Raises:
        ConfigurationError: If a value is not a positive integer
    """
    if section is None:
        section = GlobalConfig().get_section("timeouts")

    values: Dict[str, int] = {}
    for name, raw in _known(Timeouts, section).items():
        if isinstance(raw, bool) or (isinstance(raw, float) and not raw.is_integer()):
            raise ConfigurationError(f"Timeout {name} must be an integer, got {raw!r}")
        try:
            value = int(raw)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Timeout {name} must be an integer, got {raw!r}") from e
        if value <= 0:
            raise ConfigurationError(f"Timeout {name} must be positive, got {value}")
        values[name] = value
    return Timeouts(**values)


def load_error_messages(section: Optional[Dict[str, Any]] = None) -> ErrorMessages:
    """Build ErrorMessages from a config section (defaults to ``error_messages``)."""
    if section is None:
        section = GlobalConfig().get_section("error_messages")
    return ErrorMessages(**{k: str(v) for k, v in _known(ErrorMessages, section).items()})


TIMEOUTS: Final[Timeouts] = load_timeouts()
ERROR_MESSAGES: Final[ErrorMessages] = load_error_messages()
