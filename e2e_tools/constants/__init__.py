"""Shared constants for the UI test suites."""

from .timeouts import ERROR_MESSAGES, TIMEOUTS, ErrorMessages, Timeouts

__all__ = [
    "ERROR_MESSAGES",
    "TIMEOUTS",
    "ErrorMessages",
    "Timeouts",
]
