"""argcheck - fluent precondition checks with informative error messages."""

from .check import Check, IntCheck, fail, fail_on
from .config import MessageSettings, get_settings
from .errors import InvalidCheckError
from .messages import ABSENT, render_failure_message
from .version import __version__


__all__ = [
    # Checks
    "Check",
    "IntCheck",
    "fail",
    "fail_on",
    # Messages
    "ABSENT",
    "render_failure_message",
    # Configuration and errors
    "MessageSettings",
    "get_settings",
    "InvalidCheckError",
]
