"""
Errors - Configuration and setup failures.

Every error here is raised before the sleep loop starts. The CLI
prints the message on stderr and exits with code 1.
"""

__all__ = [
    "ConfigError",
    "DurationNegative",
    "DurationParseError",
    "FailedToDaemonize",
    "LucidError",
    "SignalRegistrationError",
]


class LucidError(Exception):
    """Base class for all lucid errors."""

    default_message = "Unknown error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class DurationParseError(LucidError):
    """Duration text is not a finite real number."""

    default_message = "Could not parse 'duration' argument"


class DurationNegative(LucidError):
    """Duration is a valid number but below zero."""

    default_message = "Duration can not be negative"


class ConfigError(LucidError):
    """Invalid combination of options."""

    default_message = "Invalid configuration"


class FailedToDaemonize(LucidError):
    default_message = "Failed to daemonize"


class SignalRegistrationError(LucidError):
    default_message = "Error while setting up signal handler"
