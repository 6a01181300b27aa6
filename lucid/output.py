"""
Status Output - Prefixed, verbosity-gated status messages.

Messages look like ``[lucid]: Woke up after 1.000s`` and go to exactly
one of stdout or stderr. Write failures are dropped: a closed or broken
stream must never stop the sleeping process.
"""

import sys
from enum import Enum, IntEnum
from typing import TextIO

from .errors import ConfigError

__all__ = ["Channel", "StatusReporter", "VerbosityLevel"]


class VerbosityLevel(IntEnum):
    """How much information is printed. Ordered: QUIET < NORMAL < VERBOSE."""

    QUIET = 0
    NORMAL = 1
    VERBOSE = 2

    @classmethod
    def from_flags(cls, verbose: bool = False, quiet: bool = False) -> "VerbosityLevel":
        """Collapse the --verbose/--quiet flags into a single level.

        Raises:
            ConfigError: If both flags are set
        """
        if verbose and quiet:
            raise ConfigError("Options '--verbose' and '--quiet' are mutually exclusive")
        if verbose:
            return cls.VERBOSE
        if quiet:
            return cls.QUIET
        return cls.NORMAL


class Channel(str, Enum):
    """Output stream for status messages."""

    STDOUT = "stdout"
    STDERR = "stderr"

    def resolve(self) -> TextIO:
        """Look up the current stream (honors later redirection)."""
        if self is Channel.STDERR:
            return sys.stderr
        return sys.stdout


class StatusReporter:
    """Writes status messages with a prefix, filtered by verbosity.

    Example:
        reporter = StatusReporter(prefix="nap", verbosity=VerbosityLevel.VERBOSE)
        reporter.report("Going to sleep for 1.000s")
        reporter.report_verbose("Still dreaming after 0.100s")
    """

    def __init__(
        self,
        prefix: str = "lucid",
        verbosity: VerbosityLevel = VerbosityLevel.NORMAL,
        channel: Channel = Channel.STDOUT,
        stream: TextIO | None = None,
    ) -> None:
        """Initialize reporter.

        Args:
            prefix: Text placed in brackets before every message
            verbosity: Threshold for printing
            channel: Stream to write to (resolved at write time)
            stream: Explicit stream, overrides channel
        """
        self.prefix = prefix
        self.verbosity = verbosity
        self.channel = channel
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        if self._stream is not None:
            return self._stream
        return self.channel.resolve()

    def report(self, msg: str) -> None:
        """Print message unless quiet."""
        if self.verbosity >= VerbosityLevel.NORMAL:
            self._write(msg)

    def report_verbose(self, msg: str) -> None:
        """Print message only in verbose mode."""
        if self.verbosity == VerbosityLevel.VERBOSE:
            self._write(msg)

    def _write(self, msg: str) -> None:
        try:
            stream = self.stream
            stream.write(f"[{self.prefix}]: {msg}\n")
            stream.flush()
        except (OSError, ValueError):
            pass
