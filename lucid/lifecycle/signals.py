"""
Signal Handling - Interrupt latch for the sleep loop.

SIGINT and SIGTERM flip a shared latch to INTERRUPTED. The sleep loop
reads the latch once per cycle and decides whether to stop or ignore.
The handler only stores a value; it never writes output.
"""

import signal
from enum import Enum
from typing import Protocol, runtime_checkable

import structlog

from ..errors import SignalRegistrationError

__all__ = [
    "InterruptSource",
    "OsSignalSource",
    "RunState",
    "SignalLatch",
    "TERMINATION_SIGNALS",
]

logger = structlog.get_logger(__name__)

TERMINATION_SIGNALS = (signal.SIGINT, signal.SIGTERM)


class RunState(Enum):
    RUNNING = "running"
    INTERRUPTED = "interrupted"


class SignalLatch:
    """Single running/interrupted flag shared with a signal handler.

    Reads and writes are single attribute stores, atomic under the
    interpreter lock. ``reset()`` is a plain store, not a
    read-modify-write.

    Example:
        latch = SignalLatch()
        source = OsSignalSource()
        source.install(latch)

        while not latch.interrupted:
            time.sleep(0.1)
    """

    def __init__(self) -> None:
        self._state = RunState.RUNNING

    @property
    def state(self) -> RunState:
        return self._state

    @property
    def interrupted(self) -> bool:
        return self._state is RunState.INTERRUPTED

    def interrupt(self) -> None:
        self._state = RunState.INTERRUPTED

    def reset(self) -> None:
        self._state = RunState.RUNNING


@runtime_checkable
class InterruptSource(Protocol):
    """Something that flips a latch asynchronously."""

    def install(self, latch: SignalLatch) -> None:
        """Start delivering interrupts to the latch."""
        ...

    def uninstall(self) -> None:
        """Stop delivering interrupts."""
        ...


class OsSignalSource:
    """Delivers SIGINT/SIGTERM to a latch via ``signal.signal``.

    Installing twice is an error: a process has exactly one latch.
    """

    def __init__(self, signals: tuple[signal.Signals, ...] = TERMINATION_SIGNALS) -> None:
        self.signals = signals
        self._latch: SignalLatch | None = None
        self._previous: dict[signal.Signals, object] = {}

    @property
    def installed(self) -> bool:
        return self._latch is not None

    def install(self, latch: SignalLatch) -> None:
        """Register handlers for all configured signals.

        Raises:
            SignalRegistrationError: If already installed or the OS
                refuses the handler (e.g. not called from the main thread)
        """
        if self._latch is not None:
            raise SignalRegistrationError(
                "Error while setting up signal handler: handler already registered"
            )

        self._latch = latch
        try:
            for sig in self.signals:
                self._previous[sig] = signal.signal(sig, self._handle_signal)
        except (OSError, ValueError) as e:
            self.uninstall()
            raise SignalRegistrationError(
                f"Error while setting up signal handler: {e}"
            ) from e

        logger.debug(
            "signal_handlers_registered",
            signals=[sig.name for sig in self.signals],
        )

    def uninstall(self) -> None:
        """Restore the handlers that were active before install()."""
        for sig, previous in self._previous.items():
            # None means the handler was not installed from Python
            signal.signal(sig, signal.SIG_DFL if previous is None else previous)
        self._previous.clear()
        self._latch = None

    def _handle_signal(self, signum, frame) -> None:
        if self._latch is not None:
            self._latch.interrupt()
