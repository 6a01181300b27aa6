"""
Lifecycle - Process-level collaborators of the sleep loop.

Handles:
- Signal handling (SIGINT/SIGTERM flip the interrupt latch)
- Daemonization (double fork, detach from terminal)

Example:
    from lucid.lifecycle import OsSignalSource, SignalLatch, daemonize

    daemonize()
    latch = SignalLatch()
    OsSignalSource().install(latch)
"""

from .daemon import daemonize
from .signals import (
    TERMINATION_SIGNALS,
    InterruptSource,
    OsSignalSource,
    RunState,
    SignalLatch,
)

__all__ = [
    "daemonize",
    "InterruptSource",
    "OsSignalSource",
    "RunState",
    "SignalLatch",
    "TERMINATION_SIGNALS",
]
