"""
Sleep Loop - Interruptible sleep in bounded slices.

The loop sleeps in slices of at most one polling quantum (100 ms by
default) and checks the interrupt latch between slices, so a signal is
noticed within one quantum even when sleeping forever.

Per cycle:
    1. latch interrupted?  ignore and re-arm (no-interrupt mode) or stop
    2. target reached?     stop
    3. sleep min(quantum, target - elapsed)
    4. verbose progress message
"""

import time
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

import structlog

from .duration import Duration, format_seconds
from .lifecycle.signals import SignalLatch
from .output import StatusReporter

__all__ = ["DEFAULT_POLL_INTERVAL", "SleepResult", "Sleeper", "WakeReason"]

logger = structlog.get_logger(__name__)

DEFAULT_POLL_INTERVAL = 0.1


class WakeReason(Enum):
    COMPLETED = "completed"
    INTERRUPTED = "interrupted"


@dataclass(frozen=True)
class SleepResult:
    """Outcome of one Sleeper.run()."""

    reason: WakeReason
    elapsed: float
    ignored: int = 0

    @property
    def interrupted(self) -> bool:
        return self.reason is WakeReason.INTERRUPTED


class Sleeper:
    """Sleeps until the target elapses or the latch is interrupted.

    ``clock`` and ``sleep`` are injectable so tests can drive the loop
    without real time passing.

    Example:
        latch = SignalLatch()
        OsSignalSource().install(latch)

        sleeper = Sleeper(Duration(1500), latch, StatusReporter())
        result = sleeper.run()
    """

    def __init__(
        self,
        target: Duration | None,
        latch: SignalLatch,
        reporter: StatusReporter,
        no_interrupt: bool = False,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """Initialize sleeper.

        Args:
            target: How long to sleep, None for forever
            latch: Interrupt flag checked once per cycle
            reporter: Status output
            no_interrupt: Ignore interrupts instead of stopping
            poll_interval: Maximum length of one sleep slice (seconds)
            clock: Monotonic time source
            sleep: Blocking sleep function
        """
        if poll_interval <= 0:
            raise ValueError("poll_interval must be positive")

        self.target = target
        self.latch = latch
        self.reporter = reporter
        self.no_interrupt = no_interrupt
        self.poll_interval = poll_interval
        self._clock = clock
        self._sleep = sleep

    def run(self) -> SleepResult:
        """Run the loop to completion and report the wake-up."""
        target = self.target.seconds if self.target is not None else None
        start = self._clock()
        reason = WakeReason.COMPLETED
        ignored = 0

        while True:
            since_start = self._clock() - start

            if self.latch.interrupted:
                if self.no_interrupt:
                    self.reporter.report("Ignoring termination signal.")
                    self.latch.reset()
                    ignored += 1
                    logger.debug("interrupt_ignored", count=ignored)
                else:
                    self.reporter.report("Caught termination signal - interrupting sleep.")
                    reason = WakeReason.INTERRUPTED
                    break

            if target is not None and since_start >= target:
                break

            if target is not None and since_start + self.poll_interval > target:
                remaining = target - since_start
                if remaining <= 0:
                    break
                self._sleep(remaining)
            else:
                self._sleep(self.poll_interval)

            self.reporter.report_verbose(
                f"Still dreaming after {format_seconds(since_start)}"
            )

        elapsed = self._clock() - start
        self.reporter.report(f"Woke up after {format_seconds(elapsed)}")
        logger.info("sleep_finished", reason=reason.value, elapsed=elapsed, ignored=ignored)

        return SleepResult(reason=reason, elapsed=elapsed, ignored=ignored)
