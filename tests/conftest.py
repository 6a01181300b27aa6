"""Shared test fixtures."""

import io

import pytest

from lucid.lifecycle import SignalLatch
from lucid.logging import configure_logging
from lucid.output import StatusReporter, VerbosityLevel


class FakeClock:
    """Monotonic clock that only advances when sleep() is called."""

    def __init__(self) -> None:
        self.now = 0.0
        self.sleeps: list[float] = []
        self.on_sleep = None

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds
        if self.on_sleep is not None:
            self.on_sleep(len(self.sleeps))


class FakeInterruptSource:
    """Interrupt source driven by the test instead of the OS."""

    def __init__(self) -> None:
        self.latch: SignalLatch | None = None
        self.uninstalled = False

    def install(self, latch: SignalLatch) -> None:
        self.latch = latch

    def uninstall(self) -> None:
        self.uninstalled = True

    def deliver(self) -> None:
        assert self.latch is not None, "source not installed"
        self.latch.interrupt()


@pytest.fixture(autouse=True)
def quiet_logging():
    """Keep diagnostic logs out of captured output."""
    configure_logging("WARNING")


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def source():
    return FakeInterruptSource()


@pytest.fixture
def latch(source):
    latch = SignalLatch()
    source.install(latch)
    return latch


@pytest.fixture
def stream():
    return io.StringIO()


@pytest.fixture
def reporter(stream):
    """Verbose reporter writing to an in-memory stream."""
    return StatusReporter(prefix="lucid", verbosity=VerbosityLevel.VERBOSE, stream=stream)
