"""
Centralized configuration for lucid.

Configuration sources (priority order):
1. Command line options
2. Environment variables (LUCID_*)
3. Default values

Environment variables:
- LUCID_PREFIX: Message prefix (default: lucid)
- LUCID_LOG_LEVEL: Diagnostic log level (default: WARNING)
- LUCID_POLL_INTERVAL_MS: Sleep loop polling quantum in ms (default: 100)
"""

import os
from dataclasses import dataclass

from .duration import Duration
from .errors import ConfigError
from .output import Channel, VerbosityLevel

__all__ = ["DEFAULT_POLL_INTERVAL_MS", "DEFAULT_PREFIX", "LucidConfig"]

DEFAULT_PREFIX = "lucid"
DEFAULT_POLL_INTERVAL_MS = 100


def _get_env(key: str, default: str) -> str:
    """Get environment variable with LUCID_ prefix."""
    return os.environ.get(f"LUCID_{key}", default)


def _get_env_int(key: str, default: int) -> int:
    """Get integer environment variable."""
    raw = _get_env(key, str(default))
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"LUCID_{key} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class LucidConfig:
    """Immutable run configuration.

    ``target`` of None means sleep until interrupted.
    """

    target: Duration | None = None
    verbosity: VerbosityLevel = VerbosityLevel.NORMAL
    prefix: str = DEFAULT_PREFIX
    channel: Channel = Channel.STDOUT
    no_interrupt: bool = False
    daemon: bool = False
    exit_code: int = 0
    log_level: str = "WARNING"
    poll_interval_ms: int = DEFAULT_POLL_INTERVAL_MS

    def __post_init__(self) -> None:
        if self.poll_interval_ms <= 0:
            raise ConfigError("Polling interval must be positive")

    @property
    def poll_interval(self) -> float:
        """Polling quantum in seconds."""
        return self.poll_interval_ms / 1000

    @property
    def forever(self) -> bool:
        return self.target is None

    @classmethod
    def from_env(cls, **overrides) -> "LucidConfig":
        """Build a config from LUCID_* variables, then apply overrides.

        Overrides with a value of None are ignored, so unset CLI options
        fall back to the environment.
        """
        values = {
            "prefix": _get_env("PREFIX", DEFAULT_PREFIX),
            "log_level": _get_env("LOG_LEVEL", "WARNING"),
            "poll_interval_ms": _get_env_int("POLL_INTERVAL_MS", DEFAULT_POLL_INTERVAL_MS),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
