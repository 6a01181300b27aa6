"""
lucid - An interruptible, verbose sleep.

Sleeps for a number of seconds (or forever), reports progress, and
reacts to SIGINT/SIGTERM in a configurable way.
"""

__version__ = "1.0.0"

from .config import LucidConfig
from .duration import Duration, parse_duration

__all__ = [
    "__version__",
    "Duration",
    "LucidConfig",
    "parse_duration",
]
