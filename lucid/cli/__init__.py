"""
CLI - Command-line interface for lucid.

Example:
    $ lucid -v 0.25
    [lucid]: Going to sleep for 0.250s
    [lucid]: Running as PID 12345 in /home/user
    [lucid]: Still dreaming after 0.000s
    [lucid]: Still dreaming after 0.100s
    [lucid]: Still dreaming after 0.200s
    [lucid]: Woke up after 0.250s
"""

from .main import cli

__all__ = ["cli"]
