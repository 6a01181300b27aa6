"""
Daemonization - Detach from the controlling terminal.

Classic double fork: the original process and the intermediate child
both exit, leaving a grandchild with no controlling terminal whose
standard streams point at /dev/null.
"""

import os
import sys

import structlog

from ..errors import FailedToDaemonize

__all__ = ["daemonize"]

logger = structlog.get_logger(__name__)


def daemonize() -> int:
    """Detach the current process and continue in the grandchild.

    Only returns in the daemon process. The working directory is kept.

    Returns:
        PID of the daemon process

    Raises:
        FailedToDaemonize: If any fork, setsid or redirection fails
    """
    sys.stdout.flush()
    sys.stderr.flush()

    # First fork
    try:
        pid = os.fork()
    except OSError as e:
        raise FailedToDaemonize(f"Failed to daemonize: fork failed: {e}") from e
    if pid > 0:
        os._exit(0)

    # Child - decouple from parent
    try:
        os.setsid()
    except OSError as e:
        raise FailedToDaemonize(f"Failed to daemonize: setsid failed: {e}") from e
    os.umask(0)

    # Second fork
    try:
        pid = os.fork()
    except OSError as e:
        raise FailedToDaemonize(f"Failed to daemonize: fork failed: {e}") from e
    if pid > 0:
        os._exit(0)

    # Grandchild - actual daemon
    _redirect_standard_streams()

    pid = os.getpid()
    logger.info("daemonized", pid=pid, cwd=os.getcwd())
    return pid


def _redirect_standard_streams() -> None:
    """Replace stdin, stdout and stderr with /dev/null."""
    try:
        sys.stdin = open(os.devnull)
        sys.stdout = open(os.devnull, "w")
    except OSError as e:
        raise FailedToDaemonize(
            f"Failed to daemonize: could not redirect standard streams: {e}"
        ) from e
    sys.stderr = sys.stdout
