"""
CLI Main - Entry point for the `lucid` command.

Usage:
    lucid [OPTIONS] [DURATION]

    lucid 2.5                 Sleep for 2.5 seconds
    lucid                     Sleep until SIGINT/SIGTERM
    lucid -I 10               Sleep 10 seconds, ignoring SIGINT/SIGTERM
    lucid -d -c 3 60          Sleep in the background, exit with code 3
"""

import os

import click
import structlog

from .. import __version__
from ..config import LucidConfig
from ..duration import parse_duration
from ..errors import LucidError
from ..lifecycle import InterruptSource, OsSignalSource, SignalLatch, daemonize
from ..logging import configure_logging
from ..output import Channel, StatusReporter, VerbosityLevel
from ..sleeper import Sleeper

__all__ = ["cli", "main", "run"]

logger = structlog.get_logger(__name__)

FAILURE_EXIT_CODE = 1


def build_config(
    duration: str | None,
    verbose: bool = False,
    quiet: bool = False,
    prefix: str | None = None,
    stderr: bool = False,
    no_interrupt: bool = False,
    daemon: bool = False,
    exit_code: int = 0,
) -> LucidConfig:
    """Validate raw option values into a LucidConfig.

    Raises:
        LucidError: On unparsable or negative duration, or conflicting flags
    """
    return LucidConfig.from_env(
        target=parse_duration(duration) if duration is not None else None,
        verbosity=VerbosityLevel.from_flags(verbose=verbose, quiet=quiet),
        prefix=prefix,
        channel=Channel.STDERR if stderr else Channel.STDOUT,
        no_interrupt=no_interrupt,
        daemon=daemon,
        exit_code=exit_code,
    )


def run(config: LucidConfig, source: InterruptSource | None = None) -> int:
    """Sleep according to config.

    Args:
        config: Validated run configuration
        source: Interrupt source (defaults to SIGINT/SIGTERM)

    Returns:
        The configured exit code

    Raises:
        FailedToDaemonize: If daemonization was requested and failed
        SignalRegistrationError: If the signal handler can't be installed
    """
    logger.debug(
        "sleep_configured",
        target=str(config.target) if config.target is not None else None,
        no_interrupt=config.no_interrupt,
        daemon=config.daemon,
        poll_interval=config.poll_interval,
    )

    reporter = StatusReporter(
        prefix=config.prefix,
        verbosity=config.verbosity,
        channel=config.channel,
    )

    if config.forever:
        reporter.report("Going to sleep forever")
    else:
        reporter.report(f"Going to sleep for {config.target}")
    reporter.report_verbose(f"Running as PID {os.getpid()} in {os.getcwd()}")

    if config.daemon:
        reporter.report_verbose("Daemonizing")
        daemonize()

    # Installed after daemonizing so the handler lives in the final process
    latch = SignalLatch()
    if source is None:
        source = OsSignalSource()
    source.install(latch)

    try:
        sleeper = Sleeper(
            config.target,
            latch,
            reporter,
            no_interrupt=config.no_interrupt,
            poll_interval=config.poll_interval,
        )
        sleeper.run()
    finally:
        source.uninstall()

    return config.exit_code


class LucidCommand(click.Command):
    """Command whose usage errors exit with FAILURE_EXIT_CODE.

    Unknown dash-prefixed tokens are passed through as DURATION, so a
    negative number reaches the duration parser.
    """

    def parse_args(self, ctx, args):
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            e.exit_code = FAILURE_EXIT_CODE
            raise


@click.command(
    cls=LucidCommand,
    context_settings={
        "help_option_names": ["-h", "--help"],
        "ignore_unknown_options": True,
    },
)
@click.argument("duration", required=False)
@click.option("--verbose", "-v", is_flag=True, help="Be verbose")
@click.option("--quiet", "-q", is_flag=True, help="Do not output anything")
@click.option(
    "--prefix", "-p",
    default=None,
    help="Prefix all messages with the given string [default: lucid]",
)
@click.option("--stderr", "-e", is_flag=True, help="Print all messages to stderr")
@click.option(
    "--no-interrupt", "-I",
    is_flag=True,
    help="Do not terminate when receiving SIGINT/SIGTERM signals",
)
@click.option("--daemon", "-d", is_flag=True, help="Daemonize the process after launching")
@click.option(
    "--exit-code", "-c",
    type=int,
    default=0,
    show_default=True,
    help="Exit code to return after sleeping",
)
@click.version_option(__version__, prog_name="lucid")
@click.pass_context
def cli(ctx, duration, verbose, quiet, prefix, stderr, no_interrupt, daemon, exit_code):
    """Sleep for DURATION seconds (forever if omitted)."""
    try:
        config = build_config(
            duration,
            verbose=verbose,
            quiet=quiet,
            prefix=prefix,
            stderr=stderr,
            no_interrupt=no_interrupt,
            daemon=daemon,
            exit_code=exit_code,
        )
        configure_logging(config.log_level)
        code = run(config)
    except LucidError as e:
        click.echo(f"Error: {e.message}", err=True)
        ctx.exit(FAILURE_EXIT_CODE)

    ctx.exit(code)


def main() -> None:
    """Console script entry point."""
    cli(prog_name="lucid")


if __name__ == "__main__":
    main()
