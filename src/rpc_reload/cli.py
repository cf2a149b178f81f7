"""Command line entry point for ``sol-rpc-reload``."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from .config import ConfigurationError, load_settings
from .config.runtime import DEBUG_ENV, QUIET_ENV
from .errors import ReloadError
from .logging_config import setup_logging
from .process_lookup import ProcessLookup
from .reload_signaler import TARGET_PROCESS_NAME, ReloadSignaler
from .signal_sender import SignalSender

CONFIGURATION_ERROR_EXIT_CODE = 4
# EX_USAGE from sysexits.h, outside the reload outcome codes
USAGE_ERROR_EXIT_CODE = 64

logger = logging.getLogger(__name__)


def _console(message: str, *, quiet: bool, error: bool = False) -> None:
    """Emit console output unless quiet mode is on."""

    if quiet:
        return
    print(message, file=sys.stderr if error else sys.stdout)


def _build_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog="sol-rpc-reload",
        description=f"Send SIGHUP to the running {TARGET_PROCESS_NAME} so it reloads its configuration.",
        epilog=(
            f"Settings: {DEBUG_ENV} enables debug diagnostics on stderr, {QUIET_ENV} hides the success line. "
            "Both are read from the environment, falling back to ~/.env."
        ),
    )


def _parse_args(argv: Optional[Sequence[str]]) -> Optional[int]:
    """Parse the (empty) argument list; return an exit code when parsing ends the run."""
    try:
        _build_parser().parse_args(argv)
    except SystemExit as exc:
        # --help exits 0; every usage error gets its own code
        if exc.code == 0:
            return 0
        return USAGE_ERROR_EXIT_CODE
    return None


def main(
    argv: Optional[Sequence[str]] = None,
    *,
    lookup: Optional[ProcessLookup] = None,
    sender: Optional[SignalSender] = None,
) -> int:
    """Run one reload attempt and return the process exit code."""
    parse_exit_code = _parse_args(argv)
    if parse_exit_code is not None:
        return parse_exit_code

    try:
        settings = load_settings()
    except ConfigurationError as exc:
        _console(str(exc), quiet=False, error=True)
        return CONFIGURATION_ERROR_EXIT_CODE

    setup_logging(debug=settings.debug)

    try:
        outcome = ReloadSignaler(lookup, sender).run()
    except ReloadError as exc:
        logger.debug("Reload failed", exc_info=True)
        # Failure diagnostics are printed even in quiet mode
        _console(str(exc), quiet=False, error=True)
        return exc.exit_code

    _console(outcome.message, quiet=settings.quiet)
    return 0


def run() -> None:
    """Console script wrapper."""
    sys.exit(main())
