"""
Reload Signaler

Locates the running RPC router and sends it SIGHUP so it reloads its
configuration.

Usage:
    from rpc_reload.reload_signaler import ReloadSignaler

    outcome = ReloadSignaler().run()
    print(outcome.message)
"""

from __future__ import annotations

import logging
import signal
from dataclasses import dataclass
from typing import Optional

from .errors import ProcessNotFoundError, SignalDeliveryError
from .process_lookup import ProcessLookup, PsutilProcessLookup, resolve_pid
from .signal_sender import PsutilSignalSender, SignalSender, signal_reload

TARGET_PROCESS_NAME = "sol-rpc-router"
RELOAD_SIGNAL = signal.SIGHUP

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReloadOutcome:
    process_name: str
    pid: int
    signal_name: str = RELOAD_SIGNAL.name

    @property
    def message(self) -> str:
        return f"Sent {self.signal_name} to {self.process_name} (pid {self.pid})"


class ReloadSignaler:
    """Resolves the target process and delivers the reload signal exactly once."""

    def __init__(
        self,
        lookup: Optional[ProcessLookup] = None,
        sender: Optional[SignalSender] = None,
        *,
        process_name: str = TARGET_PROCESS_NAME,
    ) -> None:
        self.lookup = lookup if lookup is not None else PsutilProcessLookup()
        self.sender = sender if sender is not None else PsutilSignalSender()
        self.process_name = process_name

    def run(self) -> ReloadOutcome:
        """
        Signal the target process.

        Raises:
            ProcessNotFoundError: If no live process matches.
            AmbiguousProcessMatchError: If several processes match.
            SignalDeliveryError: If the process exited or denied the signal after lookup.
        """
        pid = resolve_pid(self.process_name, self.lookup)
        if pid is None:
            raise ProcessNotFoundError(self.process_name)

        try:
            signal_reload(pid, self.sender)
        except SignalDeliveryError as exc:
            raise exc.for_process(self.process_name) from exc

        logger.info("Sent %s to %s (pid %d)", RELOAD_SIGNAL.name, self.process_name, pid)
        return ReloadOutcome(process_name=self.process_name, pid=pid)
