"""Signal delivery to a single pid."""

from __future__ import annotations

import logging
import signal
from typing import Protocol

import psutil

from .errors import SignalDeliveryError

logger = logging.getLogger(__name__)


class SignalSender(Protocol):
    """Delivers a signal to a pid or raises ``SignalDeliveryError``."""

    def send(self, pid: int, sig: signal.Signals) -> None: ...


class PsutilSignalSender:
    """Sends signals through ``psutil.Process.send_signal``."""

    def send(self, pid: int, sig: signal.Signals) -> None:
        try:
            psutil.Process(pid).send_signal(sig)
        except psutil.NoSuchProcess as exc:
            raise SignalDeliveryError.no_such_process(pid, signal_name=sig.name) from exc
        except psutil.AccessDenied as exc:
            raise SignalDeliveryError.permission_denied(pid, signal_name=sig.name) from exc
        logger.debug("Delivered %s to pid %d", sig.name, pid)


def signal_reload(pid: int, sender: SignalSender | None = None) -> None:
    """Deliver SIGHUP to ``pid``."""
    if sender is None:
        sender = PsutilSignalSender()
    sender.send(pid, signal.SIGHUP)
