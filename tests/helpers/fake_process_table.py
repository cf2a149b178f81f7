from __future__ import annotations

import signal
from typing import Callable, List, Optional, Sequence, Tuple

from rpc_reload.errors import SignalDeliveryError
from rpc_reload.process_lookup_helpers.process_models import ProcessCandidate


class FakeProcessLookup:
    """In-memory process table."""

    def __init__(self, rows: Optional[Sequence[ProcessCandidate]] = None):
        self.rows: List[ProcessCandidate] = list(rows or [])
        self.calls = 0

    def add(self, pid: int, name: str, status: Optional[str] = "sleeping") -> "FakeProcessLookup":
        self.rows.append(ProcessCandidate(pid=pid, name=name, status=status))
        return self

    def list_processes(self) -> Sequence[ProcessCandidate]:
        self.calls += 1
        return list(self.rows)


class RecordingSignalSender:
    """Records deliveries; optionally fails them with a prepared error factory."""

    def __init__(self, fail_with: Optional[Callable[[int], SignalDeliveryError]] = None):
        self.sent: List[Tuple[int, signal.Signals]] = []
        self.fail_with = fail_with

    def send(self, pid: int, sig: signal.Signals) -> None:
        if self.fail_with is not None:
            raise self.fail_with(pid)
        self.sent.append((pid, sig))
