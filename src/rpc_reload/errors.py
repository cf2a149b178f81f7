"""Error types raised while locating and signalling the router process."""

from __future__ import annotations

from typing import Iterable


class ReloadError(RuntimeError):
    """Base class for failures that end a reload attempt."""

    exit_code: int = 1


class ProcessNotFoundError(ReloadError):
    """Raised when no live process carries the target name."""

    exit_code = 1

    def __init__(self, process_name: str) -> None:
        super().__init__(f"{process_name} is not running")
        self.process_name = process_name


class SignalDeliveryError(ReloadError):
    """Raised when the OS refuses to deliver the signal to a resolved pid."""

    exit_code = 2

    def __init__(self, pid: int, reason: str, *, process_name: str | None = None, signal_name: str = "SIGHUP") -> None:
        target = f"{process_name} (pid {pid})" if process_name else f"pid {pid}"
        super().__init__(f"Failed to send {signal_name} to {target}: {reason}")
        self.pid = pid
        self.reason = reason
        self.process_name = process_name
        self.signal_name = signal_name

    @classmethod
    def no_such_process(cls, pid: int, **kwargs) -> "SignalDeliveryError":
        """Create error for a process that exited after lookup."""
        return cls(pid, "no such process", **kwargs)

    @classmethod
    def permission_denied(cls, pid: int, **kwargs) -> "SignalDeliveryError":
        """Create error for a process the caller may not signal."""
        return cls(pid, "permission denied", **kwargs)

    def for_process(self, process_name: str) -> "SignalDeliveryError":
        """Return a copy of this error naming the target process."""
        return type(self)(self.pid, self.reason, process_name=process_name, signal_name=self.signal_name)


class AmbiguousProcessMatchError(ReloadError):
    """Raised when more than one live process carries the target name."""

    exit_code = 3

    def __init__(self, process_name: str, pids: Iterable[int]) -> None:
        self.process_name = process_name
        self.pids = sorted(pids)
        joined = ", ".join(str(pid) for pid in self.pids)
        super().__init__(f"Multiple {process_name} processes found (pids {joined}); refusing to signal")


__all__ = [
    "AmbiguousProcessMatchError",
    "ProcessNotFoundError",
    "ReloadError",
    "SignalDeliveryError",
]
