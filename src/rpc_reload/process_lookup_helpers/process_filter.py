"""Filter helpers for process lookup."""

from __future__ import annotations

from typing import Iterable, List, Optional, TypeVar

from .process_models import ZOMBIE_STATUS, ProcessLike

_ProcessLike = TypeVar("_ProcessLike", bound=ProcessLike)


def filter_processes_by_pid(processes: Iterable[_ProcessLike], exclude_pid: Optional[int]) -> List[_ProcessLike]:
    """Return all processes except those matching the excluded PID."""
    if exclude_pid is None:
        return list(processes)
    return [proc for proc in processes if proc.pid != exclude_pid]


def filter_processes_by_name(processes: Iterable[_ProcessLike], process_name: str) -> List[_ProcessLike]:
    """Return processes whose executable name equals ``process_name`` exactly."""
    return [proc for proc in processes if proc.name == process_name]


def filter_live_processes(processes: Iterable[_ProcessLike]) -> List[_ProcessLike]:
    """Drop zombie rows, which keep their pid but cannot act on a signal."""
    return [proc for proc in processes if proc.status != ZOMBIE_STATUS]
