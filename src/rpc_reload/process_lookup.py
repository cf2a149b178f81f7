"""Resolve the pid of a running process by its exact executable name."""

from __future__ import annotations

import logging
import os
from typing import List, Optional, Protocol, Sequence

from .errors import AmbiguousProcessMatchError
from .process_lookup_helpers.process_discovery import scan_process_table
from .process_lookup_helpers.process_filter import (
    filter_live_processes,
    filter_processes_by_name,
    filter_processes_by_pid,
)
from .process_lookup_helpers.process_models import ProcessCandidate

logger = logging.getLogger(__name__)


class ProcessLookup(Protocol):
    """Source of process table snapshots."""

    def list_processes(self) -> Sequence[ProcessCandidate]: ...


class PsutilProcessLookup:
    """Reads the live process table through psutil."""

    def list_processes(self) -> Sequence[ProcessCandidate]:
        return scan_process_table()


def find_matching_pids(
    process_name: str,
    lookup: ProcessLookup,
    *,
    exclude_pid: Optional[int] = None,
) -> List[int]:
    """Return the sorted pids of live processes named exactly ``process_name``."""
    candidates = filter_processes_by_name(lookup.list_processes(), process_name)
    candidates = filter_processes_by_pid(candidates, exclude_pid)
    live = filter_live_processes(candidates)
    if len(live) != len(candidates):
        logger.debug("Ignored %d zombie %s processes", len(candidates) - len(live), process_name)
    return sorted(proc.pid for proc in live)


def resolve_pid(process_name: str, lookup: Optional[ProcessLookup] = None) -> Optional[int]:
    """
    Return the pid of the single live process named ``process_name``.

    The calling process is never reported, matching pgrep. Returns None when
    nothing matches.

    Raises:
        AmbiguousProcessMatchError: If more than one process matches.
    """
    if lookup is None:
        lookup = PsutilProcessLookup()

    pids = find_matching_pids(process_name, lookup, exclude_pid=os.getpid())
    if not pids:
        logger.debug("No %s process found", process_name)
        return None
    if len(pids) > 1:
        raise AmbiguousProcessMatchError(process_name, pids)

    logger.debug("Resolved %s to pid %d", process_name, pids[0])
    return pids[0]
