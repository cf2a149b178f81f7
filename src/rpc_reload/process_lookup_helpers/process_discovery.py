"""Process table scanning backed by psutil."""

import logging
from typing import Any, Iterator, List

import psutil

from .process_models import ProcessCandidate

logger = logging.getLogger(__name__)

_SCAN_ATTRS = ["pid", "name", "status"]


def scan_process_table() -> List[ProcessCandidate]:
    """Return a snapshot of every visible process as ``ProcessCandidate`` rows."""
    candidates = list(_iter_candidates(psutil.process_iter(_SCAN_ATTRS)))
    logger.debug("Scanned %d processes from the process table", len(candidates))
    return candidates


def _iter_candidates(processes: Iterator[Any]) -> Iterator[ProcessCandidate]:
    for proc in processes:
        try:
            info = proc.info
        except (psutil.NoSuchProcess, psutil.AccessDenied):
            # Row vanished or hid itself mid-scan; it cannot be the target anymore.
            continue
        candidate = _candidate_from_info(info)
        if candidate is not None:
            yield candidate


def _candidate_from_info(info: dict) -> ProcessCandidate | None:
    pid_value = info.get("pid")
    if pid_value is None:
        logger.debug("Skipping process row without pid: %r", info)
        return None
    return ProcessCandidate(
        pid=int(pid_value),
        name=info.get("name"),
        status=info.get("status"),
    )
