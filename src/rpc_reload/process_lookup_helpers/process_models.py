from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol

ZOMBIE_STATUS = "zombie"


@dataclass(frozen=True)
class ProcessCandidate:
    """One row of the process table as seen by a lookup."""

    pid: int
    name: Optional[str]
    status: Optional[str] = None


class ProcessLike(Protocol):
    """Minimal contract for process rows returned by a lookup."""

    pid: int
    name: Optional[str]
    status: Optional[str]
