"""Send the reload signal to a running sol-rpc-router."""

from .errors import AmbiguousProcessMatchError, ProcessNotFoundError, ReloadError, SignalDeliveryError
from .reload_signaler import TARGET_PROCESS_NAME, ReloadOutcome, ReloadSignaler

__all__ = [
    "AmbiguousProcessMatchError",
    "ProcessNotFoundError",
    "ReloadError",
    "ReloadOutcome",
    "ReloadSignaler",
    "SignalDeliveryError",
    "TARGET_PROCESS_NAME",
]
