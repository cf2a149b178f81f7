"""
Logging configuration for the reload tool.

Diagnostics go to stderr through the root logger so that stdout carries only
the single status line. Console verbosity is WARNING unless debug output is
requested.
"""

import logging
import sys
import threading
from typing import Optional, TextIO

# Thread-safe lock for logging configuration
_config_lock = threading.Lock()
_MODULE_LOGGER = logging.getLogger(__name__)
_UNKNOWN_LOGGER_NAME = "<unknown>"

_TECHNICAL_FORMAT = "%(asctime)s%(msecs)03d - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _close_handlers(logger: logging.Logger, logger_name: Optional[str] = None) -> None:
    """Close all handlers for a logger, logging any errors."""
    for handler in list(logger.handlers):
        try:
            handler.close()
        except OSError as e:
            safe_name = logger_name if logger_name else _UNKNOWN_LOGGER_NAME
            _MODULE_LOGGER.debug("Handler close failed for logger '%s': %s", safe_name, e)


def _reset_all_handlers(root_logger: logging.Logger) -> None:
    """Close existing handlers on the root and every named logger."""
    _close_handlers(root_logger)
    root_logger.handlers = []
    for logger_name in list(logging.Logger.manager.loggerDict.keys()):
        target_logger = logging.getLogger(logger_name)
        _close_handlers(target_logger, logger_name)
        target_logger.handlers = []
        target_logger.propagate = True


def _build_console_handler(debug: bool, stream: Optional[TextIO]) -> logging.Handler:
    console_handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    console_handler.setFormatter(logging.Formatter(_TECHNICAL_FORMAT, _DATE_FORMAT))
    console_handler.setLevel(logging.DEBUG if debug else logging.WARNING)
    return console_handler


def _suppress_noisy_third_parties() -> None:
    logging.getLogger("psutil").setLevel(logging.WARNING)


def setup_logging(debug: bool = False, stream: Optional[TextIO] = None) -> None:
    """Configure logging for the reload tool"""

    with _config_lock:
        root_logger = logging.getLogger()
        _reset_all_handlers(root_logger)
        root_logger.addHandler(_build_console_handler(debug, stream))
        root_logger.setLevel(logging.DEBUG if debug else logging.INFO)
        _suppress_noisy_third_parties()
