"""Logging setup shared by the CLI and library callers.

Library modules only call ``logging.getLogger(__name__)``; handlers are
installed by ``setup_logging`` so embedding applications keep control.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(levelname)s | %(name)s | %(message)s"

_configured = False


def setup_logging(verbosity: int = 0) -> None:
    """Install one stderr handler on the package logger.

    verbosity < 0 shows warnings only, 0 shows info, > 0 shows debug.
    Repeated calls only adjust the level.
    """
    global _configured
    if verbosity < 0:
        level = logging.WARNING
    elif verbosity == 0:
        level = logging.INFO
    else:
        level = logging.DEBUG
    logger = logging.getLogger("iconsmith")
    logger.setLevel(level)
    if not _configured:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
        _configured = True
