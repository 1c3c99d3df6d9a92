from __future__ import annotations

import logging
import sys
from typing import Optional

from sandbox_settings import get_settings


_INITIALIZED: bool = False

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def init_logging(level: Optional[str] = None) -> None:
    """Attach a stdout handler to the root logger once per process."""
    global _INITIALIZED
    if _INITIALIZED:
        return

    level_name = (level or get_settings().log_level).upper()
    log_level = getattr(logging, level_name, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    if not root_logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(log_level)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root_logger.addHandler(handler)

    # httpx logs every request at INFO; keep it quieter than our own fetch lines
    logging.getLogger("httpx").setLevel(max(log_level, logging.WARNING))

    _INITIALIZED = True
