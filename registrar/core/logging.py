# registrar/core/logging.py
import logging
import sys
from typing import Optional

from registrar.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

def setup_logging(level: Optional[str] = None) -> None:
    log_level = getattr(logging, (level or settings.LOG_LEVEL).upper(), logging.INFO)

    # like basicConfig: a host that already configured the root keeps its handlers
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        root.setLevel(log_level)

    # engine echo goes through DB_ECHO, not the root level
    logging.getLogger("sqlalchemy").setLevel(logging.WARNING)
    logging.getLogger("registrar").setLevel(log_level)
