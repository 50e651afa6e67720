"""Structured event logging.

Events are written as JSON lines to a rotating log file so the history
of saved, rejected and failed entries can be reviewed later.

Password values are never logged.
"""

import json
import logging
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler
from typing import Optional

from core.config import EVENT_LOG_FILE, LOG_BACKUP_COUNT, LOG_MAX_BYTES
from core.storage import ensure_directories


# Module-level state
_logging_configured = False

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool = False) -> None:
    """Configure standard logging with rotation on first use.

    Args:
        verbose: Also echo DEBUG records to stderr
    """
    global _logging_configured
    if _logging_configured:
        return

    ensure_directories()

    handler = RotatingFileHandler(
        EVENT_LOG_FILE,
        maxBytes=LOG_MAX_BYTES,
        backupCount=LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(message)s"))
    handler.setLevel(logging.INFO)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG if verbose else logging.INFO)
    root.addHandler(handler)

    if verbose:
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        root.addHandler(console)

    _logging_configured = True


def log_event(event_type: str, status: str, details: Optional[dict] = None) -> None:
    """Log an event in JSON format.

    Args:
        event_type: Type of event (e.g., 'password_saved', 'generation_failed')
        status: Event status (e.g., 'SUCCESS', 'FAILURE', 'ABORTED')
        details: Optional additional event details
    """
    event = {
        "timestamp": datetime.now().isoformat(),
        "event_type": event_type,
        "status": status,
    }

    if details:
        event["details"] = details

    logger.info(json.dumps(event))
