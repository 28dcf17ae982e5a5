import logging
import os
import sys
from logging.handlers import RotatingFileHandler, SysLogHandler
from typing import Optional

from app.config import get_settings
from app.crud import events as events_crud

APP_NAME = "pageview-tracker"

formatter = logging.Formatter("%(asctime)s %(levelname)s %(message)s")

_configured = False


def _journal_handler() -> Optional[logging.Handler]:
    try:
        from systemd.journal import JournalHandler

        return JournalHandler(SYSLOG_IDENTIFIER=APP_NAME)
    except Exception:  # pragma: no cover - fallback when systemd is unavailable
        pass
    if os.path.exists("/dev/log"):  # pragma: no cover - depends on host
        return SysLogHandler(address="/dev/log")
    return None


def configure_logging() -> None:
    """Attach the error sinks to the ``app`` logger and pageviews to stdout.

    Safe to call from every entry point; handlers are only added once.
    """

    global _configured
    if _configured:
        return

    app_logger = logging.getLogger("app")
    app_logger.setLevel(logging.INFO)
    file_handler = RotatingFileHandler(
        get_settings().log_file, maxBytes=1_000_000, backupCount=5, delay=True
    )
    for handler in (file_handler, _journal_handler()):
        if handler is None:
            continue
        handler.setLevel(logging.ERROR)
        handler.setFormatter(formatter)
        app_logger.addHandler(handler)

    # Pageviews go to stdout, which the hosting platform collects.
    event_handler = logging.StreamHandler(sys.stdout)
    event_handler.setLevel(logging.INFO)
    event_handler.setFormatter(formatter)
    events_crud.logger.setLevel(logging.INFO)
    events_crud.logger.addHandler(event_handler)

    _configured = True
