"""Serverless entry point for hosts that invoke ``handler(event, context)``."""

import logging
from typing import Any, Dict, Optional

from starlette.datastructures import Headers

from app.crud.events import record_pageview
from app.log_config import configure_logging
from app.responses import NO_CACHE_HEADERS


configure_logging()
logger = logging.getLogger(__name__)


def handler(event: Dict[str, Any], context: Optional[Any] = None) -> Dict[str, Any]:
    headers = Headers(headers=event.get("headers") or {})
    try:
        record_pageview(headers)
    except Exception:
        logger.exception("error recording pageview")
        raise
    return {"statusCode": 204, "headers": dict(NO_CACHE_HEADERS), "body": ""}
