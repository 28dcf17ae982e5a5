import logging
import uuid
from dataclasses import asdict
from datetime import datetime, timezone
from typing import Mapping, Optional, Tuple

from pydantic import AnyUrl, TypeAdapter, ValidationError

from app.config import get_settings
from app.models.event import PageviewEvent
from app.schemas.event import EventRecord


logger = logging.getLogger(__name__)

_url_adapter = TypeAdapter(AnyUrl)


def parse_page_url(url: Optional[str]) -> Tuple[Optional[str], Optional[str]]:
    """Return ``(hostname, pathname)`` of an absolute URL.

    Both are ``None`` when ``url`` is missing or is not an absolute URL.
    """

    if not url:
        return None, None
    try:
        parsed = _url_adapter.validate_python(url)
    except ValidationError:
        logger.debug("Ignoring unparseable page URL %r", url)
        return None, None
    return parsed.host, parsed.path or "/"


def _timestamp(now: datetime) -> str:
    now = now.astimezone(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_event(headers: Mapping[str, str], now: Optional[datetime] = None) -> PageviewEvent:
    """Derive a pageview from request headers and the current instant.

    ``headers`` is expected to look names up case-insensitively, as
    starlette's ``Headers`` does.
    """

    page_url = headers.get("referer")
    hostname, pathname = parse_page_url(page_url)
    ts = _timestamp(now or datetime.now(timezone.utc))
    return PageviewEvent(
        id=str(uuid.uuid4()),
        date=ts[:10],
        timestamp=ts,
        url=page_url,
        hostname=hostname,
        pathname=pathname,
        production=hostname == get_settings().production_hostname,
        user_agent=headers.get("user-agent"),
        client_ip=headers.get("client-ip"),
    )


def serialize_event(event: PageviewEvent) -> str:
    record = EventRecord(**asdict(event))
    return record.model_dump_json(by_alias=True, exclude_none=True)


def log_event(event: PageviewEvent) -> None:
    logger.info("Received event %s", serialize_event(event))


def record_pageview(headers: Mapping[str, str]) -> PageviewEvent:
    event = build_event(headers)
    log_event(event)
    return event
