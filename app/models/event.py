from dataclasses import dataclass
from typing import Optional


@dataclass
class PageviewEvent:
    """Domain model for a single pageview."""

    id: str
    date: str
    timestamp: str
    production: bool
    url: Optional[str] = None
    hostname: Optional[str] = None
    pathname: Optional[str] = None
    user_agent: Optional[str] = None
    client_ip: Optional[str] = None
