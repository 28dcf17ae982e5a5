from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class EventRecord(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": "0b0d6d4e-8f47-4a55-9f0e-3b1c1f0e2a11",
                "date": "2024-01-01",
                "timestamp": "2024-01-01T00:00:00.000Z",
                "url": "https://bajtos.net/posts/abc",
                "hostname": "bajtos.net",
                "pathname": "/posts/abc",
                "production": True,
                "userAgent": "Mozilla/5.0",
                "clientIP": "127.0.0.1",
            }
        },
    )

    id: str
    date: str
    timestamp: str
    url: Optional[str] = None
    hostname: Optional[str] = None
    pathname: Optional[str] = None
    production: bool
    user_agent: Optional[str] = Field(default=None, alias="userAgent")
    client_ip: Optional[str] = Field(default=None, alias="clientIP")
