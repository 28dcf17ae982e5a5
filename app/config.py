import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv


DEFAULT_PRODUCTION_HOSTNAME = "bajtos.net"


@dataclass(frozen=True)
class Settings:
    production_hostname: str
    log_file: str


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    load_dotenv()
    return Settings(
        production_hostname=os.getenv("PRODUCTION_HOSTNAME", DEFAULT_PRODUCTION_HOSTNAME),
        log_file=os.getenv("LOG_FILE", "pageview-tracker.log"),
    )
