import json
import os
import sys
import tempfile

import pytest

sys.path.append(os.path.dirname(os.path.dirname(__file__)))

# Error sinks are attached when the entry points are imported.
os.environ.setdefault("LOG_FILE", os.path.join(tempfile.gettempdir(), "pageview-tracker-tests.log"))

from app.config import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    monkeypatch.delenv("PRODUCTION_HOSTNAME", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def logged_records(caplog):
    """Return the pageview records captured so far, decoded from the log."""

    prefix = "Received event "

    def _records():
        return [
            json.loads(message[len(prefix):])
            for message in caplog.messages
            if message.startswith(prefix)
        ]

    return _records
