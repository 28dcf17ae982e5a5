import logging

from fastapi import FastAPI, Request, Response
from fastapi.responses import PlainTextResponse

from app.crud.events import record_pageview
from app.log_config import APP_NAME, configure_logging
from app.responses import no_content


configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title=APP_NAME)


@app.get("/healthz", response_class=PlainTextResponse)
def healthz() -> str:
    return "ok"


@app.api_route("/dot", methods=["GET", "POST"])
async def dot(request: Request) -> Response:
    """Pageview beacon.

    - Reads only the ``referer``, ``user-agent`` and ``client-ip`` headers.
    - Logs one JSON record per request.
    - Returns 204 No Content with caching disabled, whatever the headers hold.
    """
    try:
        record_pageview(request.headers)
    except Exception:
        logger.exception("error recording pageview")
        raise
    return no_content()
