from typing import Dict

from fastapi import Response


NO_CACHE_HEADERS: Dict[str, str] = {
    "Cache-Control": "no-cache, no-store, must-revalidate",
    "Pragma": "no-cache",
    "Expires": "0",
}


def no_content() -> Response:
    return Response(status_code=204, headers=NO_CACHE_HEADERS)
