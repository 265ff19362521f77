import asyncio
import json
import logging
import random
from datetime import datetime, timezone
from typing import Any, Dict, Sequence

from fastapi import Request, Response
from fastapi.responses import JSONResponse

from statuses import StatusEntry

logger = logging.getLogger(__name__)

# Status codes that must not carry a message body.
BODYLESS_CODES = {204, 304}


def sample_delay_ms(rng: random.Random, low: int, high: int) -> int:
    return rng.randint(low, high)


def pick_status(rng: random.Random, table: Sequence[StatusEntry]) -> StatusEntry:
    return table[rng.randrange(len(table))]


def utc_timestamp() -> str:
    return (
        datetime.now(timezone.utc)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )


def request_url(request: Request) -> str:
    url = request.url.path
    if request.url.query:
        url += f"?{request.url.query}"
    return url


def flatten_headers(request: Request) -> Dict[str, str]:
    headers = {}
    for key in request.headers.keys():
        if key not in headers:
            headers[key] = ", ".join(request.headers.getlist(key))
    return headers


def is_json(content_type: str) -> bool:
    media_type = content_type.split(";")[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


async def read_body(request: Request) -> Any:
    """Parse a JSON request body, falling back to ``{}``.

    Only JSON content types are parsed. A body that fails to parse is logged
    and treated as empty so the request still gets its liminal response.
    """
    raw = await request.body()
    if not raw or not is_json(request.headers.get("content-type", "")):
        return {}
    try:
        return json.loads(raw)
    except ValueError as e:
        logger.warning(f"Ignoring malformed JSON body on {request.method} {request_url(request)}: {e}")
        return {}


def render(entry: StatusEntry, echo: Dict[str, Any]) -> Response:
    if entry.code < 200 or entry.code in BODYLESS_CODES:
        return Response(status_code=entry.code)
    return JSONResponse(
        status_code=entry.code,
        content={
            "status": entry.code,
            "name": entry.name,
            "message": entry.message,
            "timestamp": utc_timestamp(),
            "request": echo,
        },
    )


async def respond(
    request: Request,
    table: Sequence[StatusEntry],
    rng: random.Random,
    delay_min_ms: int,
    delay_max_ms: int,
) -> Response:
    url = request_url(request)
    logger.info(f"Received request: {request.method} {url}")

    echo = {
        "method": request.method,
        "url": url,
        "headers": flatten_headers(request),
        "body": await read_body(request),
    }

    delay = sample_delay_ms(rng, delay_min_ms, delay_max_ms)
    logger.info(f"Introducing a delay of {delay / 1000} seconds...")
    await asyncio.sleep(delay / 1000)

    if await request.is_disconnected():
        logger.debug(f"Client left during the delay, discarding response for {request.method} {url}")
        # Never reaches the client.
        return Response(status_code=499)

    entry = pick_status(rng, table)
    logger.info(f"Responding with status code {entry.code}: {entry.name}")
    return render(entry, echo)
