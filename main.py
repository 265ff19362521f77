import logging
import random
from collections import Counter
from contextlib import asynccontextmanager
from typing import Optional, Sequence

import uvicorn
from fastapi import FastAPI, Request, Response

from service import respond
from settings import Settings
from statuses import StatusEntry, build_table, status_class
from verses import load_verses

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Origin, X-Requested-With, Content-Type, Accept, Authorization",
}


def create_app(
    settings: Optional[Settings] = None,
    rng: Optional[random.Random] = None,
    table: Optional[Sequence[StatusEntry]] = None,
) -> FastAPI:
    settings = settings or Settings.from_env()
    if rng is None:
        rng = random.Random(settings.seed)
    if table is None:
        verses = load_verses(settings.verses_file) if settings.status_table == "verses" else None
        table = build_table(settings.status_table, verses)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            f"Liminal Network Space server running at http://{settings.host}:{settings.port}"
        )
        logger.info(
            "Ready to receive requests and respond with random delays and status codes"
        )
        yield

    app = FastAPI(lifespan=lifespan, docs_url=None, redoc_url=None, openapi_url=None)
    app.state.settings = settings
    app.state.table = table

    async def liminal(request: Request):
        # Preflight skips the delay entirely.
        if settings.cors and request.method == "OPTIONS":
            return Response(status_code=200, headers=CORS_HEADERS)

        response = await respond(
            request, table, rng, settings.delay_min_ms, settings.delay_max_ms
        )
        if settings.cors:
            response.headers.update(CORS_HEADERS)
        return response

    # No methods given, so every method lands here.
    app.add_route("/{path:path}", liminal)

    classes = Counter(status_class(entry.code).value for entry in table)
    logger.debug(
        f"Serving {len(table)} statuses from the {settings.status_table} table "
        f"({', '.join(f'{name}: {count}' for name, count in classes.items())}), "
        f"delay {settings.delay_min_ms}-{settings.delay_max_ms} ms"
    )
    return app


def run():
    settings = Settings.from_env()
    logging.basicConfig(level=settings.log_level)
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        # h11 refuses 1xx final responses; httptools sends whatever was drawn.
        http="httptools",
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
