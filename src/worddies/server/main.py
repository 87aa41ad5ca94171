"""
Worddies API Server.

    uvicorn worddies.server.main:app --port 8000
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Depends
from fastapi.routing import APIRoute

from worddies.core.config import configure_logging, load_settings
from worddies.core.dispatcher import Context
from worddies.runtime import build_context, get_http, get_redis
from worddies.server.deps import get_context
from worddies.server.routes import dice, nicknames, words


logger = logging.getLogger(__name__)

VERSION = "0.1.0"


def log_routes(app: FastAPI):
    for route in app.routes:
        if isinstance(route, APIRoute):
            methods = ", ".join(sorted(route.methods - {"HEAD", "OPTIONS"}))
            logger.info("  %-8s %-36s → %s", methods, route.path, route.name)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = load_settings()
    configure_logging(settings.log_level)
    client = get_redis(settings)
    http = get_http(settings)
    try:
        app.state.ctx = build_context(settings, client, http)
        log_routes(app)
        yield
    finally:
        await http.aclose()
        await client.aclose()


app = FastAPI(title="Worddies API", version=VERSION, lifespan=lifespan)

app.include_router(words.router)
app.include_router(dice.router)
app.include_router(nicknames.router)


@app.get("/")
async def root():
    return {"name": "Worddies API", "version": VERSION}


@app.get("/api/corpus")
async def corpus_info(ctx: Context = Depends(get_context)):
    """Corpus path and indexed word count."""
    return {"path": str(ctx.corpus.path), "total_lines": ctx.corpus.total_lines}
