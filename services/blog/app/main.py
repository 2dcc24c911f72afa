from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import sqlalchemy as sa
from fastapi import FastAPI

from services.blog.app.db import ENGINE
from services.blog.app.logging import configure_logging, logger
from services.blog.app.repositories import ArticleRepository, UserRepository
from services.blog.app.seed import run_seed
from services.blog.app.settings import SETTINGS


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # Runs once before the app serves requests; a seeding error fails startup.
    if SETTINGS.seed_on_startup:
        run_seed(UserRepository(ENGINE), ArticleRepository(ENGINE))
    else:
        logger.info("seed_skipped")
    yield


app = FastAPI(title="Blog Demo API", version="0.1.0", lifespan=lifespan)
configure_logging(SETTINGS.log_level)


@app.get("/healthz")
def healthz() -> dict:
    with ENGINE.connect() as conn:
        conn.execute(sa.text("SELECT 1"))
    return {"ok": True}
