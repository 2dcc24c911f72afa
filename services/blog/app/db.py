from __future__ import annotations

import sqlalchemy as sa
from sqlalchemy.engine import Engine

from services.blog.app.settings import SETTINGS


def create_engine(database_url: str | None = None) -> Engine:
    # Seeding runs once on the startup path; a sync engine is enough.
    return sa.create_engine(database_url or SETTINGS.database_url, pool_pre_ping=True, future=True)


ENGINE = create_engine()
