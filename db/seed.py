from __future__ import annotations

import argparse
import json
import os

import sqlalchemy as sa

from db.settings import SETTINGS
from services.blog.app.logging import configure_logging
from services.blog.app.repositories import ArticleRepository, UserRepository
from services.blog.app.seed import run_seed


def seed(database_url: str) -> dict[str, int]:
    engine = sa.create_engine(database_url, future=True)
    try:
        users = UserRepository(engine)
        articles = ArticleRepository(engine)
        run_seed(users, articles)
        return {"users": users.count(), "articles": articles.count()}
    finally:
        engine.dispose()


def main() -> None:
    parser = argparse.ArgumentParser(description="Insert the demo users and articles.")
    parser.add_argument("--database-url", default=os.getenv("DATABASE_URL") or SETTINGS.database_url)
    parser.add_argument("--log-level", default=os.getenv("LOG_LEVEL") or "info")
    args = parser.parse_args()
    configure_logging(args.log_level, service="db-seed")
    counts = seed(args.database_url)
    print(json.dumps({"counts": counts}, indent=2))


if __name__ == "__main__":
    main()
