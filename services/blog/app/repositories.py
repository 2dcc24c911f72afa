from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import sqlalchemy as sa
from sqlalchemy.engine import Engine

from services.blog.app.logging import logger
from services.blog.app.models import Article, User
from services.blog.app.tables import articles, users


class StorageError(Exception):
    """A batch write failed (constraint violation or connectivity problem)."""


class _BatchRepository:
    table: sa.Table

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def _to_row(self, record: Any) -> dict[str, Any]:
        raise NotImplementedError

    def save_all(self, records: Sequence[Any]) -> None:
        rows = [self._to_row(r) for r in records]
        if not rows:
            return
        try:
            # One transaction per batch: either every row commits or none does.
            with self._engine.begin() as conn:
                conn.execute(self.table.insert(), rows)
        except sa.exc.SQLAlchemyError as exc:
            logger.warning("batch_save_failed", table=self.table.name, rows=len(rows), error=str(exc))
            raise StorageError(f"failed to save {len(rows)} rows into {self.table.name}") from exc
        logger.debug("batch_saved", table=self.table.name, rows=len(rows))

    def count(self) -> int:
        try:
            with self._engine.connect() as conn:
                return conn.execute(sa.select(sa.func.count()).select_from(self.table)).scalar_one()
        except sa.exc.SQLAlchemyError as exc:
            raise StorageError(f"failed to count rows in {self.table.name}") from exc


class UserRepository(_BatchRepository):
    table = users

    def _to_row(self, record: User) -> dict[str, Any]:
        return dict(
            login=record.login,
            firstname=record.firstname,
            lastname=record.lastname,
            description=record.description,
        )


class ArticleRepository(_BatchRepository):
    table = articles

    def _to_row(self, record: Article) -> dict[str, Any]:
        return dict(
            slug=record.slug,
            title=record.title,
            headline=record.headline,
            content=record.content,
            author=record.author.login,
            added_at=record.added_at,
        )
