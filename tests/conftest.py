from __future__ import annotations

from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config


REPO_ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture(scope="session")
def postgres_url() -> str:
    from testcontainers.postgres import PostgresContainer

    container = PostgresContainer("postgres:16")
    try:
        container.start()
    except Exception as exc:  # no docker daemon on this host
        pytest.skip(f"postgres container unavailable: {exc}")
    try:
        yield container.get_connection_url()
    finally:
        container.stop()


@pytest.fixture(scope="session")
def migrated_db(postgres_url: str, monkeypatch_session) -> str:
    # Normalize testcontainers URL (may be postgresql:// or postgresql+psycopg2://).
    base = postgres_url.replace("postgresql+psycopg2://", "postgresql://")
    sync_url = base.replace("postgresql://", "postgresql+psycopg://")

    monkeypatch_session.setenv("DATABASE_URL", sync_url)
    cfg = Config(str(REPO_ROOT / "db" / "migrations" / "alembic.ini"))
    command.upgrade(cfg, "head")
    return sync_url


@pytest.fixture(scope="session")
def monkeypatch_session():
    with pytest.MonkeyPatch.context() as mp:
        yield mp
