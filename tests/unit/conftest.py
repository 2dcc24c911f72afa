from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest
import sqlalchemy as sa
from sqlalchemy.pool import StaticPool


# Service settings are instantiated at import time and require DATABASE_URL.
# Unit tests bind their own in-memory engines, but imports must still succeed.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_LEVEL", "warning")

# Ensure the monorepo root is importable (so `import services.*` works in tests).
REPO_ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(REPO_ROOT))


def _memory_engine() -> sa.Engine:
    # StaticPool keeps a single connection so every checkout sees the same in-memory database.
    return sa.create_engine("sqlite://", poolclass=StaticPool, connect_args={"check_same_thread": False})


@pytest.fixture()
def engine() -> sa.Engine:
    from services.blog.app.tables import metadata

    eng = _memory_engine()
    metadata.create_all(eng)
    yield eng
    eng.dispose()


@pytest.fixture()
def empty_engine() -> sa.Engine:
    """An engine whose database has no tables, so every write fails."""
    eng = _memory_engine()
    yield eng
    eng.dispose()
