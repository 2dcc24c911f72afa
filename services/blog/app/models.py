from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class User:
    login: str
    firstname: str
    lastname: str
    description: str | None = None


@dataclass(frozen=True)
class Article:
    slug: str
    title: str
    headline: str
    content: str
    # Direct reference; stored as the author's login.
    author: User
    added_at: datetime
