from __future__ import annotations

import sqlalchemy as sa


metadata = sa.MetaData()

users = sa.Table(
    "users",
    metadata,
    sa.Column("login", sa.Text(), primary_key=True),
    sa.Column("firstname", sa.Text(), nullable=False),
    sa.Column("lastname", sa.Text(), nullable=False),
    sa.Column("description", sa.Text(), nullable=True),
)

articles = sa.Table(
    "articles",
    metadata,
    sa.Column("slug", sa.Text(), primary_key=True),
    sa.Column("title", sa.Text(), nullable=False),
    sa.Column("headline", sa.Text(), nullable=False),
    sa.Column("content", sa.Text(), nullable=False),
    sa.Column("author", sa.Text(), sa.ForeignKey("users.login"), nullable=False),
    sa.Column("added_at", sa.DateTime(), nullable=False),
    sa.Index("idx_articles_added_at", "added_at"),
)
