"""init schema

Revision ID: 0001_init_schema
Revises: None
Create Date: 2026-10-19
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


revision = "0001_init_schema"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("login", sa.Text(), primary_key=True),
        sa.Column("firstname", sa.Text(), nullable=False),
        sa.Column("lastname", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
    )

    op.create_table(
        "articles",
        sa.Column("slug", sa.Text(), primary_key=True),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("headline", sa.Text(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("author", sa.Text(), sa.ForeignKey("users.login"), nullable=False),
        sa.Column("added_at", sa.DateTime(), nullable=False),
    )

    op.create_index("idx_articles_added_at", "articles", ["added_at"])


def downgrade() -> None:
    op.drop_index("idx_articles_added_at", table_name="articles")
    op.drop_table("articles")
    op.drop_table("users")
