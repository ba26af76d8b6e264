"""Initial chatops schema.

Revision ID: 0001
Revises: None
Create Date: 2026-10-17

ChatOps Domain Migration
Schema: chatops.*

- chatops.repositories: 등록된 저장소와 파이프라인 목록 (JSONB)
"""

from typing import Sequence

from alembic import op

revision: str = "0001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create chatops schema tables."""
    op.execute("CREATE SCHEMA IF NOT EXISTS chatops")

    # ============================================
    # chatops.repositories 테이블
    # ============================================
    op.execute("""
        CREATE TABLE IF NOT EXISTS chatops.repositories (
            id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
            name VARCHAR(255) NOT NULL,
            url TEXT NOT NULL,
            default_branch VARCHAR(255) NOT NULL DEFAULT '',
            added_by VARCHAR(255) NOT NULL DEFAULT '',
            added_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            pipelines JSONB NOT NULL DEFAULT '[]'::jsonb,

            CONSTRAINT uq_repositories_name UNIQUE (name)
        )
    """)

    op.execute("""
        CREATE INDEX IF NOT EXISTS idx_repositories_added_at
        ON chatops.repositories(added_at)
    """)


def downgrade() -> None:
    """Drop chatops schema.

    주의: 모든 데이터가 삭제됩니다!
    """
    op.execute("DROP TABLE IF EXISTS chatops.repositories CASCADE")
    op.execute("DROP SCHEMA IF EXISTS chatops CASCADE")
