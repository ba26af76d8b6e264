"""Repository table definition - chatops.repositories.

pipelines는 [{name, path, is_default}] 형태의 JSONB로 저장합니다.
엔티티 변환은 어댑터에서 직접 수행합니다 (Core 쿼리).
"""

from __future__ import annotations

from sqlalchemy import JSON, Column, DateTime, String, Table, Text, func
from sqlalchemy.dialects.postgresql import JSONB, UUID

from apps.chatops.infrastructure.persistence_postgres.constants import REPOSITORIES_TABLE
from apps.chatops.infrastructure.persistence_postgres.registry import metadata

repositories_table = Table(
    REPOSITORIES_TABLE,
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("name", String(255), nullable=False, unique=True),
    Column("url", Text, nullable=False),
    Column("default_branch", String(255), nullable=False, server_default=""),
    Column("added_by", String(255), nullable=False, server_default=""),
    Column("added_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    Column(
        "pipelines",
        JSON().with_variant(JSONB(), "postgresql"),
        nullable=False,
        server_default="[]",
    ),
)
