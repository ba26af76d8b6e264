"""SQLAlchemy table definitions."""

from apps.chatops.infrastructure.persistence_postgres.mappings.repository import (
    repositories_table,
)

__all__ = ["repositories_table"]
