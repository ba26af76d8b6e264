"""SQLAlchemy metadata for the chatops schema."""

from sqlalchemy import MetaData

from apps.chatops.infrastructure.persistence_postgres.constants import CHATOPS_SCHEMA

metadata = MetaData(schema=CHATOPS_SCHEMA)
