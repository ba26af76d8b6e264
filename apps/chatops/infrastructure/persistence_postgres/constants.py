"""Database schema and table constants."""

CHATOPS_SCHEMA = "chatops"
REPOSITORIES_TABLE = "repositories"
