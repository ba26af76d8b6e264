"""SQLAlchemy gateway adapters."""

from apps.chatops.infrastructure.persistence_postgres.adapters.repository_gateway_sqla import (
    SqlaRepositoryCommandGateway,
    SqlaRepositoryQueryGateway,
)
from apps.chatops.infrastructure.persistence_postgres.adapters.transaction_manager_sqla import (
    SqlaTransactionManager,
)

__all__ = [
    "SqlaRepositoryCommandGateway",
    "SqlaRepositoryQueryGateway",
    "SqlaTransactionManager",
]
