"""Common ports."""

from apps.chatops.application.common.ports.transaction_manager import TransactionManager

__all__ = ["TransactionManager"]
