"""SQLAlchemy transaction manager for the chatops schema."""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)


class SqlaTransactionManager:
    """트랜잭션 관리자 SQLAlchemy 구현.

    커밋이 실패하면 세션을 롤백한 뒤 예외를 그대로 전파합니다.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def commit(self) -> None:
        """트랜잭션을 커밋합니다.

        Raises:
            SQLAlchemyError: 커밋 실패 (세션은 롤백된 상태)
        """
        try:
            await self._session.commit()
        except SQLAlchemyError as e:
            logger.error(
                "Repository transaction commit failed",
                extra={"error_type": type(e).__name__, "error": str(e)},
            )
            await self._session.rollback()
            raise

    async def rollback(self) -> None:
        """트랜잭션을 롤백합니다."""
        logger.debug("Rolling back repository transaction")
        await self._session.rollback()
