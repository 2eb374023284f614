"""
Transaction service for managing database transactions centrally.
"""

import asyncio
from typing import Awaitable, Callable, TypeVar

from sqlalchemy.exc import DBAPIError, IntegrityError, OperationalError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from repairshop.config.logging import get_logger
from repairshop.domain.exceptions import (
    ConflictError,
    PersistenceError,
    RepairShopError,
    TransactionConflictError,
)

logger = get_logger(__name__)

T = TypeVar("T")

# serialization_failure, deadlock_detected, lock_not_available
TRANSIENT_SQLSTATES = frozenset({"40001", "40P01", "55P03"})


def is_transient_error(exc: SQLAlchemyError) -> bool:
    """Whether the store aborted the statement for a reason a retry can fix."""
    if isinstance(exc, OperationalError):
        return True
    if isinstance(exc, DBAPIError):
        orig = exc.orig
        code = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
        return code in TRANSIENT_SQLSTATES
    return False


class TransactionService:
    """Centralized transaction management service."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.logger = logger

    async def execute_in_transaction(self, operation: Callable[[], Awaitable[T]]) -> T:
        """
        Execute an operation within a transaction.

        Commits when the operation returns, rolls back on any failure or
        cancellation. Store errors are translated to domain errors so callers
        never see SQLAlchemy exceptions.

        Args:
            operation: Async function to execute

        Returns:
            Result of the operation

        Raises:
            RepairShopError: Domain failure raised by the operation or translated
                from the store
        """
        try:
            result = await operation()
            await self.session.commit()

            self.logger.debug("Transaction committed")
            return result

        except RepairShopError as e:
            await self.rollback()
            self.logger.info(
                "Transaction rolled back", error_kind=e.kind, error=e.message
            )
            raise

        except asyncio.CancelledError:
            await self.rollback()
            self.logger.warning("Transaction rolled back after cancellation")
            raise

        except IntegrityError as e:
            await self.rollback()
            self.logger.warning("Transaction violated a constraint", error=str(e.orig))
            raise ConflictError(
                "Write conflicts with existing data", cause="constraint_violation"
            ) from e

        except SQLAlchemyError as e:
            await self.rollback()
            if is_transient_error(e):
                self.logger.warning("Transaction aborted by the store", error=str(e))
                raise TransactionConflictError() from e
            self.logger.error("Transaction failed", error=str(e), exc_info=True)
            raise PersistenceError("Database operation failed") from e

        except Exception as e:
            await self.rollback()
            self.logger.error(
                "Transaction rolled back due to error", error=str(e), exc_info=True
            )
            raise

    async def rollback(self) -> None:
        """Explicitly rollback the current transaction."""
        await self.session.rollback()
        self.logger.debug("Transaction rolled back")
