"""
Transaction service: one commit or one rollback per unit of work.

Repositories only flush. A use case or route hands its writes to
``execute_in_transaction`` as a single callable so that, for example, a new
job and its question bindings are committed together or not at all.
"""

from typing import Awaitable, Callable, Optional, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from jobdesk.config.logging import get_logger
from jobdesk.domain.exceptions.auth_error import PermissionDeniedError
from jobdesk.domain.exceptions.not_found_error import NotFoundError
from jobdesk.domain.exceptions.validation_error import ValidationError

logger = get_logger(__name__)

T = TypeVar("T")

# Failures raised on purpose by the unit of work; rolled back without alarm
EXPECTED_FAILURES = (ValidationError, NotFoundError, PermissionDeniedError)


class TransactionService:
    """Commit or roll back the writes of one request session."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def execute_in_transaction(
        self,
        operation: Callable[[], Awaitable[T]],
        name: Optional[str] = None,
    ) -> T:
        """
        Run ``operation`` and commit everything it wrote.

        Args:
            operation: Async callable performing the writes
            name: Label for the log lines; defaults to the callable's name

        Returns:
            Whatever ``operation`` returns

        Raises:
            Exception: the operation's own failure, after rollback
        """
        label = name or getattr(operation, "__qualname__", "operation")
        try:
            result = await operation()
            await self.session.commit()
        except EXPECTED_FAILURES as e:
            await self.session.rollback()
            logger.info("Transaction rolled back", operation=label, reason=str(e))
            raise
        except Exception as e:
            await self.session.rollback()
            logger.warning(
                "Transaction rolled back due to error",
                operation=label,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise

        logger.debug("Transaction committed", operation=label)
        return result
