"""
Retry Handler service for operations that fail with retryable conflicts.
"""

import asyncio
import random
from typing import Any, Awaitable, Callable, Optional

from repairshop.config.logging import get_logger
from repairshop.config.settings import settings
from repairshop.domain.exceptions import RepairShopError
from repairshop.infrastructure.monitoring.metrics import record_retry_attempt

logger = get_logger(__name__)


def _retryable_error(outcome: Any) -> Optional[RepairShopError]:
    """The retryable error carried by an operation outcome, if any."""
    error = getattr(outcome, "error", None)
    if isinstance(error, RepairShopError) and error.retryable:
        return error
    return None


class RetryHandler:
    """
    Retry handler with exponential backoff and jitter.

    Operations report failure through their result (an ``OperationResult``
    with an ``error``) or by raising. Only errors flagged ``retryable`` are
    retried; anything else is handed straight back to the caller.
    """

    def __init__(
        self,
        max_retries: int = settings.CONFLICT_RETRY_ATTEMPTS,
        base_delay: float = settings.CONFLICT_RETRY_BASE_DELAY,
    ):
        self.max_retries = max_retries
        self.base_delay = base_delay
        self.logger = logger

    async def execute_with_retry(
        self,
        operation: Callable[[], Awaitable[Any]],
        operation_key: str = "default",
    ) -> Any:
        """
        Execute operation, retrying while it fails with a retryable error.

        Args:
            operation: Async function to execute
            operation_key: Name used in logs and metrics

        Returns:
            Result of the last attempt
        """
        for attempt in range(self.max_retries + 1):
            try:
                outcome = await operation()
            except RepairShopError as e:
                if not e.retryable or attempt == self.max_retries:
                    raise
                error = e
            else:
                error = _retryable_error(outcome)
                if error is None or attempt == self.max_retries:
                    if error is not None:
                        self.logger.error(
                            "Operation failed after all retries",
                            operation_key=operation_key,
                            total_attempts=attempt + 1,
                            final_error=error.message,
                        )
                    return outcome

            delay = self._calculate_delay(attempt)
            record_retry_attempt(operation_key)
            self.logger.warning(
                "Operation failed, retrying",
                operation_key=operation_key,
                attempt=attempt + 1,
                max_retries=self.max_retries,
                error=error.message,
                next_retry_in_seconds=delay,
            )
            await asyncio.sleep(delay)

    def _calculate_delay(self, attempt: int) -> float:
        """Calculate delay with exponential backoff and jitter."""
        exponential_delay = self.base_delay * (2**attempt)

        # Add jitter (±25% random variation)
        jitter = exponential_delay * 0.25
        jittered_delay = exponential_delay + random.uniform(-jitter, jitter)

        return min(jittered_delay, 5.0)
