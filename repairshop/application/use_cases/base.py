"""Shared pipeline for job core use cases."""

from typing import Awaitable, Callable, Optional, TypeVar

from repairshop.application.services.authorization_gate import AuthorizationGate
from repairshop.config.logging import get_logger
from repairshop.domain.entities.user import Actor
from repairshop.domain.exceptions import RepairShopError
from repairshop.domain.policies.permissions import Action
from repairshop.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)
from repairshop.infrastructure.monitoring.metrics import record_operation

from .result import OperationResult

logger = get_logger(__name__)

T = TypeVar("T")


class UseCase:
    """
    Base class for operations guarded by the authorization gate.

    ``run`` checks the actor, validates input, then executes the operation in
    one transaction. Gate and validation failures return before any
    transaction is opened. Every ``RepairShopError`` comes back as a failed
    ``OperationResult``; anything else is a bug and propagates.
    """

    action: Action

    def __init__(self, gate: AuthorizationGate, transaction_service: TransactionService):
        self.gate = gate
        self.transaction_service = transaction_service

    async def run(
        self,
        actor: Actor,
        operation: Callable[[], Awaitable[T]],
        validate: Optional[Callable[[], None]] = None,
    ) -> OperationResult[T]:
        action = self.action.value
        try:
            self.gate.check(actor, self.action)
            if validate is not None:
                validate()
        except RepairShopError as e:
            logger.info("Request rejected", action=action, error_kind=e.kind, error=e.message)
            record_operation(action, e.kind)
            return OperationResult.failure(e)

        try:
            value = await self.transaction_service.execute_in_transaction(operation)
        except RepairShopError as e:
            logger.info(
                "Operation failed",
                action=action,
                user_id=str(actor.user_id),
                error_kind=e.kind,
                error=e.message,
                retryable=e.retryable,
            )
            record_operation(action, e.kind)
            return OperationResult.failure(e)

        record_operation(action, "ok")
        return OperationResult.success(value)
