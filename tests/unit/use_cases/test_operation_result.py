"""
Unit tests for OperationResult and the shared use case pipeline.
"""

from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from repairshop.application.services.authorization_gate import AuthorizationGate
from repairshop.application.use_cases.base import UseCase
from repairshop.application.use_cases.result import OperationResult
from repairshop.domain.entities.user import Actor
from repairshop.domain.exceptions import (
    InvariantViolationError,
    NotFoundError,
    ValidationError,
)
from repairshop.domain.policies.permissions import Action
from repairshop.domain.value_objects.role import Role


class TestOperationResult:
    def test_success(self):
        result = OperationResult.success(42)

        assert result.ok
        assert result.error_kind is None
        assert result.retryable is False
        assert result.unwrap() == 42

    def test_failure(self):
        error = NotFoundError("Job", "abc")
        result = OperationResult.failure(error)

        assert not result.ok
        assert result.error_kind == "not_found"
        with pytest.raises(NotFoundError):
            result.unwrap()

    def test_error_payload(self):
        error = ValidationError("bad", {"field": "x"})

        assert error.to_dict() == {
            "error": "validation_error",
            "message": "bad",
            "retryable": False,
            "details": {"field": "x"},
        }


class ViewJob(UseCase):
    action = Action.VIEW_JOB


class TestUseCasePipeline:
    @pytest.fixture
    def use_case(self, mock_transaction_service):
        return ViewJob(AuthorizationGate(), mock_transaction_service)

    @pytest.fixture
    def actor(self):
        return Actor(uuid4(), Role.TECHNICIAN)

    @pytest.mark.asyncio
    async def test_validation_runs_before_transaction(
        self, use_case, actor, mock_transaction_service
    ):
        def validate():
            raise ValidationError("nope")

        result = await use_case.run(actor, AsyncMock(), validate)

        assert result.error_kind == "validation_error"
        mock_transaction_service.execute_in_transaction.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_domain_error_becomes_failure(self, use_case, actor):
        operation = AsyncMock(side_effect=NotFoundError("Job", 1))

        result = await use_case.run(actor, operation)

        assert result.error_kind == "not_found"

    @pytest.mark.asyncio
    async def test_invariant_violation_propagates(self, use_case, actor):
        operation = AsyncMock(side_effect=InvariantViolationError("broken"))

        with pytest.raises(InvariantViolationError):
            await use_case.run(actor, operation)

    @pytest.mark.asyncio
    async def test_denied_action(self, mock_transaction_service):
        use_case = ViewJob(AuthorizationGate({}), mock_transaction_service)

        result = await use_case.run(Actor(uuid4(), Role.ADMIN), AsyncMock())

        assert result.error_kind == "authorization_error"
