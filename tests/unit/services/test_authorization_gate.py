"""
Unit tests for AuthorizationGate.
"""

from uuid import uuid4

import pytest

from repairshop.application.services.authorization_gate import AuthorizationGate
from repairshop.domain.entities.user import Actor
from repairshop.domain.exceptions import AuthorizationError
from repairshop.domain.policies.permissions import Action
from repairshop.domain.value_objects.role import Role


class TestAuthorizationGate:
    """Test cases for the default capability table."""

    @pytest.fixture
    def gate(self):
        return AuthorizationGate()

    @pytest.mark.parametrize(
        "action, allowed",
        [
            (Action.CREATE_JOB, {Role.ADMIN, Role.MANAGER, Role.RECEPTIONIST}),
            (Action.UPDATE_JOB, {Role.ADMIN, Role.MANAGER}),
            (Action.ASSIGN_TECHNICIAN, {Role.ADMIN, Role.MANAGER}),
            (Action.RETURN_PART, {Role.ADMIN, Role.MANAGER}),
            (Action.WITHDRAW_PART, {Role.ADMIN, Role.MANAGER, Role.TECHNICIAN}),
            (Action.ADD_REPAIR_RECORD, {Role.ADMIN, Role.MANAGER, Role.TECHNICIAN}),
            (Action.CHANGE_STATUS, set(Role)),
            (Action.UPLOAD_IMAGES, set(Role)),
            (Action.DELETE_IMAGE, set(Role)),
            (Action.DELETE_JOB, {Role.ADMIN}),
        ],
    )
    def test_capability_table(self, gate, action, allowed):
        for role in Role:
            assert gate.is_allowed(role, action) is (role in allowed), role

    def test_check_passes_for_allowed_role(self, gate):
        gate.check(Actor(uuid4(), Role.TECHNICIAN), Action.WITHDRAW_PART)

    def test_check_raises_for_denied_role(self, gate):
        with pytest.raises(AuthorizationError) as exc_info:
            gate.check(Actor(uuid4(), Role.RECEPTIONIST), Action.WITHDRAW_PART)

        error = exc_info.value
        assert error.kind == "authorization_error"
        assert error.message == "Role 'receptionist' is not permitted to withdraw part"
        assert error.details == {"role": "receptionist", "action": "withdraw_part"}

    def test_accepts_plain_strings(self, gate):
        assert gate.is_allowed("admin", "delete_job") is True
        assert gate.is_allowed("manager", "delete_job") is False

    def test_missing_action_denied(self):
        gate = AuthorizationGate({Action.VIEW_JOB: {Role.ADMIN}})

        assert gate.is_allowed(Role.ADMIN, Action.VIEW_JOB) is True
        for role in Role:
            assert gate.is_allowed(role, Action.CREATE_JOB) is False

    def test_custom_table_overrides_defaults(self):
        gate = AuthorizationGate({Action.DELETE_JOB: {"admin", "manager"}})

        gate.check(Actor(uuid4(), Role.MANAGER), Action.DELETE_JOB)
