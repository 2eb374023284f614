"""
Role capability table consulted by the authorization gate.
"""

from enum import Enum
from typing import Dict, FrozenSet

from repairshop.domain.value_objects.role import Role


class Action(str, Enum):
    """Operations guarded by the authorization gate."""

    CREATE_JOB = "create_job"
    UPDATE_JOB = "update_job"
    CHANGE_STATUS = "change_status"
    ASSIGN_TECHNICIAN = "assign_technician"
    ADD_REPAIR_RECORD = "add_repair_record"
    WITHDRAW_PART = "withdraw_part"
    RETURN_PART = "return_part"
    UPLOAD_IMAGES = "upload_images"
    DELETE_IMAGE = "delete_image"
    DELETE_JOB = "delete_job"
    VIEW_JOB = "view_job"
    VIEW_ACTIVITY = "view_activity"
    VIEW_INVENTORY = "view_inventory"


ANY_ROLE: FrozenSet[Role] = frozenset(Role)

DEFAULT_CAPABILITIES: Dict[Action, FrozenSet[Role]] = {
    Action.CREATE_JOB: frozenset({Role.ADMIN, Role.MANAGER, Role.RECEPTIONIST}),
    Action.UPDATE_JOB: frozenset({Role.ADMIN, Role.MANAGER}),
    Action.ASSIGN_TECHNICIAN: frozenset({Role.ADMIN, Role.MANAGER}),
    Action.RETURN_PART: frozenset({Role.ADMIN, Role.MANAGER}),
    Action.CHANGE_STATUS: ANY_ROLE,
    Action.ADD_REPAIR_RECORD: frozenset({Role.ADMIN, Role.MANAGER, Role.TECHNICIAN}),
    Action.WITHDRAW_PART: frozenset({Role.ADMIN, Role.MANAGER, Role.TECHNICIAN}),
    Action.UPLOAD_IMAGES: ANY_ROLE,
    Action.DELETE_IMAGE: ANY_ROLE,
    Action.DELETE_JOB: frozenset({Role.ADMIN}),
    Action.VIEW_JOB: ANY_ROLE,
    Action.VIEW_ACTIVITY: ANY_ROLE,
    Action.VIEW_INVENTORY: ANY_ROLE,
}
