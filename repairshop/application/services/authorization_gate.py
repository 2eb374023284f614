"""
Authorization gate: the single place that decides whether a role may act.
"""

from typing import Mapping, Optional, Set

from repairshop.config.logging import get_logger
from repairshop.domain.entities.user import Actor
from repairshop.domain.exceptions import AuthorizationError
from repairshop.domain.policies.permissions import DEFAULT_CAPABILITIES, Action
from repairshop.domain.value_objects.role import Role

logger = get_logger(__name__)


class AuthorizationGate:
    """Checks an actor's role against the capability table."""

    def __init__(self, capabilities: Optional[Mapping[Action, Set[Role]]] = None):
        source = capabilities if capabilities is not None else DEFAULT_CAPABILITIES
        self._capabilities = {
            Action(action): frozenset(Role(role) for role in roles)
            for action, roles in source.items()
        }

    def is_allowed(self, role: Role, action: Action) -> bool:
        """Actions missing from the table are denied for every role."""
        return Role(role) in self._capabilities.get(Action(action), frozenset())

    def check(self, actor: Actor, action: Action) -> None:
        """Raise AuthorizationError unless the actor's role may perform ``action``."""
        if not self.is_allowed(actor.role, action):
            logger.warning(
                "Action denied",
                user_id=str(actor.user_id),
                role=Role(actor.role).value,
                action=Action(action).value,
            )
            raise AuthorizationError(Role(actor.role).value, Action(action).value)
