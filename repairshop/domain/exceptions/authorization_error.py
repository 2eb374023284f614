"""
Authorization domain exception.
"""

from .base import RepairShopError


class AuthorizationError(RepairShopError):
    """Raised when the actor's role may not perform the requested action."""

    kind = "authorization_error"

    def __init__(self, role: str, action: str):
        self.role = role
        self.action = action
        super().__init__(
            f"Role '{role}' is not permitted to {action.replace('_', ' ')}",
            {"role": role, "action": action},
        )
