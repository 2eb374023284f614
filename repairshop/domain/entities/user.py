"""
User domain entities.
"""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from repairshop.domain.value_objects.role import Role


@dataclass
class User:
    """Shop staff member as seen by the job core."""

    id: UUID
    username: str
    role: Role
    full_name: Optional[str] = None
    is_active: bool = True

    def __post_init__(self):
        self.role = Role(self.role)

    @property
    def display_name(self) -> str:
        return self.full_name or self.username

    def is_technician(self) -> bool:
        return self.role == Role.TECHNICIAN


@dataclass(frozen=True)
class Actor:
    """Authenticated caller, resolved by the authentication layer."""

    user_id: UUID
    role: Role
