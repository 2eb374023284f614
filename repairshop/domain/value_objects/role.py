"""
User role value object.
"""

from enum import Enum


class Role(str, Enum):
    """Roles known to the authorization gate."""

    ADMIN = "admin"
    MANAGER = "manager"
    TECHNICIAN = "technician"
    RECEPTIONIST = "receptionist"
