"""
Validation-related domain exceptions.
"""

from typing import Any

from .base import RepairShopError


class ValidationError(RepairShopError):
    """Raised when input is malformed, missing or references the wrong thing."""

    kind = "validation_error"


class RequiredFieldError(ValidationError):
    """Raised when required field is missing."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(
            f"Required field '{field_name}' is missing", {"field": field_name}
        )


class InvalidValueError(ValidationError):
    """Raised when a field holds a value outside its allowed range."""

    def __init__(self, field_name: str, value: Any, expected: str):
        self.field_name = field_name
        self.value = value
        super().__init__(
            f"Field '{field_name}' has invalid value {value!r}, expected: {expected}",
            {"field": field_name, "value": value},
        )
