"""
Job number value object.
"""

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class JobNumber:
    """Human-facing job identifier, e.g. ``RJ2025-0001``."""

    prefix: str
    year: int
    sequence: int
    width: int = 4

    def __post_init__(self):
        """Validate job number parts."""
        if not self.prefix:
            raise ValueError("Job number prefix is required")
        if self.sequence < 1:
            raise ValueError("Job number sequence starts at 1")
        if self.year < 1:
            raise ValueError("Job number year must be positive")

    @staticmethod
    def year_prefix(prefix: str, year: int) -> str:
        """Prefix shared by every job number issued in ``year``."""
        return f"{prefix}{year}-"

    @classmethod
    def parse(cls, value: str, prefix: str = "RJ") -> "JobNumber":
        """Parse ``<prefix><year>-<sequence>``."""
        match = re.fullmatch(rf"{re.escape(prefix)}(\d{{4}})-(\d+)", value or "")
        if not match:
            raise ValueError(f"Invalid job number '{value}'")
        digits = match.group(2)
        return cls(
            prefix=prefix,
            year=int(match.group(1)),
            sequence=int(digits),
            width=len(digits),
        )

    def __str__(self) -> str:
        return f"{self.year_prefix(self.prefix, self.year)}{self.sequence:0{self.width}d}"
