"""Job domain entity."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from uuid import UUID, uuid4

from repairshop.domain.entities.user import User
from repairshop.domain.exceptions import (
    InvalidValueError,
    InvariantViolationError,
    NoOpTransitionError,
    RequiredFieldError,
    TransitionNotAllowedError,
    ValidationError,
)
from repairshop.domain.policies.status_transitions import (
    DEFAULT_TRANSITIONS,
    TransitionTable,
)
from repairshop.domain.value_objects.job_priority import JobPriority
from repairshop.domain.value_objects.job_status import JobStatus


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def coerce_priority(value) -> JobPriority:
    """Convert a raw priority to ``JobPriority`` or raise a validation error."""
    try:
        return JobPriority(int(value))
    except (TypeError, ValueError):
        raise InvalidValueError("priority", value, "0 (normal), 1 (urgent) or 2 (critical)")


# Fields an UpdateJob request may touch. Status, technician and job number
# have their own operations.
EDITABLE_FIELDS = frozenset(
    {
        "customer_id",
        "miner_model_id",
        "warranty_profile_id",
        "serial_number",
        "problem_description",
        "customer_notes",
        "priority",
        "estimated_done_date",
    }
)
_REQUIRED_FIELDS = ("customer_id", "miner_model_id", "problem_description")


@dataclass
class Job:
    """Repair job tracked from intake to completion."""

    customer_id: UUID
    miner_model_id: UUID
    problem_description: str
    created_by_id: UUID
    job_number: Optional[str] = None
    id: UUID = field(default_factory=uuid4)
    status: JobStatus = JobStatus.RECEIVED
    priority: JobPriority = JobPriority.NORMAL
    technician_id: Optional[UUID] = None
    serial_number: Optional[str] = None
    customer_notes: Optional[str] = None
    warranty_profile_id: Optional[UUID] = None
    received_date: Optional[datetime] = None
    estimated_done_date: Optional[datetime] = None
    completed_date: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        """Validate job data."""
        if not self.problem_description or not self.problem_description.strip():
            raise RequiredFieldError("problem_description")
        if not self.customer_id:
            raise RequiredFieldError("customer_id")
        if not self.miner_model_id:
            raise RequiredFieldError("miner_model_id")

        try:
            self.status = JobStatus(self.status)
        except ValueError:
            raise InvalidValueError("status", self.status, "a known job status")
        self.priority = coerce_priority(self.priority)

        now = _utcnow()
        if not self.received_date:
            self.received_date = now
        if not self.created_at:
            self.created_at = now
        if not self.updated_at:
            self.updated_at = now

    @property
    def is_active(self) -> bool:
        return not self.status.is_closed()

    def change_status(
        self,
        new_status: JobStatus,
        transitions: TransitionTable = DEFAULT_TRANSITIONS,
        now: Optional[datetime] = None,
    ) -> JobStatus:
        """
        Move the job to ``new_status`` and return the previous status.

        Entering COMPLETED stamps ``completed_date``. Leaving COMPLETED keeps
        the stamp: the completion date records the last time the job was done.
        """
        new_status = JobStatus(new_status)
        old_status = self.status

        if new_status == old_status:
            raise NoOpTransitionError(old_status.value)
        if not transitions.is_allowed(old_status, new_status):
            raise TransitionNotAllowedError(old_status.value, new_status.value)

        now = now or _utcnow()
        self.status = new_status
        if new_status == JobStatus.COMPLETED:
            self.completed_date = now
        self.updated_at = now
        return old_status

    def assign_technician(
        self, technician: User, now: Optional[datetime] = None
    ) -> Optional[UUID]:
        """Assign ``technician`` and return the previously assigned technician id."""
        if not technician.is_technician():
            raise ValidationError(
                f"User {technician.username} is not a technician",
                {"technician_id": str(technician.id), "role": technician.role.value},
            )
        if not technician.is_active:
            raise ValidationError(
                f"Technician {technician.username} is inactive",
                {"technician_id": str(technician.id)},
            )

        previous = self.technician_id
        self.technician_id = technician.id
        self.updated_at = now or _utcnow()
        return previous

    def update_details(
        self, changes: Dict[str, Any], now: Optional[datetime] = None
    ) -> List[str]:
        """Apply descriptive field changes and return the names of fields that changed."""
        unknown = sorted(set(changes) - EDITABLE_FIELDS)
        if unknown:
            raise ValidationError(
                f"Fields cannot be updated: {', '.join(unknown)}", {"fields": unknown}
            )
        if not changes:
            raise ValidationError("No changes supplied")

        for name in _REQUIRED_FIELDS:
            if name in changes:
                value = changes[name]
                if value is None or (isinstance(value, str) and not value.strip()):
                    raise RequiredFieldError(name)

        values = dict(changes)
        if "priority" in values:
            values["priority"] = coerce_priority(values["priority"])

        changed = []
        for name, value in values.items():
            if getattr(self, name) != value:
                setattr(self, name, value)
                changed.append(name)

        self.updated_at = now or _utcnow()
        return sorted(changed)

    def check_invariants(self) -> None:
        """Raise if the job is in a state no operation should produce."""
        if self.status == JobStatus.COMPLETED and self.completed_date is None:
            raise InvariantViolationError(
                f"Job {self.job_number or self.id} is COMPLETED without a completed date"
            )
        if not self.job_number:
            raise InvariantViolationError(f"Job {self.id} has no job number")
