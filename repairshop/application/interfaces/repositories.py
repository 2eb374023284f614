"""
Repository interfaces for dependency inversion.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Tuple
from uuid import UUID

from repairshop.domain.entities.activity_log import ActivityLog
from repairshop.domain.entities.job import Job
from repairshop.domain.entities.job_records import JobImage, RepairRecord
from repairshop.domain.entities.part import JobPart, Part
from repairshop.domain.entities.user import User
from repairshop.domain.value_objects.job_status import JobStatus


class JobRepositoryInterface(ABC):
    """Job repository interface."""

    @abstractmethod
    async def get_by_id(self, job_id: UUID, for_update: bool = False) -> Optional[Job]:
        """Get job by ID, optionally locking the row for the current transaction."""
        pass

    @abstractmethod
    async def create(self, job: Job) -> Job:
        """Insert a new job. Raises JobNumberConflictError on a duplicate number."""
        pass

    @abstractmethod
    async def update(self, job: Job) -> Job:
        """Persist the mutable fields of an existing job."""
        pass

    @abstractmethod
    async def delete(self, job_id: UUID) -> None:
        """Delete a job together with its parts, logs, records and images."""
        pass

    @abstractmethod
    async def count_billing_records(self, job_id: UUID) -> Dict[str, int]:
        """Count quotations and payments owned by a job."""
        pass

    @abstractmethod
    async def highest_job_number(self, prefix: str) -> Optional[str]:
        """Highest issued job number starting with ``prefix``."""
        pass

    @abstractmethod
    async def status_counts(self) -> Dict[JobStatus, int]:
        """Number of jobs per status."""
        pass

    @abstractmethod
    async def search(
        self,
        text: Optional[str] = None,
        status: Optional[JobStatus] = None,
        technician_id: Optional[UUID] = None,
        priority: Optional[int] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> Tuple[List[Job], int]:
        """Page of matching jobs, newest first, and the total number of matches."""
        pass


class JobNumberSequenceRepositoryInterface(ABC):
    """Per-year job number counter interface."""

    @abstractmethod
    async def increment(self, prefix: str, year: int) -> Optional[int]:
        """Atomically bump the counter and return it, or None if no row exists."""
        pass

    @abstractmethod
    async def create(self, prefix: str, year: int, last_value: int) -> int:
        """Create the counter row for a year. Raises JobNumberConflictError on a race."""
        pass


class PartRepositoryInterface(ABC):
    """Part repository interface."""

    @abstractmethod
    async def get_by_id(self, part_id: UUID) -> Optional[Part]:
        """Get part by ID, bypassing any cached state."""
        pass

    @abstractmethod
    async def try_decrement_stock(self, part_id: UUID, quantity: int) -> bool:
        """Decrement stock only if enough is on hand; return whether it happened."""
        pass

    @abstractmethod
    async def increment_stock(self, part_id: UUID, quantity: int) -> None:
        """Put quantity back into stock."""
        pass

    @abstractmethod
    async def find_low_stock(self, limit: int = 100) -> List[Part]:
        """Parts at or below their minimum stock level."""
        pass


class JobPartRepositoryInterface(ABC):
    """Job part (consumption ledger) repository interface."""

    @abstractmethod
    async def create(self, job_part: JobPart) -> JobPart:
        pass

    @abstractmethod
    async def get_for_job(self, job_id: UUID, job_part_id: UUID) -> Optional[JobPart]:
        """Get a ledger entry only if it belongs to the given job."""
        pass

    @abstractmethod
    async def list_by_job(self, job_id: UUID) -> List[JobPart]:
        pass

    @abstractmethod
    async def delete(self, job_part_id: UUID) -> None:
        pass


class ActivityLogRepositoryInterface(ABC):
    """Activity log repository interface (append and read only)."""

    @abstractmethod
    async def append(self, entry: ActivityLog) -> ActivityLog:
        pass

    @abstractmethod
    async def list_by_job(
        self, job_id: UUID, limit: int = 50, offset: int = 0
    ) -> List[ActivityLog]:
        """Entries for a job, most recent first."""
        pass

    @abstractmethod
    async def count_by_job(self, job_id: UUID) -> int:
        pass


class DirectoryRepositoryInterface(ABC):
    """Read-only lookups into collaborator tables (customers, models, users)."""

    @abstractmethod
    async def customer_exists(self, customer_id: UUID) -> bool:
        pass

    @abstractmethod
    async def miner_model_exists(self, miner_model_id: UUID) -> bool:
        pass

    @abstractmethod
    async def warranty_profile_exists(self, warranty_profile_id: UUID) -> bool:
        pass

    @abstractmethod
    async def get_user(self, user_id: UUID) -> Optional[User]:
        pass


class JobRecordRepositoryInterface(ABC):
    """Repair records and job image metadata."""

    @abstractmethod
    async def add_repair_record(self, record: RepairRecord) -> RepairRecord:
        pass

    @abstractmethod
    async def list_repair_records(self, job_id: UUID) -> List[RepairRecord]:
        """Repair records of a job, newest first."""
        pass

    @abstractmethod
    async def add_images(self, images: List[JobImage]) -> List[JobImage]:
        pass

    @abstractmethod
    async def list_images(self, job_id: UUID) -> List[JobImage]:
        """Image metadata of a job, newest first."""
        pass

    @abstractmethod
    async def get_image(self, job_id: UUID, image_id: UUID) -> Optional[JobImage]:
        pass

    @abstractmethod
    async def delete_image(self, image_id: UUID) -> None:
        pass
