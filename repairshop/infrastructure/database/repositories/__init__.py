"""
Database repositories package.
"""

from .activity_log_repository import ActivityLogRepository
from .directory_repository import DirectoryRepository
from .job_number_sequence_repository import JobNumberSequenceRepository
from .job_part_repository import JobPartRepository
from .job_record_repository import JobRecordRepository
from .job_repository import JobRepository
from .part_repository import PartRepository
from .transaction_repository import TransactionService

__all__ = [
    "ActivityLogRepository",
    "DirectoryRepository",
    "JobNumberSequenceRepository",
    "JobPartRepository",
    "JobRecordRepository",
    "JobRepository",
    "PartRepository",
    "TransactionService",
]
