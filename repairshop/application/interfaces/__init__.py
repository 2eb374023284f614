"""
Application interfaces package.
"""

from .repositories import (
    ActivityLogRepositoryInterface,
    DirectoryRepositoryInterface,
    JobNumberSequenceRepositoryInterface,
    JobPartRepositoryInterface,
    JobRecordRepositoryInterface,
    JobRepositoryInterface,
    PartRepositoryInterface,
)

__all__ = [
    "ActivityLogRepositoryInterface",
    "DirectoryRepositoryInterface",
    "JobNumberSequenceRepositoryInterface",
    "JobPartRepositoryInterface",
    "JobRecordRepositoryInterface",
    "JobRepositoryInterface",
    "PartRepositoryInterface",
]
