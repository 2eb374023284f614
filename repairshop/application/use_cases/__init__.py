"""
Application use cases package.
"""

from .add_repair_record import AddRepairRecordRequest, AddRepairRecordUseCase
from .assign_technician import AssignTechnicianUseCase
from .change_status import ChangeStatusUseCase
from .create_job import CreateJobRequest, CreateJobUseCase
from .delete_job import DeleteJobUseCase
from .job_images import AttachImagesUseCase, DeleteImageUseCase, ImageUpload
from .queries import (
    ActivityPage,
    GetJobUseCase,
    JobDetails,
    JobPage,
    JobStatistics,
    JobStatisticsUseCase,
    ListActivityUseCase,
    ListJobsUseCase,
    LowStockUseCase,
)
from .result import OperationResult
from .return_part import ReturnPartUseCase
from .update_job import UpdateJobUseCase
from .withdraw_part import WithdrawPartRequest, WithdrawPartUseCase

__all__ = [
    "ActivityPage",
    "AddRepairRecordRequest",
    "AddRepairRecordUseCase",
    "AssignTechnicianUseCase",
    "AttachImagesUseCase",
    "ChangeStatusUseCase",
    "CreateJobRequest",
    "CreateJobUseCase",
    "DeleteImageUseCase",
    "DeleteJobUseCase",
    "GetJobUseCase",
    "ImageUpload",
    "JobDetails",
    "JobPage",
    "JobStatistics",
    "JobStatisticsUseCase",
    "ListActivityUseCase",
    "ListJobsUseCase",
    "LowStockUseCase",
    "OperationResult",
    "ReturnPartUseCase",
    "UpdateJobUseCase",
    "WithdrawPartRequest",
    "WithdrawPartUseCase",
]
