"""
Database models package.
"""

from .base import Base, BaseModel
from .activity_log import ActivityLogModel
from .billing import PaymentModel, QuotationModel
from .customer import CustomerModel
from .job import JobModel
from .job_number_sequence import JobNumberSequenceModel
from .job_part import JobPartModel
from .job_records import JobImageModel, RepairRecordModel
from .miner_model import MinerModelModel
from .part import PartModel
from .user import UserModel
from .warranty_profile import WarrantyProfileModel

__all__ = [
    "Base",
    "BaseModel",
    "ActivityLogModel",
    "CustomerModel",
    "JobImageModel",
    "JobModel",
    "JobNumberSequenceModel",
    "JobPartModel",
    "MinerModelModel",
    "PartModel",
    "PaymentModel",
    "QuotationModel",
    "RepairRecordModel",
    "UserModel",
    "WarrantyProfileModel",
]
