"""
Application services package.
"""

from .audit_trail import AuditTrail
from .authorization_gate import AuthorizationGate
from .clock import Clock, utc_now
from .job_number_sequencer import JobNumberSequencer
from .part_ledger import PartLedger
from .retry_handler import RetryHandler

__all__ = [
    "AuditTrail",
    "AuthorizationGate",
    "Clock",
    "JobNumberSequencer",
    "PartLedger",
    "RetryHandler",
    "utc_now",
]
