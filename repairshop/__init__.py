"""
Repair-shop job service: job lifecycle, parts ledger, job numbering and
activity trail.
"""

__version__ = "0.1.0"
