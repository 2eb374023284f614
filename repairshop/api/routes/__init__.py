"""
API routes package.
"""

from . import health, jobs, parts

__all__ = ["health", "jobs", "parts"]
