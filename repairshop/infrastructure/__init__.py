"""
Database adapters and monitoring for the repair-job service.
"""
