"""
HTTP surface of the repair-job service.
"""
