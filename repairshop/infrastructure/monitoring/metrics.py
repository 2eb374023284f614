"""
Prometheus metrics for system monitoring.
"""

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

registry = CollectorRegistry()


def get_registry() -> CollectorRegistry:
    """Get the registry all service metrics are attached to."""
    return registry


JOB_OPERATIONS = Counter(
    "repairshop_job_operations_total",
    "Job core operations by action and outcome",
    ["action", "outcome"],
    registry=registry,
)

JOBS_CREATED = Counter(
    "repairshop_jobs_created_total",
    "Total number of repair jobs created",
    ["priority"],
    registry=registry,
)

STATUS_CHANGES = Counter(
    "repairshop_job_status_changes_total",
    "Job status transitions",
    ["from_status", "to_status"],
    registry=registry,
)

PART_MOVEMENTS = Counter(
    "repairshop_part_movements_total",
    "Stock units withdrawn for or returned from jobs",
    ["direction"],
    registry=registry,
)

STOCK_REJECTIONS = Counter(
    "repairshop_stock_rejections_total",
    "Withdrawals refused for insufficient stock",
    registry=registry,
)

RETRY_ATTEMPTS = Counter(
    "repairshop_retry_attempts_total",
    "Retries of operations that failed with a retryable conflict",
    ["operation"],
    registry=registry,
)

API_REQUESTS = Counter(
    "repairshop_api_requests_total",
    "Total number of API requests",
    ["method", "endpoint", "status_code"],
    registry=registry,
)

API_REQUEST_DURATION = Histogram(
    "repairshop_api_request_duration_seconds",
    "API request duration",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
    registry=registry,
)


def record_operation(action: str, outcome: str):
    """Record the outcome (``ok`` or an error kind) of a job core operation."""
    JOB_OPERATIONS.labels(action=action, outcome=outcome).inc()


def record_job_creation(priority: str):
    """Record job creation metric."""
    JOBS_CREATED.labels(priority=priority).inc()


def record_status_change(from_status: str, to_status: str):
    STATUS_CHANGES.labels(from_status=from_status, to_status=to_status).inc()


def record_part_movement(direction: str, quantity: int):
    """Record stock leaving (``withdrawn``) or re-entering (``returned``) inventory."""
    PART_MOVEMENTS.labels(direction=direction).inc(quantity)


def record_stock_rejection():
    STOCK_REJECTIONS.inc()


def record_retry_attempt(operation: str):
    """Record retry attempt metric."""
    RETRY_ATTEMPTS.labels(operation=operation).inc()


def record_api_request(method: str, endpoint: str, status_code: int, duration: float):
    """Record API request count and latency."""
    API_REQUESTS.labels(method=method, endpoint=endpoint, status_code=status_code).inc()
    API_REQUEST_DURATION.labels(method=method, endpoint=endpoint).observe(duration)


def get_metrics():
    """Get all metrics in Prometheus format."""
    return generate_latest(registry)


def get_metrics_content_type():
    """Get the content type for metrics."""
    return CONTENT_TYPE_LATEST
