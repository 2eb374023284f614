"""Job-related API endpoints."""

from typing import Annotated, List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from repairshop.api.dependencies import (
    ActorDep,
    RetryHandlerDep,
    get_add_repair_record_use_case,
    get_assign_technician_use_case,
    get_attach_images_use_case,
    get_change_status_use_case,
    get_create_job_use_case,
    get_delete_image_use_case,
    get_delete_job_use_case,
    get_get_job_use_case,
    get_job_statistics_use_case,
    get_list_activity_use_case,
    get_list_jobs_use_case,
    get_return_part_use_case,
    get_update_job_use_case,
    get_withdraw_part_use_case,
)
from repairshop.api.middleware.error_handler import error_response
from repairshop.api.schemas.common import ErrorResponse, PaginatedResponse
from repairshop.api.schemas.job import (
    ActivityLogResponse,
    AssignTechnicianRequest,
    ImageAttachRequest,
    JobCreateRequest,
    JobDetailResponse,
    JobImageResponse,
    JobPartResponse,
    JobResponse,
    JobStatisticsResponse,
    JobUpdateRequest,
    PartWithdrawRequest,
    RepairRecordCreateRequest,
    RepairRecordResponse,
    StatusChangeRequest,
)
from repairshop.application.use_cases import (
    AddRepairRecordRequest,
    AddRepairRecordUseCase,
    AssignTechnicianUseCase,
    AttachImagesUseCase,
    ChangeStatusUseCase,
    CreateJobRequest,
    CreateJobUseCase,
    DeleteImageUseCase,
    DeleteJobUseCase,
    GetJobUseCase,
    ImageUpload,
    JobStatisticsUseCase,
    ListActivityUseCase,
    ListJobsUseCase,
    ReturnPartUseCase,
    UpdateJobUseCase,
    WithdrawPartRequest,
    WithdrawPartUseCase,
)
from repairshop.config.logging import get_logger
from repairshop.domain.entities.job import Job
from repairshop.domain.entities.part import JobPart
from repairshop.domain.value_objects.job_status import JobStatus

logger = get_logger(__name__)
router = APIRouter(prefix="/jobs", tags=["jobs"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    403: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    409: {"model": ErrorResponse},
}


def _job_response(job: Job) -> JobResponse:
    return JobResponse.model_validate(job)


def _job_part_response(job_part: JobPart) -> JobPartResponse:
    part = job_part.part
    return JobPartResponse(
        id=job_part.id,
        job_id=job_part.job_id,
        part_id=job_part.part_id,
        part_number=part.part_number if part else None,
        part_name=part.part_name if part else None,
        quantity=job_part.quantity,
        unit_price=job_part.unit_price,
        total_price=job_part.total_price,
        notes=job_part.notes,
        created_at=job_part.created_at,
        remaining_stock=part.stock_qty if part else None,
    )


@router.post(
    "",
    response_model=JobResponse,
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES,
)
async def create_job(
    job_data: JobCreateRequest,
    actor: ActorDep,
    use_case: Annotated[CreateJobUseCase, Depends(get_create_job_use_case)],
    retry_handler: RetryHandlerDep,
):
    """Register a new repair job; job number collisions are retried."""
    request = CreateJobRequest(**job_data.model_dump())

    result = await retry_handler.execute_with_retry(
        lambda: use_case.execute(actor, request), operation_key="create_job"
    )
    if not result.ok:
        return error_response(result.error)
    return _job_response(result.value)


@router.get("", response_model=PaginatedResponse, responses=ERROR_RESPONSES)
async def list_jobs(
    actor: ActorDep,
    use_case: Annotated[ListJobsUseCase, Depends(get_list_jobs_use_case)],
    search: Optional[str] = Query(None, max_length=100),
    job_status: Optional[JobStatus] = Query(None, alias="status"),
    technician_id: Optional[UUID] = Query(None),
    priority: Optional[int] = Query(None, ge=0, le=2),
    limit: Optional[int] = Query(None, ge=1),
    offset: int = Query(0, ge=0),
):
    """Search jobs by number, serial or customer; newest first."""
    result = await use_case.execute(
        actor,
        search=search,
        status=job_status,
        technician_id=technician_id,
        priority=priority,
        limit=limit,
        offset=offset,
    )
    if not result.ok:
        return error_response(result.error)

    page = result.value
    return PaginatedResponse(
        items=[_job_response(job) for job in page.items],
        total=page.total,
        limit=page.limit,
        offset=page.offset,
        has_next=page.has_next,
    )


@router.get("/stats", response_model=JobStatisticsResponse)
async def job_statistics(
    actor: ActorDep,
    use_case: Annotated[JobStatisticsUseCase, Depends(get_job_statistics_use_case)],
):
    """Job counts per status."""
    result = await use_case.execute(actor)
    if not result.ok:
        return error_response(result.error)

    stats = result.value
    return JobStatisticsResponse(
        total=stats.total,
        active=stats.active,
        by_status={s.value: count for s, count in stats.by_status.items()},
    )


@router.get("/{job_id}", response_model=JobDetailResponse, responses=ERROR_RESPONSES)
async def get_job(
    job_id: UUID,
    actor: ActorDep,
    use_case: Annotated[GetJobUseCase, Depends(get_get_job_use_case)],
):
    result = await use_case.execute(actor, job_id)
    if not result.ok:
        return error_response(result.error)

    details = result.value
    return JobDetailResponse(
        **_job_response(details.job).model_dump(),
        parts=[_job_part_response(job_part) for job_part in details.parts],
        repair_records=[
            RepairRecordResponse.model_validate(record) for record in details.repair_records
        ],
        images=[JobImageResponse.model_validate(image) for image in details.images],
    )


@router.patch("/{job_id}", response_model=JobResponse, responses=ERROR_RESPONSES)
async def update_job(
    job_id: UUID,
    job_data: JobUpdateRequest,
    actor: ActorDep,
    use_case: Annotated[UpdateJobUseCase, Depends(get_update_job_use_case)],
):
    """Correct intake details; only fields present in the body change."""
    result = await use_case.execute(actor, job_id, job_data.model_dump(exclude_unset=True))
    if not result.ok:
        return error_response(result.error)
    return _job_response(result.value)


@router.delete(
    "/{job_id}", status_code=status.HTTP_204_NO_CONTENT, responses=ERROR_RESPONSES
)
async def delete_job(
    job_id: UUID,
    actor: ActorDep,
    use_case: Annotated[DeleteJobUseCase, Depends(get_delete_job_use_case)],
):
    result = await use_case.execute(actor, job_id)
    if not result.ok:
        return error_response(result.error)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/{job_id}/status", response_model=JobResponse, responses=ERROR_RESPONSES)
async def change_status(
    job_id: UUID,
    body: StatusChangeRequest,
    actor: ActorDep,
    use_case: Annotated[ChangeStatusUseCase, Depends(get_change_status_use_case)],
):
    result = await use_case.execute(actor, job_id, body.status, note=body.note)
    if not result.ok:
        return error_response(result.error)
    return _job_response(result.value)


@router.patch("/{job_id}/assign", response_model=JobResponse, responses=ERROR_RESPONSES)
async def assign_technician(
    job_id: UUID,
    body: AssignTechnicianRequest,
    actor: ActorDep,
    use_case: Annotated[AssignTechnicianUseCase, Depends(get_assign_technician_use_case)],
):
    result = await use_case.execute(actor, job_id, body.technician_id, note=body.note)
    if not result.ok:
        return error_response(result.error)
    return _job_response(result.value)


@router.post(
    "/{job_id}/records",
    response_model=RepairRecordResponse,
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES,
)
async def add_repair_record(
    job_id: UUID,
    body: RepairRecordCreateRequest,
    actor: ActorDep,
    use_case: Annotated[AddRepairRecordUseCase, Depends(get_add_repair_record_use_case)],
):
    result = await use_case.execute(
        actor,
        job_id,
        AddRepairRecordRequest(
            description=body.description, findings=body.findings, actions=body.actions
        ),
    )
    if not result.ok:
        return error_response(result.error)
    return RepairRecordResponse.model_validate(result.value)


@router.post(
    "/{job_id}/parts",
    response_model=JobPartResponse,
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES,
)
async def withdraw_part(
    job_id: UUID,
    body: PartWithdrawRequest,
    actor: ActorDep,
    use_case: Annotated[WithdrawPartUseCase, Depends(get_withdraw_part_use_case)],
):
    """Take a part out of stock for the job."""
    result = await use_case.execute(
        actor,
        job_id,
        WithdrawPartRequest(
            part_id=body.part_id,
            quantity=body.quantity,
            unit_price=body.unit_price,
            notes=body.notes,
        ),
    )
    if not result.ok:
        return error_response(result.error)
    return _job_part_response(result.value)


@router.delete(
    "/{job_id}/parts/{job_part_id}",
    response_model=JobPartResponse,
    responses=ERROR_RESPONSES,
)
async def return_part(
    job_id: UUID,
    job_part_id: UUID,
    actor: ActorDep,
    use_case: Annotated[ReturnPartUseCase, Depends(get_return_part_use_case)],
):
    """Put a withdrawn part back into stock."""
    result = await use_case.execute(actor, job_id, job_part_id)
    if not result.ok:
        return error_response(result.error)
    return _job_part_response(result.value)


@router.post(
    "/{job_id}/images",
    response_model=List[JobImageResponse],
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES,
)
async def attach_images(
    job_id: UUID,
    body: ImageAttachRequest,
    actor: ActorDep,
    use_case: Annotated[AttachImagesUseCase, Depends(get_attach_images_use_case)],
):
    uploads = [ImageUpload(image_url=i.image_url, caption=i.caption) for i in body.images]
    result = await use_case.execute(actor, job_id, uploads, image_type=body.image_type)
    if not result.ok:
        return error_response(result.error)
    return [JobImageResponse.model_validate(image) for image in result.value]


@router.delete(
    "/{job_id}/images/{image_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=ERROR_RESPONSES,
)
async def delete_image(
    job_id: UUID,
    image_id: UUID,
    actor: ActorDep,
    use_case: Annotated[DeleteImageUseCase, Depends(get_delete_image_use_case)],
):
    result = await use_case.execute(actor, job_id, image_id)
    if not result.ok:
        return error_response(result.error)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/{job_id}/activity", response_model=PaginatedResponse, responses=ERROR_RESPONSES
)
async def list_activity(
    job_id: UUID,
    actor: ActorDep,
    use_case: Annotated[ListActivityUseCase, Depends(get_list_activity_use_case)],
    limit: Optional[int] = Query(None, ge=1),
    offset: int = Query(0, ge=0),
):
    """Activity log of a job, most recent first."""
    result = await use_case.execute(actor, job_id, limit=limit, offset=offset)
    if not result.ok:
        return error_response(result.error)

    page = result.value
    return PaginatedResponse(
        items=[ActivityLogResponse.model_validate(entry) for entry in page.items],
        total=page.total,
        limit=page.limit,
        offset=page.offset,
        has_next=page.has_next,
    )
