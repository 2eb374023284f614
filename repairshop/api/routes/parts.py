"""Part inventory API endpoints."""

from typing import Annotated, List

from fastapi import APIRouter, Depends, Query

from repairshop.api.dependencies import ActorDep, get_low_stock_use_case
from repairshop.api.middleware.error_handler import error_response
from repairshop.api.schemas.part import PartResponse
from repairshop.application.use_cases import LowStockUseCase

router = APIRouter(prefix="/parts", tags=["parts"])


@router.get("/low-stock", response_model=List[PartResponse])
async def low_stock(
    actor: ActorDep,
    use_case: Annotated[LowStockUseCase, Depends(get_low_stock_use_case)],
    limit: int = Query(100, ge=1, le=1000),
):
    """Parts whose stock is at or below their minimum level."""
    result = await use_case.execute(actor, limit=limit)
    if not result.ok:
        return error_response(result.error)
    return [PartResponse.model_validate(part) for part in result.value]
