"""Lookups into tables owned by other parts of the shop system."""

from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from repairshop.application.interfaces.repositories import DirectoryRepositoryInterface
from repairshop.domain.entities.user import User
from repairshop.infrastructure.database.models.customer import CustomerModel
from repairshop.infrastructure.database.models.miner_model import MinerModelModel
from repairshop.infrastructure.database.models.user import UserModel
from repairshop.infrastructure.database.models.warranty_profile import (
    WarrantyProfileModel,
)


class DirectoryRepository(DirectoryRepositoryInterface):
    """Read-only directory of customers, miner models, warranties and users."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _exists(self, model, record_id: UUID) -> bool:
        stmt = select(model.id).where(model.id == record_id)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def customer_exists(self, customer_id: UUID) -> bool:
        return await self._exists(CustomerModel, customer_id)

    async def miner_model_exists(self, miner_model_id: UUID) -> bool:
        return await self._exists(MinerModelModel, miner_model_id)

    async def warranty_profile_exists(self, warranty_profile_id: UUID) -> bool:
        return await self._exists(WarrantyProfileModel, warranty_profile_id)

    async def get_user(self, user_id: UUID) -> Optional[User]:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self.db.execute(stmt)
        model = result.scalar_one_or_none()
        if not model:
            return None

        return User(
            id=model.id,
            username=model.username,
            role=model.role,
            full_name=model.full_name,
            is_active=model.is_active,
        )
