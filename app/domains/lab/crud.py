# app/domains/lab/crud.py

"""
'lab' 도메인과 관련된 CRUD 로직을 담당하는 모듈입니다.
"""

from typing import List

from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.crud_base import CRUDBase
from . import models as lab_models
from . import schemas as lab_schemas
from .interfaces import LaboratoryGateway


class CRUDLaboratory(
    CRUDBase[
        lab_models.Laboratory,
        lab_schemas.LaboratoryCreate,
        lab_schemas.LaboratoryUpdate
    ],
    LaboratoryGateway,
):
    def __init__(self):
        super().__init__(model=lab_models.Laboratory)

    async def get_by_specialty(self, db: AsyncSession, *, specialty: str) -> List[lab_models.Laboratory]:
        """전문 분야로 조회합니다 (정확히 일치)."""
        return await self.get_multi_by(db, specialty=specialty)

    async def get_by_name_containing(self, db: AsyncSession, *, name: str) -> List[lab_models.Laboratory]:
        """이름 부분 일치로 조회합니다. '%', '_'는 와일드카드가 아닌 문자로 취급합니다."""
        statement = (
            select(self.model)
            .where(col(self.model.name).icontains(name, autoescape=True))
            .order_by(self.model.id)
        )
        result = await db.execute(statement)
        return list(result.scalars().all())


laboratory = CRUDLaboratory()
