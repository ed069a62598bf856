# app/domains/lab/services.py

"""
'lab' 도메인 서비스 모듈입니다.

유효성 검사, 이름 중복 변환, 미존재 처리를 담당하고 저장은 게이트웨이에 위임합니다.
HTTP 상태 코드는 다루지 않으며, 실패는 `app.core.exceptions`의 도메인 오류로만 알립니다.
"""

import logging
from typing import Any, Dict, List, Optional

from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.exceptions import (
    DuplicateResource,
    ResourceNotFound,
    StorageConflictError,
    ValidationFailure,
)
from . import models, schemas
from .interfaces import LaboratoryGateway
from .validators import validate_laboratory

logger = logging.getLogger(__name__)

# 수정 시 덮어쓰는 필드 목록 (`id`는 제외)
MUTABLE_FIELDS = ("name", "address", "phone", "email", "website", "specialty")


def duplicate_name_message(name: Optional[str]) -> str:
    return f"Ya existe un laboratorio con el nombre: {name}"


def not_found_message(laboratory_id: Any) -> str:
    return f"Laboratorio no encontrado con ID: {laboratory_id}"


class LaboratoryService:
    """
    실험실 CRUD 및 검색 도메인 서비스입니다.
    게이트웨이는 생성자로 주입받습니다.
    """

    def __init__(self, gateway: LaboratoryGateway):
        self.gateway = gateway

    @staticmethod
    def _validated_data(obj_in: schemas.LaboratoryBase) -> Dict[str, Any]:
        """요청 데이터를 검사하고, 위반 사항이 있으면 모두 모아 ValidationFailure를 발생시킵니다."""
        data = {field: getattr(obj_in, field) for field in MUTABLE_FIELDS}
        errors = validate_laboratory(data)
        if errors:
            raise ValidationFailure(errors)
        return data

    async def create(self, db: AsyncSession, *, obj_in: schemas.LaboratoryCreate) -> models.Laboratory:
        data = self._validated_data(obj_in)
        try:
            db_obj = await self.gateway.create(db, obj_in=data)
        except StorageConflictError as e:
            logger.warning("Duplicate laboratory name on create: %r", data["name"])
            raise DuplicateResource(duplicate_name_message(data["name"]), value=data["name"]) from e
        logger.info("Laboratory created: id=%s name=%r", db_obj.id, db_obj.name)
        return db_obj

    async def get_all(self, db: AsyncSession) -> List[models.Laboratory]:
        return await self.gateway.get_all(db)

    async def get_by_id(self, db: AsyncSession, laboratory_id: int) -> Optional[models.Laboratory]:
        """ID로 조회합니다. 없으면 None을 반환하며, 404 변환은 호출자의 몫입니다."""
        return await self.gateway.get(db, laboratory_id)

    async def update(
        self, db: AsyncSession, laboratory_id: int, *, obj_in: schemas.LaboratoryUpdate
    ) -> models.Laboratory:
        """
        `id`를 제외한 모든 필드를 요청 값으로 덮어씁니다.
        유효성 검사는 조회보다 먼저 수행합니다.
        """
        data = self._validated_data(obj_in)

        db_obj = await self.gateway.get(db, laboratory_id)
        if db_obj is None:
            raise ResourceNotFound(not_found_message(laboratory_id), identifier=laboratory_id)

        try:
            db_obj = await self.gateway.update(db, db_obj=db_obj, obj_in=data)
        except StorageConflictError as e:
            logger.warning("Duplicate laboratory name on update of id=%s: %r", laboratory_id, data["name"])
            raise DuplicateResource(duplicate_name_message(data["name"]), value=data["name"]) from e
        logger.info("Laboratory updated: id=%s", db_obj.id)
        return db_obj

    async def delete(self, db: AsyncSession, laboratory_id: int) -> None:
        """존재 여부를 확인하지 않고 삭제합니다. 없는 ID도 조용히 성공합니다."""
        deleted = await self.gateway.delete(db, id=laboratory_id)
        if deleted is not None:
            logger.info("Laboratory deleted: id=%s", laboratory_id)

    async def find_by_specialty(self, db: AsyncSession, specialty: str) -> List[models.Laboratory]:
        """대소문자를 구분하는 완전 일치 검색입니다. 검색어를 가공하지 않고 그대로 전달합니다."""
        return await self.gateway.get_by_specialty(db, specialty=specialty)

    async def find_by_name(self, db: AsyncSession, name: str) -> List[models.Laboratory]:
        """대소문자를 구분하지 않는 부분 문자열 검색입니다. 공백만 있는 검색어도 그대로 사용합니다."""
        return await self.gateway.get_by_name_containing(db, name=name)
