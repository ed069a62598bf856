# app/domains/lab/interfaces.py

"""
실험실 저장소 게이트웨이의 추상 계약입니다.
도메인 서비스는 이 인터페이스에만 의존하며, 구체적인 DB 기술과는 분리됩니다.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Union

from sqlmodel.ext.asyncio.session import AsyncSession

from . import models, schemas


class LaboratoryGateway(ABC):
    """실험실 저장소가 구현해야 하는 기능 집합입니다."""

    @abstractmethod
    async def create(
        self, db: AsyncSession, *, obj_in: Union[schemas.LaboratoryCreate, Dict[str, Any]]
    ) -> models.Laboratory:
        """ID를 부여하여 저장합니다. 이름이 중복되면 StorageConflictError를 발생시킵니다."""

    @abstractmethod
    async def get(self, db: AsyncSession, id: Any) -> Optional[models.Laboratory]:
        """ID로 조회합니다. 없으면 None."""

    @abstractmethod
    async def get_all(self, db: AsyncSession) -> List[models.Laboratory]:
        """전체 목록을 조회합니다."""

    @abstractmethod
    async def update(
        self, db: AsyncSession, *, db_obj: models.Laboratory, obj_in: Dict[str, Any]
    ) -> models.Laboratory:
        """`id`를 제외한 필드를 덮어씁니다. 이름이 중복되면 StorageConflictError를 발생시킵니다."""

    @abstractmethod
    async def delete(self, db: AsyncSession, *, id: Any) -> Optional[models.Laboratory]:
        """ID로 삭제합니다. 없는 ID여도 오류를 발생시키지 않습니다."""

    @abstractmethod
    async def get_by_specialty(self, db: AsyncSession, *, specialty: str) -> List[models.Laboratory]:
        """전문 분야가 정확히 일치(대소문자 구분)하는 실험실을 조회합니다."""

    @abstractmethod
    async def get_by_name_containing(self, db: AsyncSession, *, name: str) -> List[models.Laboratory]:
        """이름에 검색어가 포함된(대소문자 무시) 실험실을 조회합니다."""
