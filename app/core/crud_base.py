# app/core/crud_base.py

"""
공통 CRUD(Create, Read, Update, Delete) 작업을 위한 기본 클래스 모듈입니다.
모든 메서드는 비동기(async) 환경에 맞게 작성되었습니다.
"""

import logging
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar, Union

from sqlalchemy.exc import IntegrityError
from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession
from pydantic import BaseModel

from app.core.exceptions import StorageConflictError

ModelType = TypeVar("ModelType", bound=SQLModel)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)

logger = logging.getLogger(__name__)


class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """
    모든 CRUD 작업에 대한 기본 클래스를 정의합니다.
    """
    def __init__(self, model: Type[ModelType]):
        self.model = model

    async def get(self, db: AsyncSession, id: Any) -> Optional[ModelType]:
        """
        ID를 기준으로 단일 레코드를 조회합니다.
        """
        return await db.get(self.model, id)

    async def get_all(self, db: AsyncSession) -> List[ModelType]:
        """
        전체 레코드를 ID 순으로 조회합니다.
        """
        query = select(self.model).order_by(self.model.id)
        result = await db.execute(query)
        return list(result.scalars().all())

    async def get_multi_by(self, db: AsyncSession, **filters: Any) -> List[ModelType]:
        """
        키워드 인자로 전달된 속성이 모두 일치하는 레코드를 조회합니다.
        """
        query = select(self.model)
        for field, value in filters.items():
            if not hasattr(self.model, field):
                raise AttributeError(f"Model {self.model.__name__} has no attribute '{field}'")
            query = query.where(getattr(self.model, field) == value)

        result = await db.execute(query.order_by(self.model.id))
        return list(result.scalars().all())

    async def create(self, db: AsyncSession, *, obj_in: Union[CreateSchemaType, Dict[str, Any]]) -> ModelType:
        """
        새로운 레코드를 생성합니다. ID는 항상 저장소가 부여합니다.
        """
        data = obj_in if isinstance(obj_in, dict) else obj_in.model_dump()
        data = {key: value for key, value in data.items() if key != "id"}
        db_obj = self.model.model_validate(data)
        db.add(db_obj)
        await self._commit(db)
        await db.refresh(db_obj)
        return db_obj

    async def update(
        self, db: AsyncSession, *, db_obj: ModelType, obj_in: Union[UpdateSchemaType, Dict[str, Any]]
    ) -> ModelType:
        """
        기존 레코드를 업데이트합니다.
        dict가 전달되면 포함된 모든 키를 덮어쓰고, 스키마가 전달되면 설정된 필드만 반영합니다.
        `id`는 변경하지 않습니다.
        """
        if isinstance(obj_in, dict):
            update_data = obj_in
        else:
            update_data = obj_in.model_dump(exclude_unset=True)

        for key, value in update_data.items():
            if key == "id":
                continue
            setattr(db_obj, key, value)

        db.add(db_obj)
        await self._commit(db)
        await db.refresh(db_obj)
        return db_obj

    async def delete(self, db: AsyncSession, *, id: Any) -> Optional[ModelType]:
        """
        ID를 기준으로 레코드를 삭제합니다. 레코드가 없으면 아무것도 하지 않습니다.
        """
        db_obj = await db.get(self.model, id)
        if db_obj:
            await db.delete(db_obj)
            await db.commit()
        return db_obj

    async def _commit(self, db: AsyncSession) -> None:
        """
        커밋하고, 제약 조건 위반(IntegrityError)은 롤백 후 StorageConflictError로 변환합니다.
        """
        try:
            await db.commit()
        except IntegrityError as e:
            await db.rollback()
            logger.warning("IntegrityError on %s write: %s", self.model.__name__, e.orig)
            raise StorageConflictError(f"{self.model.__name__} violates a unique constraint") from e
