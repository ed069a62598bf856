# app/core/dependencies.py

"""
FastAPI 애플리케이션의 의존성 주입(Dependency Injection)을 정의하는 모듈입니다.

- 데이터베이스 세션 관리 (get_db_session).
- 도메인 서비스 생성 (get_laboratory_service): 게이트웨이를 명시적으로 주입합니다.
"""

from typing import AsyncGenerator

from sqlmodel.ext.asyncio.session import AsyncSession

# 실제 데이터베이스 세션 제너레이터 임포트
from app.core.database import get_session as get_main_app_session
from app.domains.lab import crud as lab_crud
from app.domains.lab.services import LaboratoryService


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI 의존성 주입을 위한 비동기 데이터베이스 세션 제너레이터입니다.
    app.core.database.get_session을 래핑하여 사용합니다.
    """
    async for session in get_main_app_session():
        yield session


def get_laboratory_service() -> LaboratoryService:
    """SQLModel 게이트웨이를 사용하는 실험실 서비스를 반환합니다."""
    return LaboratoryService(lab_crud.laboratory)
