# app/core/database.py

"""
애플리케이션의 데이터베이스 연결 및 세션 관리를 담당하는 모듈입니다.

- SQLModel의 비동기 엔진을 설정합니다.
- 비동기 세션 생성을 위한 유틸리티 함수를 제공합니다.
- 애플리케이션 시작 시 데이터베이스 테이블을 생성하는 함수를 포함합니다.
"""

import logging
from typing import Any, AsyncGenerator, Dict

from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine
from sqlalchemy.orm import sessionmaker

from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.config import settings

# 모든 SQLModel 클래스가 SQLModel.metadata에 등록되도록 도메인 모델을 명시적으로 임포트합니다.
from app.domains.lab import models  # noqa

logger = logging.getLogger(__name__)


def _engine_options() -> Dict[str, Any]:
    """
    엔진 생성 옵션을 반환합니다.
    SQLite는 커넥션 풀 크기 옵션을 지원하지 않으므로 서버형 DB에만 풀 설정을 적용합니다.
    """
    options: Dict[str, Any] = {"echo": settings.DEBUG_MODE, "future": True}
    if not settings.is_sqlite:
        options.update(
            pool_recycle=settings.DB_POOL_RECYCLE,
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
        )
    return options


# SQLModel 엔진을 생성합니다.
engine: AsyncEngine = create_async_engine(
    settings.DATABASE_URL.get_secret_value(),  # SecretStr 값에 접근
    **_engine_options(),
)

# 비동기 세션을 생성하는 '세션 공장'을 정의합니다.
AsyncSessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
)

metadata = SQLModel.metadata


# =============================================================================
# 데이터베이스 초기화 및 테이블 생성 함수
# =============================================================================
async def create_db_and_tables(bind: AsyncEngine = engine) -> None:
    """
    등록된 모든 테이블을 생성합니다. 기존 테이블은 삭제하지 않습니다.
    """
    logger.debug("Creating database tables: %s", ", ".join(metadata.tables))
    async with bind.begin() as conn:
        await conn.run_sync(metadata.create_all)
    logger.info("Database tables are ready.")


# =============================================================================
# 비동기 데이터베이스 세션 의존성 주입
# =============================================================================
async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI 의존성 주입을 위한 비동기 데이터베이스 세션 제너레이터입니다.
    요청마다 새로운 세션을 생성하고, 요청 처리 후 세션을 자동으로 닫습니다.
    """
    async with AsyncSessionLocal() as session:
        yield session
