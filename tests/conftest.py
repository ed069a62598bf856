# tests/conftest.py

import os
from typing import AsyncGenerator, Awaitable, Callable, Dict, Any

# 설정 객체가 생성되기 전에 테스트용 환경 변수를 지정해야 합니다.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("CREATE_TABLES_ON_STARTUP", "false")
os.environ.setdefault("APP_ENV", "testing")

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import AsyncClient, ASGITransport  # noqa: E402

from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel import SQLModel  # noqa: E402
from sqlmodel.ext.asyncio.session import AsyncSession  # noqa: E402

# app.main을 임포트하여 FastAPI 앱 인스턴스에 접근합니다.
from app.main import app as main_app  # noqa: E402
from app.core import dependencies as deps  # noqa: E402
from app.core.database import get_session  # noqa: E402
from app.domains.lab import models as lab_models  # noqa: E402


# --- 테스트용 데이터베이스 설정 ---
# 테스트마다 독립된 인메모리 SQLite 데이터베이스를 사용합니다.
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture(scope="function")
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    """
    테스트 함수마다 새 엔진을 만들고 모든 테이블을 생성합니다.
    StaticPool을 사용해야 인메모리 DB가 하나의 연결에서 유지됩니다.
    """
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(test_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """테스트용 비동기 데이터베이스 세션을 제공합니다."""
    TestingSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    async with TestingSessionLocal() as session:
        yield session


@pytest_asyncio.fixture(scope="function")
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """
    AsyncClient 인스턴스를 생성하고, 테스트용 비동기 DB 세션을 주입합니다.
    """

    async def override_get_session_and_dependency():
        yield db_session

    original_overrides = main_app.dependency_overrides.copy()

    try:
        main_app.dependency_overrides[get_session] = override_get_session_and_dependency
        main_app.dependency_overrides[deps.get_db_session] = override_get_session_and_dependency

        async with AsyncClient(transport=ASGITransport(app=main_app), base_url="http://test") as async_client:
            yield async_client

    finally:
        # 클라이언트 픽스처가 끝나면 오버라이드를 반드시 복원해야 합니다.
        main_app.dependency_overrides.clear()
        main_app.dependency_overrides.update(original_overrides)


# --- 도메인별 공통 픽스처 ---
@pytest.fixture
def laboratory_payload() -> Dict[str, Any]:
    """유효한 실험실 생성 요청 본문입니다."""
    return {
        "name": "BioTest",
        "address": "123 Main St",
        "phone": "+12345678",
        "email": "a@b.com",
        "specialty": "Chemistry",
    }


@pytest.fixture
def laboratory_factory(db_session: AsyncSession) -> Callable[..., Awaitable[lab_models.Laboratory]]:
    """
    이름과 속성을 지정하여 테스트 실험실을 DB에 직접 생성하는 팩토리 함수를 반환합니다.
    """
    async def _create_laboratory(name: str, specialty: str = "Chemistry", **kwargs) -> lab_models.Laboratory:
        laboratory_data = {
            "name": name,
            "address": "Av. Siempre Viva 742",
            "phone": "5551234567",
            "email": "contacto@labs.com",
            "specialty": specialty,
            **kwargs,
        }
        laboratory = lab_models.Laboratory(**laboratory_data)
        db_session.add(laboratory)
        await db_session.commit()
        await db_session.refresh(laboratory)
        return laboratory
    return _create_laboratory
