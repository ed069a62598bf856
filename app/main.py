# app/main.py

import logging
from typing import AsyncGenerator
from contextlib import asynccontextmanager

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware

# 핵심 설정 및 데이터베이스 모듈 임포트
from app.core.config import settings
from app.core.database import engine, create_db_and_tables
from app.core import dependencies as deps
from app.core.error_handlers import register_exception_handlers
from app.core.logging import setup_logging

from app import API_PREFIX

from app.domains.lab.routers import router as lab_router

logger = logging.getLogger(__name__)


# -- 애플리케이션 수명 주기 이벤트 핸들러 --
# 애플리케이션 시작 및 종료 시 실행될 비동기 작업을 정의합니다.
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI 애플리케이션의 수명 주기 이벤트(로깅, 데이터베이스)를 처리합니다.
    """
    setup_logging()
    logger.info("Starting %s (%s)...", settings.APP_NAME, settings.APP_ENV)
    try:
        if settings.CREATE_TABLES_ON_STARTUP:
            await create_db_and_tables()
    except Exception:
        logger.exception("Error during application startup")
        raise

    yield  # 애플리케이션 실행

    logger.info("Shutting down %s...", settings.APP_NAME)
    # 데이터베이스 연결 풀 종료
    await engine.dispose()
    logger.info("Database connection pool disposed.")


# -- FastAPI 애플리케이션 인스턴스 생성 --
app = FastAPI(
    title=settings.APP_NAME,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
    docs_url="/docs",       # Swagger UI
    redoc_url="/redoc",     # ReDoc
    lifespan=lifespan
)

# -- 오류 변환 핸들러 등록 --
# 나중에 추가한 미들웨어가 바깥에 놓이므로 CORS보다 먼저 등록합니다.
register_exception_handlers(app)

# -- CORS 미들웨어 설정 --
# 인증 없이 모든 요청을 허용하는 공개 API입니다.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# -- 도메인 라우터 포함 --
app.include_router(lab_router, prefix=f"{API_PREFIX}/laboratories")


# -- 루트 엔드포인트 --
@app.get("/", summary="API Root", response_description="Welcome message and documentation link.")
async def read_root():
    """
    API의 시작점을 알리고 문서 링크를 제공합니다.
    """
    return {"message": f"Welcome to {settings.APP_NAME}. Visit /docs for interactive API documentation."}


# -- 헬스 체크 엔드포인트 --
# 데이터베이스 연결에 실패하면 예외가 그대로 전파되어 공통 500 응답으로 변환됩니다.
@app.get("/health-check", summary="Health Check", response_description="Status of the application and database connection.")
async def health_check(session: AsyncSession = Depends(deps.get_db_session)):
    """
    데이터베이스에 간단한 쿼리를 실행하여 서비스의 정상 작동 여부를 확인합니다.
    """
    result = await session.exec(select(1))
    if result.first() is None:
        raise RuntimeError("Database health check failed: no result from test query")
    return {"status": "ok", "database_connection": "successful"}


# -- Uvicorn 서버 직접 실행 (개발용) --
if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=settings.DEBUG_MODE, log_level=settings.LOG_LEVEL.lower())
