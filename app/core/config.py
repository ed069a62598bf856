# app/core/config.py

from typing import Any
from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict
import os

# 프로젝트의 루트 디렉토리 경로를 계산합니다.
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


class Settings(BaseSettings):
    """
    애플리케이션의 모든 설정을 정의하는 Pydantic BaseSettings 모델입니다.
    환경 변수 및 .env 파일에서 값을 자동으로 로드합니다.
    """

    # --- Pydantic Settings 설정 ---
    model_config = SettingsConfigDict(
        env_file=os.path.join(BASE_DIR, '.env'),  # 프로젝트 루트의 .env 파일을 명시적으로 지정
        env_file_encoding='utf-8',
        extra='ignore',                      # .env 파일에 정의되었지만 모델에 없는 변수는 무시
        case_sensitive=True                  # 환경 변수 이름 대소문자 구분
    )

    # --- 애플리케이션 기본 설정 ---
    APP_NAME: str = "Laboratory Directory API"
    APP_VERSION: str = "0.1.0"
    APP_DESCRIPTION: str = "CRUD API for managing laboratories (create, read, update, delete and search)."
    # 애플리케이션 환경 (예: "development", "production", "testing")
    APP_ENV: str = Field("development", description="Application environment (e.g., development, production, testing)")
    # 디버그 모드 활성화 여부 (SQL 쿼리 출력)
    DEBUG_MODE: bool = Field(False, description="Enable debug mode for SQL echo and verbose logging")
    LOG_LEVEL: str = Field("INFO", description="Root log level (DEBUG, INFO, WARNING, ERROR)")

    # --- 데이터베이스 설정 ---
    DATABASE_URL: SecretStr = Field(..., description="Async database connection URL (e.g. postgresql+asyncpg://...)")
    DB_POOL_SIZE: int = Field(10, description="Connections kept in the pool (server databases only)")
    DB_MAX_OVERFLOW: int = Field(20, description="Extra connections allowed above the pool size")
    DB_POOL_RECYCLE: int = Field(3600, description="Seconds after which a pooled connection is recycled")
    # 시작 시 테이블 생성 여부 (운영 환경에서는 마이그레이션 도구 사용 권장)
    CREATE_TABLES_ON_STARTUP: bool = Field(True, description="Run metadata.create_all during application startup")

    def model_post_init(self, __context: Any) -> None:  # noqa: ANN001
        # 디버그 모드에서는 로그 레벨을 DEBUG로 낮춥니다.
        if self.DEBUG_MODE and self.LOG_LEVEL == "INFO":
            self.LOG_LEVEL = "DEBUG"

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.get_secret_value().startswith("sqlite")


settings = Settings()
