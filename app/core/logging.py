# app/core/logging.py

"""
애플리케이션 로깅 초기화 모듈입니다.
각 모듈은 `logging.getLogger(__name__)`으로 로거를 생성하고,
여기서는 루트 핸들러와 출력 형식만 한 번 설정합니다.
"""

import logging
from typing import Optional

from app.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"

_configured = False


def setup_logging(level: Optional[str] = None) -> None:
    """루트 로거를 설정합니다. 여러 번 호출되어도 한 번만 적용됩니다."""
    global _configured
    if _configured:
        return

    log_level = (level or settings.LOG_LEVEL).upper()
    logging.basicConfig(level=log_level, format=LOG_FORMAT)
    # SQL 출력은 DEBUG_MODE일 때 엔진 echo로만 제어합니다.
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    _configured = True
    logging.getLogger(__name__).debug("Logging configured with level %s", log_level)
