# app/__init__.py

"""
Laboratory Directory FastAPI 애플리케이션의 메인 패키지입니다.

이 패키지는 애플리케이션의 핵심 로직과 도메인별 모듈을 포함합니다.
FastAPI 애플리케이션의 진입점 (main.py)과
공통 설정, 데이터베이스 연결, 예외 처리를 담는 core 서브패키지,
그리고 실험실(lab) 도메인을 담는 domains 서브패키지로 구성됩니다.
"""

# 패키지 레벨에서 사용하는 공통 상수
APP_NAME = "Laboratory Directory API"
APP_VERSION = "0.1.0"
API_PREFIX = "/api"  # API 라우트의 공통 접두사 (main.py에서 적용)

__version__ = APP_VERSION
__title__ = APP_NAME
__description__ = "CRUD API backend for managing laboratories."
__all__ = []
