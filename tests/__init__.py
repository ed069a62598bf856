# tests/__init__.py

"""
Laboratory Directory API의 테스트 스위트 패키지입니다.

- `domains/`: 도메인별 API 통합 테스트와 서비스/유효성 규칙 단위 테스트.
- `fakes.py`: 서비스 단위 테스트용 인메모리 게이트웨이.
- `conftest.py`: 테스트용 DB 엔진, 세션, 클라이언트 픽스처.
"""

__title__ = "Laboratory Directory API Tests"
__all__ = []
