# tests/domains/__init__.py

"""
도메인별 테스트 스위트 패키지입니다.

- `test_lab_n.py`: 'lab' 도메인 API 통합 테스트.
- `test_lab_services.py`: `LaboratoryService` 단위 테스트.
- `test_lab_validators.py`: 필드 유효성 규칙 단위 테스트.
"""

__all__ = []
