# app/domains/lab/__init__.py

"""
FastAPI 애플리케이션의 'lab' 도메인 패키지입니다.

'lab' 도메인은 실험실(Laboratory)의 이름, 주소, 연락처, 웹사이트,
전문 분야 정보를 등록/조회/수정/삭제하고, 전문 분야 및 이름으로 검색하는 역할을 합니다.

주요 서브모듈:
- `models.py`: `tb_laboratories` 테이블에 매핑되는 SQLModel 정의.
- `schemas.py`: 요청 및 응답에 사용되는 Pydantic/SQLModel 스키마.
- `validators.py`: 필드별 유효성 규칙 (모든 위반 사항을 한 번에 수집).
- `interfaces.py`: 저장소 게이트웨이 추상 계약.
- `crud.py`: SQLModel 기반 게이트웨이 구현.
- `services.py`: 유효성 검사, 중복/미존재 처리를 담당하는 도메인 서비스.
- `routers.py`: API 엔드포인트 정의.
"""

__title__ = "Laboratory Domain"
__description__ = "Manages laboratories (name, address, contact details, specialty)."
__version__ = "0.1.0"
__all__ = []
