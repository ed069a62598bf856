# app/domains/lab/schemas.py

"""
'lab' 도메인의 요청/응답 스키마를 정의하는 모듈입니다.

요청 스키마의 필드는 모두 선택 사항으로 두고, 필수 여부와 길이/형식 규칙은
`validators.validate_laboratory`에서 한 번에 검사합니다.
그래야 여러 필드가 동시에 잘못된 경우 모든 위반 사항을 함께 보고할 수 있습니다.
"""

from typing import Optional
from sqlmodel import SQLModel, Field


class LaboratoryBase(SQLModel):
    """
    실험실의 기본 속성을 정의하는 Base 스키마입니다.
    """
    name: Optional[str] = Field(None, description="실험실 이름 (최소 4자, 고유)")
    address: Optional[str] = Field(None, description="주소 (최대 150자)")
    phone: Optional[str] = Field(None, description="전화번호 ('+' 선택, 숫자 7~15자리)")
    email: Optional[str] = Field(None, description="이메일 (5~100자)")
    website: Optional[str] = Field(None, description="웹사이트 (선택, 최대 100자)")
    specialty: Optional[str] = Field(None, description="전문 분야 (2~50자)")


class LaboratoryCreate(LaboratoryBase):
    """
    새로운 실험실을 생성하기 위한 스키마입니다. 본문에 `id`가 있어도 무시됩니다.
    """
    pass


class LaboratoryUpdate(LaboratoryBase):
    """
    기존 실험실을 수정하기 위한 스키마입니다.
    부분 업데이트가 아니라 `id`를 제외한 모든 필드를 덮어씁니다.
    """
    pass


class LaboratoryRead(SQLModel):
    """
    API 응답으로 반환되는 실험실 정보입니다.
    """
    id: int
    name: str
    address: str
    phone: str
    email: str
    website: Optional[str] = None
    specialty: str

    class Config:
        from_attributes = True  # ORM 모드 활성화
