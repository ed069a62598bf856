# app/domains/lab/models.py

"""
'lab' 도메인의 데이터베이스 ORM 모델을 정의하는 모듈입니다.
"""

from typing import Optional
from sqlmodel import Field, SQLModel

from . import validators


class Laboratory(SQLModel, table=True):
    """
    tb_laboratories 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    `name`은 고유 인덱스로 보호되며, 동시 쓰기 시 중복은 저장소가 원자적으로 거부합니다.
    """
    __tablename__ = "tb_laboratories"

    id: Optional[int] = Field(default=None, primary_key=True, description="실험실 고유 ID")
    name: str = Field(sa_column_kwargs={"unique": True}, description="실험실 이름 (고유)")
    address: str = Field(max_length=validators.ADDRESS_MAX_LENGTH, description="주소")
    phone: str = Field(max_length=16, description="전화번호")
    email: str = Field(max_length=validators.EMAIL_MAX_LENGTH, description="이메일")
    website: Optional[str] = Field(default=None, max_length=validators.WEBSITE_MAX_LENGTH, description="웹사이트")
    specialty: str = Field(index=True, max_length=validators.SPECIALTY_MAX_LENGTH, description="전문 분야")
