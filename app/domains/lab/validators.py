# app/domains/lab/validators.py

"""
실험실 필드 유효성 규칙 모듈입니다.

`validate_laboratory`는 첫 번째 오류에서 멈추지 않고 모든 필드를 검사하여
필드 이름 -> 메시지 매핑을 반환합니다. 필드마다 먼저 위반한 규칙 하나의 메시지만 남깁니다.
"""

import re
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from email_validator import EmailNotValidError, validate_email

NAME_MIN_LENGTH = 4
ADDRESS_MAX_LENGTH = 150
PHONE_PATTERN = re.compile(r"\+?[0-9]{7,15}")
EMAIL_MIN_LENGTH = 5
EMAIL_MAX_LENGTH = 100
WEBSITE_MAX_LENGTH = 100
SPECIALTY_MIN_LENGTH = 2
SPECIALTY_MAX_LENGTH = 50

# (검사 함수, 위반 시 메시지) 목록. 검사 함수는 규칙을 만족하면 True를 반환합니다.
Rule = Tuple[Callable[[str], bool], str]


def _not_blank(value: Optional[str]) -> bool:
    return value is not None and value.strip() != ""


def _is_email(value: str) -> bool:
    """
    원본 문자열 자체가 주소 형식인지 검사합니다.
    표시 이름(`Name <addr>`)이나 앞뒤 공백이 붙은 값은 거부합니다.
    점이 없는 도메인(예: `a@localhost`)도 거부합니다.
    """
    if value != value.strip():
        return False
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


REQUIRED_MESSAGES: Dict[str, str] = {
    "name": "El nombre es obligatorio",
    "address": "La dirección es obligatoria",
    "phone": "El teléfono es obligatorio",
    "email": "El correo electrónico es obligatorio",
    "specialty": "La especialidad es obligatoria",
}

FIELD_RULES: Dict[str, List[Rule]] = {
    "name": [
        (lambda v: len(v) >= NAME_MIN_LENGTH, "El nombre debe tener al menos 4 caracteres"),
    ],
    "address": [
        (lambda v: len(v) <= ADDRESS_MAX_LENGTH, "La dirección debe tener un máximo de 150 caracteres"),
    ],
    "phone": [
        (lambda v: PHONE_PATTERN.fullmatch(v) is not None,
         "El teléfono debe ser válido y contener entre 7 y 15 dígitos"),
    ],
    "email": [
        (_is_email, "El correo electrónico debe ser válido"),
        (lambda v: EMAIL_MIN_LENGTH <= len(v) <= EMAIL_MAX_LENGTH,
         "El correo electrónico debe tener entre 5 y 100 caracteres"),
    ],
    "website": [
        (lambda v: len(v) <= WEBSITE_MAX_LENGTH, "El sitio web debe tener un máximo de 100 caracteres"),
    ],
    "specialty": [
        (lambda v: SPECIALTY_MIN_LENGTH <= len(v) <= SPECIALTY_MAX_LENGTH,
         "La especialidad debe tener entre 2 y 50 caracteres"),
    ],
}


def validate_field(field: str, value: Optional[str]) -> Optional[str]:
    """단일 필드를 검사하고, 위반 시 메시지를, 통과 시 None을 반환합니다."""
    if field in REQUIRED_MESSAGES and not _not_blank(value):
        return REQUIRED_MESSAGES[field]
    if value is None:
        # 선택 필드(website)가 비어 있는 경우
        return None
    for check, message in FIELD_RULES.get(field, []):
        if not check(value):
            return message
    return None


def validate_laboratory(data: Mapping[str, Any]) -> Dict[str, str]:
    """
    실험실 데이터 전체를 검사합니다.

    Args:
        data: 필드 이름 -> 값 매핑 (요청 스키마의 `model_dump()` 결과 등)

    Returns:
        위반한 필드 이름 -> 메시지 매핑. 모든 규칙을 만족하면 빈 dict.
    """
    errors: Dict[str, str] = {}
    for field in FIELD_RULES:
        message = validate_field(field, data.get(field))
        if message is not None:
            errors[field] = message
    return errors
