# app/core/exceptions.py

"""
서비스 및 CRUD 계층에서 발생시키는 도메인 오류 분류 체계입니다.

서비스는 아래 예외만 발생시키고, HTTP 상태 코드와 응답 본문으로의 변환은
`app.core.error_handlers`에서만 수행합니다.
"""

from typing import Any, Dict


class AppError(Exception):
    """모든 도메인 오류의 기본 클래스입니다."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationFailure(AppError):
    """
    하나 이상의 필드가 유효성 규칙을 위반했을 때 발생합니다.
    `errors`는 필드 이름 -> 메시지 매핑입니다.
    """

    def __init__(self, errors: Dict[str, str]) -> None:
        self.errors = dict(errors)
        super().__init__(f"Validation failed for: {', '.join(sorted(self.errors))}")


class IllegalArgument(AppError, ValueError):
    """잘못된 인자(예: 빈 검색어)가 전달되었을 때 발생합니다."""


class ResourceNotFound(AppError):
    """요청한 리소스가 존재하지 않을 때 발생합니다."""

    def __init__(self, message: str, identifier: Any = None) -> None:
        self.identifier = identifier
        super().__init__(message)


class DuplicateResource(AppError):
    """고유 값(예: 실험실 이름)이 이미 사용 중일 때 발생합니다."""

    def __init__(self, message: str, value: Any = None) -> None:
        self.value = value
        super().__init__(message)


class StorageConflictError(AppError):
    """
    저장소의 고유 제약 조건 위반을 나타냅니다.
    CRUD 계층에서만 발생하며, 서비스 계층에서 DuplicateResource로 변환됩니다.
    """
