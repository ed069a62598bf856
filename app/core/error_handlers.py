# app/core/error_handlers.py

"""
도메인 오류를 일관된 JSON 오류 본문으로 변환하는 FastAPI 예외 핸들러 모음입니다.

오류 본문 형식:
    {"status": int, "timestamp": datetime, "error" | "errores": str | dict,
     "path": str, "message": str}

`register_exception_handlers(app)`를 통해 애플리케이션에 한 번에 등록합니다.
"""

import logging
from datetime import datetime
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from app.core.exceptions import (
    DuplicateResource,
    IllegalArgument,
    ResourceNotFound,
    ValidationFailure,
)

logger = logging.getLogger(__name__)

STATUS_KEY = "status"
TIMESTAMP_KEY = "timestamp"
ERROR_KEY = "error"
ERRORS_KEY = "errores"
PATH_KEY = "path"
MESSAGE_KEY = "message"

INTERNAL_ERROR = "Error interno del servidor"
INTERNAL_ERROR_MESSAGE = "Ha ocurrido un problema inesperado. Por favor, intente más tarde."
ROUTE_UNAVAILABLE = "La URL solicitada no existe o no está disponible."


def build_error_body(
    status_code: int,
    *,
    error: Optional[str] = None,
    errors: Optional[Dict[str, str]] = None,
    path: Optional[str] = None,
    message: Optional[str] = None,
) -> Dict[str, Any]:
    """오류 응답 본문을 생성합니다. 값이 없는 키는 포함하지 않습니다."""
    body: Dict[str, Any] = {STATUS_KEY: status_code, TIMESTAMP_KEY: datetime.now()}
    if errors is not None:
        body[ERRORS_KEY] = errors
    if error is not None:
        body[ERROR_KEY] = error
    if message is not None:
        body[MESSAGE_KEY] = message
    if path is not None:
        body[PATH_KEY] = path
    return body


def _error_response(status_code: int, **kwargs: Any) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(build_error_body(status_code, **kwargs)),
    )


def _field_name(loc: Any) -> str:
    """('body', 'name') 형태의 오류 위치에서 필드 이름을 추출합니다."""
    parts = [str(part) for part in loc if part != "body"]
    return parts[-1] if parts else "body"


# =============================================================================
# 개별 핸들러
# =============================================================================
async def validation_failure_handler(request: Request, exc: ValidationFailure) -> JSONResponse:
    return _error_response(status.HTTP_400_BAD_REQUEST, errors=exc.errors)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    요청 본문/경로 파라미터의 디코딩 및 타입 오류를 필드별 메시지로 변환합니다.
    같은 필드에 여러 오류가 있으면 첫 번째 메시지만 사용합니다.
    """
    errors: Dict[str, str] = {}
    for error in exc.errors():
        # JSON 디코딩 오류의 위치는 ('body', <문자 위치>) 형태입니다.
        field = "body" if error.get("type") == "json_invalid" else _field_name(error.get("loc", ()))
        errors.setdefault(field, error.get("msg", "Invalid value"))
    return _error_response(status.HTTP_400_BAD_REQUEST, errors=errors)


async def illegal_argument_handler(request: Request, exc: IllegalArgument) -> JSONResponse:
    return _error_response(status.HTTP_400_BAD_REQUEST, error=exc.message, path=request.url.path)


async def not_found_handler(request: Request, exc: ResourceNotFound) -> JSONResponse:
    return _error_response(status.HTTP_404_NOT_FOUND, error=exc.message, path=request.url.path)


async def duplicate_resource_handler(request: Request, exc: DuplicateResource) -> JSONResponse:
    return _error_response(status.HTTP_409_CONFLICT, error=exc.message, path=request.url.path)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """존재하지 않는 경로, 허용되지 않은 메서드 등 프레임워크 수준 오류를 처리합니다."""
    response = _error_response(exc.status_code, error=ROUTE_UNAVAILABLE, path=request.url.path)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """처리되지 않은 모든 예외. 상세 내용은 로그에만 남기고 클라이언트에는 일반 메시지만 반환합니다."""
    logger.exception("Error interno del servidor (%s %s)", request.method, request.url.path, exc_info=exc)
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        error=INTERNAL_ERROR,
        message=INTERNAL_ERROR_MESSAGE,
        path=request.url.path,
    )


async def catch_unexpected_errors(request: Request, call_next: RequestResponseEndpoint) -> Response:
    """
    처리되지 않은 예외를 사용자 미들웨어 스택 안쪽에서 500 응답으로 바꿉니다.
    `Exception` 핸들러만으로는 가장 바깥의 ServerErrorMiddleware에서 응답이 만들어져
    CORS 헤더가 붙지 않습니다.
    """
    try:
        return await call_next(request)
    except Exception as exc:
        return await unexpected_error_handler(request, exc)


def register_exception_handlers(app: FastAPI) -> None:
    """
    모든 예외 핸들러를 애플리케이션에 등록합니다.
    CORS 등 응답 헤더를 붙이는 미들웨어보다 먼저 호출해야 합니다.
    """
    app.add_middleware(BaseHTTPMiddleware, dispatch=catch_unexpected_errors)
    app.add_exception_handler(ValidationFailure, validation_failure_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(IllegalArgument, illegal_argument_handler)
    app.add_exception_handler(ResourceNotFound, not_found_handler)
    app.add_exception_handler(DuplicateResource, duplicate_resource_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
