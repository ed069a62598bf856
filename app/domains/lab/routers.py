# app/domains/lab/routers.py

"""
'lab' 도메인의 API 엔드포인트를 정의하는 모듈입니다.

| 메서드 | 경로                       | 성공 | 실패          |
|--------|----------------------------|------|---------------|
| POST   | /                          | 200  | 400, 409      |
| GET    | /                          | 200  |               |
| GET    | /{laboratory_id}           | 200  | 404           |
| PUT    | /{laboratory_id}           | 200  | 400, 404, 409 |
| DELETE | /{laboratory_id}           | 204  |               |
| GET    | /specialty/{specialty}     | 200  | 400           |
| GET    | /name/{name}               | 200  | 400           |

오류 응답 본문은 `app.core.error_handlers`에서 생성합니다.
"""

from typing import List
from fastapi import APIRouter, Depends, Response, status
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core import dependencies as deps
from app.core.exceptions import ResourceNotFound
from app.domains.lab import schemas as lab_schemas
from app.domains.lab.services import LaboratoryService, not_found_message

router = APIRouter(
    tags=["Laboratories"],
    responses={404: {"description": "Not found"}},
)


@router.post("", response_model=lab_schemas.LaboratoryRead, summary="새 실험실 생성")
@router.post("/", response_model=lab_schemas.LaboratoryRead, include_in_schema=False)
async def create_laboratory(
    laboratory_in: lab_schemas.LaboratoryCreate,
    db: AsyncSession = Depends(deps.get_db_session),
    service: LaboratoryService = Depends(deps.get_laboratory_service),
):
    """
    새로운 실험실을 생성합니다.
    - 유효성 위반 시 400 (필드별 메시지), 이름 중복 시 409
    """
    return await service.create(db, obj_in=laboratory_in)


@router.get("", response_model=List[lab_schemas.LaboratoryRead], summary="모든 실험실 목록 조회")
@router.get("/", response_model=List[lab_schemas.LaboratoryRead], include_in_schema=False)
async def read_laboratories(
    db: AsyncSession = Depends(deps.get_db_session),
    service: LaboratoryService = Depends(deps.get_laboratory_service),
):
    return await service.get_all(db)


@router.get("/specialty/{specialty}", response_model=List[lab_schemas.LaboratoryRead], summary="전문 분야로 검색")
async def read_laboratories_by_specialty(
    specialty: str,
    db: AsyncSession = Depends(deps.get_db_session),
    service: LaboratoryService = Depends(deps.get_laboratory_service),
):
    """전문 분야가 정확히 일치(대소문자 구분)하는 실험실 목록을 반환합니다."""
    return await service.find_by_specialty(db, specialty)


@router.get("/name/{name}", response_model=List[lab_schemas.LaboratoryRead], summary="이름으로 검색")
async def read_laboratories_by_name(
    name: str,
    db: AsyncSession = Depends(deps.get_db_session),
    service: LaboratoryService = Depends(deps.get_laboratory_service),
):
    """이름에 검색어가 포함된 실험실 목록을 반환합니다 (대소문자 무시)."""
    return await service.find_by_name(db, name)


@router.get("/{laboratory_id}", response_model=lab_schemas.LaboratoryRead, summary="특정 실험실 조회")
async def read_laboratory(
    laboratory_id: int,
    db: AsyncSession = Depends(deps.get_db_session),
    service: LaboratoryService = Depends(deps.get_laboratory_service),
):
    db_laboratory = await service.get_by_id(db, laboratory_id)
    if db_laboratory is None:
        raise ResourceNotFound(not_found_message(laboratory_id), identifier=laboratory_id)
    return db_laboratory


@router.put("/{laboratory_id}", response_model=lab_schemas.LaboratoryRead, summary="실험실 정보 수정")
async def update_laboratory(
    laboratory_id: int,
    laboratory_in: lab_schemas.LaboratoryUpdate,
    db: AsyncSession = Depends(deps.get_db_session),
    service: LaboratoryService = Depends(deps.get_laboratory_service),
):
    """
    특정 ID의 실험실 정보를 수정합니다. `id`를 제외한 모든 필드를 덮어씁니다.
    """
    return await service.update(db, laboratory_id, obj_in=laboratory_in)


@router.delete("/{laboratory_id}", status_code=status.HTTP_204_NO_CONTENT, summary="실험실 삭제")
async def delete_laboratory(
    laboratory_id: int,
    db: AsyncSession = Depends(deps.get_db_session),
    service: LaboratoryService = Depends(deps.get_laboratory_service),
):
    """존재하지 않는 ID도 204로 응답합니다."""
    await service.delete(db, laboratory_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
