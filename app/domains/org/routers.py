# app/domains/org/routers.py

"""
'org' 도메인 (부서 관리)과 관련된 API 엔드포인트를 정의하는 모듈입니다.

모든 엔드포인트는 get_session 의존성이 제공하는 하나의 트랜잭션 안에서 실행됩니다.
변경 엔드포인트는 응답을 돌려주기 전에 직접 커밋합니다 (커밋 실패 시 204가 아닌 오류 응답).
입력은 form-encoded 데이터로 받고, 응답은 값이 있는 필드만 포함하는 JSON입니다.
"""

from typing import List, Optional
import logging

from fastapi import APIRouter, Depends, Form, HTTPException, status
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.database import get_session

# org 도메인의 CRUD, 모델, 스키마
from . import crud as org_crud
from . import models as org_models
from . import schemas as org_schemas

logger = logging.getLogger(__name__)

# 라우터 인스턴스 생성 (prefix는 main.py에서 관리)
router = APIRouter(
    tags=["Department Management (부서 관리)"],
    responses={404: {"description": "Not found"}},
)


# =============================================================================
# 1. 부서 (Department) 관리 엔드포인트
# =============================================================================
@router.post("/departments", status_code=status.HTTP_204_NO_CONTENT, summary="새 부서 생성")
async def add_new_department(
    deptno: str = Form(...),
    name: Optional[str] = Form(None),
    location: Optional[str] = Form(None),
    db: AsyncSession = Depends(get_session),
):
    """
    제출된 데이터(name, deptno, location)로 새 부서를 생성합니다.
    같은 deptno의 부서가 이미 있으면 400을 반환합니다.
    """
    if await org_crud.department.get(db, deptno) is not None:
        logger.warning("Rejected create: department %s already exists", deptno)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Department already exists")

    new_department = org_models.Department(deptno=deptno, deptname=name, location=location)
    await org_crud.department.create(db, obj=new_department)
    await db.commit()
    logger.info("Created department %s", deptno)
    return None


@router.put("/departments/{deptno}", status_code=status.HTTP_204_NO_CONTENT, summary="부서 업데이트")
async def update_department(
    deptno: str,
    name: Optional[str] = Form(None),
    location: Optional[str] = Form(None),
    db: AsyncSession = Depends(get_session),
):
    """
    부서명과 위치를 제출된 값으로 덮어씁니다. deptno는 변경되지 않습니다.
    """
    prev_department = await org_crud.department.get(db, deptno)
    if prev_department is None:
        logger.warning("Rejected update: department %s does not exist", deptno)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Department does not exist")

    prev_department.deptname = name
    prev_department.location = location
    await org_crud.department.update(db, obj=prev_department)
    await db.commit()
    logger.info("Updated department %s", deptno)
    return None


@router.delete("/departments/{deptno}", status_code=status.HTTP_204_NO_CONTENT, summary="부서 삭제")
async def delete_department(
    deptno: str,
    db: AsyncSession = Depends(get_session),
):
    department = await org_crud.department.get(db, deptno)
    if department is None:
        logger.warning("Rejected delete: department %s does not exist", deptno)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Department does not exist")

    await org_crud.department.delete(db, obj=department)
    await db.commit()
    logger.info("Deleted department %s", deptno)
    return None


@router.get(
    "/departments/{deptno}",
    response_model=org_schemas.DepartmentRead,
    response_model_exclude_none=True,
    summary="특정 부서 조회",
)
async def get_department(
    deptno: str,
    db: AsyncSession = Depends(get_session),
):
    """
    특정 부서를 조회합니다.
    부서가 없어도 오류가 아니며, 빈 JSON 객체 `{}`를 200으로 반환합니다.
    """
    department = await org_crud.department.get(db, deptno)
    if department is None:
        return org_schemas.DepartmentRead()
    return org_schemas.DepartmentRead.from_entity(department)


@router.get(
    "/departments",
    response_model=List[org_schemas.DepartmentRead],
    response_model_exclude_none=True,
    summary="모든 부서 조회",
)
async def get_departments(db: AsyncSession = Depends(get_session)):
    departments = await org_crud.department.read_all(db)
    return [org_schemas.DepartmentRead.from_entity(dept) for dept in departments]
