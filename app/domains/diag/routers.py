# app/domains/diag/routers.py

"""
'diag' 도메인 (데이터베이스 진단) API 엔드포인트를 정의하는 모듈입니다.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from app.core.datasource import DataSourceRegistry
from app.core import dependencies as deps

from . import services as diag_services

router = APIRouter(tags=["Database Diagnostics (DB 진단)"])


@router.get("/database", summary="DB 연결 메타데이터 조회")
async def database_metadata(
    registry: DataSourceRegistry = Depends(deps.get_datasources),
    datasource_name: str = Depends(deps.get_datasource_name),
) -> Dict[str, Any]:
    """
    애플리케이션 커넥션 풀의 클라이언트 정보와 DB/드라이버 메타데이터를 반환합니다.
    커넥션 풀을 찾지 못하거나 메타데이터를 읽지 못하면 500 오류가 됩니다.
    """
    return await diag_services.database_metadata(registry, datasource_name)
