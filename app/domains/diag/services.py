# app/domains/diag/services.py

"""
'diag' 도메인의 비즈니스 로직을 담당하는 서비스 모듈입니다.

논리 이름으로 커넥션 풀을 찾고, 연결 하나를 열어 클라이언트 정보와
데이터베이스/드라이버 메타데이터를 점(.)으로 구분된 키의 평탄한 dict로 만듭니다.
조회나 메타데이터 수집에 실패하면 RuntimeError로 감싸서 던집니다 (복구 경로 없음).
"""

from typing import Any, Dict, Optional, Tuple
from importlib import metadata as importlib_metadata
import logging
import socket

from sqlalchemy.engine import Connection, URL
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from app.core.config import settings
from app.core.datasource import DataSourceLookupError, DataSourceRegistry

logger = logging.getLogger(__name__)


def client_info(url: URL, application_name: str) -> Dict[str, str]:
    """
    연결의 클라이언트 정보 키/값 쌍을 만듭니다.
    연결 옵션(URL 쿼리)은 자격 증명을 포함할 수 있으므로 보고하지 않으며, 값이 없는 항목은 제외합니다.
    """
    info: Dict[str, Optional[str]] = {
        "ApplicationName": application_name,
        "ClientUser": url.username,
        "ClientHostname": socket.gethostname(),
    }
    return {key: value for key, value in info.items() if value is not None}


def _version_part(version: Tuple[Any, ...], index: int) -> int:
    if len(version) > index and isinstance(version[index], int):
        return version[index]
    return 0


def _driver_version(driver: str, dbapi: Any) -> str:
    try:
        return importlib_metadata.version(driver)
    except importlib_metadata.PackageNotFoundError:
        return str(getattr(dbapi, "version", getattr(dbapi, "__version__", "unknown")))


def collect_connection_metadata(conn: Connection, application_name: str) -> Dict[str, Any]:
    """
    동기 Connection에서 메타데이터를 읽습니다. (AsyncConnection.run_sync로 호출됩니다)
    """
    dialect = conn.dialect
    response: Dict[str, Any] = {}

    info = client_info(conn.engine.url, application_name)
    for key in sorted(info):
        response[f"client.info.{key}"] = info[key]

    server_version = tuple(dialect.server_version_info or ())
    dbapi = dialect.loaded_dbapi
    apilevel = tuple(int(p) for p in str(getattr(dbapi, "apilevel", "2.0")).split(".")[:2])

    response["db.product.name"] = dialect.name
    response["db.product.version"] = ".".join(str(p) for p in server_version)
    response["db.major.version"] = _version_part(server_version, 0)
    response["db.minor.version"] = _version_part(server_version, 1)
    response["db.driver.version"] = _driver_version(dialect.driver, dbapi)
    response["db.dbapi.major.version"] = _version_part(apilevel, 0)
    response["db.dbapi.minor.version"] = _version_part(apilevel, 1)
    return response


async def build_connection_metadata(engine: AsyncEngine, name: str) -> Dict[str, Any]:
    """
    커넥션 풀에서 연결 하나를 열어 메타데이터를 수집합니다.
    연결은 async with 블록으로 성공/실패와 관계없이 반드시 반환됩니다.
    """
    try:
        async with engine.connect() as conn:
            return await conn.run_sync(collect_connection_metadata, settings.APP_NAME)
    except (SQLAlchemyError, OSError) as e:
        logger.exception("Failed to read connection metadata from [%s]", name)
        raise RuntimeError(
            f"Unable to obtain connection metadata from connection pool retrieved from "
            f"context [{name}] due to {e}"
        ) from e


async def database_metadata(registry: DataSourceRegistry, name: str) -> Dict[str, Any]:
    """이름으로 커넥션 풀을 찾아 메타데이터 응답을 만듭니다."""
    try:
        engine = registry.lookup(name)
    except DataSourceLookupError as e:
        logger.error("Unable to locate connection pool [%s]", name)
        raise RuntimeError(f"Unable to locate connection pool in [{name}] due to {e}") from e

    return await build_connection_metadata(engine, name)
