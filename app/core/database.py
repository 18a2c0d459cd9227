# app/core/database.py

"""
애플리케이션의 데이터베이스 연결 및 세션 관리를 담당하는 모듈입니다.

- SQLModel의 비동기 엔진을 설정합니다.
- 요청마다 하나의 트랜잭션으로 동작하는 비동기 세션 의존성을 제공합니다.
- 애플리케이션 시작 시 데이터베이스 테이블을 생성하는 함수를 포함합니다 (개발용).
"""

from typing import Any, AsyncGenerator, Dict
from contextlib import asynccontextmanager
import logging

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine  # 비동기 엔진 생성 함수와 타입 임포트
from sqlalchemy.orm import sessionmaker

from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession  # AsyncSession은 비동기용

# 애플리케이션 설정을 임포트합니다.
from app.core.config import settings

# =============================================================================
# 모든 도메인 모델 임포트
# =============================================================================
# 모든 SQLModel 클래스가 SQLModel.metadata에 등록되도록 명시적으로 임포트해야 합니다.
from app.domains.org import models      # noqa

logger = logging.getLogger(__name__)


def _engine_options(url: str) -> Dict[str, Any]:
    """
    백엔드에 맞는 엔진 옵션을 만듭니다.
    풀 크기 옵션은 커넥션 풀을 사용하는 서버형 DB(PostgreSQL 등)에만 적용합니다.
    """
    options: Dict[str, Any] = {
        "echo": settings.DEBUG_MODE,  # 디버그 모드일 때만 SQL 쿼리 출력
        "pool_pre_ping": True,
    }
    if make_url(url).get_backend_name() != "sqlite":
        options.update(
            pool_recycle=settings.DB_POOL_RECYCLE,  # 유휴 연결 재활용 주기 (초)
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
        )
    return options


# SQLModel 엔진을 생성합니다.
engine: AsyncEngine = create_async_engine(
    settings.DATABASE_URL.get_secret_value(),  # SecretStr 값에 접근
    **_engine_options(settings.DATABASE_URL.get_secret_value()),
)

# 비동기 세션을 생성하는 '세션 공장'을 정의합니다.
AsyncSessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
)

# SQLModel의 기본 MetaData 객체입니다.
metadata = SQLModel.metadata


# =============================================================================
# 데이터베이스 초기화 및 테이블 생성 함수
# =============================================================================
async def create_db_and_tables(bind: AsyncEngine = engine) -> None:
    """
    등록된 모든 SQLModel 테이블을 생성합니다.
    이 함수는 개발 환경에서만 사용해야 하며, 기존 테이블을 삭제하지는 않습니다.
    """
    logger.info("Creating database tables (if missing)...")
    async with bind.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    logger.info("Database tables are ready.")


async def drop_db_and_tables(bind: AsyncEngine = engine) -> None:
    """등록된 모든 SQLModel 테이블을 삭제합니다 (테스트/초기화용)."""
    async with bind.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)


# =============================================================================
# 비동기 데이터베이스 세션 의존성 주입
# =============================================================================
@asynccontextmanager
async def get_async_session_context() -> AsyncGenerator[AsyncSession, None]:
    """
    하나의 트랜잭션으로 묶인 독립적인 비동기 DB 세션을 제공하는 컨텍스트 관리자입니다.
    블록이 정상 종료되면 커밋하고, 예외가 발생하면 롤백한 뒤 예외를 다시 던집니다.
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI 의존성 주입을 위한 비동기 데이터베이스 세션 제너레이터입니다.
    요청 하나가 하나의 트랜잭션입니다 (HTTPException으로 종료된 요청도 롤백됩니다).
    변경 엔드포인트는 응답 전에 직접 커밋해야 합니다. 의존성 종료 코드는 응답이 전송된 뒤에 실행됩니다.
    """
    async with get_async_session_context() as session:
        yield session
