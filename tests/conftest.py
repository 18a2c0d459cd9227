# tests/conftest.py

import os
import tempfile
from typing import AsyncGenerator, Awaitable, Callable, Optional

# --- 테스트용 데이터베이스 설정 ---
# app 모듈이 임포트되기 전에 환경 변수를 지정해야 Settings가 테스트 DB를 사용합니다.
TEST_DB_PATH = os.path.join(tempfile.gettempdir(), "department_service_test.db")
os.environ.setdefault("DATABASE_URL", f"sqlite+aiosqlite:///{TEST_DB_PATH}")
os.environ["DB_CREATE_TABLES"] = "false"
os.environ["APP_ENV"] = "testing"

import pytest_asyncio  # noqa: E402
from httpx import AsyncClient, ASGITransport  # noqa: E402
from sqlmodel.ext.asyncio.session import AsyncSession  # noqa: E402

# app.main을 임포트하여 FastAPI 앱 인스턴스에 접근합니다.
from app.main import app as main_app  # noqa: E402
from app.core.config import settings  # noqa: E402
from app.core.database import (  # noqa: E402
    AsyncSessionLocal,
    create_db_and_tables,
    drop_db_and_tables,
    engine,
)
from app.core.datasource import datasources  # noqa: E402
from app.domains.org import models as org_models  # noqa: E402


# --- 데이터베이스 픽스처 ---
@pytest_asyncio.fixture(scope="function", autouse=True)
async def setup_database() -> AsyncGenerator[None, None]:
    """
    각 테스트 시작 시 테이블을 생성하고, 종료 시 삭제합니다.
    테스트마다 이벤트 루프가 바뀌므로 엔진의 커넥션 풀도 매번 정리합니다.
    """
    await drop_db_and_tables()
    await create_db_and_tables()

    yield  # 테스트 실행

    await drop_db_and_tables()
    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """테스트 데이터 준비용 비동기 세션을 제공합니다. 준비한 데이터는 직접 커밋해야 합니다."""
    async with AsyncSessionLocal() as session:
        yield session


@pytest_asyncio.fixture(scope="function")
def department_factory(db_session: AsyncSession) -> Callable[..., Awaitable[org_models.Department]]:
    """부서를 생성하고 커밋하는 팩토리 함수를 반환합니다."""
    async def _create_department(
        deptno: str,
        deptname: Optional[str] = None,
        location: Optional[str] = None,
    ) -> org_models.Department:
        department = org_models.Department(deptno=deptno, deptname=deptname, location=location)
        db_session.add(department)
        await db_session.commit()
        return department
    return _create_department


@pytest_asyncio.fixture(scope="function")
def fetch_department() -> Callable[[str], Awaitable[Optional[org_models.Department]]]:
    """
    새 세션으로 저장소의 현재 부서 상태를 조회하는 함수를 반환합니다.
    (세션 캐시(identity map)를 거치지 않고 커밋된 상태를 확인하기 위함)
    """
    async def _fetch(deptno: str) -> Optional[org_models.Department]:
        async with AsyncSessionLocal() as session:
            return await session.get(org_models.Department, deptno)
    return _fetch


# --- 비동기 테스트 클라이언트 픽스처 ---
@pytest_asyncio.fixture(scope="function")
async def client() -> AsyncGenerator[AsyncClient, None]:
    """
    AsyncClient 인스턴스를 생성합니다. 요청은 실제 get_session 의존성을 거치므로
    엔드포인트의 트랜잭션(커밋/롤백) 동작이 그대로 검증됩니다.
    ASGITransport는 lifespan을 실행하지 않으므로 데이터소스 등록을 여기서 수행합니다.
    """
    datasources.register(settings.DATASOURCE_NAME, engine)
    original_overrides = main_app.dependency_overrides.copy()
    try:
        async with AsyncClient(transport=ASGITransport(app=main_app), base_url="http://test") as async_client:
            yield async_client
    finally:
        # 클라이언트 픽스처가 끝나면 오버라이드와 등록을 반드시 복원해야 합니다.
        main_app.dependency_overrides.clear()
        main_app.dependency_overrides.update(original_overrides)
        datasources.unregister(settings.DATASOURCE_NAME)


@pytest_asyncio.fixture(scope="function")
async def lenient_client() -> AsyncGenerator[AsyncClient, None]:
    """
    처리되지 않은 서버 예외를 테스트로 다시 던지지 않고 500 응답으로 돌려주는 클라이언트입니다.
    """
    original_overrides = main_app.dependency_overrides.copy()
    try:
        transport = ASGITransport(app=main_app, raise_app_exceptions=False)
        async with AsyncClient(transport=transport, base_url="http://test") as async_client:
            yield async_client
    finally:
        main_app.dependency_overrides.clear()
        main_app.dependency_overrides.update(original_overrides)
