# app/main.py

from typing import AsyncGenerator
from contextlib import asynccontextmanager
import logging

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from fastapi import FastAPI, Depends, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware

# 핵심 설정 및 데이터베이스 모듈 임포트
from app.core.config import settings
from app.core.database import create_db_and_tables, engine, get_session
from app.core.datasource import datasources
from app.core.logging_config import setup_logging

# 각 도메인의 라우터들을 임포트합니다.
from app.domains.org.routers import router as org_router
from app.domains.diag.routers import router as diag_router

logger = logging.getLogger(__name__)


# -- 애플리케이션 수명 주기 이벤트 핸들러 --
# 애플리케이션 시작 및 종료 시 실행될 비동기 작업을 정의합니다.
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    로깅 설정, 테이블 생성(개발용), 데이터소스 등록 및 엔진 정리를 처리합니다.
    """
    setup_logging(settings.LOG_LEVEL)
    logger.info("Starting %s (%s)...", settings.APP_NAME, settings.APP_ENV)
    try:
        # 1. 데이터베이스 테이블 생성 (운영 환경에서는 비활성화)
        if settings.DB_CREATE_TABLES:
            await create_db_and_tables()

        # 2. 애플리케이션 엔진을 논리 이름으로 데이터소스 레지스트리에 등록
        datasources.register(settings.DATASOURCE_NAME, engine)
        logger.info("Registered connection pool as [%s]", settings.DATASOURCE_NAME)

    except Exception:
        logger.exception("Application startup failed")
        raise

    yield  # 애플리케이션 실행

    logger.info("Shutting down %s...", settings.APP_NAME)
    datasources.unregister(settings.DATASOURCE_NAME)
    # 데이터베이스 연결 풀 종료
    await engine.dispose()
    logger.info("Database connection pool disposed.")


# -- FastAPI 애플리케이션 인스턴스 생성 --
app = FastAPI(
    title=settings.APP_NAME,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
    docs_url="/docs",       # Swagger UI (Interactive API documentation)
    redoc_url="/redoc",     # ReDoc (Alternative API documentation)
    lifespan=lifespan       # 위에서 정의한 수명 주기 이벤트 핸들러를 등록합니다.
)


# -- CORS (Cross-Origin Resource Sharing) 미들웨어 설정 --
# 프로덕션에서는 CORS_ORIGINS를 실제 프론트엔드 도메인으로 제한해야 합니다.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# -- 도메인 라우터 포함 --
app.include_router(org_router, prefix=settings.API_PREFIX)
app.include_router(diag_router, prefix=settings.API_PREFIX)


# -- 루트 엔드포인트 --
@app.get("/", summary="API Root", response_description="Welcome message and documentation link.")
async def read_root():
    """
    API의 루트 엔드포인트입니다.
    API의 시작점을 알리고 문서 링크를 제공합니다.
    """
    return {"message": f"Welcome to {settings.APP_NAME}. Visit /docs for interactive API documentation."}


# -- 헬스 체크 엔드포인트 --
# 애플리케이션과 데이터베이스의 연결 상태를 확인하는 엔드포인트입니다.
@app.get("/health-check", summary="Health Check", response_description="Status of the application and database connection.")
async def health_check(session: AsyncSession = Depends(get_session)):
    try:
        # select(1)은 가장 가볍고 안전한 확인 쿼리입니다.
        result = await session.exec(select(1))
        if result.first():
            return {"status": "ok", "database_connection": "successful"}
    except Exception as e:
        logger.exception("Database health check failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Database connection error during health check: {e}"
        ) from e

    raise HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Database health check failed: No result from test query"
    )


# -- Uvicorn 서버 직접 실행 (개발용) --
if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=settings.DEBUG_MODE, log_level=settings.LOG_LEVEL.lower())
