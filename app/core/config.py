# app/core/config.py

from typing import Any, List
from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict
import os

# 프로젝트의 루트 디렉토리 경로를 계산합니다.
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


class Settings(BaseSettings):
    """
    애플리케이션의 모든 설정을 정의하는 Pydantic BaseSettings 모델입니다.
    환경 변수 및 .env 파일에서 값을 자동으로 로드합니다.
    """

    # --- Pydantic Settings 설정 ---
    model_config = SettingsConfigDict(
        env_file=os.path.join(BASE_DIR, '.env'),  # 프로젝트 루트의 .env 파일을 명시적으로 지정
        env_file_encoding='utf-8',           # .env 파일 인코딩
        extra='ignore',                      # .env 파일에 정의되었지만 모델에 없는 변수는 무시
        case_sensitive=True                  # 환경 변수 이름 대소문자 구분
    )

    # --- 애플리케이션 기본 설정 ---
    APP_NAME: str = "Department Service API"
    APP_VERSION: str = "0.1.0"
    APP_DESCRIPTION: str = "Department CRUD service with database diagnostics"
    # 애플리케이션 환경 (예: "development", "production", "testing")
    APP_ENV: str = Field("development", description="Application environment (e.g., development, production, testing)")
    # 디버그 모드 활성화 여부 (SQL 쿼리 출력)
    DEBUG_MODE: bool = Field(False, description="Enable debug mode for detailed logging and SQL echo")
    # API 라우트의 공통 접두사. 기본값은 루트('/')입니다.
    API_PREFIX: str = Field("", description="Common prefix for every API route")

    # --- 데이터베이스 설정 ---
    DATABASE_URL: SecretStr = Field(
        SecretStr("sqlite+aiosqlite:///" + os.path.join(BASE_DIR, "data", "departments.db")),
        description="Async SQLAlchemy database URL (postgresql+asyncpg://... in production)"
    )
    # 진단 엔드포인트가 조회하는 커넥션 풀의 논리 이름
    DATASOURCE_NAME: str = Field("jdbc/sample", description="Logical name of the application connection pool")
    DB_CREATE_TABLES: bool = Field(True, description="Create missing tables at startup (development only)")
    DB_POOL_SIZE: int = Field(10, description="Number of pooled connections kept open")
    DB_MAX_OVERFLOW: int = Field(20, description="Connections allowed beyond DB_POOL_SIZE")
    DB_POOL_RECYCLE: int = Field(3600, description="Seconds after which a pooled connection is recycled")

    # --- 로깅 설정 ---
    LOG_LEVEL: str = Field("INFO", description="Log level for the 'app' logger")

    # --- CORS 설정 ---
    CORS_ORIGINS: List[str] = Field(default_factory=lambda: ["*"], description="Allowed CORS origins")

    # Post-initialization validation (Pydantic v2 BaseSettings)
    def model_post_init(self, __context: Any) -> None:  # noqa: ANN001
        # 개발 환경에서 기본 SQLite 경로를 사용하는 경우 data 디렉토리를 미리 만들어 둡니다.
        url = self.DATABASE_URL.get_secret_value()
        if self.APP_ENV == "development" and url.startswith("sqlite") and BASE_DIR in url:
            os.makedirs(os.path.join(BASE_DIR, "data"), exist_ok=True)


settings = Settings()
