# app/core/dependencies.py

"""
FastAPI 애플리케이션의 의존성 주입(Dependency Injection)을 정의하는 모듈입니다.

- 데이터베이스 세션: 라우터는 app.core.database.get_session을 직접 사용합니다.
- 진단용 데이터소스 레지스트리 제공 (get_datasources).
"""

from app.core.config import settings
from app.core.datasource import DataSourceRegistry, datasources


# --- 데이터소스 레지스트리 의존성 주입 ---
def get_datasources() -> DataSourceRegistry:
    """시작 시 채워진 전역 데이터소스 레지스트리를 반환합니다. 테스트에서 오버라이드할 수 있습니다."""
    return datasources


def get_datasource_name() -> str:
    """진단 엔드포인트가 조회할 커넥션 풀의 논리 이름입니다."""
    return settings.DATASOURCE_NAME
