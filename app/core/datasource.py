# app/core/datasource.py

"""
논리 이름으로 커넥션 풀(AsyncEngine)을 찾는 데이터소스 레지스트리 모듈입니다.

애플리케이션 시작 시(lifespan) 엔진을 설정된 이름(settings.DATASOURCE_NAME)으로 등록하고,
진단 엔드포인트는 의존성 주입으로 레지스트리를 받아 이름으로 조회합니다.
"""

from typing import Dict, Iterator

from sqlalchemy.ext.asyncio import AsyncEngine


class DataSourceLookupError(LookupError):
    """등록되지 않은 이름으로 데이터소스를 조회했을 때 발생합니다."""

    def __init__(self, name: str):
        super().__init__(f"Name [{name}] is not bound to a connection pool")
        self.name = name


class DataSourceRegistry:
    """이름 -> AsyncEngine 매핑을 보관합니다."""

    def __init__(self) -> None:
        self._engines: Dict[str, AsyncEngine] = {}

    def register(self, name: str, engine: AsyncEngine) -> None:
        self._engines[name] = engine

    def unregister(self, name: str) -> None:
        self._engines.pop(name, None)

    def lookup(self, name: str) -> AsyncEngine:
        try:
            return self._engines[name]
        except KeyError:
            raise DataSourceLookupError(name) from None

    def __contains__(self, name: object) -> bool:
        return name in self._engines

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._engines))


# 애플리케이션 전역 레지스트리 (main.py의 lifespan에서 채워집니다)
datasources = DataSourceRegistry()
