# tests/core/test_registries.py

"""
이름 있는 쿼리 레지스트리와 데이터소스 레지스트리에 대한 단위 테스트 모듈입니다.
"""

import pytest
from sqlalchemy.ext.asyncio import create_async_engine
from sqlmodel import select

from app.core.datasource import DataSourceLookupError, DataSourceRegistry
from app.core.named_queries import (
    NamedQueryNotFoundError,
    get_named_query,
    query_name_for,
    register_named_query,
)
from app.domains.org.models import Department


# =============================================================================
# 1. 이름 있는 쿼리 (named query)
# =============================================================================
def test_department_declares_find_all():
    query = get_named_query("Department.findAll")

    assert "FROM department" in str(query)


def test_query_name_for_uses_class_name():
    assert query_name_for(Department, "findAll") == "Department.findAll"


def test_register_and_resolve_named_query():
    register_named_query("Department.findEngineering", lambda: select(Department).where(Department.deptname == "Engineering"))

    query = get_named_query("Department.findEngineering")

    assert "WHERE department.deptname" in str(query)


def test_unknown_named_query_raises():
    with pytest.raises(NamedQueryNotFoundError) as exc_info:
        get_named_query("Nothing.findAll")

    assert exc_info.value.name == "Nothing.findAll"
    assert isinstance(exc_info.value, LookupError)


# =============================================================================
# 2. 데이터소스 레지스트리
# =============================================================================
@pytest.mark.asyncio
async def test_datasource_register_lookup_unregister():
    engine = create_async_engine("sqlite+aiosqlite://")
    registry = DataSourceRegistry()

    registry.register("jdbc/sample", engine)
    assert "jdbc/sample" in registry
    assert registry.lookup("jdbc/sample") is engine
    assert list(registry) == ["jdbc/sample"]

    registry.unregister("jdbc/sample")
    assert "jdbc/sample" not in registry
    await engine.dispose()


def test_datasource_lookup_unknown_name():
    registry = DataSourceRegistry()

    with pytest.raises(DataSourceLookupError, match=r"\[jdbc/other\]"):
        registry.lookup("jdbc/other")

    # 없는 이름의 등록 해제는 오류가 아닙니다.
    registry.unregister("jdbc/other")
