# tests/test_init_db.py

"""
scripts/init_db.py 초기화 스크립트에 대한 테스트 모듈입니다.
"""

import pytest
import typer
from typer.testing import CliRunner

from scripts import init_db


def test_parse_department_full_spec():
    dept = init_db.parse_department("D1:Engineering:Building 3")

    assert (dept.deptno, dept.deptname, dept.location) == ("D1", "Engineering", "Building 3")


def test_parse_department_partial_spec():
    dept = init_db.parse_department("D2")
    assert (dept.deptno, dept.deptname, dept.location) == ("D2", None, None)

    dept = init_db.parse_department("D3::Annex")
    assert (dept.deptno, dept.deptname, dept.location) == ("D3", None, "Annex")


def test_parse_department_requires_deptno():
    with pytest.raises(typer.BadParameter):
        init_db.parse_department(":Nameless")


@pytest.mark.asyncio
async def test_init_database_skips_existing(department_factory, fetch_department):
    await department_factory("D1", "Engineering")

    created = await init_db.init_database(
        reset=False,
        departments=[init_db.parse_department("D1:Other"), init_db.parse_department("D2:Sales:HQ")],
    )

    assert created == 1
    assert (await fetch_department("D1")).deptname == "Engineering"
    assert (await fetch_department("D2")).location == "HQ"


def test_cli_rejects_bad_department():
    result = CliRunner().invoke(init_db.cli, ["--department", ":NoId"])

    assert result.exit_code != 0
