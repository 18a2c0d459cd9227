# scripts/init_db.py

import asyncio
from typing import List, Optional

import typer

from app.core.database import create_db_and_tables, drop_db_and_tables, engine, get_async_session_context
from app.core.logging_config import setup_logging
from app.domains.org import crud as org_crud
from app.domains.org import models as org_models

cli = typer.Typer()


def parse_department(spec: str) -> org_models.Department:
    """
    'deptno:name:location' 형식의 문자열을 Department 객체로 변환합니다.
    name, location은 생략할 수 있습니다 (예: 'D1', 'D1:Engineering').
    """
    parts = spec.split(":", 2)
    if not parts[0]:
        raise typer.BadParameter(f"deptno is required: '{spec}'")
    parts += [None] * (3 - len(parts))
    deptno, name, location = (p or None for p in parts)
    return org_models.Department(deptno=deptno, deptname=name, location=location)


async def init_database(reset: bool, departments: List[org_models.Department]) -> int:
    """
    테이블을 생성하고 주어진 부서를 추가합니다. 이미 있는 부서는 건너뜁니다.
    추가된 부서 수를 반환합니다.
    """
    if reset:
        await drop_db_and_tables()
    await create_db_and_tables()

    created = 0
    async with get_async_session_context() as db:
        for dept in departments:
            if await org_crud.department.get(db, dept.deptno) is not None:
                print(f"건너뜀: 이미 존재하는 부서입니다: {dept.deptno}")
                continue
            await org_crud.department.create(db, obj=dept)
            created += 1
    await engine.dispose()
    return created


@cli.command()
def main(
    department: Optional[List[str]] = typer.Option(
        None, '--department', '-d',
        help="추가할 부서 'deptno:name:location' (여러 번 지정 가능)."
    ),
    reset: bool = typer.Option(
        False, '--reset',
        help="기존 테이블을 삭제하고 다시 생성합니다."
    ),
):
    """
    부서 서비스 데이터베이스 테이블을 만들고 초기 부서 데이터를 추가합니다.
    """
    setup_logging()
    departments = [parse_department(spec) for spec in department or []]
    created = asyncio.run(init_database(reset, departments))
    print(f"데이터베이스 초기화 완료: 부서 {created}개 추가")


if __name__ == "__main__":
    cli()
