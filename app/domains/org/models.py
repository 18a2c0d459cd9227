# app/domains/org/models.py

"""
'org' 도메인의 데이터베이스 ORM 모델을 정의하는 모듈입니다.
"""

from typing import Optional
from sqlmodel import Field, SQLModel, select

from app.core.named_queries import named_query


# =============================================================================
# 1. department 테이블 모델
# =============================================================================
class DepartmentBase(SQLModel):
    """
    department 테이블의 기본 속성을 정의하는 SQLModel Base 클래스입니다.
    """
    deptno: str = Field(primary_key=True, description="부서 번호 (식별자, 변경 불가)")
    deptname: Optional[str] = Field(default=None, description="부서명")
    location: Optional[str] = Field(default=None, description="위치")


@named_query("Department.findAll", lambda: select(Department))
class Department(DepartmentBase, table=True):
    """
    department 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    """
    __tablename__ = "department"
