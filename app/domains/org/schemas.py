# app/domains/org/schemas.py

"""
'org' 도메인 (부서 관리)의 API 데이터 전송 객체(DTO)를 정의하는 모듈입니다.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from . import models as org_models


# =============================================================================
# 1. 부서 (Department) 스키마
# =============================================================================
class DepartmentRead(BaseModel):
    """
    부서 조회 응답 스키마입니다. JSON 키는 deptNo, name, location 이며
    라우터는 response_model_exclude_none=True로 값이 없는 필드를 생략합니다.
    """
    model_config = ConfigDict(populate_by_name=True)

    deptno: Optional[str] = Field(default=None, alias="deptNo")
    deptname: Optional[str] = Field(default=None, alias="name")
    location: Optional[str] = None

    @classmethod
    def from_entity(cls, dept: org_models.Department) -> "DepartmentRead":
        return cls(deptNo=dept.deptno, name=dept.deptname, location=dept.location)
