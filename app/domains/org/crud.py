# app/domains/org/crud.py

"""
'org' 도메인의 CRUD 작업을 담당하는 모듈입니다.
"""

from app.core.crud_base import CRUDBase
from . import models as org_models


# =============================================================================
# 1. department 테이블 CRUD
# =============================================================================
class CRUDDepartment(CRUDBase[org_models.Department]):
    def __init__(self):
        super().__init__(model=org_models.Department)


department = CRUDDepartment()
