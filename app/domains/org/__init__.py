# app/domains/org/__init__.py

"""
FastAPI 애플리케이션의 'org' 도메인 패키지입니다.

'org' 도메인은 부서(Department) 엔티티 하나를 관리합니다.

주요 서브모듈:
- `models.py`: department 테이블에 매핑되는 SQLModel 정의와 이름 있는 쿼리.
- `schemas.py`: 부서 JSON 표현 (null 필드는 생략).
- `crud.py`: 범용 DAO(CRUDBase)를 부서 엔티티에 바인딩한 CRUD 객체.
- `routers.py`: /departments API 엔드포인트 정의.
"""

__title__ = "Department Domain"
__description__ = "Manages department records."
__version__ = "0.1.0"
__all__ = []
