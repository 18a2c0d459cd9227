# app/core/__init__.py

"""
FastAPI 애플리케이션의 핵심 구성 요소 패키지입니다.

주요 서브모듈은 다음과 같습니다:

- `config.py`: 애플리케이션의 설정 및 환경 변수 관리 (Pydantic Settings).
- `logging_config.py`: 'app' 로거 설정.
- `database.py`: 데이터베이스 연결, 트랜잭션 세션 관리 (SQLModel 및 AsyncSQLAlchemy).
- `datasource.py`: 논리 이름으로 커넥션 풀을 찾는 데이터소스 레지스트리.
- `named_queries.py`: 모델에 선언되는 이름 있는 쿼리 레지스트리.
- `crud_base.py`: 엔티티 타입으로 매개변수화된 범용 DAO.
- `dependencies.py`: FastAPI의 의존성 주입 시스템에서 사용될 공통 의존성 함수들.
"""

# 패키지 메타데이터 (선택 사항)
__title__ = "Department Service Core"
__description__ = "Core components for the department FastAPI application."
__version__ = "0.1.0"  # core 패키지의 버전
__all__ = []  # 'from app.core import *' 시 내보낼 이름 목록. 일반적으로 비워둡니다.
