# tests/__init__.py

"""
FastAPI 애플리케이션의 테스트 스위트 패키지입니다.

테스트 코드는 `pytest`와 `pytest-asyncio`를 기반으로 작성되며, 애플리케이션 구조를 따라 나뉩니다.

- `core/`: 범용 DAO, 이름 있는 쿼리, 데이터소스 레지스트리, 트랜잭션 세션 테스트.
- `domains/`: 각 도메인(org, diag)의 API 엔드포인트 통합 테스트.
- `conftest.py`: 테스트 DB, 세션, 비동기 테스트 클라이언트 픽스처.
"""

__title__ = "Department Service Tests"
__version__ = "0.1.0"
__all__ = []
