# app/domains/diag/__init__.py

"""
FastAPI 애플리케이션의 'diag' 도메인 패키지입니다.

'diag' 도메인은 애플리케이션 커넥션 풀의 드라이버/서버 메타데이터를
운영 확인용으로 보고합니다. 저장되는 엔티티는 없습니다.

주요 서브모듈:
- `services.py`: 데이터소스 조회 및 연결 메타데이터 수집 로직.
- `routers.py`: /database API 엔드포인트 정의.
"""

__title__ = "Database Diagnostics Domain"
__description__ = "Reports connection, driver and server metadata."
__version__ = "0.1.0"
__all__ = []
