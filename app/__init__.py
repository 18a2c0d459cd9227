# app/__init__.py

"""
부서(Department) 관리 FastAPI 애플리케이션의 메인 패키지입니다.

FastAPI 애플리케이션의 진입점 (main.py)과
공통 설정, 데이터베이스 연결, 범용 DAO를 담는 core 서브패키지,
그리고 각 기능 영역(org: 부서, diag: DB 진단)을 대표하는 domains 서브패키지로 구성됩니다.
"""

APP_NAME = "Department Service API"
APP_VERSION = "0.1.0"

# PEP 440 (Version Identification and Dependency Specification)을 따르는 버전 정보
__version__ = APP_VERSION
__title__ = APP_NAME
__description__ = "Department CRUD service backend."
__license__ = "MIT"
__all__ = []
