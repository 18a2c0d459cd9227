# tests/domains/__init__.py

"""
도메인별(org: 부서, diag: DB 진단) API 엔드포인트 통합 테스트 패키지입니다.
"""

__all__ = []
