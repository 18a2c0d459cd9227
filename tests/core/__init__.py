# tests/core/__init__.py

"""
app.core 구성 요소(범용 DAO, 이름 있는 쿼리, 데이터소스 레지스트리, 세션)의 테스트 패키지입니다.
"""

__all__ = []
