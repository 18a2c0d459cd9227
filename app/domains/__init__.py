# app/domains/__init__.py

"""
기능 영역별 도메인 패키지입니다.

- `org`: 부서(Department) 엔티티의 모델, 스키마, CRUD, API 엔드포인트.
- `diag`: 애플리케이션 커넥션 풀의 DB/드라이버 메타데이터 보고.
"""
