# app/domains/__init__.py

"""
비즈니스 도메인 서브패키지 모음입니다.

- `lab/`: 실험실(Laboratory) 등록, 조회, 수정, 삭제 및 검색.
"""
