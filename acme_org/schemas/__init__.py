"""스키마 패키지 — Pydantic 입력 레코드.

Schema package — Pydantic input records.
"""
