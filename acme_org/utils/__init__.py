"""유틸리티 패키지 — 공용 예외.

Utility package — Shared exceptions.
"""
