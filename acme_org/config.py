"""패키지 환경 설정 모듈.

Package configuration module using pydantic-settings.
All settings can be overridden via environment variables or a .env file.
Unrelated keys in the .env file are ignored.
"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# .env 파일 절대 경로 — CWD와 무관하게 항상 프로젝트 루트의 .env를 참조
# Absolute path to .env file — ensures correct loading regardless of CWD
_ENV_FILE: Path = Path(__file__).resolve().parent.parent / ".env"


class Settings(BaseSettings):
    """패키지 전역 설정 — 환경 변수 기반 구성.

    Global package settings loaded from environment variables.

    Attributes:
        LOG_LEVEL: 로그 레벨 (Root log level used by setup_logging)
    """

    # 로깅 — Logging
    LOG_LEVEL: str = "INFO"

    # 다른 애플리케이션의 .env 키는 무시 (Keys owned by other applications are ignored)
    model_config = SettingsConfigDict(env_file=_ENV_FILE, env_file_encoding="utf-8", extra="ignore")


# 전역 설정 싱글턴 인스턴스 — Global settings singleton instance
settings: Settings = Settings()
