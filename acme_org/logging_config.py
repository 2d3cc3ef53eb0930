"""로깅 설정 모듈.

Logging configuration module.
Attaches a single stdout handler to the root logger; calling
setup_logging again only adjusts the level.
"""

import logging
import sys

from acme_org.config import settings

_HANDLER_NAME = "acme_org"
_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_LOG_LEVEL_MAP: dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def setup_logging(level: str | None = None) -> logging.Handler:
    """루트 로거에 콘솔 핸들러를 설정합니다.

    Configure the root logger with a stdout handler.

    Args:
        level: 로그 레벨 문자열 (Level name such as "DEBUG"; defaults to settings.LOG_LEVEL)

    Returns:
        logging.Handler: 설치된 핸들러 (The handler owned by this package)
    """
    log_level = _LOG_LEVEL_MAP.get((level or settings.LOG_LEVEL).upper(), logging.INFO)
    root_logger = logging.getLogger()

    handler = next((h for h in root_logger.handlers if h.get_name() == _HANDLER_NAME), None)
    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        root_logger.addHandler(handler)

    handler.setLevel(log_level)
    root_logger.setLevel(log_level)
    return handler
