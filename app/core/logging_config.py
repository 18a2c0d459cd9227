# app/core/logging_config.py

"""
애플리케이션 로깅 설정 모듈입니다.

각 모듈은 `logging.getLogger(__name__)`으로 로거를 만들고,
이 모듈의 `setup_logging()`이 'app' 로거에 핸들러와 포맷을 한 번만 설정합니다.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# 중복 핸들러 등록 방지 플래그
_configured = False


def setup_logging(level: str = "INFO") -> logging.Logger:
    """
    'app' 로거에 표준 출력 핸들러를 설정하고 로거를 반환합니다.
    여러 번 호출되어도 핸들러는 한 번만 추가되며, 레벨만 갱신됩니다.
    """
    global _configured
    app_logger = logging.getLogger("app")
    app_logger.setLevel(level.upper())

    if not _configured:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        app_logger.addHandler(handler)
        _configured = True

    return app_logger
