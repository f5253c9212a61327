"""
로깅 설정 유틸리티
"""
import logging
import sys
from typing import Optional

from config.settings import get_config

_HANDLER_NAME = "crypto_blog"


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """
    루트 로거에 콘솔 핸들러 설정

    Streamlit은 매 상호작용마다 스크립트를 다시 실행하므로
    핸들러는 한 번만 추가합니다.
    """
    log_config = get_config("log")
    level_name = (level or log_config.get("level", "INFO")).upper()

    root = logging.getLogger()
    root.setLevel(getattr(logging, level_name, logging.INFO))

    if not any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(
            log_config.get("format"),
            datefmt=log_config.get("datefmt"),
        ))
        root.addHandler(handler)

    return root
