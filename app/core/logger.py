"""표준화된 로거 모듈.

서비스 전체에서 `[시각] 레벨 [로거명] 메시지` 형식의 로그를 남깁니다.
"""

import logging
import os
import sys

_LOG_FORMAT = "[%(asctime)s] %(levelname)s [%(name)s] %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _default_level() -> int:
    """`LOG_LEVEL` 환경변수를 logging 레벨로 변환합니다. 알 수 없는 값은 INFO입니다."""
    level = logging.getLevelName(os.getenv("LOG_LEVEL", "INFO").upper())
    return level if isinstance(level, int) else logging.INFO


def get_logger(name: str) -> logging.Logger:
    """표준화된 로거를 반환합니다.

    Args:
        name: 로거 이름 (일반적으로 __name__ 사용).

    Returns:
        설정된 로거 인스턴스.
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        level = _default_level()
        logger.setLevel(level)

        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_DATE_FORMAT))
        logger.addHandler(handler)

    return logger
