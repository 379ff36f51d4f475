"""Uvicorn 기본 포맷을 기반으로 한 프로세스 로깅 설정."""

from __future__ import annotations

import copy
import logging.config
import os
from typing import Any

from uvicorn.config import LOGGING_CONFIG as UVICORN_LOGGING_CONFIG

_UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def _resolve_log_level(level: str | None = None) -> str:
    if level:
        return level.upper()
    return os.getenv("LOG_LEVEL", "INFO").upper()


def build_logging_config(level: str | None = None) -> dict[str, Any]:
    """루트 로거까지 uvicorn `default` 핸들러를 쓰도록 설정 딕셔너리를 만듭니다."""
    log_level = _resolve_log_level(level)
    config = copy.deepcopy(UVICORN_LOGGING_CONFIG)

    config["root"] = {"handlers": ["default"], "level": log_level}
    for name in _UVICORN_LOGGERS:
        config["loggers"][name]["level"] = log_level

    return config


def configure_logging(level: str | None = None) -> None:
    logging.config.dictConfig(build_logging_config(level))
