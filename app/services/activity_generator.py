"""활동 생성기 서비스.

테마/지역/일차를 받아 원본 활동 목록(`{"activities": [...]}`)을 돌려줍니다.
응답 본문의 형식 검증은 `app.services.activity_adapter`가 담당합니다.
"""

from __future__ import annotations

import asyncio
import json
from abc import ABC, abstractmethod
from functools import lru_cache
from typing import Any

import requests
from langchain_core.prompts import ChatPromptTemplate

from app.core.config import get_settings
from app.core.logger import get_logger
from app.core.timeout_policy import get_timeout_policy, to_requests_timeout
from app.graph.regenerate.llm import get_llm
from app.graph.regenerate.utils import strip_code_fence
from app.schemas.enums import ActivityCategory, GeneratorBackend
from app.schemas.generate import ActivityGenerationRequest

logger = get_logger(__name__)


class ActivityGenerationError(RuntimeError):
    """활동 생성기 호출 자체가 실패했을 때 발생하는 예외."""


class ActivityGeneratorProtocol(ABC):
    """활동 생성기 인터페이스를 정의합니다."""

    @abstractmethod
    async def generate(
        self,
        theme: str,
        region: str,
        prefecture: str | None,
        day_number: int,
    ) -> Any:
        """하루치 활동 후보를 생성합니다.

        Args:
            theme: 여행 테마
            region: 여행 지역
            prefecture: 세부 지역 (없으면 None)
            day_number: 생성 대상 일차

        Returns:
            파싱된 응답 본문 (형식은 보장하지 않음)

        Raises:
            ActivityGenerationError: 호출 실패 또는 JSON이 아닌 응답
        """
        raise NotImplementedError


SYSTEM_PROMPT = """\
당신은 일본 여행 일정을 설계하는 여행 플래너입니다.
주어진 테마와 지역으로 하루 일정을 시간 순서대로 작성하세요.

규칙:
- 활동은 4~6개로 구성하고 점심/저녁 식사를 포함하세요.
- type은 다음 중 하나여야 합니다: {categories}
- time은 24시간제 HH:MM, duration은 분 단위 정수, cost는 엔화 정수입니다.
- id는 "day{day_number}-activity<순번>" 형식입니다.
- 응답은 JSON만 출력하세요.
"""

USER_PROMPT = """\
테마: {theme}
지역: {region}
세부 지역: {prefecture}
일차: {day_number}일차

다음 형식으로 응답하세요:
{{"activities": [{{"id": "...", "title": "...", "time": "09:00", "duration": 90, "cost": 1500,
"type": "experience", "icon": "...", "location": "...", "description": "..."}}]}}
"""


class LlmActivityGenerator(ActivityGeneratorProtocol):
    """OpenAI 채팅 모델 기반 활동 생성기."""

    async def generate(
        self,
        theme: str,
        region: str,
        prefecture: str | None,
        day_number: int,
    ) -> Any:
        prompt = ChatPromptTemplate.from_messages([("system", SYSTEM_PROMPT), ("human", USER_PROMPT)])
        messages = prompt.format_messages(
            categories=", ".join(category.value for category in ActivityCategory),
            theme=theme,
            region=region,
            prefecture=prefecture or "none",
            day_number=day_number,
        )

        try:
            response = await get_llm().ainvoke(messages)
        except Exception as exc:
            logger.error("활동 생성 LLM 호출 실패: %s", exc)
            raise ActivityGenerationError("활동 생성 LLM 호출에 실패했습니다.") from exc

        content = strip_code_fence(response.content)
        try:
            return json.loads(content)
        except json.JSONDecodeError as exc:
            logger.warning("활동 생성 LLM 응답 파싱 실패: %s", content[:200])
            raise ActivityGenerationError("활동 생성 응답이 JSON 형식이 아닙니다.") from exc


class HttpActivityGenerator(ActivityGeneratorProtocol):
    """외부 HTTP 엔드포인트에 활동 생성을 위임하는 생성기."""

    def __init__(self, url: str, timeout_seconds: int = 20, service_secret: str | None = None) -> None:
        if not url:
            raise ActivityGenerationError("ACTIVITY_GENERATOR_URL is not configured.")
        self._url = url
        self._timeout_seconds = timeout_seconds
        self._service_secret = service_secret

    @classmethod
    def from_settings(cls) -> HttpActivityGenerator:
        """애플리케이션 설정으로 생성기 인스턴스를 만듭니다."""
        settings = get_settings()
        timeout_policy = get_timeout_policy(settings)
        return cls(
            url=settings.ACTIVITY_GENERATOR_URL or "",
            timeout_seconds=timeout_policy.activity_generator_timeout_seconds,
            service_secret=settings.SERVICE_SECRET,
        )

    async def generate(
        self,
        theme: str,
        region: str,
        prefecture: str | None,
        day_number: int,
    ) -> Any:
        payload = ActivityGenerationRequest(
            theme=theme,
            region=region,
            prefecture=prefecture,
            day_number=day_number,
        ).model_dump(by_alias=True)
        headers = {"Content-Type": "application/json"}
        if self._service_secret:
            headers["x-service-secret"] = self._service_secret
        request_timeout = to_requests_timeout(self._timeout_seconds)

        def _send() -> requests.Response:
            return requests.post(self._url, json=payload, headers=headers, timeout=request_timeout)

        try:
            response = await asyncio.to_thread(_send)
            response.raise_for_status()
            return response.json()
        except requests.HTTPError as exc:
            response = exc.response
            status_code = response.status_code if response is not None else None
            body = (response.text or "")[:200] if response is not None else ""
            logger.error("Activity generator API error: status=%s body=%s", status_code, body)
            raise ActivityGenerationError(f"활동 생성기 응답 오류 (status={status_code})") from exc
        except requests.JSONDecodeError as exc:
            logger.error("Activity generator response parse failed: %s", exc)
            raise ActivityGenerationError("활동 생성 응답이 JSON 형식이 아닙니다.") from exc
        except requests.RequestException as exc:
            logger.error("Activity generator request failed: %s", exc)
            raise ActivityGenerationError("활동 생성기 호출에 실패했습니다.") from exc


@lru_cache(maxsize=1)
def get_activity_generator() -> ActivityGeneratorProtocol:
    """설정된 백엔드의 활동 생성기를 프로세스 단위로 재사용합니다."""
    settings = get_settings()
    if settings.ACTIVITY_GENERATOR_BACKEND == GeneratorBackend.HTTP:
        return HttpActivityGenerator.from_settings()
    return LlmActivityGenerator()
