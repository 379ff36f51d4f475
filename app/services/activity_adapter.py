"""활동 생성기 응답을 Activity 목록으로 변환하는 경계 모듈.

생성기 응답은 신뢰할 수 없으므로 결과를 `AdaptationSuccess` 또는
`InvalidExternalResponse` 중 하나로 돌려줍니다. 응답에 `activities` 목록이 없으면
빈 일정으로 취급하지 않고 반드시 실패로 보고합니다.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Literal, Union

from pydantic import ValidationError

from app.core.logger import get_logger
from app.schemas.generate import GeneratedActivity
from app.schemas.timeline import Activity

logger = get_logger(__name__)

ACTIVITIES_FIELD = "activities"


class InvalidExternalResponseError(ValueError):
    """`AdaptationResult.unwrap()`가 실패 결과에서 발생시키는 예외."""


@dataclass(frozen=True, slots=True)
class AdaptationSuccess:
    """변환 성공 결과."""

    activities: list[Activity] = field(default_factory=list)
    kind: Literal["success"] = "success"

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> list[Activity]:
        return list(self.activities)


@dataclass(frozen=True, slots=True)
class InvalidExternalResponse:
    """생성기 응답 형식이 잘못되어 변환하지 못한 결과."""

    reason: str
    kind: Literal["invalid_external_response"] = "invalid_external_response"

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> list[Activity]:
        raise InvalidExternalResponseError(self.reason)


AdaptationResult = Union[AdaptationSuccess, InvalidExternalResponse]


def _default_activity_id(day_number: int | None, index: int) -> str:
    return f"day{day_number or 0}-activity{index}"


def _to_activity(item: GeneratedActivity, day_number: int | None, index: int) -> Activity:
    """필드 이름만 바꿔 Activity를 만듭니다."""
    return Activity(
        id=item.id or _default_activity_id(day_number, index),
        name=item.title,
        description=item.description,
        start_time=item.time,
        duration_minutes=item.duration,
        category=item.type,
        icon=item.icon,
        estimated_cost=item.cost,
        location=item.location,
    )


def adapt_generated_activities(raw: Any, day_number: int | None = None) -> AdaptationResult:
    """생성기 응답 본문을 Activity 목록으로 변환합니다.

    Args:
        raw: 생성기 응답 본문 (`{"activities": [...]}` 형태를 기대).
        day_number: id가 없는 활동에 붙일 기본 id의 일차.

    Returns:
        `AdaptationSuccess` 또는 `InvalidExternalResponse`.
    """
    if not isinstance(raw, Mapping):
        return InvalidExternalResponse(reason="생성기 응답이 JSON 객체가 아닙니다.")
    if ACTIVITIES_FIELD not in raw:
        return InvalidExternalResponse(reason="생성기 응답에 activities 필드가 없습니다.")

    items = raw[ACTIVITIES_FIELD]
    if not isinstance(items, list):
        return InvalidExternalResponse(reason="생성기 응답의 activities 필드가 목록이 아닙니다.")

    activities: list[Activity] = []
    for index, item in enumerate(items, start=1):
        if not isinstance(item, Mapping):
            return InvalidExternalResponse(reason=f"{index}번째 활동이 JSON 객체가 아닙니다.")
        try:
            generated = GeneratedActivity.model_validate(dict(item))
        except ValidationError as exc:
            logger.warning("생성 활동 검증 실패: index=%d errors=%s", index, exc.errors())
            return InvalidExternalResponse(reason=f"{index}번째 활동 형식이 올바르지 않습니다.")
        activities.append(_to_activity(generated, day_number, index))

    return AdaptationSuccess(activities=activities)
