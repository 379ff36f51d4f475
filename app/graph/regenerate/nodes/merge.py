"""재생성된 활동을 타임라인에 병합하는 노드."""

from __future__ import annotations

from pydantic import ValidationError

from app.core.logger import get_logger
from app.graph.regenerate.state import RegenerateState
from app.schemas.enums import EditStatus
from app.schemas.timeline import DayOverride, Timeline
from app.services.timeline_editor import apply_day_override

logger = get_logger(__name__)


def merge_day(state: RegenerateState) -> RegenerateState:
    """대상 일차의 활동을 교체하고 나머지 일차는 그대로 둡니다."""
    day_number = state.get("day_number")
    try:
        timeline = Timeline.model_validate(state.get("timeline") or {})
        override = DayOverride.model_validate(
            {"modifiedDay": day_number, "overrideActivities": state.get("override_activities", [])}
        )
    except ValidationError as exc:
        logger.error("병합 입력 검증 실패: %s", exc)
        return {**state, "error": "병합할 타임라인 형식이 올바르지 않습니다."}

    merged = apply_day_override(override, timeline)
    if merged is timeline:
        logger.info("재생성 대상 일차가 없어 타임라인을 유지합니다: day=%s", day_number)
        return {
            **state,
            "modified_timeline": timeline.model_dump(by_alias=True, mode="json"),
            "status": EditStatus.NO_CHANGE,
            "change_summary": f"{day_number}일차가 일정에 없어 변경하지 않았습니다.",
        }

    return {
        **state,
        "modified_timeline": merged.model_dump(by_alias=True, mode="json"),
        "status": EditStatus.SUCCESS,
    }
