"""생성기 응답 변환 노드."""

from __future__ import annotations

from app.core.logger import get_logger
from app.graph.regenerate.state import RegenerateState
from app.graph.regenerate.utils import collect_activity_warnings
from app.services.activity_adapter import AdaptationSuccess, InvalidExternalResponse, adapt_generated_activities

logger = get_logger(__name__)


def adapt_activities(state: RegenerateState) -> RegenerateState:
    """생성기 응답을 Activity 목록으로 변환합니다. 형식이 잘못되면 오류로 종료합니다."""
    day_number = state.get("day_number")
    result = adapt_generated_activities(state.get("raw_response"), day_number=day_number)

    match result:
        case InvalidExternalResponse(reason=reason):
            logger.warning("생성기 응답 변환 실패: day=%s reason=%s", day_number, reason)
            return {**state, "error": f"생성된 일정 형식이 올바르지 않습니다: {reason}"}
        case AdaptationSuccess(activities=activities):
            warnings = list(state.get("warnings", []))
            warnings.extend(collect_activity_warnings(day_number, activities))
            return {
                **state,
                "override_activities": [activity.model_dump(by_alias=True) for activity in activities],
                "warnings": warnings,
            }
