"""재생성 결과 요약 노드."""

from __future__ import annotations

from app.graph.regenerate.state import RegenerateState
from app.schemas.enums import EditStatus
from app.schemas.timeline import Timeline
from app.services.timeline_editor import build_diff_key, compute_timeline_total_cost, find_day


def summarize(state: RegenerateState) -> RegenerateState:
    """변경 키, 변경 요약, 여행 전체 비용을 계산합니다."""
    timeline = Timeline.model_validate(state.get("modified_timeline") or {})
    total_cost = compute_timeline_total_cost(timeline)

    if state.get("status") != EditStatus.SUCCESS:
        return {**state, "diff_keys": [], "total_cost": total_cost}

    day_number = state.get("day_number")
    day = find_day(timeline, day_number)
    activities = day.activities if day else []
    diff_keys = [build_diff_key(day_number, index) for index in range(1, len(activities) + 1)]

    return {
        **state,
        "diff_keys": diff_keys,
        "total_cost": total_cost,
        "change_summary": (
            f"{day_number}일차 일정을 {len(activities)}개 활동으로 새로 구성했어요. "
            f"하루 예상 비용은 {day.total_cost if day else 0:,.0f}입니다."
        ),
    }
