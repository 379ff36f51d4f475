"""타임라인 편집 함수 모음.

모든 함수는 입력 타임라인을 변경하지 않고 새 값을 반환합니다. 아무것도 바꿀 것이
없는 경우(일정이 비어 있음, 대상 일차 없음, 상한 미지정)는 오류가 아니라 입력을
그대로 돌려줍니다.
"""

from __future__ import annotations

from typing import Iterable

from app.schemas.timeline import Activity, Day, DayOverride, PacingConfig, Timeline


def compute_total_cost(activities: Iterable[Activity]) -> float:
    """활동 목록의 비용 합계를 계산합니다. 비용이 없거나 음수이면 0으로 봅니다."""
    return sum(max(0.0, activity.estimated_cost or 0.0) for activity in activities)


def compute_timeline_total_cost(timeline: Timeline) -> float:
    """여행 전체 비용(일자별 total_cost 합계)을 계산합니다."""
    return sum(day.total_cost for day in timeline.days)


def _rebuild_day(day: Day, activities: Iterable[Activity]) -> Day:
    copied = [activity.model_copy(deep=True) for activity in activities]
    return day.model_copy(update={"activities": copied, "total_cost": compute_total_cost(copied)}, deep=True)


def apply_pacing(timeline: Timeline, config: PacingConfig) -> Timeline:
    """하루 활동 수를 `activities_per_day` 이하로 자릅니다.

    앞에서부터 `activities_per_day`개만 남기므로 뒤쪽에 배치된 식사/숙소도 잘릴 수 있습니다.
    """
    limit = config.activities_per_day
    if not timeline.days or limit is None:
        return timeline

    days = [_rebuild_day(day, day.activities[:limit]) for day in timeline.days]
    return timeline.model_copy(update={"days": days}, deep=True)


def find_day(timeline: Timeline, day_number: int) -> Day | None:
    """day_number에 해당하는 Day를 찾습니다."""
    for day in timeline.days:
        if day.day_number == day_number:
            return day
    return None


def apply_day_override(override: DayOverride, timeline: Timeline) -> Timeline:
    """`modified_day` 일차의 활동을 `override_activities`로 교체합니다."""
    if not timeline.days or find_day(timeline, override.modified_day) is None:
        return timeline

    days = [
        _rebuild_day(day, override.override_activities)
        if day.day_number == override.modified_day
        else day.model_copy(deep=True)
        for day in timeline.days
    ]
    return timeline.model_copy(update={"days": days}, deep=True)


def build_diff_key(day_number: int, activity_index: int) -> str:
    """변경된 활동 식별 키를 생성합니다."""
    return f"day{day_number}_activity{activity_index}"
