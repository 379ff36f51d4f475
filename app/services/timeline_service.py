"""타임라인 편집 작업 처리 서비스."""

from __future__ import annotations

import asyncio

from app.core.config import get_settings
from app.core.logger import get_logger
from app.core.timeout_policy import get_timeout_policy
from app.graph.regenerate.workflow import compiled_regenerate_graph
from app.schemas.edit import DayOverrideRequest, PacingRequest, RegenerateDayRequest, TimelineEditResponse
from app.schemas.enums import EditStatus
from app.schemas.timeline import Timeline
from app.services.activity_generator import ActivityGeneratorProtocol
from app.services.timeline_editor import (
    apply_day_override,
    apply_pacing,
    build_diff_key,
    compute_timeline_total_cost,
    find_day,
)

logger = get_logger(__name__)


def _response(status: EditStatus, timeline: Timeline, **kwargs) -> TimelineEditResponse:
    return TimelineEditResponse(
        status=status,
        timeline=timeline,
        total_cost=compute_timeline_total_cost(timeline),
        **kwargs,
    )


def run_pacing(request: PacingRequest) -> TimelineEditResponse:
    """일정 밀도 설정을 적용합니다."""
    result = apply_pacing(request.timeline, request.config)
    if result is request.timeline:
        return _response(EditStatus.NO_CHANGE, result, change_summary="적용할 일정 밀도 설정이 없습니다.")

    limit = request.config.activities_per_day
    diff_keys = [
        build_diff_key(before.day_number, index)
        for before in request.timeline.days
        for index in range(limit + 1, len(before.activities) + 1)
    ]
    logger.info("Pacing applied: limit=%d removed=%d", limit, len(diff_keys))
    return _response(
        EditStatus.SUCCESS,
        result,
        change_summary=f"하루 최대 {limit}개 활동으로 일정을 조정했어요.",
        diff_keys=diff_keys,
    )


def run_day_override(request: DayOverrideRequest) -> TimelineEditResponse:
    """특정 일차의 활동을 교체합니다."""
    override = request.override
    result = apply_day_override(override, request.timeline)
    if result is request.timeline:
        return _response(
            EditStatus.NO_CHANGE,
            result,
            change_summary=f"{override.modified_day}일차가 일정에 없어 변경하지 않았습니다.",
        )

    day = find_day(result, override.modified_day)
    return _response(
        EditStatus.SUCCESS,
        result,
        change_summary=f"{override.modified_day}일차 일정을 교체했어요.",
        diff_keys=[build_diff_key(override.modified_day, index) for index in range(1, len(day.activities) + 1)],
    )


async def run_regenerate_pipeline(
    request: RegenerateDayRequest,
    activity_generator: ActivityGeneratorProtocol | None = None,
) -> TimelineEditResponse:
    """일정 재생성 그래프를 실행하고 결과를 반환합니다.

    실패하면 입력 타임라인을 그대로 담아 REJECTED(또는 시간 초과 시 FAILED)로 응답합니다.
    """
    settings = get_settings()
    timeout_policy = get_timeout_policy(settings)

    initial_state = {
        "timeline": request.timeline.model_dump(by_alias=True, mode="json"),
        "theme": request.theme,
        "region": request.region,
        "prefecture": request.prefecture,
        "day_number": request.day_number,
    }
    config = {"configurable": {"activity_generator": activity_generator}} if activity_generator else None

    try:
        result = await asyncio.wait_for(
            compiled_regenerate_graph.ainvoke(initial_state, config=config),
            timeout=timeout_policy.llm_timeout_seconds,
        )
    except asyncio.TimeoutError:
        logger.error("일정 재생성 시간 초과: day=%d", request.day_number)
        return _response(
            EditStatus.FAILED,
            request.timeline,
            change_summary="일정 생성 시간이 초과되었습니다. 잠시 후 다시 시도해 주세요.",
        )

    if error := result.get("error"):
        logger.error("일정 재생성 파이프라인 에러: %s", error)
        return _response(EditStatus.REJECTED, request.timeline, change_summary=error)

    return TimelineEditResponse(
        status=result.get("status", EditStatus.SUCCESS),
        timeline=Timeline.model_validate(result["modified_timeline"]),
        total_cost=result.get("total_cost", 0),
        change_summary=result.get("change_summary", ""),
        diff_keys=result.get("diff_keys", []),
        warnings=result.get("warnings", []),
    )
