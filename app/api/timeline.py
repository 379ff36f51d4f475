"""타임라인 편집 API."""

from fastapi import APIRouter, Depends, HTTPException, status

from app.api.dependencies import require_service_secret
from app.core.logger import get_logger
from app.schemas.edit import DayOverrideRequest, PacingRequest, RegenerateDayRequest, TimelineEditResponse
from app.services.timeline_service import run_day_override, run_pacing, run_regenerate_pipeline

router = APIRouter(
    prefix="/api/v1/timeline",
    tags=["timeline"],
    dependencies=[Depends(require_service_secret)],
)
logger = get_logger(__name__)

REGENERATE_ERROR_EXAMPLES = {
    "invalid_external_response": {
        "summary": "생성 응답 형식 오류",
        "description": "활동 생성기 응답에 activities 목록이 없어 기존 일정을 유지한 경우",
        "value": {
            "status": "REJECTED",
            "timeline": {"days": [], "totalDuration": 0, "regions": [], "travelStyles": [], "season": None},
            "totalCost": 0,
            "changeSummary": "생성된 일정 형식이 올바르지 않습니다: 생성기 응답에 activities 필드가 없습니다.",
            "diffKeys": [],
            "warnings": [],
        },
    }
}


@router.post("/pacing", response_model=TimelineEditResponse, status_code=status.HTTP_200_OK)
def pace_timeline(request: PacingRequest) -> TimelineEditResponse:
    """하루 활동 수 상한을 적용한 타임라인을 반환한다."""
    return run_pacing(request)


@router.post("/override", response_model=TimelineEditResponse, status_code=status.HTTP_200_OK)
def override_day(request: DayOverrideRequest) -> TimelineEditResponse:
    """특정 일차의 활동을 교체한 타임라인을 반환한다."""
    return run_day_override(request)


@router.post(
    "/regenerate-day",
    response_model=TimelineEditResponse,
    status_code=status.HTTP_200_OK,
    responses={
        200: {
            "description": "재생성 결과 (실패 시 기존 타임라인 유지)",
            "content": {"application/json": {"examples": REGENERATE_ERROR_EXAMPLES}},
        }
    },
)
async def regenerate_day(request: RegenerateDayRequest) -> TimelineEditResponse:
    """특정 일차를 AI로 다시 생성해 타임라인에 병합한다."""
    try:
        return await run_regenerate_pipeline(request)
    except Exception as exc:
        logger.error("일정 재생성 처리 실패: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="일정 재생성 처리에 실패했습니다.",
        ) from exc
