"""타임라인 편집 요청/응답 스키마."""

from typing import Optional

from pydantic import Field

from app.schemas.enums import EditStatus
from app.schemas.timeline import DayOverride, PacingConfig, Timeline, TimelineModel


class PacingRequest(TimelineModel):
    """일정 밀도 적용 요청."""

    timeline: Timeline = Field(..., description="현재 타임라인")
    config: PacingConfig = Field(default_factory=PacingConfig, description="밀도 설정")


class DayOverrideRequest(TimelineModel):
    """특정 일자 활동 교체 요청."""

    timeline: Timeline = Field(..., description="현재 타임라인")
    override: DayOverride = Field(..., description="교체 지시")


class RegenerateDayRequest(TimelineModel):
    """특정 일자 AI 재생성 요청.

    Fields:
        timeline: 현재 타임라인
        theme: 생성 테마 (예: 문화, 미식)
        region: 여행 지역
        prefecture: 세부 지역
        day_number: 재생성 대상 일차
    """

    timeline: Timeline = Field(..., description="현재 타임라인")
    theme: str = Field(..., min_length=1, description="생성 테마")
    region: str = Field(..., min_length=1, description="여행 지역")
    prefecture: Optional[str] = Field(default=None, description="세부 지역")
    day_number: int = Field(..., ge=1, description="재생성 대상 일차")


class TimelineEditResponse(TimelineModel):
    """타임라인 편집 응답.

    Fields:
        status: 편집 결과 상태
        timeline: 편집 결과 타임라인 (실패 시 입력 그대로)
        total_cost: 여행 전체 비용 합계
        change_summary: 변경 사항 설명
        diff_keys: UI 하이라이트용 변경 활동 키
        warnings: 경고 메시지 목록
    """

    status: EditStatus = Field(..., description="편집 결과 상태")
    timeline: Timeline = Field(..., description="편집 결과 타임라인")
    total_cost: float = Field(default=0, description="여행 전체 비용 합계")
    change_summary: str = Field(default="", description="변경 사항 설명")
    diff_keys: list[str] = Field(default_factory=list, description="변경된 활동 키 목록")
    warnings: list[str] = Field(default_factory=list, description="경고 메시지 목록")
