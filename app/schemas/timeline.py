"""여행 타임라인 모델.

외부 JSON(`timeline_data`)은 camelCase 키를 사용하므로 모든 모델은 camelCase
별칭을 가지며, 파이썬 코드에서는 snake_case 필드명으로도 생성할 수 있습니다.
"""

from datetime import date
from typing import Any, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class TimelineModel(BaseModel):
    """camelCase 직렬화를 공유하는 기본 모델."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Activity(TimelineModel):
    """최하단 단위: 하루 안의 예정된 활동.

    선언되지 않은 키(예: `notes`, `nameJapanese`)도 그대로 보존합니다.
    """

    model_config = ConfigDict(extra="allow")

    id: str = Field(..., description="활동 ID (해당 일자 안에서만 고유)")
    name: str = Field(..., description="표시용 활동 이름")
    description: str = Field(default="", description="활동 설명")
    start_time: str = Field(default="", description="시작 시각 (HH:MM, 시간대 없음)")
    duration_minutes: int = Field(default=0, ge=0, description="소요 시간(분)")
    category: str = Field(
        default="",
        validation_alias=AliasChoices("category", "type"),
        description="attraction / meal / transport / accommodation / experience (예전 데이터는 `type` 키)",
    )
    icon: Any = Field(default=None, description="UI 아이콘 태그")
    estimated_cost: Optional[float] = Field(default=None, ge=0, description="예상 비용, 없으면 0으로 집계")
    location: Optional[str] = Field(default=None, description="장소 텍스트")


class Day(TimelineModel):
    """중간 단위: 여행 N일차.

    `total_cost`는 항상 `activities`의 `estimated_cost` 합계여야 하며,
    편집 함수가 활동 목록을 바꿀 때마다 다시 계산됩니다.
    """

    model_config = ConfigDict(extra="allow")

    day_number: int = Field(..., ge=1, description="여행 N일차")
    day_date: Optional[Union[date, str]] = Field(default=None, alias="date", description="여행 날짜 (형식 자유)")
    region: Any = Field(default=None, description="여행 지역 참조값")
    activities: list[Activity] = Field(default_factory=list, description="순서대로 정렬된 활동 목록")
    total_cost: float = Field(default=0, description="활동 비용 합계")


class Timeline(TimelineModel):
    """여행 전체 타임라인.

    `total_duration`은 선언된 여행 일수이며 `len(days)`와 달라도 허용합니다.
    """

    model_config = ConfigDict(extra="allow")

    days: list[Day] = Field(default_factory=list, description="일자별 일정 (day_number 오름차순)")
    total_duration: int = Field(default=0, ge=0, description="선언된 여행 일수")
    regions: list[Any] = Field(default_factory=list, description="여행 지역 목록 (형태 무관)")
    travel_styles: list[str] = Field(default_factory=list, description="여행 스타일 목록")
    season: Optional[str] = Field(default=None, description="여행 계절")

    @model_validator(mode="after")
    def validate_unique_day_numbers(self):
        seen: set[int] = set()
        for day in self.days:
            if day.day_number in seen:
                raise ValueError(f"day_number {day.day_number}이(가) 중복되었습니다.")
            seen.add(day.day_number)
        return self


class DayOverride(TimelineModel):
    """특정 일자의 활동 목록을 통째로 교체하는 일회성 지시."""

    modified_day: int = Field(..., ge=1, description="교체 대상 day_number")
    override_activities: list[Activity] = Field(default_factory=list, description="새 활동 목록 (순서 유지)")


class PacingConfig(TimelineModel):
    """일정 밀도 설정.

    `rest_time`과 `pace`는 호환성을 위해 받기만 하고 결과에는 영향을 주지 않습니다.
    """

    activities_per_day: Optional[int] = Field(default=None, ge=1, description="하루 최대 활동 수")
    rest_time: Optional[str] = Field(default=None, description="휴식 시간 선호")
    pace: Optional[str] = Field(default=None, description="여행 페이스 선호")
