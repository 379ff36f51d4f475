"""활동 생성기 요청 및 원본 응답 스키마."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.schemas.timeline import TimelineModel


class ActivityGenerationRequest(TimelineModel):
    """활동 생성기에 전달하는 요청 모델."""

    theme: str = Field(..., min_length=1, description="여행 테마")
    region: str = Field(..., min_length=1, description="여행 지역")
    prefecture: Optional[str] = Field(default=None, description="세부 지역(현/도)")
    day_number: int = Field(..., ge=1, description="생성 대상 일차")


class GeneratedActivity(BaseModel):
    """생성기가 반환하는 활동 원본 형태.

    이름만 다를 뿐 Activity와 같은 정보를 담으며, 시간 형식이나 분류 값은 검증하지 않습니다.
    숫자 id나 null 문자열처럼 사소한 타입 차이는 거절하지 않고 맞춰 줍니다.
    """

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    id: Optional[str] = None
    title: str
    time: str = ""
    duration: int = Field(default=0, ge=0)
    cost: Optional[float] = Field(default=None, ge=0)
    type: str
    icon: Any = None
    location: Optional[str] = None
    description: str = ""

    @field_validator("time", "description", mode="before")
    @classmethod
    def _none_to_empty(cls, value: object) -> object:
        return "" if value is None else value
