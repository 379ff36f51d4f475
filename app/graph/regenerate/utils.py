"""일정 재생성 그래프 유틸리티."""

import re

from app.schemas.enums import ActivityCategory
from app.schemas.timeline import Activity

_TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")
_CATEGORIES = {category.value for category in ActivityCategory}


def strip_code_fence(text: str) -> str:
    """코드 펜스를 제거합니다."""
    content = (text or "").strip()
    if content.startswith("```"):
        parts = content.split("```")
        if len(parts) > 1:
            content = parts[1].strip()
            if content.startswith("json"):
                content = content[4:].strip()
    return content.strip()


def collect_activity_warnings(day_number: int, activities: list[Activity]) -> list[str]:
    """시작 시각 형식과 분류 값이 어긋난 활동을 경고 메시지로 모읍니다."""
    warnings: list[str] = []
    for activity in activities:
        if not _TIME_PATTERN.match(activity.start_time):
            warnings.append(
                f"{day_number}일차 '{activity.name}' 시작 시각 '{activity.start_time}'이(가) HH:MM 형식이 아닙니다."
            )
        if activity.category not in _CATEGORIES:
            warnings.append(f"{day_number}일차 '{activity.name}' 분류 '{activity.category}'은(는) 알 수 없는 값입니다.")
    return warnings
