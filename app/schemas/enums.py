"""타임라인 도메인 열거형."""

from enum import StrEnum


class ActivityCategory(StrEnum):
    """활동 분류."""

    ATTRACTION = "attraction"
    MEAL = "meal"
    TRANSPORT = "transport"
    ACCOMMODATION = "accommodation"
    EXPERIENCE = "experience"


class EditStatus(StrEnum):
    """타임라인 편집 결과 상태."""

    SUCCESS = "SUCCESS"
    NO_CHANGE = "NO_CHANGE"
    REJECTED = "REJECTED"
    FAILED = "FAILED"


class GeneratorBackend(StrEnum):
    """활동 생성기 구현 선택값."""

    LLM = "llm"
    HTTP = "http"
