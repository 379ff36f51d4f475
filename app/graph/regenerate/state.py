"""일정 재생성 그래프 상태 정의."""

from typing import Any, TypedDict


class RegenerateState(TypedDict, total=False):
    """일정 재생성 그래프 상태.

    Keys:
        timeline: 현재 타임라인 (camelCase dict)
        theme: 생성 테마
        region: 여행 지역
        prefecture: 세부 지역
        day_number: 재생성 대상 일차
        raw_response: 활동 생성기 원본 응답
        override_activities: 변환된 활동 목록 (dict)
        modified_timeline: 병합 완료된 타임라인
        status: 편집 결과 상태
        change_summary: 변경 사항 설명
        diff_keys: 변경된 활동 키 목록
        warnings: 경고 메시지 누적
        total_cost: 여행 전체 비용 합계
        error: 오류 메시지
    """

    # Input
    timeline: dict
    theme: str
    region: str
    prefecture: str | None
    day_number: int

    # Processing
    raw_response: Any
    override_activities: list[dict]
    warnings: list[str]

    # Output
    modified_timeline: dict | None
    status: str
    change_summary: str
    diff_keys: list[str]
    total_cost: float
    error: str | None
