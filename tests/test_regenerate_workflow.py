"""일정 재생성 워크플로우 통합 테스트."""

from __future__ import annotations

import asyncio

import pytest

from app.core.config import get_settings
from app.graph.regenerate.workflow import compiled_regenerate_graph
from app.schemas.edit import RegenerateDayRequest
from app.schemas.enums import EditStatus
from app.schemas.timeline import Timeline
from app.services.activity_generator import ActivityGenerationError
from app.services.timeline_service import run_regenerate_pipeline
from tests.mocks.mock_activity_generator import MockActivityGenerator


def _set_required_env(monkeypatch, **overrides: str) -> None:
    monkeypatch.setenv("OPENAI_API_KEY", "test-key")
    monkeypatch.setenv("SERVICE_SECRET", "test-service-secret")
    monkeypatch.setenv("LLM_MODEL_NAME", "gpt-4o-mini")
    for key, value in overrides.items():
        monkeypatch.setenv(key, value)
    get_settings.cache_clear()


@pytest.fixture()
def sample_timeline() -> dict:
    """테스트용 타임라인 데이터 (camelCase)."""
    return {
        "days": [
            {
                "dayNumber": 1,
                "date": "2025-04-01",
                "region": "kansai",
                "activities": [
                    {
                        "id": "day1-activity1",
                        "name": "후시미 이나리",
                        "description": "센본 도리이 산책",
                        "startTime": "08:30",
                        "durationMinutes": 120,
                        "category": "attraction",
                        "icon": "⛩️",
                        "estimatedCost": 0,
                        "location": "Kyoto",
                    }
                ],
                "totalCost": 0,
            },
            {
                "dayNumber": 2,
                "date": "2025-04-02",
                "region": "kansai",
                "activities": [
                    {
                        "id": "day2-activity1",
                        "name": "도톤보리",
                        "startTime": "18:00",
                        "durationMinutes": 90,
                        "category": "meal",
                        "estimatedCost": 3000,
                    }
                ],
                "totalCost": 3000,
            },
        ],
        "totalDuration": 2,
        "regions": ["kansai"],
        "travelStyles": ["culture", "food"],
        "season": "spring",
    }


def _generated_day(day_number: int = 2) -> dict:
    return {
        "activities": [
            {
                "id": f"day{day_number}-activity1",
                "title": "Temple Visit",
                "time": "09:00",
                "duration": 90,
                "cost": 1500,
                "type": "experience",
                "icon": "🎨",
                "location": "Kyoto",
                "description": "사찰에서 좌선 체험",
            },
            {
                "id": f"day{day_number}-activity2",
                "title": "Kaiseki Lunch",
                "time": "점심",
                "duration": 60,
                "cost": 5000,
                "type": "meal",
                "icon": "🍱",
                "location": "Gion",
                "description": "가이세키 요리",
            },
        ]
    }


def _initial_state(timeline: dict, day_number: int = 2) -> dict:
    return {
        "timeline": timeline,
        "theme": "culture",
        "region": "kansai",
        "prefecture": "Kyoto",
        "day_number": day_number,
    }


@pytest.mark.asyncio
async def test_regenerate_merges_target_day(sample_timeline):
    """생성된 활동이 대상 일차에만 반영되는지 검증합니다."""
    generator = MockActivityGenerator(response=_generated_day())

    result = await compiled_regenerate_graph.ainvoke(
        _initial_state(sample_timeline),
        config={"configurable": {"activity_generator": generator}},
    )

    assert result.get("error") is None
    assert result["status"] == EditStatus.SUCCESS
    assert generator.calls == [{"theme": "culture", "region": "kansai", "prefecture": "Kyoto", "day_number": 2}]

    modified = Timeline.model_validate(result["modified_timeline"])
    original = Timeline.model_validate(sample_timeline)
    assert modified.days[0] == original.days[0]
    assert [activity.name for activity in modified.days[1].activities] == ["Temple Visit", "Kaiseki Lunch"]
    assert modified.days[1].total_cost == 6500
    assert result["total_cost"] == 6500
    assert result["diff_keys"] == ["day2_activity1", "day2_activity2"]
    assert any("점심" in warning for warning in result["warnings"])


@pytest.mark.asyncio
async def test_regenerate_unknown_day_is_no_change(sample_timeline):
    generator = MockActivityGenerator(response=_generated_day(day_number=9))

    result = await compiled_regenerate_graph.ainvoke(
        _initial_state(sample_timeline, day_number=9),
        config={"configurable": {"activity_generator": generator}},
    )

    assert result["status"] == EditStatus.NO_CHANGE
    assert Timeline.model_validate(result["modified_timeline"]) == Timeline.model_validate(sample_timeline)
    assert result["diff_keys"] == []


@pytest.mark.asyncio
async def test_regenerate_invalid_response_stops_before_merge(sample_timeline):
    generator = MockActivityGenerator(response={})

    result = await compiled_regenerate_graph.ainvoke(
        _initial_state(sample_timeline),
        config={"configurable": {"activity_generator": generator}},
    )

    assert "activities" in result["error"]
    assert result.get("modified_timeline") is None


def test_pipeline_invalid_response_keeps_timeline(monkeypatch, sample_timeline):
    """형식이 잘못된 응답이면 기존 타임라인을 그대로 돌려주는지 검증합니다."""
    _set_required_env(monkeypatch)
    request = RegenerateDayRequest(timeline=sample_timeline, theme="culture", region="kansai", day_number=2)

    response = asyncio.run(run_regenerate_pipeline(request, MockActivityGenerator(response={"items": []})))

    assert response.status == EditStatus.REJECTED
    assert response.timeline == request.timeline
    assert response.total_cost == 3000
    assert response.diff_keys == []


def test_pipeline_generator_error_is_rejected(monkeypatch, sample_timeline):
    _set_required_env(monkeypatch)
    request = RegenerateDayRequest(timeline=sample_timeline, theme="culture", region="kansai", day_number=2)
    generator = MockActivityGenerator(error=ActivityGenerationError("활동 생성기 호출에 실패했습니다."))

    response = asyncio.run(run_regenerate_pipeline(request, generator))

    assert response.status == EditStatus.REJECTED
    assert response.change_summary == "활동 생성기 호출에 실패했습니다."
    assert response.timeline == request.timeline


def test_pipeline_empty_generated_day_clears_day(monkeypatch, sample_timeline):
    _set_required_env(monkeypatch)
    request = RegenerateDayRequest(timeline=sample_timeline, theme="culture", region="kansai", day_number=2)

    response = asyncio.run(run_regenerate_pipeline(request, MockActivityGenerator(response={"activities": []})))

    assert response.status == EditStatus.SUCCESS
    assert response.timeline.days[1].activities == []
    assert response.timeline.days[1].total_cost == 0
    assert response.total_cost == 0


def test_pipeline_timeout_is_failed(monkeypatch, sample_timeline):
    _set_required_env(monkeypatch, LLM_TIMEOUT_SECONDS="1")
    request = RegenerateDayRequest(timeline=sample_timeline, theme="culture", region="kansai", day_number=2)

    class _SlowGenerator(MockActivityGenerator):
        async def generate(self, theme, region, prefecture, day_number):
            await asyncio.sleep(5)
            return _generated_day()

    response = asyncio.run(run_regenerate_pipeline(request, _SlowGenerator()))

    assert response.status == EditStatus.FAILED
    assert response.timeline == request.timeline
