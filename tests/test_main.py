"""애플리케이션 진입점 및 타임라인 API 테스트."""

from __future__ import annotations

import importlib
from unittest.mock import AsyncMock, patch

from fastapi.testclient import TestClient

from app.core.config import get_settings
from app.schemas.edit import TimelineEditResponse
from app.schemas.enums import EditStatus

SECRET_HEADERS = {"x-service-secret": "test-service-secret"}


def _set_required_env(monkeypatch, **overrides: str) -> None:
    monkeypatch.setenv("OPENAI_API_KEY", "test-key")
    monkeypatch.setenv("SERVICE_SECRET", "test-service-secret")
    monkeypatch.setenv("LLM_MODEL_NAME", "gpt-4o-mini")
    monkeypatch.setenv("DOCS_MODE", "disabled")
    for key, value in overrides.items():
        monkeypatch.setenv(key, value)
    get_settings.cache_clear()


def _load_main_module():
    import app.main as main_module

    return importlib.reload(main_module)


def _client(monkeypatch, **overrides: str) -> TestClient:
    _set_required_env(monkeypatch, **overrides)
    return TestClient(_load_main_module().app)


def _activity(activity_id: str, cost: int) -> dict:
    return {
        "id": activity_id,
        "name": f"활동 {activity_id}",
        "startTime": "10:00",
        "durationMinutes": 60,
        "category": "attraction",
        "estimatedCost": cost,
    }


def _timeline() -> dict:
    return {
        "days": [
            {
                "dayNumber": 1,
                "activities": [_activity("a", 100), _activity("b", 100), _activity("c", 100)],
                "totalCost": 300,
            },
            {"dayNumber": 2, "activities": [_activity("x", 50)], "totalCost": 50},
        ],
        "totalDuration": 2,
        "regions": ["kanto"],
        "travelStyles": ["city"],
    }


def test_health_check_endpoint(monkeypatch) -> None:
    client = _client(monkeypatch)

    response = client.get("/")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "message": "Tabi Planner AI Server is running"}


def test_docs_disabled_by_default(monkeypatch) -> None:
    client = _client(monkeypatch)

    assert client.get("/docs").status_code == 404
    assert client.get("/openapi.json").status_code == 404


def test_docs_secret_mode_requires_service_secret(monkeypatch) -> None:
    client = _client(monkeypatch, DOCS_MODE="secret")

    assert client.get("/docs").status_code == 401
    assert client.get("/docs", headers=SECRET_HEADERS).status_code == 200


def test_security_headers_are_attached(monkeypatch) -> None:
    client = _client(monkeypatch)

    response = client.get("/")

    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"


def test_timeline_endpoints_require_service_secret(monkeypatch) -> None:
    client = _client(monkeypatch)

    missing = client.post("/api/v1/timeline/pacing", json={"timeline": _timeline()})
    invalid = client.post(
        "/api/v1/timeline/pacing",
        json={"timeline": _timeline()},
        headers={"x-service-secret": "wrong"},
    )

    assert missing.status_code == 401
    assert invalid.status_code == 401


def test_pacing_endpoint_truncates_days(monkeypatch) -> None:
    client = _client(monkeypatch)

    response = client.post(
        "/api/v1/timeline/pacing",
        json={"timeline": _timeline(), "config": {"activitiesPerDay": 2, "pace": "relaxed"}},
        headers=SECRET_HEADERS,
    )

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "SUCCESS"
    assert [activity["id"] for activity in body["timeline"]["days"][0]["activities"]] == ["a", "b"]
    assert body["timeline"]["days"][0]["totalCost"] == 200
    assert body["totalCost"] == 250
    assert body["diffKeys"] == ["day1_activity3"]


def test_pacing_endpoint_without_limit_is_no_change(monkeypatch) -> None:
    client = _client(monkeypatch)

    response = client.post("/api/v1/timeline/pacing", json={"timeline": _timeline()}, headers=SECRET_HEADERS)

    assert response.json()["status"] == "NO_CHANGE"
    assert response.json()["timeline"]["days"][0]["totalCost"] == 300


def test_override_endpoint_replaces_day(monkeypatch) -> None:
    client = _client(monkeypatch)

    response = client.post(
        "/api/v1/timeline/override",
        json={
            "timeline": _timeline(),
            "override": {"modifiedDay": 2, "overrideActivities": [_activity("y", 30), _activity("z", 20)]},
        },
        headers=SECRET_HEADERS,
    )

    body = response.json()
    assert body["status"] == "SUCCESS"
    assert body["timeline"]["days"][1]["totalCost"] == 50
    assert [activity["id"] for activity in body["timeline"]["days"][1]["activities"]] == ["y", "z"]
    assert body["timeline"]["days"][0]["totalCost"] == 300
    assert body["diffKeys"] == ["day2_activity1", "day2_activity2"]


def test_override_endpoint_unknown_day_is_no_change(monkeypatch) -> None:
    client = _client(monkeypatch)

    response = client.post(
        "/api/v1/timeline/override",
        json={"timeline": _timeline(), "override": {"modifiedDay": 99, "overrideActivities": []}},
        headers=SECRET_HEADERS,
    )

    assert response.json()["status"] == "NO_CHANGE"
    assert len(response.json()["timeline"]["days"]) == 2


def test_duplicate_day_numbers_are_unprocessable(monkeypatch) -> None:
    client = _client(monkeypatch)
    timeline = _timeline()
    timeline["days"][1]["dayNumber"] = 1

    response = client.post("/api/v1/timeline/pacing", json={"timeline": timeline}, headers=SECRET_HEADERS)

    assert response.status_code == 422


def test_regenerate_endpoint_delegates_to_pipeline(monkeypatch) -> None:
    client = _client(monkeypatch)
    canned = TimelineEditResponse(status=EditStatus.REJECTED, timeline=_timeline(), total_cost=350)

    with patch("app.api.timeline.run_regenerate_pipeline", new=AsyncMock(return_value=canned)) as pipeline:
        response = client.post(
            "/api/v1/timeline/regenerate-day",
            json={"timeline": _timeline(), "theme": "city", "region": "kanto", "dayNumber": 1},
            headers=SECRET_HEADERS,
        )

    assert response.status_code == 200
    assert response.json()["status"] == "REJECTED"
    assert response.json()["totalCost"] == 350
    assert pipeline.await_args.args[0].day_number == 1


def test_override_endpoint_passes_through_original_app_shape(monkeypatch) -> None:
    """객체형 regions와 선언되지 않은 키가 있는 타임라인도 그대로 보존되는지 검증합니다."""
    client = _client(monkeypatch)
    timeline = _timeline()
    timeline["regions"] = [{"region": {"name": "Tokyo"}, "days": 2}]
    timeline["days"][0]["date"] = "4월 1일"
    timeline["days"][0]["activities"][0]["notes"] = "keep me"
    timeline["days"][0]["activities"][0]["transportMethod"] = "JR"

    response = client.post(
        "/api/v1/timeline/override",
        json={"timeline": timeline, "override": {"modifiedDay": 2, "overrideActivities": [_activity("y", 30)]}},
        headers=SECRET_HEADERS,
    )

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "SUCCESS"
    assert body["timeline"]["regions"] == [{"region": {"name": "Tokyo"}, "days": 2}]
    assert body["timeline"]["days"][0]["date"] == "4월 1일"
    assert body["timeline"]["days"][0]["activities"][0]["notes"] == "keep me"
    assert body["timeline"]["days"][0]["activities"][0]["transportMethod"] == "JR"
