"""Tests for GPS workout and coach chat endpoints."""

from dataclasses import replace

from fastapi.testclient import TestClient

from health_tracker.api.app import create_app
from tests.conftest import FakeCoachClient

ROUTE = [
    {"latitude": 52.52, "longitude": 13.405, "timestamp": "2024-06-15T07:00:00Z"},
    {
        "latitude": 52.53,
        "longitude": 13.405,
        "elevation": 8,
        "heartRate": 150,
        "timestamp": "2024-06-15T07:06:00Z",
    },
]


def test_record_and_list_gps_workouts(container, auth_headers) -> None:
    client = TestClient(create_app(container))

    created = client.post(
        "/workouts/gps", json={"type": "running", "route": ROUTE}, headers=auth_headers
    )
    listed = client.get("/workouts/gps", headers=auth_headers)

    assert created.status_code == 201
    body = created.json()
    assert body["name"] == "Running Workout"
    assert body["duration"] == 360
    assert body["calories"] == 72
    assert body["heartRateMax"] == 150
    assert [workout["id"] for workout in listed.json()["workouts"]] == [body["id"]]


def test_gps_workout_needs_route(container, auth_headers) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/workouts/gps", json={"type": "running", "route": []}, headers=auth_headers
    )

    assert response.status_code == 422


def test_coach_chat_uses_rules_without_client(container, auth_headers) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/coach/chat", json={"message": "How is my hydration?"}, headers=auth_headers
    )

    assert response.status_code == 200
    body = response.json()
    assert body["source"] == "rules"
    assert "glasses daily" in body["message"]
    assert body["suggestions"][0] == "Tell me more"


def test_coach_chat_uses_configured_client(container, auth_headers) -> None:
    coach_client = FakeCoachClient(reply_text="Great pace this week!")
    coach_service = replace(container.coach_service, client=coach_client)
    client = TestClient(create_app(replace(container, coach_service=coach_service)))

    response = client.post(
        "/coach/chat", json={"message": "Motivate me"}, headers=auth_headers
    )

    assert response.json()["source"] == "openai"
    assert response.json()["message"] == "Great pace this week!"
    assert coach_client.calls[0]["model"] == "gpt-5.2"


def test_coach_chat_rejects_empty_message(container, auth_headers) -> None:
    client = TestClient(create_app(container))

    response = client.post("/coach/chat", json={"message": ""}, headers=auth_headers)

    assert response.status_code == 422
