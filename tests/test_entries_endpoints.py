"""Tests for the entry logging endpoints."""

from uuid import uuid4

from fastapi.testclient import TestClient

from health_tracker.api.app import create_app
from tests.conftest import make_token


def test_entries_require_bearer_token(container) -> None:
    client = TestClient(create_app(container))

    missing = client.get("/entries/water")
    wrong_secret = client.get(
        "/entries/water",
        headers={"Authorization": f"Bearer {make_token(uuid4(), secret='x' * 40)}"},
    )
    no_subject = client.get(
        "/entries/water",
        headers={"Authorization": f"Bearer {make_token(uuid4(), sub='')}"},
    )

    assert missing.status_code == 401
    assert missing.headers["WWW-Authenticate"] == "Bearer"
    assert wrong_secret.json() == {"detail": "Invalid token"}
    assert no_subject.json() == {"detail": "Invalid token: missing user ID"}


def test_expired_token_is_rejected(container) -> None:
    client = TestClient(create_app(container))
    token = make_token(uuid4(), exp=1)

    response = client.get("/entries/water", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
    assert response.json() == {"detail": "Token has expired"}


def test_log_water_awards_points(container, auth_headers, user_id) -> None:
    client = TestClient(create_app(container))

    response = client.post("/entries/water", json={"amount": 500}, headers=auth_headers)

    assert response.status_code == 201
    body = response.json()
    assert body["entry"]["amount"] == 500
    assert body["entry"]["id"]
    assert body["award"] == {"points": 10, "level": 1, "leveled_up": False}
    profile = container.profile_service.get_profile(user_id)
    assert profile.points == 10
    assert profile.streak == 1


def test_entry_saved_even_when_counters_fail(
    container, auth_headers, profile_repository, health_data_repository
) -> None:
    profile_repository.fail_updates = True
    client = TestClient(create_app(container))

    response = client.post(
        "/entries/mood", json={"rating": 7, "factors": ["sleep"]}, headers=auth_headers
    )

    assert response.status_code == 201
    assert response.json()["award"] is None
    assert len(health_data_repository.rows) == 1


def test_exercise_calories_estimated_when_missing(container, auth_headers) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/entries/exercise",
        json={"name": "Run", "type": "cardio", "duration": 30, "intensity": "high"},
        headers=auth_headers,
    )

    assert response.status_code == 201
    assert response.json()["entry"]["calories"] == 390


def test_log_catalog_food(container, auth_headers) -> None:
    client = TestClient(create_app(container))

    created = client.post(
        "/entries/food/catalog",
        json={"foodId": "apple-medium", "quantity": 2, "meal": "snack"},
        headers=auth_headers,
    )
    unknown = client.post(
        "/entries/food/catalog",
        json={"foodId": "dragon-fruit", "quantity": 1, "meal": "snack"},
        headers=auth_headers,
    )

    assert created.status_code == 201
    assert created.json()["entry"]["name"] == "Apple"
    assert created.json()["entry"]["quantity"] == 2
    assert unknown.status_code == 404


def test_invalid_payload_and_timezone_rejected(container, auth_headers) -> None:
    client = TestClient(create_app(container))

    bad_rating = client.post("/entries/mood", json={"rating": 11}, headers=auth_headers)
    bad_timezone = client.post(
        "/entries/water?timezone=Mars/Olympus",
        json={"amount": 250},
        headers=auth_headers,
    )

    assert bad_rating.status_code == 422
    assert bad_timezone.status_code == 422


def test_list_summary_and_delete(container, auth_headers) -> None:
    client = TestClient(create_app(container))
    client.post(
        "/entries/food",
        json={"name": "Oats", "calories": 300, "meal": "breakfast"},
        headers=auth_headers,
    )
    water = client.post("/entries/water", json={"amount": 250}, headers=auth_headers)
    water_id = water.json()["entry"]["id"]

    listed = client.get("/entries/water", headers=auth_headers)
    summary = client.get("/entries/summary?days=7", headers=auth_headers)
    deleted = client.delete(f"/entries/{water_id}", headers=auth_headers)
    missing = client.delete(f"/entries/{water_id}", headers=auth_headers)

    assert [entry["id"] for entry in listed.json()["entries"]] == [water_id]
    assert summary.json()["counts"]["food_entry"] == 1
    assert summary.json()["food"][0]["name"] == "Oats"
    assert deleted.status_code == 204
    assert missing.status_code == 404


def test_entries_are_scoped_to_user(container, auth_headers) -> None:
    client = TestClient(create_app(container))
    client.post("/entries/water", json={"amount": 250}, headers=auth_headers)
    other = {"Authorization": f"Bearer {make_token(uuid4())}"}

    response = client.get("/entries/water", headers=other)

    assert response.json() == {"entries": []}
