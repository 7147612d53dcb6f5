"""Tests for coffee log, stats and goal endpoints."""

from fastapi.testclient import TestClient


def test_log_coffee_and_list(client: TestClient, auth_headers) -> None:
    response = client.post(
        "/api/coffee-log",
        json={"caffeineAmount": 95, "calories": 5},
        headers=auth_headers,
    )

    assert response.status_code == 200
    entry = response.json()
    assert entry["caffeineAmount"] == 95
    assert entry["recipeId"] is None
    assert "consumedAt" in entry

    listed = client.get("/api/coffee-log", headers=auth_headers).json()
    assert [item["id"] for item in listed] == [entry["id"]]

    past_day = client.get(
        "/api/coffee-log", params={"date": "2000-01-01"}, headers=auth_headers
    )
    assert past_day.status_code == 200
    assert past_day.json() == []


def test_log_coffee_rejects_negative_caffeine(
    client: TestClient, auth_headers
) -> None:
    response = client.post(
        "/api/coffee-log",
        json={"caffeineAmount": -5, "calories": 5},
        headers=auth_headers,
    )

    assert response.status_code == 400


def test_log_saved_recipe(client: TestClient, auth_headers) -> None:
    recipe = client.post(
        "/api/recipes",
        json={
            "name": "Flat white",
            "coffeeType": "espresso",
            "milkType": "whole",
            "sweetnessLevel": 2,
        },
        headers=auth_headers,
    ).json()

    response = client.post(f"/api/recipes/{recipe['id']}/log", headers=auth_headers)

    assert response.status_code == 200
    entry = response.json()
    assert entry["recipeId"] == recipe["id"]
    assert entry["caffeineAmount"] == 150
    assert entry["calories"] == 97
    missing = client.post("/api/recipes/999/log", headers=auth_headers)
    assert missing.status_code == 404


def test_health_stats(client: TestClient, auth_headers) -> None:
    client.post(
        "/api/coffee-log",
        json={"caffeineAmount": 700, "calories": 0},
        headers=auth_headers,
    )

    response = client.get("/api/health-stats", headers=auth_headers)

    assert response.status_code == 200
    assert response.json() == {
        "todaysCaffeine": 700,
        "dailyGoal": 400,
        "avgCaffeine": 100,
        "totalCups": 1,
        "goalAdherence": 25,
    }


def test_update_caffeine_goal(client: TestClient, auth_headers) -> None:
    response = client.put(
        "/api/caffeine-goal", json={"goal": 200}, headers=auth_headers
    )

    assert response.status_code == 200
    assert response.json() == {"dailyCaffeineGoal": 200}
    stats = client.get("/api/health-stats", headers=auth_headers).json()
    assert stats["dailyGoal"] == 200


def test_update_caffeine_goal_out_of_range(client: TestClient, auth_headers) -> None:
    for goal in (-1, 1001):
        response = client.put(
            "/api/caffeine-goal", json={"goal": goal}, headers=auth_headers
        )
        assert response.status_code == 400
