"""Tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient

from config import settings
from main import app

client = TestClient(app)


def solve_payload(**overrides):
    payload = {
        "numMeetings": 2,
        "startDate": "2025-07-07",
        "endDate": "2025-07-11",
        "constraints": [{"arity": 2, "left": 0, "op": "!=", "right": 1}],
    }
    payload.update(overrides)
    return payload


@pytest.fixture(autouse=True)
def no_api_key(monkeypatch):
    monkeypatch.setattr(settings, "API_KEY", None)


class TestHealth:
    def test_health_check(self):
        response = client.get("/api/health/check")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ok"
        assert "backtracking" in body["engines"]
        assert "ac3" in body["propagation"]

    def test_root(self):
        assert client.get("/").status_code == 200


class TestSolve:
    def test_returns_the_first_schedule(self):
        response = client.post("/api/schedule/solve", json=solve_payload())
        assert response.status_code == 200
        body = response.json()
        assert body["schedule"] == [
            {"Meeting": 0, "Date": "2025-07-07", "Day": "Monday"},
            {"Meeting": 1, "Date": "2025-07-08", "Day": "Tuesday"},
        ]
        assert body["metrics"]["Status"] == "solved"
        assert body["metrics"]["Engine"] == "backtracking"
        assert body["metrics"]["Domain Sizes"] == [5, 5]

    def test_unary_and_operator_alias(self):
        payload = solve_payload(
            constraints=[
                {"arity": 1, "meeting": 0, "operator": ">", "date": "2025-07-09"},
                {"arity": 2, "left": 1, "operator": ">", "right": 0},
            ]
        )
        response = client.post("/api/schedule/solve", json=payload)
        assert response.status_code == 200
        dates = [row["Date"] for row in response.json()["schedule"]]
        assert dates == ["2025-07-10", "2025-07-11"]

    def test_cp_sat_engine(self):
        response = client.post("/api/schedule/solve", json=solve_payload(engine="cp-sat"))
        assert response.status_code == 200
        assert response.json()["metrics"]["Engine"] == "cp-sat"

    def test_ac3_propagation(self):
        response = client.post("/api/schedule/solve", json=solve_payload(propagation="ac3"))
        assert response.status_code == 200

    def test_infeasible_is_422(self):
        payload = solve_payload(
            endDate="2025-07-10",
            constraints=[
                {"arity": 1, "meeting": 0, "op": "==", "date": "2025-07-10"},
                {"arity": 2, "left": 0, "op": "<", "right": 1},
            ],
        )
        response = client.post("/api/schedule/solve", json=payload)
        assert response.status_code == 422
        assert "No feasible schedule" in response.json()["detail"]

    def test_search_budget_is_408(self):
        payload = solve_payload(
            numMeetings=3,
            endDate="2025-07-08",
            constraints=[
                {"arity": 2, "left": 0, "op": "!=", "right": 1},
                {"arity": 2, "left": 0, "op": "!=", "right": 2},
                {"arity": 2, "left": 1, "op": "!=", "right": 2},
            ],
            maxNodes=1,
        )
        response = client.post("/api/schedule/solve", json=payload)
        assert response.status_code == 408

    @pytest.mark.parametrize(
        "overrides",
        [
            {"constraints": [{"arity": 2, "left": 0, "op": "<", "right": 2}]},
            {"constraints": [{"arity": 3, "left": 0, "op": "<", "right": 1}]},
            {"constraints": [{"arity": 2, "left": 0, "op": "=<", "right": 1}]},
            {"startDate": "2025-07-11", "endDate": "2025-07-07"},
            {"numMeetings": -1, "constraints": []},
        ],
        ids=["index", "arity", "operator", "range", "count"],
    )
    def test_bad_input_is_400(self, overrides):
        response = client.post("/api/schedule/solve", json=solve_payload(**overrides))
        assert response.status_code == 400

    def test_unary_without_a_date_is_rejected(self):
        payload = solve_payload(constraints=[{"arity": 1, "meeting": 0, "op": "<"}])
        response = client.post("/api/schedule/solve", json=payload)
        assert response.status_code == 422

    def test_range_too_long_is_rejected(self):
        payload = solve_payload(startDate="2000-01-01", endDate="2030-12-31")
        response = client.post("/api/schedule/solve", json=payload)
        assert response.status_code == 422


class TestCheck:
    def test_valid_schedule(self):
        payload = {
            "numMeetings": 2,
            "constraints": [{"arity": 2, "left": 0, "op": "<", "right": 1}],
            "schedule": ["2025-07-07", "2025-07-08"],
        }
        response = client.post("/api/schedule/check", json=payload)
        assert response.status_code == 200
        assert response.json() == {"valid": True, "violations": []}

    def test_reports_violations(self):
        payload = {
            "numMeetings": 2,
            "constraints": [
                {"arity": 2, "left": 0, "op": "<", "right": 1},
                {"arity": 1, "meeting": 1, "op": "<=", "date": "2025-07-08"},
            ],
            "schedule": ["2025-07-09", "2025-07-08"],
        }
        response = client.post("/api/schedule/check", json=payload)
        body = response.json()
        assert body["valid"] is False
        assert len(body["violations"]) == 1

    def test_bad_index_is_400(self):
        payload = {
            "numMeetings": 1,
            "constraints": [{"arity": 2, "left": 0, "op": "<", "right": 1}],
            "schedule": ["2025-07-07"],
        }
        response = client.post("/api/schedule/check", json=payload)
        assert response.status_code == 400


class TestApiKey:
    def test_key_required_when_configured(self, monkeypatch):
        monkeypatch.setattr(settings, "API_KEY", "secret")
        assert client.post("/api/schedule/solve", json=solve_payload()).status_code == 401
        response = client.post(
            "/api/schedule/solve", json=solve_payload(), headers={"x-api-key": "secret"}
        )
        assert response.status_code == 200

    def test_health_stays_public(self, monkeypatch):
        monkeypatch.setattr(settings, "API_KEY", "secret")
        assert client.get("/api/health/check").status_code == 200
