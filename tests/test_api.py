"""API tests through TestClient with the database dependency overridden."""

import uuid
from datetime import date
from unittest.mock import AsyncMock, patch

from liftlog.core.exceptions import PersistenceError
from liftlog.schemas.volume import DailyVolumeRecord
from liftlog.schemas.workout import WorkoutSavedRead

from .conftest import REPS_WEIGHT, make_entry

VOLUME_FETCH = "liftlog.api.v1.endpoints.volume.fetch_volume_records"
NOW = "2023-10-15T12:00:00Z"


def draft_json(*entries):
    return {"exercises": [e.model_dump(mode="json") for e in entries]}


class TestHealth:
    def test_root(self, client):
        assert client.get("/").json()["status"] == "ok"

    def test_health(self, client):
        response = client.get("/api/v1/health")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    def test_ready(self, client):
        response = client.get("/api/v1/health/ready")
        assert response.json() == {"status": "ok", "database": "connected"}


class TestSession:
    def test_missing_user_header(self, client):
        response = client.get("/api/v1/profile")
        assert response.status_code == 401
        assert response.json()["error"]["code"] == "UNAUTHORIZED"

    def test_malformed_user_header(self, client):
        response = client.get("/api/v1/profile", headers={"X-User-Id": "not-a-uuid"})
        assert response.status_code == 401


class TestValidate:
    def test_reports_per_set_validity(self, client, auth_headers):
        entry = make_entry(1, REPS_WEIGHT, {"reps": 5, "weight_kg": 20}, {"reps": 5})
        response = client.post("/api/v1/workouts/validate", json=draft_json(entry), headers=auth_headers)

        assert response.status_code == 200
        body = response.json()
        assert body["can_save"] is True
        assert body["sets"] == [[True, False]]
        assert len(body["exercises"][0]["sets"]) == 1

    def test_empty_draft(self, client, auth_headers):
        response = client.post("/api/v1/workouts/validate", json={"exercises": []}, headers=auth_headers)
        assert response.json()["can_save"] is False

    def test_too_many_sets_is_rejected(self, client, auth_headers):
        payload = draft_json(make_entry(1, REPS_WEIGHT))
        payload["exercises"][0]["sets"] = [
            {"set_number": n, "reps": 1, "weight_kg": 1} for n in range(1, 12)
        ]
        response = client.post("/api/v1/workouts/validate", json=payload, headers=auth_headers)
        assert response.status_code == 422


class TestSave:
    def test_unknown_exercise(self, client, auth_headers):
        entry = make_entry(1, REPS_WEIGHT, {"reps": 5, "weight_kg": 20})
        response = client.post("/api/v1/workouts", json=draft_json(entry), headers=auth_headers)
        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND"

    def test_nothing_valid(self, client, auth_headers):
        entry = make_entry(1, REPS_WEIGHT, {"reps": 5, "weight_kg": 0})
        with patch(
            "liftlog.services.workout_store.resolve_capabilities", AsyncMock(return_value=[entry])
        ):
            response = client.post("/api/v1/workouts", json=draft_json(entry), headers=auth_headers)
        assert response.status_code == 422
        error = response.json()["error"]
        assert error["code"] == "WORKOUT_VALIDATION_ERROR"
        assert error["message"] == "Log at least one complete set before saving."

    def test_created(self, client, auth_headers):
        saved = WorkoutSavedRead(
            id=uuid.uuid4(), workout_date=date(2023, 10, 15), exercise_count=1, set_count=1, total_volume=100
        )
        entry = make_entry(1, REPS_WEIGHT, {"reps": 5, "weight_kg": 20})
        with patch("liftlog.services.workout_store.save_draft", AsyncMock(return_value=saved)) as save:
            response = client.post("/api/v1/workouts", json=draft_json(entry), headers=auth_headers)
        assert response.status_code == 201
        assert response.json()["total_volume"] == 100
        assert save.await_args.args[1] == uuid.UUID(auth_headers["X-User-Id"])

    def test_persistence_failure_is_retryable(self, client, auth_headers):
        entry = make_entry(1, REPS_WEIGHT, {"reps": 5, "weight_kg": 20})
        with patch(
            "liftlog.services.workout_store.save_draft",
            AsyncMock(side_effect=PersistenceError("OperationalError")),
        ):
            response = client.post("/api/v1/workouts", json=draft_json(entry), headers=auth_headers)
        assert response.status_code == 503
        assert response.json()["error"]["details"]["retryable"] is True


class TestHistory:
    def test_empty_history(self, client, auth_headers):
        response = client.get("/api/v1/workouts", headers=auth_headers)
        assert response.status_code == 200
        assert response.json() == []

    def test_offset_out_of_range(self, client, auth_headers):
        response = client.get("/api/v1/workouts?tz_offset_minutes=900", headers=auth_headers)
        assert response.status_code == 422

    def test_delete_missing(self, client, auth_headers):
        response = client.delete(f"/api/v1/workouts/{uuid.uuid4()}", headers=auth_headers)
        assert response.status_code == 404


class TestVolume:
    def test_days_with_offset(self, client, auth_headers):
        records = [
            DailyVolumeRecord(date=date(2023, 10, 15), volume=300),
            DailyVolumeRecord(date=date(2023, 10, 10), volume=50),
        ]
        with patch(VOLUME_FETCH, AsyncMock(return_value=records)):
            response = client.get(
                "/api/v1/volume",
                params={"range": "7days", "tz_offset_minutes": -300, "now": NOW},
                headers=auth_headers,
            )
        assert response.status_code == 200
        body = response.json()
        assert body["time_range"] == "7days"
        assert [b["label"] for b in body["buckets"]][-2:] == ["Oct 14", "Oct 15"]
        assert body["buckets"][-2]["volume"] == 300
        assert body["buckets"][-1]["volume"] == 0
        assert body["total_volume"] == 350

    def test_default_range(self, client, auth_headers):
        response = client.get("/api/v1/volume", params={"now": NOW}, headers=auth_headers)
        assert response.status_code == 200
        assert len(response.json()["buckets"]) == 7

    def test_months(self, client, auth_headers):
        response = client.get(
            "/api/v1/volume", params={"range": "12months", "now": NOW}, headers=auth_headers
        )
        assert len(response.json()["buckets"]) == 12

    def test_unknown_range(self, client, auth_headers):
        response = client.get("/api/v1/volume", params={"range": "3days"}, headers=auth_headers)
        assert response.status_code == 422

    def test_malformed_row(self, client, auth_headers):
        with patch(VOLUME_FETCH, AsyncMock(return_value=[{"date": "2023-13-45", "volume": 1}])):
            response = client.get("/api/v1/volume", params={"now": NOW}, headers=auth_headers)
        assert response.status_code == 502
        error = response.json()["error"]
        assert error["code"] == "VOLUME_DATA_ERROR"
        assert error["message"] == "Failed to load volume data."


class TestProfileAndDashboard:
    def test_profile_defaults(self, client, auth_headers):
        response = client.get("/api/v1/profile", headers=auth_headers)
        assert response.json() == {"total_workouts": 0, "total_volume": 0.0, "unit_preference": "kg"}

    def test_update_unit_preference(self, client, auth_headers):
        response = client.patch("/api/v1/profile", json={"unit_preference": "lbs"}, headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["unit_preference"] == "lbs"

    def test_dashboard(self, client, auth_headers):
        response = client.get("/api/v1/dashboard", params={"range": "8weeks"}, headers=auth_headers)
        assert response.status_code == 200
        body = response.json()
        assert body["profile"]["total_workouts"] == 0
        assert len(body["volume"]["buckets"]) == 8


class TestExercises:
    def test_catalog(self, client, auth_headers):
        response = client.get("/api/v1/exercises", headers=auth_headers)
        assert response.status_code == 200
        assert response.json() == []

    def test_delete_unknown_user_exercise(self, client, auth_headers):
        response = client.delete(f"/api/v1/exercises/{uuid.uuid4()}", headers=auth_headers)
        assert response.status_code == 404
