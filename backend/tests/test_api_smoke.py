from fastapi.testclient import TestClient

from fittrack.core.config import Settings
from fittrack.main import create_app
from fittrack.storage.errors import StoreUnavailable


def get_client(**overrides):
    # In-memory store, seeded with the demo user (id 1)
    app_settings = Settings(storage_backend="memory", **overrides)
    return TestClient(create_app(app_settings))


def test_root_ok():
    client = get_client()
    r = client.get("/")
    assert r.status_code == 200
    data = r.json()
    assert "message" in data


def test_user_hides_password():
    client = get_client()
    r = client.get("/api/user/1")
    assert r.status_code == 200
    assert r.json()["username"] == "alex"
    assert r.json()["displayName"] == "Alex Johnson"
    assert "password" not in r.json()

    assert client.get("/api/user/99").status_code == 404


def test_create_update_delete_workout():
    client = get_client()
    payload = {
        "userId": 1,
        "type": "running",
        "name": "Test Run",
        "date": "2030-01-01T07:00:00Z",
        "duration": 40,
        "distance": 5.0,
    }
    cr = client.post("/api/workouts", json=payload)
    assert cr.status_code == 201, cr.text
    workout = cr.json()

    # list is most recent first, so the future-dated run leads
    lr = client.get("/api/workouts/1")
    assert lr.status_code == 200
    assert lr.json()[0]["id"] == workout["id"]

    ur = client.put(f"/api/workouts/{workout['id']}", json={"notes": "windy"})
    assert ur.status_code == 200
    assert ur.json()["notes"] == "windy"
    assert ur.json()["name"] == "Test Run"

    assert client.delete(f"/api/workouts/{workout['id']}").status_code == 204
    assert client.delete(f"/api/workouts/{workout['id']}").status_code == 404
    assert client.get(f"/api/workouts/1/{workout['id']}").status_code == 404


def test_invalid_workout_rejected():
    client = get_client()
    r = client.post(
        "/api/workouts",
        json={
            "userId": 1,
            "type": "yoga",
            "name": "x",
            "date": "2025-01-01T00:00:00Z",
            "duration": 0,
        },
    )
    assert r.status_code == 422


def test_unknown_user_conflict():
    client = get_client()
    r = client.post(
        "/api/goals",
        json={"userId": 42, "title": "t", "type": "other", "target": 1, "current": 0, "unit": "x"},
    )
    assert r.status_code == 409


def test_latest_measurement():
    client = get_client()
    r = client.get("/api/measurements/1/latest")
    assert r.status_code == 200
    assert r.json()["weight"] == 172

    assert client.get("/api/measurements/2/latest").status_code == 404


def test_goal_progress():
    client = get_client()
    r = client.get("/api/goals/1/progress")
    assert r.status_code == 200
    by_title = {g["title"]: g for g in r.json()}
    assert by_title["Lose 10 pounds"]["progress"] == 50
    assert by_title["Run 5K under 25 minutes"]["progress"] == 100
    assert by_title["Workout 5 days a week"]["timeRemaining"] == "Ongoing goal"


def test_goal_completed_filter():
    client = get_client()
    goal_id = client.get("/api/goals/1").json()[0]["id"]
    client.put(f"/api/goals/{goal_id}", json={"completed": True})

    done = client.get("/api/goals/1", params={"completed": "true"}).json()
    active = client.get("/api/goals/1", params={"completed": "false"}).json()
    assert [g["id"] for g in done] == [goal_id]
    assert len(active) == 2


def test_unseeded_app_is_empty():
    client = get_client(seed_demo_data=False)
    assert client.get("/api/user/1").status_code == 404
    assert client.get("/api/goals/1").json() == []


def test_measurement_round_trips_camel_case():
    client = get_client()
    cr = client.post(
        "/api/measurements",
        json={"userId": 1, "date": "2030-02-01T06:30:00Z", "bodyFat": 18, "waist": 33.5},
    )
    assert cr.status_code == 201, cr.text
    body = cr.json()
    assert body["userId"] == 1
    assert body["bodyFat"] == 18
    assert body["weight"] is None
    assert "user_id" not in body

    latest = client.get("/api/measurements/1/latest").json()
    assert latest["id"] == body["id"]


def test_goal_keys_are_camel_case():
    client = get_client()
    goal = client.get("/api/goals/1").json()[0]
    assert {"userId", "createdAt", "deadline", "completed"} <= set(goal)

    ur = client.put(f"/api/goals/{goal['id']}", json={"current": 26, "userId": 1})
    assert ur.status_code == 200
    assert ur.json()["current"] == 26


class _UnreachableStorage:
    """Every storage call fails the way a dropped database connection does."""

    def __getattr__(self, name):
        def fail(*args, **kwargs):
            raise StoreUnavailable("connection refused")
        return fail


def test_store_unavailable_maps_to_503():
    app = create_app(Settings(seed_demo_data=False), storage=_UnreachableStorage())
    client = TestClient(app)

    r = client.get("/api/workouts/1")
    assert r.status_code == 503
    assert r.json() == {"detail": "Storage unavailable"}

    r = client.delete("/api/goals/1")
    assert r.status_code == 503
