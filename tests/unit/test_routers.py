"""
Router tests against create_app() with the catalog and remote matcher
overridden through FastAPI dependency injection.
"""

import pytest
from fastapi.testclient import TestClient

from api.deps import get_catalog, get_catalog_matcher
from backend.main import create_app
from backend.settings import Settings
from tests.fakes import FakeCatalogMatcher


@pytest.fixture
def settings():
    return Settings(environment="test", openai_api_key=None, _env_file=None)


@pytest.fixture
def fake_matcher():
    return FakeCatalogMatcher({"Skullcrushers": "Skull Crusher"})


@pytest.fixture
def app(settings, catalog, fake_matcher):
    app = create_app(settings=settings)
    app.dependency_overrides[get_catalog] = lambda: catalog
    app.dependency_overrides[get_catalog_matcher] = lambda: fake_matcher
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.mark.unit
class TestHealthRouter:

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_ready(self, client):
        response = client.get("/health/ready")
        assert response.status_code == 200
        body = response.json()
        assert body["catalog_size"] == 10
        assert body["remote_matching"] is False


@pytest.mark.unit
class TestExercisesRouter:

    def test_catalog(self, client, catalog):
        response = client.get("/exercises/catalog")
        assert response.status_code == 200
        body = response.json()
        assert body["exercises"] == list(catalog.names)
        assert body["count"] == 10

    def test_match_local_and_remote(self, client, fake_matcher):
        response = client.post("/exercises/match", json={
            "names": ["barbell bench press", "Skullcrushers", "barbell bench press", "Zumba"],
        })
        assert response.status_code == 200
        assert response.json()["matches"] == [
            {"input": "barbell bench press", "match": "Barbell Bench Press"},
            {"input": "Skullcrushers", "match": "Skull Crusher"},
            {"input": "Zumba", "match": None},
        ]
        assert fake_matcher.call_count == 1
        assert fake_matcher.last_names == ["Skullcrushers", "Zumba"]

    def test_match_fails_open(self, client, fake_matcher):
        fake_matcher.fail_with()
        response = client.post("/exercises/match", json={
            "names": ["barbell bench press", "Skullcrushers"],
        })
        assert response.status_code == 200
        assert response.json()["matches"] == [
            {"input": "barbell bench press", "match": "Barbell Bench Press"},
            {"input": "Skullcrushers", "match": None},
        ]

    def test_normalize_survives_unexpected_matcher_error(self, client, fake_matcher):
        fake_matcher.fail_with(RuntimeError("connection reset"))
        response = client.post("/workouts/normalize", json={
            "days": [{"exercises": [{"name": "Skullcrushers"}]}],
        })
        assert response.status_code == 200
        assert response.json()["days"][0]["exercises"][0]["name"] == "Skullcrushers"

    def test_match_without_remote_matcher(self, app, client):
        app.dependency_overrides[get_catalog_matcher] = lambda: None
        response = client.post("/exercises/match", json={"names": ["Skullcrushers"]})
        assert response.status_code == 200
        assert response.json()["matches"] == [{"input": "Skullcrushers", "match": None}]

    def test_match_empty(self, client, fake_matcher):
        response = client.post("/exercises/match", json={"names": []})
        assert response.status_code == 200
        assert response.json() == {"matches": []}
        assert fake_matcher.call_count == 0

    def test_match_too_many_names(self, client):
        response = client.post("/exercises/match", json={"names": [f"ex {i}" for i in range(201)]})
        assert response.status_code == 422

    def test_suggest(self, client):
        response = client.get("/exercises/suggest", params={"name": "bench press", "limit": 2})
        assert response.status_code == 200
        body = response.json()
        assert {s["name"] for s in body} == {"Barbell Bench Press", "Incline Dumbbell Bench Press"}
        assert all(0.0 <= s["confidence"] <= 1.0 for s in body)

    def test_suggest_limit_bounds(self, client):
        response = client.get("/exercises/suggest", params={"name": "bench", "limit": 0})
        assert response.status_code == 422


@pytest.mark.unit
class TestWorkoutsRouter:

    def test_normalize(self, client, fake_matcher):
        response = client.post("/workouts/normalize", json={
            "name": "Push Pull",
            "days": [
                {"name": "Push", "exercises": [
                    {"name": "barbell bench press", "sets": 4, "reps": 8, "weight": "135 lbs"},
                    {"name": "Skullcrushers", "reps": ["12", "10"], "restTime": "60s"},
                ]},
                {"isRestDay": True},
                {"name": "Pull", "exercises": [{"name": "Pull Up", "weight": "8 RPE"}]},
            ],
        })
        assert response.status_code == 200
        plan = response.json()

        assert plan["name"] == "Push Pull"
        assert plan["id"].startswith("workout-")
        assert "uploadedAt" in plan

        push, rest, pull = plan["days"]
        assert [ex["name"] for ex in push["exercises"]] == ["Barbell Bench Press", "Skull Crusher"]
        assert push["exercises"][0]["reps"] == "8"
        assert push["exercises"][1]["restTime"] == "60s"
        assert push["exercises"][1]["sets"] == 3
        assert rest["name"] == "Day 2"
        assert rest["isRestDay"] is True
        assert pull["exercises"][0]["name"] == "Pull-Up"
        assert pull["exercises"][0]["weight"] is None
        assert pull["exercises"][0]["targetNotes"] == "RPE 8"

        assert fake_matcher.last_names == ["Skullcrushers"]

    def test_normalize_empty_tree(self, client):
        response = client.post("/workouts/normalize", json={})
        assert response.status_code == 200
        plan = response.json()
        assert plan["name"] == "My Workout Plan"
        assert plan["days"] == []


@pytest.mark.unit
class TestPlatesRouter:

    def test_default_plates(self, client):
        response = client.post("/plates/calculate", json={"targetWeight": 225})
        assert response.status_code == 200
        assert response.json() == {
            "plates": [{"weight": 45.0, "count": 2}],
            "totalWeight": 225.0,
            "exact": True,
            "barbellWeight": 45.0,
            "formatted": "2×45 per side",
        }

    def test_custom_inventory_inexact(self, client):
        response = client.post("/plates/calculate", json={
            "targetWeight": 315,
            "plates": [{"weight": 45, "available": 1}],
        })
        body = response.json()
        assert body["exact"] is False
        assert body["totalWeight"] == 135.0

    def test_custom_bar(self, client):
        response = client.post("/plates/calculate", json={"targetWeight": 125, "barbellWeight": 35})
        body = response.json()
        assert body["plates"] == [{"weight": 45.0, "count": 1}]
        assert body["barbellWeight"] == 35.0

    def test_bar_default_from_settings(self):
        app = create_app(settings=Settings(environment="test", default_barbell_weight=35, _env_file=None))
        response = TestClient(app).post("/plates/calculate", json={"targetWeight": 35})
        body = response.json()
        assert body["formatted"] == "Bar only (35 lbs)"
        assert body["exact"] is True

    def test_negative_target_rejected(self, client):
        response = client.post("/plates/calculate", json={"targetWeight": -10})
        assert response.status_code == 422
