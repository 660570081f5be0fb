"""
Tests for the inspection API
"""

import inspect

import pytest
from fastapi.testclient import TestClient

from hollow import __version__
from hollow.cache import TypeCache
from hollow.server.app import app, describe, get_cache, list_stubs, stats


@pytest.fixture
def cache():
    registry = TypeCache()
    app.dependency_overrides[get_cache] = lambda: registry
    yield registry
    app.dependency_overrides.clear()


@pytest.fixture
def client(cache):
    return TestClient(app)


def test_health(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "version": __version__}


def test_describe_point(client):
    response = client.post("/api/describe", json={"contract": "hollow.tests.contracts:Point"})

    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "PointStub"
    assert [(p["name"], p["default"]) for p in body["properties"]] == [("x", "0"), ("y", "0")]
    assert body["methods"] == []


@pytest.mark.parametrize("reference", [
    "hollow.tests.contracts:Nope",
    "no_such_module_for_hollow:Thing",
])
def test_describe_unknown_contract(client, reference):
    response = client.post("/api/describe", json={"contract": reference})
    assert response.status_code == 404


@pytest.mark.parametrize("reference", ["builtins:len", "builtins:bool"])
def test_describe_unusable_contract(client, reference):
    response = client.post("/api/describe", json={"contract": reference})
    assert response.status_code == 400


def test_describe_unconstructible_default(client):
    response = client.post("/api/describe", json={"contract": "hollow.tests.contracts:Meter"})

    assert response.status_code == 422
    assert "reading" in response.json()["detail"]


def test_list_and_stats(client, cache):
    client.post("/api/describe", json={"contract": "hollow.tests.contracts:Shape"})
    client.post("/api/describe", json={"contract": "hollow.tests.contracts:Shape"})

    listing = client.get("/api/stubs").json()
    assert listing["total"] == 1
    assert listing["stubs"][0]["name"] == "ShapeStub"

    stats = client.get("/api/stats").json()
    assert stats == {
        "hits": 1,
        "misses": 1,
        "syntheses": 1,
        "failures": 0,
        "total_entries": 1
    }


@pytest.mark.parametrize("endpoint", [describe, list_stubs, stats])
def test_registry_endpoints_run_in_threadpool(endpoint):
    """Endpoints that take the registry lock must not block the event loop"""
    assert not inspect.iscoroutinefunction(endpoint)
