"""App-level Routes — unmatched paths, the /api index, and health probes."""

from fastapi.routing import APIRoute

from app.api.routes.endpoints import ENDPOINTS
from app.main import app


async def test_unmatched_route_is_404_not_found(client):
    res = await client.get("/not-a-route")
    assert res.status_code == 404
    assert res.json() == {"message": "Not Found"}


async def test_unmatched_api_route_is_404_not_found(client):
    res = await client.get("/api/articles/1/authors")
    assert res.status_code == 404
    assert res.json() == {"message": "Not Found"}


async def test_wrong_method_has_message_body(client):
    res = await client.put("/api/topics")
    assert res.status_code == 405
    assert set(res.json()) == {"message"}


async def test_api_index_lists_endpoints(client):
    res = await client.get("/api")
    assert res.status_code == 200
    endpoints = res.json()["endpoints"]
    assert "GET /api/articles" in endpoints
    assert endpoints["GET /api/articles"]["queries"] == ["topic", "sort_by", "order"]


def test_api_index_covers_registered_routes():
    documented = {
        key.split(" ", 1)[1].replace(":article_id", "{article_id}")
        .replace(":comment_id", "{comment_id}").replace(":username", "{username}")
        for key in ENDPOINTS
    }
    registered = {
        route.path for route in app.routes
        if isinstance(route, APIRoute)
        and route.path.startswith("/api") and not route.path.startswith("/api/health")
    }
    assert registered == documented


async def test_health_liveness(client):
    res = await client.get("/api/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_health_readiness_without_database_is_503(client):
    res = await client.get("/api/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"
