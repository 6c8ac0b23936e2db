from app.core.config import settings


def test_root_returns_message(client):
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "HR Dashboard API"


def test_health_returns_status(client):
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] in ("healthy", "degraded")
    assert data["version"] == "0.1.0"
    assert "services" in data


def test_bookmark_store_attached_on_startup(client):
    store = client.app.state.bookmark_store
    assert store is not None
    assert store.key == settings.BOOKMARKS_STORAGE_KEY
