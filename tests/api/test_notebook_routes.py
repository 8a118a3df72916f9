"""Tests for the notebook API routes."""

import inspect
from io import BytesIO

import pytest
from fastapi.testclient import TestClient
from PIL import Image

from tft_notebook.api.dependencies import get_notebook_service
from tft_notebook.api.main import app
from tft_notebook.api.services.notebook_service import NotebookService
from tft_notebook.core import StateFile
from tft_notebook.data.loaders import ImageCache


class IconClient:
    """Serves a tiny PNG for any asset."""

    def fetch_asset(self, path):
        buffer = BytesIO()
        Image.new("RGB", (8, 8)).save(buffer, format="PNG")
        return buffer.getvalue()


@pytest.fixture
def client(service):
    """Test client bound to the sample notebook."""
    app.dependency_overrides[get_notebook_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestRootEndpoints:
    """Tests for root endpoints."""

    def test_root(self, client):
        """Test root endpoint."""
        response = client.get("/")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["name"] == "TFT Notebook API"

    def test_health(self, client):
        """Test health check endpoint."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestDataRoutes:
    """Tests for catalog routes."""

    def test_champions(self, client):
        response = client.get("/api/data/champions")
        assert response.status_code == 200
        assert [c["name"] for c in response.json()] == ["Ahri", "Garen", "Jinx"]
        assert response.json()[0]["apiName"] == "TFT8_Ahri"

    def test_champion(self, client):
        response = client.get("/api/data/champions/Jinx")
        assert response.status_code == 200
        assert response.json()["cost"] == 3

    def test_unknown_champion(self, client):
        response = client.get("/api/data/champions/Training Dummy")
        assert response.status_code == 404
        assert response.json()["status"] == "error"
        assert response.json()["kind"] == "champion"
        assert response.json()["key"] == "Training Dummy"

    def test_items(self, client):
        response = client.get("/api/data/items")
        assert response.status_code == 200
        assert all(item["composition"] for item in response.json())

    def test_components(self, client):
        response = client.get("/api/data/components")
        assert response.status_code == 200
        assert len(response.json()) == 5

    def test_item(self, client):
        response = client.get("/api/data/items/TFT_Item_Deathblade")
        assert response.status_code == 200
        assert response.json()["name"] == "Deathblade"

    def test_unknown_item(self, client):
        assert client.get("/api/data/items/TFT_Item_Nope").status_code == 404

    def test_icon_without_cache(self, client):
        assert client.get("/api/data/champions/Ahri/icon").status_code == 502

    def test_icon(self, catalog, state_file, tmp_path):
        service = NotebookService(catalog, state_file, ImageCache(tmp_path, IconClient()))
        app.dependency_overrides[get_notebook_service] = lambda: service
        try:
            response = TestClient(app).get("/api/data/items/TFT_Item_Deathblade/icon")
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 200
        assert response.headers["content-type"] == "image/png"

    def test_icon_routes_run_in_threadpool(self):
        icon_routes = [r for r in app.routes if getattr(r, "path", "").endswith("/icon")]
        assert len(icon_routes) == 2
        for route in icon_routes:
            assert not inspect.iscoroutinefunction(route.endpoint)


class TestBuildRoutes:
    """Tests for build routes."""

    def test_get_builds(self, client):
        response = client.get("/api/builds")
        assert response.status_code == 200
        assert all(b["items"] == [] for b in response.json())

    def test_select_and_assign(self, client):
        response = client.post("/api/builds/select", json={"champion_name": "Garen"})
        assert response.status_code == 200

        response = client.post("/api/builds/assign", json={"item_api_name": "TFT_Item_BrambleVest"})
        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Garen"
        assert [i["name"] for i in data["items"]] == ["Bramble Vest"]

    def test_assign_without_focus(self, client):
        response = client.post("/api/builds/assign", json={"item_api_name": "TFT_Item_BrambleVest"})
        assert response.status_code == 409

    def test_assign_to_named(self, client):
        response = client.post(
            "/api/builds/assign",
            json={"item_api_name": "TFT_Item_Deathblade", "champion_name": "Jinx"},
        )
        assert response.status_code == 200
        assert client.get("/api/builds/Jinx").json()["items"][0]["api_name"] == "TFT_Item_Deathblade"

    def test_assign_unknown_item(self, client):
        response = client.post(
            "/api/builds/assign",
            json={"item_api_name": "TFT_Item_Nope", "champion_name": "Jinx"},
        )
        assert response.status_code == 404

    @pytest.mark.parametrize(
        "api_name",
        ["TFT_Item_BFSword", "TFT_Item_Unused", "TFT5_Item_DeathbladeRadiant"],
    )
    def test_assign_filtered_item(self, client, api_name):
        response = client.post(
            "/api/builds/assign",
            json={"item_api_name": api_name, "champion_name": "Ahri"},
        )
        assert response.status_code == 404
        assert client.get("/api/builds/Ahri").json()["items"] == []

    def test_select_unknown(self, client):
        response = client.post("/api/builds/select", json={"champion_name": "Nobody"})
        assert response.status_code == 404

    def test_remove(self, client):
        payload = {"item_api_name": "TFT_Item_Deathblade", "champion_name": "Jinx"}
        client.post("/api/builds/assign", json=payload)
        client.post("/api/builds/assign", json=payload)

        response = client.post("/api/builds/Jinx/remove", json={"item_api_name": "TFT_Item_Deathblade"})
        assert response.status_code == 200
        assert len(response.json()["items"]) == 1

    def test_remove_absent_item(self, client):
        response = client.post("/api/builds/Jinx/remove", json={"item_api_name": "TFT_Item_Deathblade"})
        assert response.status_code == 200
        assert response.json()["items"] == []

    def test_clear(self, client):
        client.post(
            "/api/builds/assign",
            json={"item_api_name": "TFT_Item_Deathblade", "champion_name": "Ahri"},
        )
        response = client.post("/api/builds/Ahri/clear")
        assert response.status_code == 200
        assert response.json()["items"] == []

    def test_clear_unknown(self, client):
        assert client.post("/api/builds/Nobody/clear").status_code == 404


class TestComponentRoutes:
    """Tests for inventory routes."""

    def test_inventory(self, client):
        response = client.get("/api/components")
        assert response.status_code == 200
        assert {c["count"] for c in response.json()} == {0}

    def test_increment_and_decrement(self, client):
        assert client.post("/api/components/TFT_Item_BFSword/increment").json()["count"] == 1
        assert client.post("/api/components/TFT_Item_BFSword/decrement").json()["count"] == 0
        assert client.post("/api/components/TFT_Item_BFSword/decrement").json()["count"] == 0

    def test_adjust(self, client):
        response = client.post("/api/components/TFT_Item_ChainVest/adjust", json={"delta": 1})
        assert response.status_code == 200
        assert response.json()["count"] == 1

    def test_adjust_rejects_large_delta(self, client):
        response = client.post("/api/components/TFT_Item_ChainVest/adjust", json={"delta": 3})
        assert response.status_code == 422

    def test_unknown_component(self, client):
        assert client.post("/api/components/TFT_Item_Deathblade/increment").status_code == 404


class TestNotebookRoutes:
    """Tests for session routes."""

    def test_state(self, client):
        response = client.get("/api/notebook")
        assert response.status_code == 200
        data = response.json()
        assert data["screen"] == "item_determiner"
        assert data["sort_order"] == "roster"
        assert data["champion_count"] == 3
        assert data["component_count"] == 5

    def test_focus(self, client):
        assert client.get("/api/notebook/focus").json()["summary"] == "No champion selected"
        client.post("/api/builds/select", json={"champion_name": "Ahri"})
        assert client.get("/api/notebook/focus").json()["summary"] == "Ahri: no items"

    def test_switch_screen(self, client):
        response = client.put("/api/notebook/screen", json={"screen": "character_builder"})
        assert response.status_code == 200
        assert response.json()["screen"] == "character_builder"

    def test_invalid_screen(self, client):
        assert client.put("/api/notebook/screen", json={"screen": "settings"}).status_code == 422

    def test_sort_order(self, client):
        response = client.put("/api/notebook/sort", json={"order": "cost"})
        assert response.status_code == 200
        names = [b["name"] for b in client.get("/api/builds").json()]
        assert names == ["Garen", "Jinx", "Ahri"]

    def test_ranking(self, client):
        client.post(
            "/api/builds/assign",
            json={"item_api_name": "TFT_Item_BrambleVest", "champion_name": "Garen"},
        )
        client.post("/api/components/TFT_Item_ChainVest/increment")

        response = client.get("/api/notebook/ranking")
        assert response.status_code == 200
        data = response.json()
        assert data[0]["name"] == "Garen"
        assert data[0]["score"] == 1
        assert [m["score"] for m in data[1:]] == [0, 0]

    def test_save(self, client, state_file):
        client.post(
            "/api/builds/assign",
            json={"item_api_name": "TFT_Item_Deathblade", "champion_name": "Jinx"},
        )
        response = client.post("/api/notebook/save")
        assert response.status_code == 200
        assert response.json()["path"] == str(state_file.path)
        assert response.json()["status"] == "success"
        assert state_file.path.exists()

    def test_save_failure(self, catalog, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        service = NotebookService(catalog, StateFile(blocker / "champ_info.json"))
        app.dependency_overrides[get_notebook_service] = lambda: service
        try:
            response = TestClient(app).post("/api/notebook/save")
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 500
        assert response.json()["error"] == "save failed"
        assert response.json()["kind"] is None
