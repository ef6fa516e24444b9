"""
API Integration Tests

manifest 미리보기 엔드포인트 통합 테스트
"""
from fastapi import status

from tests.test_helpers import assert_manifest_invariants


class TestHealthEndpoints:

    def test_basic_health_check(self, client):
        response = client.get("/health")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["status"] == "ok"
        assert "version" in data


class TestManifestEndpoints:

    def test_data_json(self, client):
        response = client.get("/data.json")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert set(data) == {"generated", "categories", "projects"}
        assert_manifest_invariants(data)
        assert [p["title"] for p in data["projects"]] == ["Castle", "Empty", "landing page", "Robot"]

    def test_single_project(self, client):
        response = client.get("/projects/3D/castle")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["imageSource"] == "release"
        assert data["releaseVersion"] == "v20250101"

    def test_unknown_project_404(self, client):
        response = client.get("/projects/3D/nope")
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_missing_root_404(self, client, tmp_path):
        from gallery.common.dependencies import get_portfolio_root
        from gallery.main import app

        app.dependency_overrides[get_portfolio_root] = lambda: tmp_path / "missing"
        response = client.get("/data.json")
        assert response.status_code == status.HTTP_404_NOT_FOUND
