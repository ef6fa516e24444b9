"""
Pytest Configuration & Shared Fixtures

이 파일은 모든 테스트에서 재사용 가능한 fixture를 정의합니다.
"""
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from gallery.domain.manifest.builder import ManifestBuilder
from gallery.schemas.build_dto import ManifestBuildOptions
from gallery.services.manifest_service import ManifestService
from tests.test_helpers import RELEASE_REPO, make_project


# ========================================
# Builder / Service Fixtures
# ========================================

@pytest.fixture
def build_options() -> ManifestBuildOptions:
    """테스트용 고정 URL 옵션"""
    return ManifestBuildOptions(
        site_base_path="/site/",
        release_repo_url=RELEASE_REPO,
    )


@pytest.fixture
def fixed_clock():
    return lambda: datetime(2026, 1, 2, 8, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def builder(build_options, fixed_clock) -> ManifestBuilder:
    return ManifestBuilder(build_options, clock=fixed_clock)


@pytest.fixture
def manifest_service(builder) -> ManifestService:
    return ManifestService(builder=builder)


# ========================================
# Portfolio Tree Fixtures
# ========================================

@pytest.fixture
def portfolio_root(tmp_path):
    """빈 portfolio 루트"""
    root = tmp_path / "portfolio"
    root.mkdir()
    return root


@pytest.fixture
def sample_portfolio(portfolio_root):
    """
    repo/release 모드, 썸네일 유무, 이미지 없는 프로젝트가 섞인 샘플 트리
    """
    make_project(
        portfolio_root, "3D", "robot",
        {"title": "Robot", "description": "Hard-surface model"},
        images=["front.png", "front.webp", "side.jpg"],
        thumbnails=["thumbnail.jpg"],
    )
    make_project(
        portfolio_root, "3D", "castle",
        {"title": "Castle", "releaseVersion": "v20250101", "images": ["b.png", "a.png"]},
    )
    make_project(
        portfolio_root, "web-design", "landing",
        {"title": "landing page"},
        images=["hero.jpeg"],
    )
    make_project(portfolio_root, "web-design", "empty", {"title": "Empty"})
    return portfolio_root


# ========================================
# Application Fixtures
# ========================================

@pytest.fixture
def client(sample_portfolio, manifest_service):
    """sample_portfolio를 바라보는 TestClient"""
    from gallery.common.dependencies import get_manifest_service, get_portfolio_root
    from gallery.main import app

    app.dependency_overrides[get_manifest_service] = lambda: manifest_service
    app.dependency_overrides[get_portfolio_root] = lambda: sample_portfolio
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
