from pathlib import Path

from gallery.config.settings import settings
from gallery.services.manifest_service import ManifestService
from gallery.services.service_factory import create_manifest_service


def get_portfolio_root() -> Path:
    """스캔할 portfolio 루트 (테스트에서 dependency_overrides로 교체)"""
    return settings.PORTFOLIO_DIR


def get_manifest_service() -> ManifestService:
    return create_manifest_service()
