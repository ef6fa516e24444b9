from typing import Optional

from gallery.config.settings import settings
from gallery.domain.image.optimizer import ImageOptimizer
from gallery.domain.manifest.builder import ManifestBuilder
from gallery.schemas.build_dto import ManifestBuildOptions
from gallery.services.manifest_service import ManifestService


def create_manifest_service(
        site_base_path: Optional[str] = None,
        release_repo_url: Optional[str] = None,
        content_prefix: Optional[str] = None,
) -> ManifestService:
    """
    ManifestService 인스턴스 생성

    Args:
        site_base_path: repo 모드 URL prefix (없으면 settings.SITE_BASE_PATH)
        release_repo_url: release 모드 저장소 URL (없으면 settings.RELEASE_REPO_URL)
        content_prefix: project.path prefix (없으면 루트 폴더명)

    Returns:
        ManifestService 인스턴스
    """
    options = ManifestBuildOptions(
        site_base_path=site_base_path or settings.SITE_BASE_PATH,
        release_repo_url=release_repo_url or settings.RELEASE_REPO_URL,
        content_prefix=content_prefix,
        image_exts=settings.IMAGE_EXTS,
        thumbnail_exts=settings.THUMBNAIL_EXTS,
    )
    return ManifestService(builder=ManifestBuilder(options))


def create_image_optimizer() -> ImageOptimizer:
    return ImageOptimizer(
        webp_quality=settings.WEBP_QUALITY,
        thumbnail_size=settings.THUMBNAIL_SIZE,
        thumbnail_quality=settings.THUMBNAIL_QUALITY,
    )
