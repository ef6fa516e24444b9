"""
이미지 목록/썸네일 결정 Domain Logic
프로젝트 폴더 + metadata → ImageRef 리스트, 썸네일 URL
"""
import logging
from pathlib import Path
from typing import List, Optional, Sequence

from gallery.domain.image.source import ImageSource, ReleaseSource
from gallery.schemas.manifest_dto import ImageRef
from gallery.schemas.metadata_dto import ProjectMetadata
from gallery.storage.local_fs import LocalFS

logger = logging.getLogger(__name__)

DEFAULT_IMAGE_EXTS = ("webp", "png", "jpg", "jpeg")
DEFAULT_THUMBNAIL_EXTS = ("webp", "jpg", "png")


def _ext(p: Path) -> str:
    return p.suffix.lower().lstrip(".")


def prefer_webp(paths: Sequence[Path], exts: Sequence[str] = DEFAULT_IMAGE_EXTS) -> List[Path]:
    """
    같은 basename의 WebP가 있으면 raster(png/jpg/jpeg) 버전은 버린다.

    Returns:
        basename 순 정렬, 같은 basename 내에서는 exts 우선순위 순
    """
    order = {e.lower().lstrip("."): i for i, e in enumerate(exts)}
    webp_stems = {p.stem for p in paths if _ext(p) == "webp"}

    kept = [p for p in paths if _ext(p) == "webp" or p.stem not in webp_stems]
    return sorted(kept, key=lambda p: (p.stem, order.get(_ext(p), len(order)), p.name))


def collect_images(fs: LocalFS, project_rel: str, exts: Sequence[str] = DEFAULT_IMAGE_EXTS) -> List[Path]:
    """images/ 폴더 스캔. 폴더가 없으면 이미지 0장 (에러 아님)"""
    found = fs.glob_images(f"{project_rel}/images", exts)
    return prefer_webp(found, exts)


def resolve_images(
    fs: LocalFS,
    project_rel: str,
    metadata: ProjectMetadata,
    source: ImageSource,
    exts: Sequence[str] = DEFAULT_IMAGE_EXTS,
) -> List[ImageRef]:
    """
    이미지 목록 결정

    - metadata.images가 있으면 그 순서 그대로 (파일시스템 스캔보다 우선)
    - 없으면 images/ 폴더 스캔 결과 (WebP 우선)
    """
    if metadata.images is not None:
        names = list(metadata.images)
        if not isinstance(source, ReleaseSource):
            missing = [n for n in names if not (fs.root / project_rel / "images" / n).is_file()]
            if missing:
                logger.warning(f"⚠ {project_rel}: metadata.images에 없는 파일 {missing}")
    else:
        names = [p.name for p in collect_images(fs, project_rel, exts)]

    return [ImageRef(name=n, url=source.url_for(n), source=source.kind) for n in names]


def resolve_thumbnail(
    fs: LocalFS,
    project_rel: str,
    metadata: ProjectMetadata,
    source: ImageSource,
    images: List[ImageRef],
    thumbnail_exts: Sequence[str] = DEFAULT_THUMBNAIL_EXTS,
) -> Optional[str]:
    """
    썸네일 우선순위
    - release: metadata.thumbnail(릴리스 파일명 규칙 적용) → 첫 이미지
    - repo: thumbnail.{webp,jpg,png} 중 처음 존재하는 파일 → 첫 이미지
    - 이미지가 하나도 없으면 None
    """
    if isinstance(source, ReleaseSource):
        if metadata.thumbnail:
            return source.thumbnail_url(metadata.thumbnail)
    else:
        candidates = [f"thumbnail.{e.lower().lstrip('.')}" for e in thumbnail_exts]
        local = fs.first_existing(project_rel, candidates)
        if local is not None:
            return source.thumbnail_url(local.name)

    return images[0].url if images else None
