"""
manifest 생성 Domain Logic
폴더 트리 스캔 → ManifestDocument
"""
import json
import logging
import unicodedata
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, List, NamedTuple, Optional, Union

from pydantic import ValidationError

from gallery.common.errors import ManifestRootError, MetadataError
from gallery.domain.category.formatter import CategoryAggregator
from gallery.domain.image.resolver import resolve_images, resolve_thumbnail
from gallery.domain.image.source import select_image_source
from gallery.schemas.build_dto import ManifestBuildOptions
from gallery.schemas.manifest_dto import ManifestDocument, Project
from gallery.schemas.metadata_dto import ProjectMetadata
from gallery.storage.local_fs import LocalFS

logger = logging.getLogger(__name__)


class ProjectOutcome(NamedTuple):
    """metadata.json 하나의 처리 결과 (project 또는 error 중 하나만 채워짐)"""
    path: Path
    project: Optional[Project]
    error: Optional[Exception]

    @property
    def ok(self) -> bool:
        return self.error is None


def title_sort_key(title: str):
    # 악센트/대소문자 무시 비교 → 동률이면 원문 비교
    decomposed = unicodedata.normalize("NFKD", title)
    base = "".join(c for c in decomposed if not unicodedata.combining(c))
    return base.casefold(), decomposed.casefold(), title


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """2026-01-02T08:00:00.000Z 형식"""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def load_metadata(path: Path) -> ProjectMetadata:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        raise MetadataError(path, f"cannot read: {e}") from e
    except json.JSONDecodeError as e:
        raise MetadataError(path, f"invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise MetadataError(path, "metadata must be a JSON object")

    try:
        return ProjectMetadata.model_validate(data)
    except ValidationError as e:
        raise MetadataError(path, f"invalid metadata: {e.errors()}") from e


class ManifestBuilder:
    """portfolio 폴더 트리 → data.json 문서"""

    def __init__(
        self,
        options: Optional[ManifestBuildOptions] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.options = options or ManifestBuildOptions()
        self._clock = clock

    def collect(self, root: Union[str, Path]) -> List[ProjectOutcome]:
        """
        모든 프로젝트를 처리해서 결과를 모은다. 프로젝트 단위 실패는 로그만 남기고 계속.

        Raises:
            ManifestRootError: root 디렉토리가 없을 때
        """
        fs = LocalFS(Path(root))
        if not fs.exists():
            raise ManifestRootError(root)

        prefix = self.options.content_prefix
        if prefix is None:
            prefix = fs.root.resolve().name

        metadata_files = fs.metadata_files()
        logger.info(f"📊 Found {len(metadata_files)} projects in {fs.root}")

        outcomes: List[ProjectOutcome] = []
        for metadata_path in metadata_files:
            try:
                project = self._build_project(fs, metadata_path, prefix)
            except (MetadataError, OSError, ValueError) as e:
                logger.error(f"✗ Error processing {metadata_path}: {e}")
                outcomes.append(ProjectOutcome(metadata_path, None, e))
                continue
            logger.info(f"✓ {project.category}/{project.id} - {project.title}")
            outcomes.append(ProjectOutcome(metadata_path, project, None))
        return outcomes

    def build(self, root: Union[str, Path]) -> ManifestDocument:
        return self.build_from(self.collect(root))

    def build_from(self, outcomes: List[ProjectOutcome]) -> ManifestDocument:
        categories = CategoryAggregator()
        projects: List[Project] = []
        for outcome in outcomes:
            if not outcome.ok:
                continue
            categories.add(outcome.project.category)
            projects.append(outcome.project)

        projects.sort(key=lambda p: title_sort_key(p.title))

        return ManifestDocument(
            generated=utc_timestamp(self._clock() if self._clock else None),
            categories=categories.categories(),
            projects=projects,
        )

    # ----- 내부 -----
    def _build_project(self, fs: LocalFS, metadata_path: Path, prefix: str) -> Project:
        project_dir = metadata_path.parent
        project_id = project_dir.name
        category = project_dir.parent.name
        project_rel = f"{category}/{project_id}"
        project_path = f"{prefix}/{project_rel}" if prefix else project_rel

        metadata = load_metadata(metadata_path)

        source = select_image_source(
            metadata,
            category=category,
            project_id=project_id,
            project_path=project_path,
            site_base_path=self.options.site_base_path,
            release_repo_url=self.options.release_repo_url,
        )
        images = resolve_images(fs, project_rel, metadata, source, self.options.image_exts)
        thumbnail = resolve_thumbnail(
            fs, project_rel, metadata, source, images, self.options.thumbnail_exts
        )

        return Project(
            id=project_id,
            title=metadata.title or project_id,
            description=metadata.description or "",
            category=category,
            path=project_path,
            thumbnail=thumbnail,
            images=images,
            release_version=source.release_version,
            image_source=source.kind,
        )
