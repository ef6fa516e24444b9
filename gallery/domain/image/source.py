"""
이미지 호스팅 방식 Domain Logic
프로젝트마다 한 번 선택해서 URL 생성에 그대로 넘긴다.
"""
from __future__ import annotations
from typing import Optional, Union

from gallery.schemas.metadata_dto import ProjectMetadata
from gallery.utils.enums.enums import ImageSourceEnum


def _normalize_base_path(base_path: str) -> str:
    base = base_path or "/"
    if not base.startswith(("/", "http://", "https://")):
        base = "/" + base
    return base if base.endswith("/") else base + "/"


class RepoSource:
    """사이트와 같은 origin에서 파일을 직접 서빙"""

    kind = ImageSourceEnum.repo
    release_version: Optional[str] = None

    def __init__(self, base_path: str, project_path: str):
        self.base_path = _normalize_base_path(base_path)
        self.project_path = project_path.strip("/")

    def url_for(self, name: str) -> str:
        return f"{self.base_path}{self.project_path}/images/{name}"

    def thumbnail_url(self, filename: str) -> str:
        # repo 모드 썸네일은 images/ 가 아니라 프로젝트 폴더 바로 아래
        return f"{self.base_path}{self.project_path}/{filename}"

    def __repr__(self) -> str:
        return f"RepoSource({self.base_path}{self.project_path})"


class ReleaseSource:
    """외부 릴리스 저장소(버전 태그)에서 파일을 가져옴"""

    kind = ImageSourceEnum.release

    def __init__(self, repo_url: str, version: str, category: str, project_id: str):
        self.repo_url = repo_url.rstrip("/")
        self.release_version = version
        self.category = category
        self.project_id = project_id

    @property
    def base_url(self) -> str:
        return f"{self.repo_url}/releases/download/{self.release_version}/"

    def release_filename(self, name: str) -> str:
        """릴리스 업로드 파일명 규칙: CATEGORY_PROJECT_원본파일명"""
        return f"{self.category}_{self.project_id}_{name}"

    def url_for(self, name: str) -> str:
        return self.base_url + self.release_filename(name)

    def thumbnail_url(self, filename: str) -> str:
        return self.url_for(filename)

    def __repr__(self) -> str:
        return f"ReleaseSource({self.base_url})"


ImageSource = Union[RepoSource, ReleaseSource]


def select_image_source(
    metadata: ProjectMetadata,
    *,
    category: str,
    project_id: str,
    project_path: str,
    site_base_path: str,
    release_repo_url: str,
) -> ImageSource:
    """releaseVersion 유무로 호스팅 방식 결정"""
    if metadata.release_version:
        return ReleaseSource(
            repo_url=release_repo_url,
            version=metadata.release_version,
            category=category,
            project_id=project_id,
        )
    return RepoSource(base_path=site_base_path, project_path=project_path)
