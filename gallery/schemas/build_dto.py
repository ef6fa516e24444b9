"""
manifest 생성 옵션 DTO
ManifestBuilder 입력용
"""
from typing import List, Optional

from pydantic import BaseModel, Field


class ManifestBuildOptions(BaseModel):
    """manifest 생성 옵션"""
    site_base_path: str = Field(default="/", description="repo 모드 URL prefix")
    release_repo_url: str = Field(
        default="https://github.com/Confucii/portfolio_yarik",
        description="release 모드 저장소 URL",
    )
    content_prefix: Optional[str] = Field(
        default=None,
        description="project.path 앞에 붙는 저장소 기준 경로 (없으면 루트 폴더명)",
    )
    image_exts: List[str] = Field(default_factory=lambda: ["webp", "png", "jpg", "jpeg"])
    thumbnail_exts: List[str] = Field(default_factory=lambda: ["webp", "jpg", "png"])
