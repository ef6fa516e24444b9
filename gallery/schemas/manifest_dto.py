from typing import List, Optional

from pydantic import BaseModel, Field

from gallery.utils.enums.enums import ImageSourceEnum


class ImageRef(BaseModel):
    """프로젝트 이미지 한 장"""
    name: str = Field(..., description="파일명")
    url: str = Field(..., description="절대 URL(release) 또는 사이트 상대 경로(repo)")
    source: ImageSourceEnum


class Project(BaseModel):
    """data.json의 projects[] 항목"""
    id: str = Field(..., description="프로젝트 폴더명 (카테고리 내 유일)")
    title: str
    description: str = ""
    category: str = Field(..., description="상위 카테고리 폴더명")
    path: str = Field(..., description="저장소 기준 상대 경로")
    thumbnail: Optional[str] = None
    images: List[ImageRef] = Field(default_factory=list)
    release_version: Optional[str] = Field(None, alias="releaseVersion")
    image_source: ImageSourceEnum = Field(ImageSourceEnum.repo, alias="imageSource")

    class Config:
        populate_by_name = True


class Category(BaseModel):
    """data.json의 categories[] 항목"""
    name: str
    display_name: str = Field(..., alias="displayName")
    project_count: int = Field(0, ge=0, alias="projectCount")

    class Config:
        populate_by_name = True


class ManifestDocument(BaseModel):
    """클라이언트 렌더러가 읽는 data.json 전체"""

    generated: str = Field(..., description="ISO-8601 생성 시각")
    categories: List[Category] = Field(default_factory=list)
    projects: List[Project] = Field(default_factory=list)

    def to_json_dict(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "generated": "2026-01-02T08:00:00.000Z",
                "categories": [
                    {"name": "3D", "displayName": "3D", "projectCount": 1}
                ],
                "projects": [
                    {
                        "id": "robot",
                        "title": "Robot",
                        "description": "Hard-surface model",
                        "category": "3D",
                        "path": "portfolio/3D/robot",
                        "thumbnail": "/portfolio/3D/robot/thumbnail.webp",
                        "images": [
                            {
                                "name": "front.webp",
                                "url": "/portfolio/3D/robot/images/front.webp",
                                "source": "repo",
                            }
                        ],
                        "releaseVersion": None,
                        "imageSource": "repo",
                    }
                ],
            }
        }
