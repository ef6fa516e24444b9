"""
프로젝트 metadata.json DTO
{root}/{category}/{project}/metadata.json 입력용
"""
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class ProjectMetadata(BaseModel):
    """프로젝트 폴더 하나의 메타데이터 (알 수 없는 키는 무시)"""
    title: Optional[str] = None
    description: Optional[str] = ""
    release_version: Optional[str] = Field(
        None, alias="releaseVersion", description="릴리스 태그 (있으면 release 모드)"
    )
    images: Optional[List[str]] = Field(
        None, description="명시적 이미지 파일명 목록 (순서 유지)"
    )
    thumbnail: Optional[str] = Field(None, description="썸네일 파일명")

    class Config:
        populate_by_name = True

    @field_validator("release_version", "thumbnail", "title")
    @classmethod
    def _blank_to_none(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            return None
        return v
