"""
이미지 최적화 관련 DTO
ImageOptimizer 출력용
"""
from typing import List

from pydantic import BaseModel, Field


class ConvertedImage(BaseModel):
    """WebP로 변환된 이미지 한 장"""
    source: str
    target: str
    original_bytes: int = Field(..., ge=0)
    webp_bytes: int = Field(..., ge=0)

    @property
    def saved_bytes(self) -> int:
        return self.original_bytes - self.webp_bytes


class OptimizeResult(BaseModel):
    """최적화 전체 결과"""
    converted: List[ConvertedImage] = Field(default_factory=list)
    thumbnails: List[str] = Field(default_factory=list, description="생성된 thumbnail.webp 경로")
    failed: List[str] = Field(default_factory=list, description="실패한 파일/폴더 경로")

    @property
    def total_saved(self) -> int:
        return sum(c.saved_bytes for c in self.converted)
