from __future__ import annotations
from enum import Enum


# 이미지 호스팅 방식
class ImageSourceEnum(str, Enum):
    repo = "repo"
    release = "release"
