"""
카테고리 Domain Logic
폴더명 → 표시 이름, 카테고리별 프로젝트 수 집계
"""
import re
from typing import Dict, List

from gallery.schemas.manifest_dto import Category

_SEPARATORS = re.compile(r"[-_]")


def format_category_name(name: str) -> str:
    """
    폴더명을 표시용 이름으로 변환
    예) "3D" → "3D", "web-design" → "Web Design", "motion_graphics" → "Motion Graphics"
    """
    return " ".join(word[:1].upper() + word[1:] for word in _SEPARATORS.split(name))


class CategoryAggregator:
    """한 번의 manifest 생성 동안만 쓰는 카테고리 집계기 (처음 등장한 순서 유지)"""

    def __init__(self):
        self._by_name: Dict[str, Category] = {}

    def add(self, name: str) -> Category:
        category = self._by_name.get(name)
        if category is None:
            category = Category(
                name=name,
                display_name=format_category_name(name),
                project_count=0,
            )
            self._by_name[name] = category
        category.project_count += 1
        return category

    def categories(self) -> List[Category]:
        return list(self._by_name.values())

    def __len__(self) -> int:
        return len(self._by_name)
