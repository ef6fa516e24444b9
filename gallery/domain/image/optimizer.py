"""
이미지 최적화 Domain Logic
raster(png/jpg/jpeg) → WebP 변환, 프로젝트별 정사각 썸네일 생성
"""
import logging
import math
from pathlib import Path
from typing import List, Optional, Union

import cv2
import numpy as np

from gallery.schemas.optimize_dto import ConvertedImage, OptimizeResult

logger = logging.getLogger(__name__)

RASTER_EXTS = (".png", ".jpg", ".jpeg")


def format_bytes(num: int) -> str:
    if num == 0:
        return "0 B"
    if num < 0:
        return "-" + format_bytes(-num)
    sizes = ["B", "KB", "MB", "GB"]
    i = min(int(math.floor(math.log(num) / math.log(1024))), len(sizes) - 1)
    return f"{num / math.pow(1024, i):.2f} {sizes[i]}"


def center_crop_square(image: np.ndarray, size: int) -> np.ndarray:
    """짧은 변을 size에 맞춰 확대/축소한 뒤 가운데를 잘라냄 (cover)"""
    h, w = image.shape[:2]
    scale = size / min(h, w)
    new_w = max(size, int(math.ceil(w * scale)))
    new_h = max(size, int(math.ceil(h * scale)))
    interp = cv2.INTER_AREA if scale < 1 else cv2.INTER_CUBIC
    resized = cv2.resize(image, (new_w, new_h), interpolation=interp)

    top = (new_h - size) // 2
    left = (new_w - size) // 2
    return resized[top:top + size, left:left + size]


def _write_webp(path: Path, image: np.ndarray, quality: int) -> None:
    ok = cv2.imwrite(str(path), image, [cv2.IMWRITE_WEBP_QUALITY, int(quality)])
    if not ok:
        raise ValueError(f"Cannot write webp: {path}")


def _read(path: Path, flags: int = cv2.IMREAD_UNCHANGED) -> np.ndarray:
    image = cv2.imread(str(path), flags)
    if image is None:
        raise ValueError(f"Cannot open image: {path}")
    return image


class ImageOptimizer:
    """portfolio 이미지 최적화기"""

    def __init__(self, webp_quality: int = 85, thumbnail_size: int = 400, thumbnail_quality: int = 90):
        self.webp_quality = webp_quality
        self.thumbnail_size = thumbnail_size
        self.thumbnail_quality = thumbnail_quality

    def run(self, root: Union[str, Path]) -> OptimizeResult:
        root = Path(root)
        if not root.is_dir():
            raise FileNotFoundError(f"root_dir not found: {root}")

        logger.info("🖼️  Starting image optimization...")
        result = OptimizeResult()
        self.convert_all(root, result)

        logger.info("📸 Generating project thumbnails...")
        self.make_thumbnails(root, result)

        logger.info(
            f"✨ Optimization complete! processed={len(result.converted)} "
            f"saved={format_bytes(result.total_saved)}"
        )
        return result

    def convert_all(self, root: Path, result: OptimizeResult) -> None:
        for image_path in self.raster_images(root):
            try:
                converted = self.convert(image_path)
            except (OSError, ValueError, cv2.error) as e:
                logger.error(f"✗ Error processing {image_path}: {e}")
                result.failed.append(str(image_path))
                continue
            result.converted.append(converted)

    def convert(self, image_path: Path) -> ConvertedImage:
        """같은 폴더에 {basename}.webp 생성"""
        webp_path = image_path.with_suffix(".webp")
        original_size = image_path.stat().st_size

        _write_webp(webp_path, _read(image_path), self.webp_quality)

        webp_size = webp_path.stat().st_size
        savings = (original_size - webp_size) / original_size * 100 if original_size else 0.0
        logger.info(
            f"✓ {image_path} → {format_bytes(original_size)} → {format_bytes(webp_size)} "
            f"({savings:.1f}% smaller)"
        )
        return ConvertedImage(
            source=str(image_path),
            target=str(webp_path),
            original_bytes=original_size,
            webp_bytes=webp_size,
        )

    def make_thumbnails(self, root: Path, result: OptimizeResult) -> None:
        for project_dir in sorted(p for p in root.glob("*/*") if p.is_dir()):
            try:
                thumb = self.make_thumbnail(project_dir)
            except (OSError, ValueError, cv2.error) as e:
                logger.error(f"✗ Error creating thumbnail for {project_dir}: {e}")
                result.failed.append(str(project_dir))
                continue
            if thumb is not None:
                result.thumbnails.append(str(thumb))

    def make_thumbnail(self, project_dir: Path) -> Optional[Path]:
        """첫 raster 이미지로 thumbnail.webp 생성. 이미지가 없으면 None"""
        images = self.raster_images_in(project_dir / "images")
        if not images:
            logger.warning(f"⚠ No images found in {project_dir}")
            return None

        thumbnail_path = project_dir / "thumbnail.webp"
        square = center_crop_square(_read(images[0], cv2.IMREAD_COLOR), self.thumbnail_size)
        _write_webp(thumbnail_path, square, self.thumbnail_quality)

        logger.info(f"✓ Created thumbnail: {thumbnail_path}")
        return thumbnail_path

    # ----- 탐색 -----
    @staticmethod
    def raster_images_in(images_dir: Path) -> List[Path]:
        if not images_dir.is_dir():
            return []
        return sorted(p for p in images_dir.iterdir() if p.is_file() and p.suffix.lower() in RASTER_EXTS)

    @staticmethod
    def raster_images(root: Path) -> List[Path]:
        return sorted(
            p for p in root.glob("**/images/*")
            if p.is_file() and p.suffix.lower() in RASTER_EXTS
        )
