from pathlib import Path
from typing import Iterable, List, Optional


def _ext_set(exts: Iterable[str]) -> set:
    return {"." + e.lower().lstrip(".") for e in exts}


def _is_hidden(p: Path, base: Path) -> bool:
    return any(part.startswith(".") for part in p.relative_to(base).parts)


class LocalFS:
    def __init__(self, root: Path):
        self.root = Path(root)

    def exists(self) -> bool:
        return self.root.is_dir()

    def metadata_files(self) -> List[Path]:
        # 2단계 고정: {root}/{category}/{project}/metadata.json, 숨김 폴더(.xxx)는 제외
        return sorted(
            p for p in self.root.glob("*/*/metadata.json")
            if p.is_file() and not _is_hidden(p, self.root)
        )

    def glob_images(self, rel: str | Path, exts: Iterable[str]) -> List[Path]:
        base = self.root / rel
        if not base.is_dir():
            return []
        wanted = _ext_set(exts)
        return sorted(p for p in base.iterdir() if p.is_file() and p.suffix.lower() in wanted)

    def first_existing(self, rel: str | Path, names: Iterable[str]) -> Optional[Path]:
        base = self.root / rel
        for name in names:
            candidate = base / name
            if candidate.is_file():
                return candidate
        return None
