from pathlib import Path
from typing import Union


class ManifestError(Exception):
    """manifest 생성 관련 예외의 공통 부모"""


class ManifestRootError(ManifestError):
    """스캔할 루트 디렉토리가 없음 (치명적)"""

    def __init__(self, root: Union[str, Path]):
        self.root = Path(root)
        super().__init__(f"portfolio root not found: {self.root}")


class ManifestWriteError(ManifestError):
    """data.json 쓰기 실패 (치명적)"""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        super().__init__(f"cannot write manifest {self.path}: {reason}")


class MetadataError(ManifestError):
    """metadata.json 읽기/파싱 실패 (해당 프로젝트만 skip)"""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")
