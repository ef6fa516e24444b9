import json
import logging
from pathlib import Path
from typing import List, NamedTuple, Union

from gallery.common.errors import ManifestWriteError
from gallery.domain.manifest.builder import ManifestBuilder, ProjectOutcome
from gallery.schemas.manifest_dto import ManifestDocument

logger = logging.getLogger(__name__)


class GenerationReport(NamedTuple):
    document: ManifestDocument
    output_path: Path
    failures: List[ProjectOutcome]


class ManifestService:
    """data.json 생성 서비스 (빌드 + 파일 쓰기)"""

    def __init__(self, builder: ManifestBuilder):
        self.builder = builder

    def build(self, root: Union[str, Path]) -> ManifestDocument:
        return self.builder.build(root)

    def generate(self, root: Union[str, Path], output: Union[str, Path]) -> GenerationReport:
        """
        manifest 생성 후 output 경로에 저장

        Args:
            root: portfolio 루트 ({root}/{category}/{project}/metadata.json)
            output: data.json 경로

        Returns:
            GenerationReport (문서, 저장 경로, 실패한 프로젝트 목록)

        Raises:
            ManifestRootError: root 없음
            ManifestWriteError: 저장 실패
        """
        logger.info(f"📊 Scanning portfolio folders: {root}")
        outcomes = self.builder.collect(root)
        document = self.builder.build_from(outcomes)
        failures = [o for o in outcomes if not o.ok]

        out = self.write(document, output)

        logger.info(f"✨ Generated {out}")
        logger.info(f"   Categories: {len(document.categories)}")
        logger.info(f"   Projects: {len(document.projects)}")
        if failures:
            logger.warning(f"⚠ Skipped {len(failures)} project(s)")
        return GenerationReport(document=document, output_path=out, failures=failures)

    def write(self, document: ManifestDocument, output: Union[str, Path]) -> Path:
        out = Path(output)
        payload = json.dumps(document.to_json_dict(), indent=2, ensure_ascii=False)
        try:
            out.parent.mkdir(parents=True, exist_ok=True)
            out.write_text(payload + "\n", encoding="utf-8")
        except OSError as e:
            raise ManifestWriteError(out, str(e)) from e
        return out
