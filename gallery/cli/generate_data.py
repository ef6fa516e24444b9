# gallery/cli/generate_data.py
import argparse
import logging
import sys
from pathlib import Path

from gallery.common.errors import ManifestError
from gallery.config.settings import settings
from gallery.services.service_factory import create_manifest_service

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Scan portfolio folders and write data.json")
    p.add_argument("--root", default=str(settings.PORTFOLIO_DIR), help="portfolio root ({category}/{project}/metadata.json)")
    p.add_argument("--out", default=str(settings.OUTPUT_FILE), help="output data.json path")
    p.add_argument("--base-path", dest="base_path", help="URL prefix for repo-hosted images")
    p.add_argument("--release-repo", dest="release_repo", help="repository URL for release-hosted images")
    p.add_argument("--prefix", help="repository-relative prefix for project.path")
    return p.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=settings.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    service = create_manifest_service(
        site_base_path=args.base_path,
        release_repo_url=args.release_repo,
        content_prefix=args.prefix,
    )
    try:
        report = service.generate(Path(args.root), Path(args.out))
    except ManifestError as e:
        logger.error(f"❌ {e}")
        return 1

    print(
        f"✅ data.json created: {report.output_path} "
        f"({len(report.document.projects)} projects, {len(report.failures)} skipped)"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
