# gallery/cli/optimize_images.py
import argparse
import logging
import sys
from pathlib import Path

from gallery.config.settings import settings
from gallery.domain.image.optimizer import format_bytes
from gallery.services.service_factory import create_image_optimizer


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Convert portfolio images to WebP and build thumbnails")
    parser.add_argument("--root", default=str(settings.PORTFOLIO_DIR), help="portfolio root")
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=settings.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    try:
        result = create_image_optimizer().run(Path(args.root))
    except FileNotFoundError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    print(f"   Processed: {len(result.converted)} images")
    print(f"   Thumbnails: {len(result.thumbnails)}")
    print(f"   Total saved: {format_bytes(result.total_saved)}")
    if result.failed:
        print(f"   Failed: {len(result.failed)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
