# sitemap_tool.py
# Generate the mock sitemaps without starting the server.
import argparse
import sys
from typing import List, Optional

from config_paths import SITEMAPS_DIR
from helpers.sitemap_catalog import build_catalog
from helpers.sitemap_writer import SitemapGenerationError, generate_sitemaps


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Generate the mock sitemap files")
    p.add_argument("--host", required=True, help="e.g. localhost:8080")
    p.add_argument("--out", default=str(SITEMAPS_DIR), help="output directory")
    args = p.parse_args(argv)

    try:
        written = generate_sitemaps(args.out, build_catalog(args.host))
    except SitemapGenerationError as e:
        print(f"Failed to generate sitemaps: {e}", file=sys.stderr)
        return 1

    for path in written:
        print(f"Wrote {path}")
    print(f"{len(written)} sitemap files in {args.out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
