# helpers/sitemap_writer.py
# ---------------------------------------------------------------
# Writes a sitemap catalog to <output_dir>/<domain>/<filename>.
# First failure aborts the whole run; nothing is cleaned up.
# ---------------------------------------------------------------

from __future__ import annotations
import logging
from pathlib import Path
from typing import List, Union

from helpers.sitemap_catalog import Catalog
from helpers.sitemap_utils import render_document

logger = logging.getLogger(__name__)


class SitemapGenerationError(Exception):
    """Directory creation or file write failed for ``path``."""

    def __init__(self, message: str, path: Path):
        super().__init__(message)
        self.path = path


def generate_sitemaps(output_dir: Union[str, Path], catalog: Catalog) -> List[Path]:
    output_dir = Path(output_dir)
    root = output_dir.resolve()
    written: List[Path] = []

    for domain in sorted(catalog):
        domain_dir = output_dir / domain
        files = catalog[domain]

        # a domain is a single directory name directly under output_dir
        if domain_dir.resolve().parent != root:
            raise SitemapGenerationError(
                f"failed to create directory {domain_dir}: path escapes {output_dir}",
                domain_dir,
            )

        for filename in sorted(files):
            file_path = domain_dir / filename

            if not file_path.resolve().is_relative_to(domain_dir.resolve()):
                raise SitemapGenerationError(
                    f"failed to write file {file_path}: path escapes {domain_dir}",
                    file_path,
                )

            parent = file_path.parent
            try:
                parent.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise SitemapGenerationError(
                    f"failed to create directory {parent}: {e}", parent
                ) from e

            try:
                xml = render_document(files[filename])
                file_path.write_text(xml, encoding="utf-8")
            except (OSError, TypeError, ValueError) as e:
                raise SitemapGenerationError(
                    f"failed to write file {file_path}: {e}", file_path
                ) from e

            logger.debug("📄 Wrote %s", file_path)
            written.append(file_path)

    logger.info("🗺️ Generated %d sitemap files under %s", len(written), output_dir)
    return written
