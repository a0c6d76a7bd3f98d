# === Standard Library ===
import sys
from pathlib import Path
from typing import Union

# === Third-Party Libraries ===
import uvicorn
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from config_paths import ENV_FILE, LOG_DIR, PAGES_DIR, SITEMAPS_DIR
from core.settings import ConfigurationError, load_settings
from helpers.sitemap_catalog import build_catalog
from helpers.sitemap_writer import SitemapGenerationError, generate_sitemaps
from logging_setup import get_app_logger, setup_logging

logger = get_app_logger("sitemap_server")

PathLike = Union[str, Path]


# ───────────────────────────────────────────────
# App
# ───────────────────────────────────────────────
def create_app(pages_dir: PathLike = PAGES_DIR, sitemaps_dir: PathLike = SITEMAPS_DIR) -> FastAPI:
    """Serve pre-rendered pages under /pages and generated sitemaps under /sitemaps."""
    app = FastAPI(
        title="Mock Sitemap Server",
        docs_url=None,        # disable default /docs
        redoc_url=None,       # disable default /redoc
        openapi_url=None      # disable default /openapi.json
    )
    for prefix, directory in (("pages", Path(pages_dir)), ("sitemaps", Path(sitemaps_dir))):
        if directory.is_dir():
            app.mount(f"/{prefix}", StaticFiles(directory=directory), name=prefix)
        else:
            logger.warning(f"⚠️ {directory} not found, /{prefix}/ will answer 404")
    return app


# ───────────────────────────────────────────────
# Entrypoint
# ───────────────────────────────────────────────
def run(
    env_file: PathLike = ENV_FILE,
    pages_dir: PathLike = PAGES_DIR,
    sitemaps_dir: PathLike = SITEMAPS_DIR,
) -> None:
    setup_logging(log_level="INFO", log_dir=LOG_DIR, log_file_name="app.log")

    try:
        settings = load_settings(env_file)
    except ConfigurationError as e:
        logger.critical(f"❌ {e}")
        sys.exit(1)

    if settings.LOG_LEVEL != "INFO":
        setup_logging(log_level=settings.LOG_LEVEL, log_dir=LOG_DIR, log_file_name="app.log")

    logger.info("🚀 Generating sitemaps for host %s", settings.host)
    try:
        generate_sitemaps(sitemaps_dir, build_catalog(settings.host))
    except SitemapGenerationError as e:
        logger.error(f"Failed to generate sitemaps: {e}")
        return

    app = create_app(pages_dir, sitemaps_dir)

    logger.info(f"Server running at {settings.SERVER_PORT}")
    uvicorn.run(app, host="0.0.0.0", port=settings.SERVER_PORT, log_config=None)


if __name__ == "__main__":
    run()
