# config_paths.py
# -----------------------------------------------------
# Shared filesystem paths used across the application.
# Safe to import from helpers (no circular imports).
# -----------------------------------------------------

from pathlib import Path

# Base and directories
BASE_DIR: Path = Path(__file__).resolve().parent
PAGES_DIR: Path = BASE_DIR / "pages"
SITEMAPS_DIR: Path = BASE_DIR / "sitemaps"
LOG_DIR: Path = BASE_DIR / "logs"

# Config file
ENV_FILE: Path = BASE_DIR / ".env"
