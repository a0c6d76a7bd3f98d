# logging_setup.py
from __future__ import annotations
import logging
import logging.config
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

# browsers ask for this on every page load; /pages/ never has one
DEFAULT_IGNORED_ACCESS_PATHS: List[str] = ["/favicon.ico"]

DATEFMT = "%Y-%m-%d %H:%M:%S"
LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold_red",
}

class IgnorePathsFilter(logging.Filter):
    """Drops access-log records for the given request paths."""
    def __init__(self, ignored_paths: Optional[Iterable[str]] = None):
        super().__init__()
        self.ignored_paths = list(ignored_paths or [])

    def filter(self, record: logging.LogRecord) -> bool:
        msg = record.getMessage()
        return not any(p in msg for p in self.ignored_paths)

def _console_formatter(color: bool) -> Dict[str, Any]:
    if not color:
        return {"format": "%(levelname)s | %(asctime)s | %(name)s | %(message)s", "datefmt": DATEFMT}
    return {
        "()": "colorlog.ColoredFormatter",
        "format": "%(log_color)s%(levelname)-8s%(reset)s | %(asctime)s | %(name)s | %(message)s",
        "datefmt": DATEFMT,
        "log_colors": LOG_COLORS,
    }

def setup_logging(
    log_level: str = "INFO",
    log_dir: Path | str = "logs",
    log_file_name: str = "app.log",
    ignored_access_paths: Optional[Iterable[str]] = None,
    file_max_bytes: int = 1024 * 1024,  # 1MB
    file_backup_count: int = 2,
    color: bool = True,
) -> None:
    """
    Configure logging for sitemap generation and the uvicorn static server.

    The console gets colorlog output at ``log_level``; the rotating file keeps
    INFO and above. Only ``uvicorn.access`` is filtered for ignored paths.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    access_handler = {
        "class": "logging.StreamHandler",
        "level": log_level,
        "filters": ["ignore_paths"],
        "formatter": "console",
    }

    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "ignore_paths": {
                "()": IgnorePathsFilter,
                "ignored_paths": list(ignored_access_paths or DEFAULT_IGNORED_ACCESS_PATHS),
            },
        },
        "formatters": {
            "console": _console_formatter(color),
            "file": {"format": "%(levelname)s | %(asctime)s | %(name)s | %(message)s", "datefmt": DATEFMT},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": log_level,
                "formatter": "console",
            },
            "access": access_handler,
            "file": {
                "()": RotatingFileHandler,
                "level": "INFO",
                "filename": str(log_dir / log_file_name),
                "maxBytes": file_max_bytes,
                "backupCount": file_backup_count,
                "encoding": "utf-8",
                "formatter": "file",
            },
        },
        "loggers": {
            # GET /sitemaps/crunchyroll/sitemap.xml 200 OK
            "uvicorn.access": {"level": log_level, "handlers": ["access"], "propagate": False},
            # bind failures and startup/shutdown
            "uvicorn.error": {"level": "INFO", "handlers": ["console", "file"], "propagate": False},
        },
        "root": {"level": log_level, "handlers": ["console", "file"]},
    })

    logging.getLogger("sitemap_server").debug("Logging configured at %s", log_level)

def get_app_logger(name: str = "sitemap_server") -> logging.Logger:
    return logging.getLogger(name)
