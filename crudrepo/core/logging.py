from __future__ import annotations

import logging
import logging.config
from pathlib import Path
from typing import Any, Dict

from crudrepo.core.settings import settings


def _build_logging_config(log_dir: Path | None) -> Dict[str, Any]:
    formatter = {
        "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        "datefmt": "%Y-%m-%d %H:%M:%S",
    }
    handlers: Dict[str, Any] = {
        "console": {
            "class": "logging.StreamHandler",
            "level": settings.log_level,
            "formatter": "standard",
        },
    }
    if log_dir is not None:
        handlers["app_file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": settings.log_level,
            "formatter": "standard",
            "filename": str(log_dir / "app.log"),
            "maxBytes": settings.log_max_bytes,
            "backupCount": settings.log_backup_count,
            "encoding": "utf-8",
        }
        handlers["error_file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": "ERROR",
            "formatter": "standard",
            "filename": str(log_dir / "errors.log"),
            "maxBytes": settings.log_max_bytes,
            "backupCount": settings.log_backup_count,
            "encoding": "utf-8",
        }
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"standard": formatter},
        "handlers": handlers,
        "root": {
            "level": settings.log_level,
            "handlers": list(handlers),
        },
    }


def setup_logging() -> None:
    """Configure logging once at application start.

    The library never calls this itself; hosting applications do.
    """

    log_dir: Path | None = None
    if settings.log_to_file:
        log_dir = Path(settings.log_directory).resolve()
        log_dir.mkdir(parents=True, exist_ok=True)
    config = _build_logging_config(log_dir)
    logging.config.dictConfig(config)


def get_logger(name: str | None = None) -> logging.Logger:
    return logging.getLogger(name or "crudrepo")
