from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from config.logging_config import LoggingConfig


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(cfg: LoggingConfig, project_root: Path | None = None) -> Path:
    """
    Route all logging to a rotating file.

    stdout belongs to the TUI, so nothing is attached to the console.
    Calling this twice replaces the handlers instead of duplicating them.
    """
    log_path = Path(cfg.log_file)
    if not log_path.is_absolute() and project_root is not None:
        log_path = (project_root / log_path).resolve()
    log_path.parent.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, cfg.level, logging.INFO))
    if root_logger.hasHandlers():
        root_logger.handlers.clear()

    file_handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=cfg.max_bytes,
        backupCount=cfg.backup_count,
        encoding="utf-8",
    )
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(file_handler)
    return log_path
