"""Logging helpers."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
import os
from pathlib import Path
from typing import Optional

from .paths import prodsignal_data_dir

_CONFIGURED = False


def setup_logging(log_path: Optional[Path] = None) -> Path:
    """Configure logging to a root file plus a dedicated LLM call log."""
    global _CONFIGURED
    if _CONFIGURED:
        return _resolve_log_path(log_path)

    resolved = _resolve_log_path(log_path)
    resolved.parent.mkdir(parents=True, exist_ok=True)

    level_name = os.environ.get("PRODSIGNAL_LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    rotate_bytes = int(os.environ.get("PRODSIGNAL_LOG_ROTATE_BYTES", "0"))
    backup_count = int(os.environ.get("PRODSIGNAL_LOG_BACKUP_COUNT", "3"))

    formatter = logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s"
    )

    root_handler = _build_handler(
        resolved,
        rotate_bytes=rotate_bytes,
        backup_count=backup_count,
    )
    root_handler.setFormatter(formatter)

    llm_handler = _build_handler(
        resolved.parent / "prodsignal_llm.log",
        rotate_bytes=rotate_bytes,
        backup_count=backup_count,
    )
    llm_handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(root_handler)
    console_handler: Optional[logging.Handler] = None
    if os.environ.get("PRODSIGNAL_LOG_STDOUT", "").lower() in {"1", "true", "yes"}:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    _attach_logger("prodsignal.llm", level, llm_handler, root_handler)
    if console_handler is not None:
        logging.getLogger("prodsignal.llm").addHandler(console_handler)

    _CONFIGURED = True
    logging.getLogger(__name__).info("Logging initialized: %s", resolved)
    return resolved


def _resolve_log_path(log_path: Optional[Path]) -> Path:
    if log_path is not None:
        return log_path
    env_path = os.environ.get("PRODSIGNAL_LOG_FILE")
    if env_path:
        return Path(env_path)
    return prodsignal_data_dir() / "logs" / "prodsignal.log"


def _attach_logger(name: str, level: int, *handlers: logging.Handler) -> None:
    logger = logging.getLogger(name)
    logger.setLevel(level)
    for handler in handlers:
        logger.addHandler(handler)
    logger.propagate = False


def _build_handler(path: Path, *, rotate_bytes: int, backup_count: int) -> logging.Handler:
    if rotate_bytes > 0:
        return RotatingFileHandler(
            path,
            maxBytes=rotate_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
    return logging.FileHandler(path, encoding="utf-8")
