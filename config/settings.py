"""Environment-driven settings (values may come from a local .env file)."""

from __future__ import annotations

import logging
import os
from pathlib import Path

DEFAULT_DATA_DIR = "data/inputs"
DEFAULT_OWNER = "local"


def get_log_level() -> str:
    return (os.getenv("PLANNER_LOG_LEVEL") or "INFO").strip().upper()


def get_data_dir() -> Path:
    return Path(os.getenv("PLANNER_DATA_DIR") or DEFAULT_DATA_DIR)


def get_owner() -> str:
    owner = (os.getenv("PLANNER_OWNER") or "").strip()
    return owner or DEFAULT_OWNER


def configure_logging() -> None:
    level = get_log_level()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
