"""Local JSON storage for the last validated raw input record."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict

from config.settings import get_data_dir

logger = logging.getLogger(__name__)

LAST_INPUTS_NAME = "last_inputs"


def _owner_dir(owner: str, base_dir: Path | None = None) -> Path:
    return (base_dir or get_data_dir()) / owner


def _inputs_path(owner: str, base_dir: Path | None = None) -> Path:
    return _owner_dir(owner, base_dir) / f"{LAST_INPUTS_NAME}.json"


def save_inputs(owner: str, record: Dict[str, Any], base_dir: Path | None = None) -> Path:
    """Write the raw record verbatim. OSError propagates to the caller."""
    owner_dir = _owner_dir(owner, base_dir)
    owner_dir.mkdir(parents=True, exist_ok=True)
    path = _inputs_path(owner, base_dir)
    with path.open("w", encoding="utf-8") as handle:
        json.dump(record, handle, indent=2)
    logger.info("Saved inputs for '%s' to %s", owner, path)
    return path


def load_inputs(owner: str, base_dir: Path | None = None) -> Dict[str, Any] | None:
    """
    Return the stored record, or None when nothing usable is saved.

    The result is untrusted and must go through validation before use.
    """
    path = _inputs_path(owner, base_dir)
    if not path.exists():
        return None
    try:
        with path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        logger.warning("Ignoring unreadable saved inputs at %s: %s", path, exc)
        return None
    if not isinstance(data, dict):
        logger.warning("Ignoring saved inputs at %s: expected an object", path)
        return None
    logger.info("Loaded saved inputs for '%s' from %s", owner, path)
    return data

