"""Load/save the Store to its JSON data file."""

from __future__ import annotations

import logging
from pathlib import Path

from keep.config import data_path
from keep.fileio import read_json, write_json_atomic
from keep.models import Store

logger = logging.getLogger(__name__)


def load_store(path: Path | None = None) -> Store:
    """Load the Store; any missing or unreadable file yields an empty Store."""
    if path is None:
        path = data_path()
    try:
        data = read_json(path)
        store = Store.from_dict(data)
    except (OSError, ValueError, TypeError) as e:
        logger.warning("Could not load %s, starting empty: %s", path, e)
        return Store()
    logger.debug("Loaded %d tasks from %s", len(store.tasks), path)
    return store


def save_store(store: Store, path: Path | None = None) -> bool:
    """Write the Store atomically. Returns False if the write failed."""
    if path is None:
        path = data_path()
    try:
        write_json_atomic(path, store.to_dict())
    except OSError:
        logger.exception("Failed to save %s", path)
        return False
    return True
