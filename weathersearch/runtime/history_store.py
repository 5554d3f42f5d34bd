"""JSON persistence for search history.

The file is a pretty-printed array of ``{"query", "timestamp"}`` objects.
Reads tolerate missing or corrupt files; writes never raise.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from ..history import HistoryEntry
from .config import AppPaths

logger = logging.getLogger(__name__)


def _history_read_path(paths: AppPaths) -> Path:
    """Prefer the native history file, falling back to the legacy location."""
    if paths.history_path.exists():
        return paths.history_path
    if paths.legacy_history_path.exists():
        return paths.legacy_history_path
    return paths.history_path


def _coerce_entry(raw: object) -> HistoryEntry | None:
    if not isinstance(raw, dict):
        return None
    query = raw.get("query")
    timestamp = raw.get("timestamp")
    if not isinstance(query, str) or not query:
        return None
    if isinstance(timestamp, bool) or not isinstance(timestamp, int) or timestamp < 0:
        return None
    return HistoryEntry(query=query, timestamp=timestamp)


def load_history(paths: AppPaths) -> list[HistoryEntry]:
    """Load saved history, dropping malformed items individually."""
    path = _history_read_path(paths)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return []
    except (OSError, ValueError):
        logger.debug("ignoring unreadable history file %s", path, exc_info=True)
        return []
    if not isinstance(data, list):
        return []
    entries: list[HistoryEntry] = []
    for raw in data:
        entry = _coerce_entry(raw)
        if entry is not None:
            entries.append(entry)
    return entries


def save_history(paths: AppPaths, entries: list[HistoryEntry]) -> bool:
    """Write history to the native location; failures are logged and ignored."""
    path = paths.history_path
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps([entry.to_json() for entry in entries], indent=2) + "\n",
            encoding="utf-8",
        )
    except OSError:
        logger.debug("could not save history to %s", path, exc_info=True)
        return False
    return True
