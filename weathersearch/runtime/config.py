"""Per-user locations and persisted JSON settings.

Paths are resolved once into an ``AppPaths`` value that callers pass around
explicitly. All config access is defensive: malformed or missing config
falls back to defaults field by field.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir, user_data_dir, user_log_dir

from ..history import DEFAULT_HISTORY_LIMIT
from ..suggestions import DEFAULT_LOOKUP_WORKERS, DEFAULT_MIN_QUERY_CHARS
from ..weather.client import DEFAULT_SUGGESTION_COUNT, DEFAULT_TIMEOUT_SECONDS

APP_NAME = "weathersearch"
CONFIG_FILENAME = "config.json"
HISTORY_FILENAME = "history.json"
LOG_FILENAME = "weathersearch.log"
LEGACY_HISTORY_FILENAME = ".weather_searcher_history.json"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(frozen=True)
class AppPaths:
    config_path: Path
    history_path: Path
    legacy_history_path: Path
    log_path: Path


def default_app_paths() -> AppPaths:
    """Resolve platform-native config, data, and log locations."""
    return AppPaths(
        config_path=Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME,
        history_path=Path(user_data_dir(APP_NAME, appauthor=False)) / HISTORY_FILENAME,
        legacy_history_path=Path.home() / LEGACY_HISTORY_FILENAME,
        log_path=Path(user_log_dir(APP_NAME, appauthor=False)) / LOG_FILENAME,
    )


@dataclass(frozen=True)
class Settings:
    suggestion_min_chars: int = DEFAULT_MIN_QUERY_CHARS
    history_limit: int = DEFAULT_HISTORY_LIMIT
    suggestion_count: int = DEFAULT_SUGGESTION_COUNT
    suggestion_workers: int = DEFAULT_LOOKUP_WORKERS
    request_timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    theme: str = "default"
    log_level: str | None = None


def load_config(path: Path) -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def _positive_int(value: object, default: int, maximum: int) -> int:
    """Accept plain ints in ``[1, maximum]``; booleans count as invalid."""
    if isinstance(value, bool) or not isinstance(value, int):
        return default
    if value < 1 or value > maximum:
        return default
    return value


def _positive_float(value: object, default: float) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    if value <= 0:
        return default
    return float(value)


def _optional_name(value: object) -> str | None:
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def settings_from_config(data: dict[str, object]) -> Settings:
    defaults = Settings()
    log_level = _optional_name(data.get("log_level"))
    if log_level is not None and log_level.upper() not in LOG_LEVELS:
        log_level = None
    return Settings(
        suggestion_min_chars=_positive_int(data.get("suggestion_min_chars"), defaults.suggestion_min_chars, 64),
        history_limit=_positive_int(data.get("history_limit"), defaults.history_limit, 10_000),
        suggestion_count=_positive_int(data.get("suggestion_count"), defaults.suggestion_count, 100),
        suggestion_workers=_positive_int(data.get("suggestion_workers"), defaults.suggestion_workers, 32),
        request_timeout_seconds=_positive_float(
            data.get("request_timeout_seconds"), defaults.request_timeout_seconds
        ),
        theme=_optional_name(data.get("theme")) or defaults.theme,
        log_level=log_level.upper() if log_level is not None else None,
    )


def load_settings(path: Path) -> Settings:
    return settings_from_config(load_config(path))
