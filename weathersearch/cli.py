"""Command-line front door for weathersearch.

Parses CLI arguments, configures file logging, and dispatches into the
interactive runtime. Terminal setup failures are reported and exit cleanly.
"""

from __future__ import annotations

import argparse
import logging
import os
import termios
from collections.abc import Sequence

from .runtime import run_app
from .runtime.config import LOG_LEVELS, AppPaths, Settings, default_app_paths, load_settings
from .ui_theme import available_theme_names

LOG_LEVEL_ENV = "WEATHERSEARCH_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog="weathersearch",
        description=(
            "Search current weather by city name in a modal terminal UI "
            "with live suggestions and search history."
        ),
        epilog=(
            f"Settings are read from {default_app_paths().config_path}. "
            f"UI themes: {', '.join(available_theme_names())}. "
            f"Set {LOG_LEVEL_ENV} to one of {', '.join(LOG_LEVELS)} to enable file logging."
        ),
    )


def resolve_log_level(settings: Settings) -> str | None:
    """Environment override first, then the config ``log_level`` key."""
    env_value = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if env_value in LOG_LEVELS:
        return env_value
    return settings.log_level


def configure_logging(settings: Settings, paths: AppPaths) -> logging.Handler | None:
    """Attach a file handler to the package logger when a level is configured.

    The terminal belongs to the UI, so nothing is ever logged to stdout or
    stderr. Returns the installed handler, or ``None`` when logging stays off.
    """
    level = resolve_log_level(settings)
    if level is None:
        return None
    try:
        paths.log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(paths.log_path, encoding="utf-8")
    except OSError:
        return None
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger = logging.getLogger("weathersearch")
    package_logger.setLevel(level)
    package_logger.addHandler(handler)
    return handler


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments and run the interactive weather search."""
    build_parser().parse_args(argv)

    paths = default_app_paths()
    configure_logging(load_settings(paths.config_path), paths)

    try:
        run_app(paths)
    except (termios.error, OSError) as exc:
        print(f"Error: {exc}")
        return 0
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
