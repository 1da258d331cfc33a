"""Locating the bundled theme files relative to the application directory."""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_THEME_NAME = "default_dark_neon.json"


def candidate_base_paths(app_dir: str | Path) -> list[Path]:
    """Resource directories to search, in order of preference."""
    app_dir = Path(app_dir)
    return [
        app_dir / ".." / "share" / "alte" / "resources",
        app_dir / "resources",
        app_dir / ".." / "resources",
        app_dir / ".." / ".." / "resources",
    ]


def find_theme_file(app_dir: str | Path, theme_name: str = DEFAULT_THEME_NAME) -> Path:
    """Absolute path of the theme file, falling back to ``./resources/themes``."""
    for base in candidate_base_paths(app_dir):
        candidate = base / "themes" / theme_name
        if candidate.is_file():
            logger.debug("Theme file found at: %s", candidate)
            return Path(os.path.abspath(candidate))
        logger.debug("Theme file not found at: %s", candidate)

    direct = Path(app_dir) / "resources" / "themes" / theme_name
    if direct.is_file():
        return Path(os.path.abspath(direct))

    fallback = Path("resources") / "themes" / theme_name
    logger.warning(
        "Could not find theme in standard locations; falling back to %s", fallback
    )
    return Path(os.path.abspath(fallback))