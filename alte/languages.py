"""Language definitions read from JSON files, and detection of a file's language."""

from __future__ import annotations

import copy
import json
import logging
import re
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

PLAIN_TEXT = "Plain Text"
"""Name of the language used when nothing more specific is detected."""


def _suffixes(file_path: str | Path) -> tuple[str, str]:
    """Return the last suffix and the complete suffix of a file name, without dots."""
    name = Path(file_path).name
    if "." not in name:
        return "", ""
    return name.rsplit(".", 1)[1], name.split(".", 1)[1]


def _base_name(path: Path) -> str:
    return path.name.split(".", 1)[0]


def _read_object(path: Path) -> dict[str, Any] | None:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as error:
        logger.warning("Could not open language file %s: %s", path, error)
        return None
    except ValueError as error:
        logger.warning("Error parsing language JSON %s: %s", path.name, error)
        return None
    if not isinstance(data, dict):
        logger.warning("Language JSON is not an object: %s", path.name)
        return None
    return data


class LanguageRegistry:
    """Language definitions keyed by language name."""

    def __init__(self) -> None:
        self._definitions: dict[str, dict[str, Any]] = {}

    def load_directory(self, directory: str | Path) -> int:
        """Replace the definitions with those in ``directory``; return how many loaded."""
        self._definitions.clear()
        directory = Path(directory)
        if not directory.is_dir():
            logger.warning("Syntax definition directory does not exist: %s", directory)
            return 0

        for path in sorted(p for p in directory.glob("*.json") if p.is_file()):
            definition = _read_object(path)
            if definition is None:
                continue
            name = definition.get("language_name")
            if not isinstance(name, str) or not name:
                name = _base_name(path)
                logger.warning(
                    "Language file %s is missing 'language_name'; using %r.", path.name, name
                )
            if not isinstance(definition.get("file_extensions"), list):
                logger.warning("Language %s is missing 'file_extensions' array. Skipping.", name)
                continue
            self._definitions[name] = definition

        if not self._definitions:
            logger.warning("No language definitions loaded.")
        return len(self._definitions)

    def detect(self, file_path: str | Path, first_line: str = "") -> str:
        """Name of the language of ``file_path``, or an empty string if none fits."""
        if not self._definitions:
            logger.warning("No language definitions loaded. Cannot detect language.")
            return ""

        suffix, complete_suffix = _suffixes(file_path)
        for name in self.languages():
            for extension in self.extensions_for(name):
                extension = extension[1:]
                if extension and extension in (suffix, complete_suffix):
                    return name

        if first_line:
            for name in self.languages():
                patterns = self._definitions[name].get("first_line_patterns", [])
                if not isinstance(patterns, list):
                    continue
                for pattern in patterns:
                    if not isinstance(pattern, str) or not pattern:
                        continue
                    try:
                        if re.search(pattern, first_line):
                            return name
                    except re.error:
                        continue

        return PLAIN_TEXT if PLAIN_TEXT in self._definitions else ""

    def languages(self) -> list[str]:
        """Names of all loaded languages, sorted."""
        return sorted(self._definitions)

    def extensions_for(self, language: str) -> list[str]:
        """File extensions, with their dots, declared by ``language``."""
        definition = self._definitions.get(language)
        if definition is None:
            return []
        return [ext if isinstance(ext, str) else "" for ext in definition["file_extensions"]]

    def definition(self, language: str) -> dict[str, Any]:
        """A copy of the definition of ``language``; empty if it is unknown."""
        definition = self._definitions.get(language)
        if definition is None:
            logger.warning("Language definition not found for language: %s", language)
            return {}
        return copy.deepcopy(definition)