"""Theme loading: colours, style sheets, palette, fonts and language definitions."""

from __future__ import annotations

import json
import logging
import string
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from alte.languages import LanguageRegistry

logger = logging.getLogger(__name__)

DEFAULT_SYNTAX_DIRECTORY = "resources/syntax/"
DEFAULT_THEMES_DIRECTORY = "resources/themes/"
FONT_FALLBACKS = ("Monospace", "DejaVu Sans Mono", "Courier New", "Courier")


class ThemeError(Exception):
    """Raised when a theme file cannot be read or is not a JSON object."""


_NAMED_COLORS: dict[str, tuple[int, int, int, int]] = {
    "black": (0, 0, 0, 255),
    "white": (255, 255, 255, 255),
    "red": (255, 0, 0, 255),
    "green": (0, 128, 0, 255),
    "blue": (0, 0, 255, 255),
    "yellow": (255, 255, 0, 255),
    "cyan": (0, 255, 255, 255),
    "aqua": (0, 255, 255, 255),
    "magenta": (255, 0, 255, 255),
    "fuchsia": (255, 0, 255, 255),
    "gray": (128, 128, 128, 255),
    "grey": (128, 128, 128, 255),
    "silver": (192, 192, 192, 255),
    "maroon": (128, 0, 0, 255),
    "olive": (128, 128, 0, 255),
    "lime": (0, 255, 0, 255),
    "navy": (0, 0, 128, 255),
    "purple": (128, 0, 128, 255),
    "teal": (0, 128, 128, 255),
    "orange": (255, 165, 0, 255),
    "darkgray": (169, 169, 169, 255),
    "darkgrey": (169, 169, 169, 255),
    "lightgray": (211, 211, 211, 255),
    "lightgrey": (211, 211, 211, 255),
    "transparent": (0, 0, 0, 0),
}


@dataclass(frozen=True)
class Color:
    """An RGBA colour."""

    red: int
    green: int
    blue: int
    alpha: int = 255

    @classmethod
    def parse(cls, value: str) -> Color:
        """Parse ``#rgb``, ``#rrggbb``, ``#aarrggbb`` or a colour name."""
        text = value.strip()
        if text.startswith("#"):
            digits = text[1:]
            if not digits or any(c not in string.hexdigits for c in digits):
                raise ValueError(f"invalid colour: {value!r}")
            if len(digits) == 3:
                r, g, b = (int(c * 2, 16) for c in digits)
                return cls(r, g, b)
            if len(digits) == 6:
                return cls(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))
            if len(digits) == 8:
                return cls(
                    int(digits[2:4], 16),
                    int(digits[4:6], 16),
                    int(digits[6:8], 16),
                    int(digits[0:2], 16),
                )
            raise ValueError(f"invalid colour: {value!r}")
        named = _NAMED_COLORS.get(text.lower())
        if named is None:
            raise ValueError(f"invalid colour: {value!r}")
        return cls(*named)

    def name(self) -> str:
        """The colour as ``#rrggbb``."""
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)
RED = Color(255, 0, 0)
BLUE = Color(0, 0, 255)
MAGENTA = Color(255, 0, 255)
LIGHT_GRAY = Color(192, 192, 192)
DARK_GRAY = Color(128, 128, 128)


@dataclass(frozen=True)
class FontSpec:
    """A font request: families in order of preference and a point size."""

    families: tuple[str, ...]
    point_size: int

    @property
    def family(self) -> str:
        return self.families[0] if self.families else ""


def _object(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_int(value: Any, default: int) -> int:
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return default


class ThemeManager:
    """The loaded theme and the language definitions used for highlighting."""

    def __init__(self, syntax_directory: str | Path = DEFAULT_SYNTAX_DIRECTORY) -> None:
        self._theme: dict[str, Any] = {}
        self._colors: dict[str, Any] = {}
        self._syntax_colors: dict[str, Any] = {}
        self._styles: dict[str, Any] = {}
        self._highlighting: dict[str, Any] = {}
        self._font_info: dict[str, Any] = {}
        self._languages = LanguageRegistry()
        self._languages.load_directory(syntax_directory)

    @property
    def languages(self) -> LanguageRegistry:
        """The registry of language definitions."""
        return self._languages

    @property
    def theme_name(self) -> str:
        name = self._theme.get("name")
        return name if isinstance(name, str) else ""

    def load_theme(self, path: str | Path) -> None:
        """Load the theme at ``path``; raise ThemeError if it cannot be used."""
        path = Path(path)
        try:
            raw = path.read_text(encoding="utf-8")
        except OSError as error:
            raise ThemeError(f"Could not open theme file {path}: {error}") from error
        try:
            data = json.loads(raw)
        except ValueError as error:
            raise ThemeError(f"Error parsing theme JSON {path}: {error}") from error
        if not isinstance(data, dict):
            raise ThemeError(f"Theme JSON is not an object: {path}")

        self._theme = data
        self._colors = _object(data.get("colors"))
        self._syntax_colors = _object(data.get("syntax"))
        self._styles = _object(data.get("styles"))
        self._highlighting = _object(data.get("syntax_highlighting"))
        self._font_info = _object(data.get("font"))
        logger.info("Theme loaded successfully: %s", self.theme_name)

    @staticmethod
    def _lookup(table: dict[str, Any], name: str, default: Color) -> Color | None:
        value = table.get(name)
        if not isinstance(value, str):
            return default
        try:
            return Color.parse(value)
        except ValueError:
            return None

    def color(self, name: str, default: Color = BLACK) -> Color | None:
        """Theme colour ``name``; ``default`` if absent, None if unparseable."""
        return self._lookup(self._colors, name, default)

    def syntax_color(self, name: str, default: Color = BLACK) -> Color | None:
        """Syntax colour ``name``; ``default`` if absent, None if unparseable."""
        return self._lookup(self._syntax_colors, name, default)

    def style_sheet(self, widget_name: str) -> str:
        """The raw style declared for ``widget_name``, or an empty string."""
        value = self._styles.get(widget_name)
        return value if isinstance(value, str) else ""

    def global_style_sheet(self) -> str:
        """All styles with ``%%colour%%`` placeholders filled, one rule per line."""
        if not self._styles:
            logger.warning("No styles found in theme JSON's 'styles' section.")
        entries = []
        for widget in sorted(self._styles):
            style = self.style_sheet(widget)
            for key in sorted(self._colors):
                value = self._colors[key]
                style = style.replace(f"%%{key}%%", value if isinstance(value, str) else "")
            entries.append(f"{widget} {{ {style} }}")
        return "\n".join(entries)

    def palette(self) -> dict[str, Color]:
        """Application palette roles mapped to their colours."""

        def pick(name: str, default: Color) -> Color:
            found = self.color(name, default)
            return default if found is None else found

        return {
            "Window": pick("windowBackground", WHITE),
            "WindowText": pick("text", BLACK),
            "Base": pick("base", WHITE),
            "AlternateBase": pick("alternateBase", LIGHT_GRAY),
            "ToolTipBase": pick("tooltipBase", WHITE),
            "ToolTipText": pick("tooltipText", BLACK),
            "Text": pick("text", BLACK),
            "Disabled:Text": pick("textDisabled", DARK_GRAY),
            "Button": pick("button", LIGHT_GRAY),
            "ButtonText": pick("buttonText", BLACK),
            "Disabled:ButtonText": pick("textDisabled", DARK_GRAY),
            "BrightText": RED,
            "Link": pick("accent", BLUE),
            "Highlight": pick("highlight", BLUE),
            "HighlightedText": pick("highlightedText", WHITE),
        }

    def _font(
        self,
        family_key: str,
        size_key: str,
        default: FontSpec,
        available_families: list[str] | None,
    ) -> FontSpec:
        requested = self._font_info.get(family_key)
        if not isinstance(requested, str):
            requested = default.family
        size = _as_int(self._font_info.get(size_key), default.point_size)
        if size <= 0:
            size = default.point_size
        if available_families is not None:
            known = {family.casefold() for family in available_families}
            if requested.casefold() not in known:
                logger.warning("Font %s not found. Attempting fallbacks.", requested)
                return FontSpec(FONT_FALLBACKS, size)
        return FontSpec((requested,), size)

    def application_font(
        self, default: FontSpec, available_families: list[str] | None = None
    ) -> FontSpec:
        """Font for the application's widgets."""
        return self._font(
            "applicationFontFamily", "applicationFontSize", default, available_families
        )

    def editor_font(
        self, default: FontSpec, available_families: list[str] | None = None
    ) -> FontSpec:
        """Font for the text editor."""
        return self._font("editorFontFamily", "editorFontSize", default, available_families)

    def syntax_rules(self, language: str) -> dict[str, Any]:
        """The language definition holding the highlighting rules; empty if unknown."""
        return self._languages.definition(language)

    def available_themes(
        self, directory: str | Path = DEFAULT_THEMES_DIRECTORY
    ) -> dict[str, Path]:
        """Theme names found in ``directory`` mapped to their canonical paths."""
        directory = Path(directory)
        if not directory.is_dir():
            logger.warning("Theme directory not found: %s", directory)
            return {}
        themes: dict[str, Path] = {}
        for path in sorted(p for p in directory.glob("*.json") if p.is_file()):
            try:
                data = json.loads(path.read_text(encoding="utf-8"))
            except (OSError, ValueError) as error:
                logger.warning("Error reading theme file %s: %s", path.name, error)
                continue
            if not isinstance(data, dict):
                logger.warning("Theme file %s is not an object.", path.name)
                continue
            name = data.get("name")
            if isinstance(name, str) and name:
                themes[name] = path.resolve()
            else:
                logger.warning("Theme file %s is missing 'name' property.", path.name)
        return dict(sorted(themes.items()))