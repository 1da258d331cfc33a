# alte

Building blocks for a small text editor. None of them need a GUI toolkit.

- `alte.rope.Rope` is a text buffer stored as a tree of string pieces. Positions are counted in characters. It supports `len()`, `str()`, `insert(index, text)`, `remove(index, count)` and `character_at(index)`. An index outside the text raises `IndexError`.
- `alte.languages.LanguageRegistry` loads language definitions from a directory of `*.json` files.
  - `load_directory` returns how many definitions it loaded.
  - `detect(file_path, first_line)` finds a file's language. It tries the file extension first, then the `first_line_patterns` regexes. If neither matches, it returns `"Plain Text"` when that language is defined, and an empty string otherwise.
  - It also provides `languages()`, `extensions_for()` and `definition()`.
- `alte.theme_manager.ThemeManager` loads a JSON theme.
  - `load_theme` raises `ThemeError` if the file cannot be read or does not hold a JSON object.
  - It gives you theme and syntax colours as `Color` values (`color`, `syntax_color`) and the raw style of each widget (`style_sheet`).
  - `global_style_sheet` returns the combined style sheet with every `%%name%%` placeholder replaced by its colour.
  - `palette` maps palette roles to colours.
  - `application_font` and `editor_font` return a `FontSpec`. If the requested family is not among the available ones, the spec falls back to monospace families.
  - `available_themes(directory)` maps theme names to file paths.
  - The manager also holds a `LanguageRegistry`, loaded from `resources/syntax/` by default.
- `alte.resources`: `candidate_base_paths(app_dir)` lists the resource directories to search, and `find_theme_file(app_dir)` locates the default theme file.
- `alte.gutter` works out the line-number gutter: `digit_count`, `gutter_width` and `line_labels`.
- `alte.splash` describes the start-up glyph animation.
  - `glyph_strokes` returns the strokes of the glyph as `Stroke` values.
  - `SplashAnimation` gives the column height and opacity at any time after `start`.
- `alte.app` holds the text-editor border logic:
  - `resolve_text_edit_style_sheet` builds the editor's style sheet.
  - `FocusGlow` tracks the border style, which glows briefly on focus and is restored on timeout or focus out.
  - `sample_document()` returns the Python sample text shown in a new document.

## Installation

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Quick start

```python
from alte.rope import Rope

rope = Rope("héllo")
rope.insert(5, " world")
rope.remove(0, 1)
print(str(rope), len(rope), rope.character_at(0))  # éllo world 10 é
```

```python
from alte.languages import LanguageRegistry

registry = LanguageRegistry()
registry.load_directory("resources/syntax")
print(registry.detect("script.py", "#!/usr/bin/env python3"))
```

```python
from alte.theme_manager import ThemeManager, FontSpec

manager = ThemeManager("resources/syntax")
manager.load_theme("resources/themes/default_dark_neon.json")
print(manager.global_style_sheet())
print(manager.editor_font(FontSpec(("Monospace",), 11)))
```

## What this package does not do

There is no editor window and no command to start one. The package does not apply syntax-highlighting rules to text. It does not open, save or track a document in an editing session. It supplies the buffer, theme, language and layout pieces that such an editor would be built from.