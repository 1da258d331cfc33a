import json

import pytest

from alte.theme_manager import (
    BLACK,
    FONT_FALLBACKS,
    RED,
    WHITE,
    Color,
    FontSpec,
    ThemeError,
    ThemeManager,
)


@pytest.fixture
def manager(tmp_path):
    syntax = tmp_path / "syntax"
    syntax.mkdir()
    (syntax / "py.json").write_text(json.dumps({
        "language_name": "Python",
        "file_extensions": [".py"],
        "highlighting_rules": [{"type": "keywords", "list": ["def"]}],
    }))
    return ThemeManager(syntax)


def write_theme(tmp_path, data, name="theme.json"):
    path = tmp_path / name
    path.write_text(json.dumps(data))
    return path


def test_parse_long_hex_round_trips():
    color = Color.parse("#1A2B3C")
    assert color.name() == "#1a2b3c"
    assert Color.parse(color.name()) == color


def test_parse_short_hex_matches_long_form():
    assert Color.parse("#abc") == Color.parse("#aabbcc")


def test_parse_alpha_form_keeps_rgb():
    color = Color.parse("#80112233")
    assert color.name() == "#112233"
    assert color.alpha == 0x80


def test_parse_names():
    assert Color.parse("black") == BLACK
    assert Color.parse("White") == WHITE


@pytest.mark.parametrize("bad", ["", "#12", "#ggg", "nocolour", "#12345"])
def test_parse_invalid_raises(bad):
    with pytest.raises(ValueError):
        Color.parse(bad)


def test_color_from_theme(manager, tmp_path):
    manager.load_theme(write_theme(tmp_path, {"name": "T", "colors": {"text": "#102030"}}))
    assert manager.color("text") == Color.parse("#102030")
    assert manager.theme_name == "T"


def test_color_missing_uses_default(manager, tmp_path):
    manager.load_theme(write_theme(tmp_path, {"colors": {}}))
    assert manager.color("absent", WHITE) == WHITE
    assert manager.color("absent") == BLACK


def test_color_unparseable_is_none(manager, tmp_path):
    manager.load_theme(write_theme(tmp_path, {"colors": {"text": "notacolour"}}))
    assert manager.color("text") is None


def test_syntax_color(manager, tmp_path):
    manager.load_theme(write_theme(tmp_path, {"syntax": {"keyword": "#aabbcc"}}))
    assert manager.syntax_color("keyword") == Color.parse("#aabbcc")
    assert manager.syntax_color("missing", RED) == RED


def test_style_sheet_lookup(manager, tmp_path):
    manager.load_theme(write_theme(tmp_path, {"styles": {"QWidget": "color: red;"}}))
    assert manager.style_sheet("QWidget") == "color: red;"
    assert manager.style_sheet("QLabel") == ""


def test_global_style_sheet_fills_placeholders(manager, tmp_path):
    manager.load_theme(write_theme(tmp_path, {
        "colors": {"accent": "#112233"},
        "styles": {"QWidget": "color: %%accent%%;"},
    }))
    assert manager.global_style_sheet() == "QWidget { color: #112233; }"


def test_global_style_sheet_sorted_lines(manager, tmp_path):
    manager.load_theme(write_theme(tmp_path, {
        "styles": {"QMenu": "a", "QLabel": "b"},
    }))
    lines = manager.global_style_sheet().split("\n")
    assert len(lines) == 2
    assert lines == sorted(lines)
    assert lines[0].startswith("QLabel")


def test_global_style_sheet_empty_without_styles(manager):
    assert manager.global_style_sheet() == ""


def test_load_missing_file_raises(manager, tmp_path):
    with pytest.raises(ThemeError):
        manager.load_theme(tmp_path / "nope.json")


def test_load_invalid_json_raises(manager, tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{not json")
    with pytest.raises(ThemeError):
        manager.load_theme(path)


def test_load_non_object_raises_and_keeps_previous(manager, tmp_path):
    manager.load_theme(write_theme(tmp_path, {"colors": {"text": "#010203"}}))
    with pytest.raises(ThemeError):
        manager.load_theme(write_theme(tmp_path, [1, 2], name="list.json"))
    assert manager.color("text") == Color.parse("#010203")


def test_palette_uses_theme_and_defaults(manager, tmp_path):
    manager.load_theme(write_theme(tmp_path, {"colors": {"windowBackground": "#0a0b0c"}}))
    palette = manager.palette()
    assert palette["Window"] == Color.parse("#0a0b0c")
    assert palette["BrightText"] == RED
    assert palette["Text"] == BLACK
    assert palette["HighlightedText"] == WHITE


def test_application_font_requested_family(manager, tmp_path):
    manager.load_theme(write_theme(tmp_path, {
        "font": {"applicationFontFamily": "Inter", "applicationFontSize": 12},
    }))
    font = manager.application_font(FontSpec(("Sans",), 9), ["inter", "Sans"])
    assert font.family == "Inter"
    assert font.point_size == 12


def test_editor_font_falls_back_when_unavailable(manager, tmp_path):
    manager.load_theme(write_theme(tmp_path, {
        "font": {"editorFontFamily": "Missing Font", "editorFontSize": 14},
    }))
    font = manager.editor_font(FontSpec(("Sans",), 9), ["Sans"])
    assert font.families == FONT_FALLBACKS
    assert font.point_size == 14


def test_font_non_positive_size_uses_default(manager, tmp_path):
    manager.load_theme(write_theme(tmp_path, {"font": {"editorFontSize": 0}}))
    default = FontSpec(("Sans",), 9)
    assert manager.editor_font(default) == default


def test_syntax_rules_for_language(manager):
    rules = manager.syntax_rules("Python")
    assert rules["highlighting_rules"][0]["list"] == ["def"]
    assert manager.syntax_rules("Cobol") == {}


def test_available_themes(manager, tmp_path):
    themes_dir = tmp_path / "themes"
    themes_dir.mkdir()
    good = write_theme(themes_dir, {"name": "Neon"}, name="neon.json")
    write_theme(themes_dir, {"colors": {}}, name="nameless.json")
    (themes_dir / "broken.json").write_text("[")
    themes = manager.available_themes(themes_dir)
    assert themes == {"Neon": good.resolve()}


def test_available_themes_missing_directory(manager, tmp_path):
    assert manager.available_themes(tmp_path / "absent") == {}