"""Editor window behaviour that does not depend on a GUI toolkit: focus glow and sample text."""

from __future__ import annotations

from alte.theme_manager import BLACK, Color, ThemeManager

TEXT_EDIT_WIDGETS = "QPlainTextEdit, QTextEdit"
"""Style-sheet selector under which the theme declares the text editor's style."""

GLOW_DURATION_MS = 250
"""How long the focus glow stays on the editor border after it gains focus."""

SAMPLE_TITLE = "Alte Editor - Untitled.py"
"""Window title shown for the sample document of a new file."""

_SAMPLE_LINES = (
    "#!/usr/bin/env python3",
    "",
    "class Greeter:",
    '    """A simple greeter class"""',
    "    def __init__(self, name):",
    "        self.name = name  # Instance variable",
    "",
    "    def greet(self, loud=False):",
    "        # This is a single line comment",
    "        if loud:",
    "            greeting = f'HELLO, {self.name.upper()}!'",
    "        else:",
    "            greeting = f'Hello, {self.name}'",
    "        print(greeting) # Print the greeting",
    "        return 0.0 # Return a float",
    "",
    "# Main execution",
    'if __name__ == "__main__":',
    '    player = Greeter("Alte User")',
    "    player.greet()",
    "    player.greet(loud=True)",
    "    # Test numbers: 123, 0x1A, 0.45, 1e-3",
    "    number_test = 123 + 0x1A - 0.45 * 1e-3",
)


def _color_name(theme_manager: ThemeManager, key: str) -> str:
    found: Color | None = theme_manager.color(key)
    return (found or BLACK).name()


def resolve_text_edit_style_sheet(theme_manager: ThemeManager | None, use_glow: bool) -> str:
    """The editor's style sheet with colour placeholders filled; glow colour for the border if asked."""
    if theme_manager is None:
        return ""
    border = _color_name(theme_manager, "cyberPulse" if use_glow else "border")
    base_style = theme_manager.style_sheet(TEXT_EDIT_WIDGETS)
    if not base_style:
        return f"border: 1px solid {border};"
    replacements = (
        ("%%border%%", border),
        ("%%alternateBase%%", _color_name(theme_manager, "alternateBase")),
        ("%%lightMist%%", _color_name(theme_manager, "lightMist")),
        ("%%cyberPulse%%", _color_name(theme_manager, "cyberPulse")),
        ("%%highlightedText%%", _color_name(theme_manager, "highlightedText")),
    )
    for placeholder, value in replacements:
        base_style = base_style.replace(placeholder, value)
    return base_style


def sample_document() -> str:
    """The Python sample shown in a new document, for trying out highlighting."""
    return "\n".join(_SAMPLE_LINES) + "\n"


class FocusGlow:
    """Border style of the editor: glows briefly when focused, then returns to normal."""

    def __init__(self, theme_manager: ThemeManager | None) -> None:
        self.theme_manager = theme_manager
        self.original_style_sheet = resolve_text_edit_style_sheet(theme_manager, False)
        self.style_sheet = self.original_style_sheet
        self.timer_active = False

    def _reset(self) -> None:
        if self.theme_manager is None:
            return
        if self.original_style_sheet:
            self.style_sheet = self.original_style_sheet
        else:
            self.style_sheet = resolve_text_edit_style_sheet(self.theme_manager, False)

    def focus_in(self) -> None:
        """Show the glow and start the timer that will remove it."""
        if self.theme_manager is not None:
            if not self.original_style_sheet:
                self.original_style_sheet = resolve_text_edit_style_sheet(
                    self.theme_manager, False
                )
            self.style_sheet = resolve_text_edit_style_sheet(self.theme_manager, True)
        self.timer_active = True

    def focus_out(self) -> None:
        """Stop the timer and restore the normal border at once."""
        self.timer_active = False
        self._reset()

    def timeout(self) -> None:
        """The glow timer ran out: restore the normal border."""
        self.timer_active = False
        self._reset()