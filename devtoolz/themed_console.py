"""Themed console with automatic dark/light detection."""

import os
from typing import Dict

from rich.console import Console as RichConsole

THEMES: Dict[str, Dict[str, str]] = {
    "dark": {"error": "red", "dim": "dim"},
    "light": {"error": "red3", "dim": "dim"},
}


class ThemedConsole(RichConsole):
    """Console with theme support and a semantic error style."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.current_theme_name = os.environ.get("DEVTOOLZ_THEME", "auto").lower()
        self.theme = self._resolve_theme()

    def _resolve_theme(self) -> Dict[str, str]:
        """Resolve theme name to actual theme dict."""
        if self.current_theme_name == "auto":
            detected = "dark" if self._is_dark_terminal() else "light"
            return THEMES[detected]
        return THEMES.get(self.current_theme_name, THEMES["dark"])

    def _is_dark_terminal(self) -> bool:
        """Detect if terminal has dark background."""
        # COLORFGBG is "fg;bg" in terminals that export it
        colorfgbg = os.environ.get('COLORFGBG', '')
        if colorfgbg and ';' in colorfgbg:
            bg = colorfgbg.split(';')[-1]
            if bg.isdigit():
                # Background colors 0-7 are typically dark
                return int(bg) <= 7

        if os.environ.get('THEME', '').lower() in ['dark', 'dracula', 'monokai', 'nord']:
            return True

        return False

    def _colorized_print(self, text: str, style_key: str) -> None:
        """Print text with color from current theme."""
        self.print(self.get_styled(text, style_key))

    def error(self, text: str) -> None:
        """Print error message."""
        self._colorized_print(text, 'error')

    def get_styled(self, text: str, style_key: str) -> str:
        """Get styled text without printing."""
        color = self.theme.get(style_key, self.theme.get('dim', 'dim'))
        return f"[{color}]{text}[/{color}]"
