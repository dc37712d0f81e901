"""Theme definitions for the TUI.

This module hides the design decisions about:
- Color palettes and visual appearance
- Theme variables (borders, scrollbars, etc.)
- Dark/light mode configuration

To add a new theme, define it here and register in the app.
"""

from textual.theme import Theme

from .config import THEME_DARK, THEME_LIGHT

# Catppuccin Mocha - dark mode
CATPPUCCIN_MOCHA = Theme(
    name=THEME_DARK,
    primary="#89b4fa",      # Blue - main accent
    secondary="#cba6f7",    # Mauve - assistant messages
    accent="#f9e2af",       # Yellow - highlights
    foreground="#cdd6f4",
    background="#11111b",   # Crust
    success="#a6e3a1",      # Green - user messages, generate
    warning="#fab387",      # Peach - log panel
    error="#f38ba8",        # Red - blocked plans
    surface="#1e1e2e",      # Base
    panel="#181825",        # Mantle
    dark=True,
    variables={
        "block-cursor-foreground": "#11111b",
        "block-cursor-background": "#f5e0dc",
        "block-cursor-text-style": "bold",
        "input-selection-background": "#89b4fa 30%",
        "border": "#45475a",
        "border-blurred": "#313244",
        "scrollbar": "#313244",
        "scrollbar-hover": "#45475a",
        "scrollbar-active": "#89b4fa",
        "footer-key-foreground": "#f9e2af",
        "text-muted": "#6c7086",
    },
)

# Catppuccin Latte - light mode
CATPPUCCIN_LATTE = Theme(
    name=THEME_LIGHT,
    primary="#1e66f5",
    secondary="#8839ef",
    accent="#df8e1d",
    foreground="#4c4f69",
    background="#dce0e8",   # Crust
    success="#40a02b",
    warning="#fe640b",
    error="#d20f39",
    surface="#eff1f5",      # Base
    panel="#e6e9ef",        # Mantle
    dark=False,
    variables={
        "block-cursor-foreground": "#eff1f5",
        "block-cursor-background": "#dc8a78",
        "block-cursor-text-style": "bold",
        "input-selection-background": "#1e66f5 25%",
        "border": "#9ca0b0",
        "border-blurred": "#bcc0cc",
        "scrollbar": "#bcc0cc",
        "scrollbar-hover": "#9ca0b0",
        "scrollbar-active": "#1e66f5",
        "footer-key-foreground": "#df8e1d",
        "text-muted": "#8c8fa1",
    },
)

THEMES = (CATPPUCCIN_MOCHA, CATPPUCCIN_LATTE)
