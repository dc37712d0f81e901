"""Terminal UI module for uistudio.

Provides a Textual-based TUI around a StudioSession.

Module structure (each module hides a design decision):
- widgets.py: Custom widgets (prompt history, transcript, preview, log rendering)
- formatting.py: Rich renderables for the plan preview
- styles.py: CSS styling (layout decisions)
- themes.py: Color palettes and theme configuration
- screens.py: Modal dialogs (version rollback)
- config.py: UI constants and log levels
- app.py: Application orchestration (user interaction flow)
"""

from .app import StudioTextualApp, run_textual_tui
from .config import LogLevel
from .screens import VersionsScreen
from .widgets import ChatHistoryWidget, CodePanel, DebugPanel, PreviewPanel, PromptBar

__all__ = [
    "ChatHistoryWidget",
    "CodePanel",
    "DebugPanel",
    "LogLevel",
    "PreviewPanel",
    "PromptBar",
    "StudioTextualApp",
    "VersionsScreen",
    "run_textual_tui",
]
