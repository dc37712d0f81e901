"""Modal screens for the TUI.

This module hides the design decisions about:
- How the version history is listed for rollback
- Keyboard shortcuts for dialogs

To change how the versions dialog looks, modify only this file.
"""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import OptionList, Static
from textual.widgets.option_list import Option

from ..session.models import VersionItem
from .formatting import format_version_label


class VersionsScreen(ModalScreen[int | None]):
    """Rollback dialog listing stored versions, newest first.

    Dismisses with the selected zero-based position, or None when closed.
    """

    CSS = """
    VersionsScreen {
        align: center middle;
        background: $background 70%;
    }

    #versions-dialog {
        width: 72;
        height: auto;
        max-height: 24;
        border: tall $accent;
        background: $surface;
        padding: 1 2;
    }

    #versions-title {
        width: 100%;
        text-align: center;
        text-style: bold;
        color: $accent;
        padding: 0 0 1 0;
        border-bottom: solid $border;
        margin-bottom: 1;
    }

    #versions-empty {
        width: 100%;
        text-align: center;
        color: $text-muted;
        padding: 1 2;
    }

    #versions-list {
        height: auto;
        max-height: 16;
    }
    """

    BINDINGS = [
        Binding("escape", "close", "Close", show=False),
    ]

    def __init__(self, items: list[VersionItem]) -> None:
        super().__init__()
        self._items = items

    def compose(self) -> ComposeResult:
        with Vertical(id="versions-dialog"):
            yield Static("Rollback", id="versions-title")
            if not self._items:
                yield Static("No versions yet.", id="versions-empty")
            else:
                options = [
                    Option(format_version_label(item), id=item.id)
                    for item in reversed(self._items)
                ]
                yield OptionList(*options, id="versions-list")

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        """Restore the chosen version."""
        event.stop()
        if event.option.id is not None:
            self.dismiss(int(event.option.id))

    def action_close(self) -> None:
        self.dismiss(None)
