"""Main Textual TUI application.

Orchestrates the UI components and routes user actions to a StudioSession.
"""

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Footer, Header, Static, TabbedContent, TabPane

from ..session import DEFAULT_PROMPT, EXAMPLE_HINTS, EXAMPLE_PROMPT, StudioSession
from .config import GUARDRAIL_NOTE, THEME_BY_MODE, THEME_DARK, THEME_LIGHT, LogLevel
from .screens import VersionsScreen
from .styles import APP_CSS
from .themes import THEMES
from .widgets import ChatHistoryWidget, CodePanel, DebugPanel, ErrorLine, PreviewPanel, PromptBar

EXAMPLE_HINT = (
    "Try prompts like " + ", ".join(f"“{hint}”" for hint in EXAMPLE_HINTS) + ". F2 loads an example."
)


class StudioTextualApp(App):
    """Textual TUI for the deterministic UI builder."""

    CSS = APP_CSS
    TITLE = "Deterministic UI Builder"
    SUB_TITLE = "Planner → Generator → Explainer"

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit"),
        Binding("ctrl+o", "open_versions", "Versions"),
        Binding("ctrl+t", "toggle_theme", "Theme"),
        Binding("ctrl+k", "clear_chat", "Clear Chat"),
        Binding("ctrl+r", "copy_code", "Copy Code"),
        Binding("ctrl+d", "toggle_debug", "Debug"),
        Binding("f2", "use_example", "Example", priority=True),
        Binding("f3", "copy_last_response", "Copy Reply", priority=True),
    ]

    def __init__(
        self,
        session: StudioSession | None = None,
        log_level: str | None = None,
        theme_mode: str = "dark",
    ) -> None:
        super().__init__()
        self._session = session or StudioSession()
        self._log_level = log_level
        self._theme_mode = theme_mode if theme_mode in THEME_BY_MODE else "dark"

    @property
    def session(self) -> StudioSession:
        return self._session

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)

        with Vertical(id="left-panel"):
            yield ChatHistoryWidget(id="chat-history")
            yield PromptBar(id="prompt-bar", initial_text=DEFAULT_PROMPT)
            yield ErrorLine(id="error-line")
            yield Static(GUARDRAIL_NOTE, id="guardrail-note", markup=False)
            yield Static(EXAMPLE_HINT, id="example-hint", markup=False)

        with Vertical(id="right-panel"):
            with TabbedContent(id="output-tabs", initial="tab-preview"):
                with TabPane("Preview", id="tab-preview"):
                    yield PreviewPanel(id="preview-panel")
                with TabPane("Code", id="tab-code"):
                    yield CodePanel(id="code-panel")
            yield DebugPanel(id="debug-panel")

        yield Footer()

    def on_mount(self) -> None:
        """Called when app is mounted."""
        for theme in THEMES:
            self.register_theme(theme)
        self.theme = THEME_BY_MODE[self._theme_mode]

        debug_panel = self.query_one("#debug-panel", DebugPanel)
        if self._log_level is not None:
            debug_panel.log_level = LogLevel.from_string(self._log_level)
            debug_panel.show()
            debug_panel.info("TUI", f"Log panel enabled with level: {self._log_level.upper()}")
        self._session.set_debug_callback(debug_panel.route)

        self._refresh_view()
        self.query_one("#prompt-bar", PromptBar).focus_input()

    def _refresh_view(self) -> None:
        """Push session state into the widgets."""
        session = self._session
        self.query_one("#chat-history", ChatHistoryWidget).sync(session.messages)
        self.query_one("#preview-panel", PreviewPanel).show_model(session.model)
        self.query_one("#code-panel", CodePanel).show_model(session.model)
        self.query_one("#error-line", ErrorLine).show_error(session.error)
        self.sub_title = f"{len(session.versions)} versions | {self._theme_mode}"

    def on_prompt_bar_submitted(self, event: PromptBar.Submitted) -> None:
        """Run the agent on the submitted prompt."""
        outcome = self._session.submit(event.value, event.mode)
        self._refresh_view()
        if outcome.accepted:
            self.notify(f"Version #{len(self._session.versions)} created", timeout=2)
        else:
            self.notify(f"Blocked: {outcome.error}", severity="error", timeout=4)

    def action_open_versions(self) -> None:
        """Show the rollback dialog."""
        self.push_screen(VersionsScreen(self._session.version_items()), self._restore_version)

    def _restore_version(self, index: int | None) -> None:
        if index is None:
            return
        if self._session.restore_by_index(index) is None:
            self.notify("Version not found", severity="warning", timeout=2)
            return
        self._refresh_view()
        self.notify(f"Restored version #{index + 1}", timeout=2)

    def action_toggle_theme(self) -> None:
        """Switch between light and dark."""
        self._theme_mode = "light" if self._theme_mode == "dark" else "dark"
        self.theme = THEME_LIGHT if self._theme_mode == "light" else THEME_DARK
        self._refresh_view()

    def action_clear_chat(self) -> None:
        """Clear the chat display."""
        self.query_one("#chat-history", ChatHistoryWidget).clear_history()
        self.notify("Chat cleared", timeout=2)

    def action_copy_code(self) -> None:
        """Copy the generated code to the clipboard."""
        self.copy_to_clipboard(self.query_one("#code-panel", CodePanel).code)
        self.notify("Code copied")

    def action_use_example(self) -> None:
        """Load the example prompt into the prompt bar."""
        prompt_bar = self.query_one("#prompt-bar", PromptBar)
        prompt_bar.set_text(EXAMPLE_PROMPT)
        prompt_bar.focus_input()

    def action_copy_last_response(self) -> None:
        """Copy the last assistant message to the clipboard."""
        response = self.query_one("#chat-history", ChatHistoryWidget).get_last_response()
        if response is None:
            self.notify("No response to copy", severity="warning", timeout=2)
            return
        self.copy_to_clipboard(response)
        self.notify("Response copied", timeout=2)

    def action_toggle_debug(self) -> None:
        """Toggle the log panel visibility."""
        is_visible = self.query_one("#debug-panel", DebugPanel).toggle()
        self.notify(f"Log panel {'shown' if is_visible else 'hidden'}", timeout=2)


def run_textual_tui(
    session: StudioSession | None = None,
    log_level: str | None = None,
    theme_mode: str = "dark",
) -> None:
    """Run the Textual TUI.

    Args:
        session: Session to drive (a fresh one if omitted)
        log_level: Log level for panel (debug/info/warning/error), None to hide
        theme_mode: "dark" or "light"
    """
    StudioTextualApp(session=session, log_level=log_level, theme_mode=theme_mode).run()
