"""Custom Textual widgets for the TUI.

Hides widget implementation details:
- Prompt history management
- Chat message rendering
- Preview and code rendering
- Log rendering and level filtering
"""

from datetime import datetime

from rich.text import Text
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.events import Click
from textual.message import Message
from textual.widgets import Button, RichLog, Static, TextArea

from ..agent.data_structures import UIModel
from ..session.models import ChatMessage, Role, RunMode
from .config import CODE_NOTE, INPUT_HISTORY_MAX_SIZE, LOG_MAX_MESSAGE_LENGTH, LOG_TIMESTAMP_FORMAT, LogLevel
from .formatting import render_code, render_guardrails, render_plan_json, render_preview


class ClickableMessage(Vertical):
    """A chat message container that copies its content when clicked."""

    def __init__(self, content: str, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._content = content

    def on_click(self, event: Click) -> None:
        event.stop()
        self.app.copy_to_clipboard(self._content)
        self.app.notify("Copied to clipboard", timeout=2)


class PromptBar(Vertical):
    """Prompt input with Generate, Modify and Clear buttons.

    The prompt text is kept after a run so it can be re-sent in the
    other mode; Clear empties it.
    """

    class Submitted(Message):
        """Message sent when the user runs the agent."""

        def __init__(self, value: str, mode: RunMode) -> None:
            super().__init__()
            self.value = value
            self.mode = mode

    def __init__(self, *args, initial_text: str = "", **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._initial_text = initial_text
        self._history: list[str] = []
        self._history_index: int = -1

    def compose(self):
        text_area = TextArea(self._initial_text, id="prompt-input", show_line_numbers=False)
        text_area.cursor_blink = False
        yield text_area
        with Horizontal(id="prompt-buttons"):
            yield Button("Generate UI", id="generate-btn", variant="success").with_tooltip(
                "Plan from scratch (Ctrl+J)"
            )
            yield Button("Modify UI", id="modify-btn", variant="primary").with_tooltip(
                "Build on the current plan"
            )
            yield Button("Clear", id="clear-btn")

    def on_mount(self) -> None:
        text_area = self.query_one("#prompt-input", TextArea)
        text_area.highlight_cursor_line = False

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "generate-btn":
            self._submit(RunMode.GENERATE)
        elif event.button.id == "modify-btn":
            self._submit(RunMode.MODIFY)
        elif event.button.id == "clear-btn":
            self.clear()

    def on_key(self, event) -> None:
        """Ctrl+J generates; Up/Down at the text edges walk the history."""
        if event.key == "ctrl+j":
            self._submit(RunMode.GENERATE)
            event.prevent_default()
            event.stop()
        elif event.key == "up" and self._is_cursor_at_start():
            self._navigate_history(-1)
            event.prevent_default()
            event.stop()
        elif event.key == "down" and self._is_cursor_at_end():
            self._navigate_history(1)
            event.prevent_default()
            event.stop()

    def _is_cursor_at_start(self) -> bool:
        text_area = self.query_one("#prompt-input", TextArea)
        return text_area.cursor_location == (0, 0)

    def _is_cursor_at_end(self) -> bool:
        text_area = self.query_one("#prompt-input", TextArea)
        lines = text_area.text.split("\n")
        return text_area.cursor_location == (len(lines) - 1, len(lines[-1]))

    def _navigate_history(self, direction: int) -> None:
        if not self._history:
            return
        text_area = self.query_one("#prompt-input", TextArea)
        if direction < 0:
            if self._history_index == -1:
                self._history_index = len(self._history) - 1
            elif self._history_index > 0:
                self._history_index -= 1
        else:
            if self._history_index < len(self._history) - 1:
                self._history_index += 1
            else:
                self._history_index = -1
                text_area.text = ""
                return
        text_area.text = self._history[self._history_index]

    def _submit(self, mode: RunMode) -> None:
        value = self.value
        if not value:
            return
        if not self._history or self._history[-1] != value:
            self._history.append(value)
            del self._history[:-INPUT_HISTORY_MAX_SIZE]
        self._history_index = -1
        self.post_message(self.Submitted(value, mode))

    @property
    def value(self) -> str:
        """Current prompt text, stripped."""
        return self.query_one("#prompt-input", TextArea).text.strip()

    def clear(self) -> None:
        """Empty the prompt."""
        self.query_one("#prompt-input", TextArea).text = ""

    def set_text(self, text: str) -> None:
        """Replace the prompt text and move the cursor to its end."""
        text_area = self.query_one("#prompt-input", TextArea)
        text_area.text = text
        text_area.move_cursor(text_area.document.end)

    def focus_input(self) -> None:
        """Focus the text input."""
        self.query_one("#prompt-input", TextArea).focus()


class ErrorLine(Static):
    """Shows why the last plan was blocked; hidden when there is none."""

    def show_error(self, error: str | None) -> None:
        if error:
            self.update(Text(error))
            self.display = True
        else:
            self.update("")
            self.display = False


class PreviewPanel(VerticalScroll):
    """Mock render of the current plan with its JSON and explanation."""

    BORDER_TITLE = "Preview"

    def compose(self):
        yield Static(id="preview-render")
        yield Static("Plan", classes="section-title")
        yield Static(id="preview-plan")
        yield Static("Explanation", classes="section-title")
        yield Static(id="preview-explanation")
        yield Static("Guardrails", classes="section-title")
        yield Static(render_guardrails(), id="preview-guardrails")

    def show_model(self, model: UIModel) -> None:
        """Render a model."""
        self.query_one("#preview-render", Static).update(render_preview(model.plan))
        self.query_one("#preview-plan", Static).update(render_plan_json(model.plan))
        self.query_one("#preview-explanation", Static).update(Text(model.explanation))
        self.border_subtitle = f"{model.plan.layout} • {model.plan.tone}"


class CodePanel(VerticalScroll):
    """Read-only view of the generated code."""

    BORDER_TITLE = "Code"

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._code = ""

    def compose(self):
        badges = Text()
        badges.append(" generated ", style="bold reverse")
        badges.append(" ")
        badges.append(" whitelist enforced ", style="underline")
        yield Static(badges, id="code-badges")
        yield Static(id="code-view")
        yield Static(Text(CODE_NOTE), id="code-note")

    def show_model(self, model: UIModel) -> None:
        """Render a model's code."""
        self._code = model.code
        self.query_one("#code-view", Static).update(render_code(model))

    @property
    def code(self) -> str:
        return self._code


class DebugPanel(RichLog):
    """Log panel for execution tracing with level filtering.

    Shows timestamped log messages from all components.
    Supports standard log levels: DEBUG < INFO < WARNING < ERROR.
    Hidden by default, shown with --log-level flag or toggled with Ctrl+D.
    """

    BORDER_TITLE = "Log"
    BORDER_SUBTITLE = "Trace log"

    LEVEL_COLORS = {
        LogLevel.DEBUG: "dim white",
        LogLevel.INFO: "cyan",
        LogLevel.WARNING: "yellow",
        LogLevel.ERROR: "red",
    }

    COMPONENT_COLORS = {
        "TUI": "cyan",
        "Session": "bright_green",
        "Planner": "bright_blue",
        "Validator": "bright_yellow",
        "Generator": "bright_magenta",
        "Explainer": "bright_cyan",
    }

    def __init__(self, *args, log_level: int = LogLevel.DEBUG, **kwargs) -> None:
        super().__init__(
            *args,
            markup=True,
            highlight=False,
            auto_scroll=True,
            wrap=False,
            **kwargs
        )
        self._log_level = log_level

    @property
    def log_level(self) -> int:
        """Current log level threshold."""
        return self._log_level

    @log_level.setter
    def log_level(self, level: int) -> None:
        self._log_level = level
        self._update_subtitle()

    def _update_subtitle(self) -> None:
        if self.display:
            self.border_subtitle = f"Level: {LogLevel.name(self._log_level)}"
        else:
            self.border_subtitle = "Hidden"

    def on_mount(self) -> None:
        """Hide by default."""
        self.display = False

    def log_message(self, component: str, message: str, level: int = LogLevel.DEBUG) -> None:
        """Add a log entry if it meets the current level threshold.

        Args:
            component: Component name (TUI, Session, Planner, ...)
            message: Log message
            level: Log level (LogLevel.DEBUG, INFO, WARNING, ERROR)
        """
        if level < self._log_level:
            return

        if len(message) > LOG_MAX_MESSAGE_LENGTH:
            message = message[:LOG_MAX_MESSAGE_LENGTH] + "..."

        line = Text()
        line.append(datetime.now().strftime(LOG_TIMESTAMP_FORMAT), style="dim")
        line.append(" ")
        line.append(f"{LogLevel.name(level):<5}", style=self.LEVEL_COLORS.get(level, "white"))
        line.append(" ")
        line.append(f"[{component}]", style=self.COMPONENT_COLORS.get(component, "white"))
        line.append(f" {message}")
        self.write(line)

    def route(self, level: str, component: str, message: str) -> None:
        """Debug callback entry point: level is a name like 'info'."""
        self.log_message(component, message, LogLevel.from_string(level))

    def info(self, component: str, message: str) -> None:
        self.log_message(component, message, LogLevel.INFO)

    def show(self) -> None:
        """Show the log panel."""
        self.display = True
        self._update_subtitle()

    def hide(self) -> None:
        """Hide the log panel."""
        self.display = False
        self.border_subtitle = "Hidden"

    def toggle(self) -> bool:
        """Toggle visibility. Returns new state."""
        if self.display:
            self.hide()
            return False
        self.show()
        return True


class ChatHistoryWidget(VerticalScroll):
    """Scrollable chat transcript mirroring the session's messages."""

    BORDER_TITLE = "Chat"
    BORDER_SUBTITLE = "Conversation history"
    ALLOW_MAXIMIZE = True

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._seen_ids: set[str] = set()
        self._shown: list[ChatMessage] = []

    def sync(self, messages: tuple[ChatMessage, ...]) -> int:
        """Render messages not shown before.

        Returns:
            Number of newly rendered messages
        """
        added = 0
        for msg in messages:
            if msg.id in self._seen_ids:
                continue
            self._seen_ids.add(msg.id)
            self._shown.append(msg)
            self._render_message(msg)
            added += 1
        if added:
            self.border_subtitle = f"{len(self._shown)} messages"
            self.scroll_end(animate=False)
        return added

    def get_last_response(self) -> str | None:
        """Get the last assistant message shown."""
        for msg in reversed(self._shown):
            if msg.role == Role.ASSISTANT:
                return msg.content
        return None

    def clear_history(self) -> None:
        """Clear the display; cleared messages are not shown again."""
        self._shown.clear()
        self.remove_children()
        self.border_subtitle = "Conversation history"

    def _render_message(self, msg: ChatMessage) -> None:
        if msg.role == Role.USER:
            prefix, border_class, icon = "You", "user-message", ">"
        else:
            prefix, border_class, icon = "Assistant", "assistant-message", "<"

        header_text = f"{icon} {prefix} [{msg.timestamp:%H:%M:%S}]"
        container = ClickableMessage(content=msg.content, classes=f"chat-message {border_class}")
        container.compose_add_child(Static(header_text, classes="message-header", markup=False))
        container.compose_add_child(Static(msg.content, classes="message-content", markup=False))
        self.mount(container)
