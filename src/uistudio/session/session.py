"""Studio session: transcript, current model and version history.

All state for one user lives on a StudioSession instance that the TUI
and CLI pass around; nothing is kept at module level.
"""

from datetime import timedelta
from typing import Any

from ..agent import StudioAgent, UIModel
from ..agent.text import clamp_text
from ..errors import PlanValidationError
from ..versions import VersionStore, create_version_store
from .models import MESSAGE_MAX_LENGTH, ChatMessage, Role, RunMode, RunOutcome, VersionItem

INITIAL_PROMPT = "Create a dashboard with a sidebar, charts, and a table. Make it minimal."
FALLBACK_PROMPT = "Create a dashboard"
DEFAULT_PROMPT = (
    "Create a dashboard with a sidebar, charts, and a table. "
    "Make it minimal and add a settings modal."
)
WELCOME_MESSAGE = (
    "Describe a UI (e.g. ‘Create a dashboard with a sidebar, charts, and a table’). "
    "I’ll produce a plan, deterministic code, and a preview — and you can iterate safely."
)
EXAMPLE_PROMPT = "Create a landing page with pricing and a features table. Make it bold."
EXAMPLE_HINTS = (
    "Create a landing page with pricing cards",
    "Add a bar chart",
    "Make it enterprise",
    "Show empty state",
)


class StudioSession:
    """One user's studio state.

    Runs are atomic: a rejected plan leaves the current model and the
    version history exactly as they were.
    """

    def __init__(
        self,
        agent: StudioAgent | None = None,
        versions: VersionStore | None = None,
        initial_prompt: str = INITIAL_PROMPT,
    ):
        """Initialize the session with a welcome message and version 0.

        Args:
            agent: Agent used for every run (default: StudioAgent())
            versions: Version history backend (default: in-memory)
            initial_prompt: Text planned to produce the starting model
        """
        self._agent = agent or StudioAgent()
        self._versions = versions if versions is not None else create_version_store("memory")
        self._messages: list[ChatMessage] = []
        self._error: str | None = None
        self._debug_callback: Any | None = None

        self.push_message(Role.ASSISTANT, WELCOME_MESSAGE)
        self._model = self._initial_model(initial_prompt)
        self._versions.append(self._model)

    def _initial_model(self, prompt: str) -> UIModel:
        plan = self._agent.plan(prompt)
        if not self._agent.validate(plan).ok:
            plan = self._agent.plan(FALLBACK_PROMPT)
        return self._agent.build(plan)

    def set_debug_callback(self, callback: Any) -> None:
        """Set the debug callback on the session and its agent.

        Args:
            callback: Callable(level: str, component: str, message: str)
        """
        self._debug_callback = callback
        self._agent.set_debug_callback(callback)

    def _debug(self, level: str, component: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, component, message)

    @property
    def messages(self) -> tuple[ChatMessage, ...]:
        return tuple(self._messages)

    @property
    def model(self) -> UIModel:
        """The model currently shown."""
        return self._model

    @property
    def error(self) -> str | None:
        """Reason the last run was rejected, cleared on the next run."""
        return self._error

    @property
    def versions(self) -> VersionStore:
        return self._versions

    def push_message(self, role: Role | str, content: str) -> ChatMessage:
        """Append a chat message, clamping its content."""
        message = ChatMessage(role=role, content=clamp_text(content, MESSAGE_MAX_LENGTH))
        self._messages.append(message)
        return message

    def run_agent(self, text: str, mode: RunMode | str = RunMode.GENERATE) -> RunOutcome:
        """Run the agent and install the result if the plan is accepted.

        Args:
            text: Free-text request
            mode: generate (fresh plan) or modify (build on the current plan)

        Returns:
            RunOutcome describing what happened
        """
        mode = RunMode(mode)
        self._error = None
        previous = self._model.plan if mode == RunMode.MODIFY else None

        try:
            model = self._agent.run(text, previous)
        except PlanValidationError as e:
            self._error = e.reason
            self.push_message(Role.ASSISTANT, f"Blocked: {e.reason}")
            self._debug("warning", "Session", f"Run blocked: {e.reason}")
            return RunOutcome(accepted=False, error=e.reason)

        self._model = model
        index = self._versions.append(model)
        self._debug("info", "Session", f"Installed version #{index + 1} ({mode.value})")

        plan = model.plan
        self.push_message(
            Role.ASSISTANT,
            f"Plan: {plan.layout} • tone: {plan.tone} • components: {', '.join(plan.components)}",
        )
        self.push_message(Role.ASSISTANT, model.explanation)
        return RunOutcome(accepted=True, model=model)

    def submit(self, text: str, mode: RunMode | str = RunMode.GENERATE) -> RunOutcome:
        """Record the user's message, then run the agent on it."""
        self.push_message(Role.USER, text)
        return self.run_agent(text, mode)

    def restore_by_index(self, index: int) -> UIModel | None:
        """Make a stored version current again.

        Later versions stay in the history.

        Args:
            index: Zero-based version position

        Returns:
            The restored model, or None if no version exists at that position
        """
        model = self._versions.restore_by_index(index)
        if model is None:
            self._debug("warning", "Session", f"No version at position {index}")
            return None

        self._model = model
        self.push_message(Role.ASSISTANT, f"Restored version #{index + 1}.")
        self._debug("info", "Session", f"Restored version #{index + 1}")
        return model

    def version_items(self) -> list[VersionItem]:
        """Describe every stored version, oldest first."""
        origin = self._messages[0].timestamp
        return [
            VersionItem(
                id=str(idx),
                label=(
                    f"{model.plan.layout} • {model.plan.tone} • "
                    f"{len(model.plan.components)} components"
                ),
                timestamp=origin + timedelta(seconds=idx),
            )
            for idx, model in enumerate(self._versions.list_versions())
        ]
