"""Unit tests for StudioSession."""
from datetime import timedelta

from uistudio.agent import StudioAgent
from uistudio.session import INITIAL_PROMPT, Role, RunMode, StudioSession
from uistudio.session.models import MESSAGE_MAX_LENGTH
from uistudio.session.session import WELCOME_MESSAGE
from uistudio.versions import InMemoryVersionStore


class TestSessionStart:
    """Tests for a new session."""

    def test_welcome_and_first_version(self, session):
        """Test that a session starts with a welcome and version 0."""
        assert len(session.messages) == 1
        assert session.messages[0].role == Role.ASSISTANT
        assert session.messages[0].content == WELCOME_MESSAGE
        assert len(session.versions) == 1
        assert session.versions.get(0) is session.model
        assert session.error is None

    def test_initial_model_from_prompt(self, session):
        """Test that the initial model comes from the initial prompt."""
        assert session.model.plan == StudioAgent().plan(INITIAL_PROMPT)
        assert session.model.plan.tone == "minimal"

    def test_initial_prompt_fallback(self):
        """Test that a rejected initial prompt falls back to a plain dashboard."""
        session = StudioSession(initial_prompt="dashboard title:   ")

        assert session.model.plan.layout == "dashboard"
        assert session.model.plan.tone == "bold"
        assert session.model.plan.content.title
        assert len(session.versions) == 1

    def test_uses_given_store(self):
        """Test that an injected version store is used."""
        store = InMemoryVersionStore()

        session = StudioSession(versions=store)

        assert session.versions is store
        assert len(store) == 1


class TestRunAgent:
    """Tests for running the agent inside a session."""

    def test_accepted_run(self, session):
        """Test that an accepted run installs a new version."""
        outcome = session.submit("Make a landing page for pricing")

        assert outcome.accepted
        assert outcome.model is session.model
        assert len(session.versions) == 2
        contents = [m.content for m in session.messages[-3:]]
        assert contents[0] == "Make a landing page for pricing"
        assert contents[1] == "Plan: landing • tone: bold • components: AppShell, TopNav, DataTable"
        assert contents[2] == session.model.explanation
        assert session.messages[-3].role == Role.USER

    def test_rejected_run_is_atomic(self, session):
        """Test that a rejected run changes nothing but the transcript."""
        model_before = session.model

        outcome = session.submit("dashboard title:   ")

        assert not outcome.accepted
        assert outcome.error == "Plan missing title."
        assert session.model is model_before
        assert len(session.versions) == 1
        assert session.error == "Plan missing title."
        assert session.messages[-1].content == "Blocked: Plan missing title."

    def test_error_cleared_by_next_run(self, session):
        """Test that a later accepted run clears the error."""
        session.submit("title: ")

        session.submit("Create a dashboard")

        assert session.error is None

    def test_modify_builds_on_current_plan(self, session):
        """Test that modify keeps the current components."""
        components = session.model.plan.components

        session.submit("make it playful", RunMode.MODIFY)

        assert session.model.plan.components == components
        assert session.model.plan.tone == "playful"

    def test_generate_starts_over(self, session):
        """Test that generate ignores the current plan."""
        session.submit("make it playful", "generate")

        assert session.model.plan.components == ["AppShell", "TopNav"]

    def test_run_agent_does_not_record_user_message(self, session):
        """Test that run_agent only adds assistant messages."""
        session.run_agent("Create a dashboard")

        assert all(m.role == Role.ASSISTANT for m in session.messages)


class TestRestore:
    """Tests for version rollback."""

    def test_restore_keeps_history(self, session):
        """Test that restoring does not truncate later versions."""
        first = session.model
        session.submit("Make a landing page for pricing")

        restored = session.restore_by_index(0)

        assert restored is first
        assert session.model is first
        assert len(session.versions) == 2
        assert session.messages[-1].content == "Restored version #1."

    def test_restore_missing(self, session):
        """Test that an unknown position changes nothing."""
        model = session.model
        count = len(session.messages)

        assert session.restore_by_index(7) is None
        assert session.model is model
        assert len(session.messages) == count

    def test_modify_after_restore(self, session):
        """Test that modify builds on the restored version."""
        session.submit("Make a landing page for pricing")
        session.restore_by_index(0)

        session.submit("make it playful", RunMode.MODIFY)

        assert session.model.plan.has("Sidebar")
        assert len(session.versions) == 3


class TestMessages:
    """Tests for the transcript."""

    def test_message_is_clamped(self, session):
        """Test that long messages are clamped."""
        message = session.push_message(Role.USER, "x" * (MESSAGE_MAX_LENGTH + 50))

        assert message.content == "x" * MESSAGE_MAX_LENGTH + "…"

    def test_message_ids_are_unique(self, session):
        """Test that each message gets its own id."""
        for _ in range(3):
            session.submit("Create a dashboard")

        ids = [m.id for m in session.messages]
        assert len(ids) == len(set(ids))
        assert all(i.startswith("m_") for i in ids)

    def test_messages_are_read_only(self, session):
        """Test that the transcript is exposed as a tuple."""
        assert isinstance(session.messages, tuple)


class TestVersionItems:
    """Tests for version display items."""

    def test_items(self, session):
        """Test labels, ids and timestamps."""
        session.submit("Make a landing page for pricing")

        items = session.version_items()

        assert [item.id for item in items] == ["0", "1"]
        assert items[0].label == "dashboard • minimal • 6 components"
        assert items[1].label == "landing • bold • 3 components"
        assert items[1].timestamp - items[0].timestamp == timedelta(seconds=1)


class TestDebugCallback:
    """Tests for session logging."""

    def test_session_and_agent_report(self, session):
        """Test that the callback reaches both the session and the agent."""
        events = []
        session.set_debug_callback(lambda level, component, message: events.append((level, component)))

        session.submit("title: ")
        session.restore_by_index(0)

        assert ("warning", "Validator") in events
        assert ("warning", "Session") in events
        assert ("info", "Session") in events


class TestWelcome:
    """Tests for the welcome copy."""

    def test_welcome_text(self, session):
        """Test the welcome message wording."""
        assert session.messages[0].content == (
            "Describe a UI (e.g. ‘Create a dashboard with a sidebar, charts, and a table’). "
            "I’ll produce a plan, deterministic code, and a preview — and you can iterate safely."
        )
