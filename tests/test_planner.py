"""Unit tests for the keyword planner."""
from hypothesis import given
from hypothesis import strategies as st

from uistudio.agent import ALLOWED_COMPONENTS, Layout, Tone, base_plan, plan_ui, validate_plan
from uistudio.agent.planner import (
    BASE_SUBTITLE,
    BASE_TITLE,
    LANDING_SUBTITLE,
    MAX_TITLE_LENGTH,
    SETTINGS_SUBTITLE,
    extract_title,
    pick_layout,
    pick_tone,
)


class TestPickTone:
    """Tests for tone selection."""

    def test_minimal_wins_over_everything(self):
        """Test that minimal keywords take priority."""
        assert pick_tone("clean but playful and corporate") == Tone.MINIMAL

    def test_playful_beats_enterprise(self):
        """Test that playful keywords beat enterprise ones."""
        assert pick_tone("bright corporate page") == Tone.PLAYFUL

    def test_enterprise(self):
        """Test enterprise keywords."""
        assert pick_tone("a professional portal") == Tone.ENTERPRISE

    def test_default_is_bold(self):
        """Test that bold is used when nothing matches."""
        assert pick_tone("") == Tone.BOLD
        assert pick_tone("show me the numbers") == Tone.BOLD


class TestPickLayout:
    """Tests for layout selection."""

    def test_landing_beats_settings(self):
        """Test that landing intent wins over settings intent."""
        assert pick_layout("landing page with a settings modal") == Layout.LANDING

    def test_settings(self):
        """Test settings intent."""
        assert pick_layout("user preferences") == Layout.SETTINGS

    def test_default_is_dashboard(self):
        """Test that dashboard is the fallback layout."""
        assert pick_layout("anything else") == Layout.DASHBOARD


class TestExtractTitle:
    """Tests for title overrides."""

    def test_no_marker(self):
        """Test that text without a marker has no override."""
        assert extract_title("Create a dashboard") is None

    def test_title_marker(self):
        """Test the title: marker."""
        assert extract_title("Create a dashboard title: Ops Hub") == "Ops Hub"

    def test_name_marker_case_insensitive(self):
        """Test the name: marker in another case."""
        assert extract_title("landing page NAME:  Acme Cloud  ") == "Acme Cloud"

    def test_whitespace_only_gives_empty_title(self):
        """Test that a marker followed by spaces yields an empty title."""
        assert extract_title("dashboard title:   ") == ""

    def test_long_title_is_clamped(self):
        """Test that titles are clamped with an ellipsis."""
        title = extract_title("title: " + "x" * 200)

        assert title == "x" * MAX_TITLE_LENGTH + "…"


class TestBasePlan:
    """Tests for the base plan."""

    def test_base_plan_contents(self):
        """Test the starting components and copy."""
        plan = base_plan()

        assert plan.layout == "dashboard"
        assert plan.tone == "bold"
        assert plan.components == ["AppShell", "TopNav"]
        assert plan.content.title == BASE_TITLE
        assert plan.content.subtitle == BASE_SUBTITLE
        assert len(plan.content.kpis) == 4
        assert plan.content.table.columns == ["Component", "Purpose", "Status"]


class TestPlanUI:
    """Tests for plan_ui."""

    def test_minimal_dashboard(self):
        """Test the dashboard request used as the initial prompt."""
        plan = plan_ui("Create a dashboard with a sidebar, charts, and a table. Make it minimal.")

        assert plan.layout == "dashboard"
        assert plan.tone == "minimal"
        assert plan.components == [
            "AppShell",
            "TopNav",
            "Sidebar",
            "KPIGrid",
            "LineChartCard",
            "DataTable",
        ]
        assert plan.content.title == BASE_TITLE
        assert validate_plan(plan).ok

    def test_landing_replaces_components(self):
        """Test that a landing layout replaces the component set and content."""
        plan = plan_ui("Make a landing page for pricing")

        assert plan.layout == "landing"
        assert plan.tone == "bold"
        assert plan.components == ["AppShell", "TopNav", "DataTable"]
        assert plan.content.subtitle == LANDING_SUBTITLE
        assert plan.content.kpis is None
        assert plan.content.table.columns == ["Feature", "Why it matters"]

    def test_landing_drops_previous_dashboard_components(self, dashboard_plan):
        """Test that landing replaces even when modifying a dashboard."""
        plan = plan_ui("turn it into a marketing page", dashboard_plan)

        assert plan.components == ["AppShell", "TopNav", "DataTable"]
        assert "kpis" not in plan.to_json()

    def test_settings_adds_modal_and_table(self):
        """Test that a settings layout appends its components."""
        plan = plan_ui("Add a settings modal")

        assert plan.layout == "settings"
        assert plan.components == ["AppShell", "TopNav", "SettingsModal", "DataTable"]
        assert plan.content.subtitle == SETTINGS_SUBTITLE

    def test_settings_keeps_previous_components(self, dashboard_plan):
        """Test that settings is additive on top of a dashboard."""
        plan = plan_ui("add preferences", dashboard_plan)

        assert plan.components[: len(dashboard_plan.components)] == dashboard_plan.components
        assert plan.components[-1] == "SettingsModal"
        assert plan.components.count("DataTable") == 1

    def test_bar_chart_keywords(self):
        """Test that revenue requests add a bar chart."""
        plan = plan_ui("show revenue")

        assert plan.components == ["AppShell", "TopNav", "BarChartCard"]

    def test_empty_state(self):
        """Test that empty-state keywords add EmptyState."""
        plan = plan_ui("an empty dashboard")

        assert plan.components[-1] == "EmptyState"
        assert plan.has("Sidebar")

    def test_title_override(self):
        """Test that a title override replaces the title."""
        plan = plan_ui("Create a dashboard title: Ops Hub")

        assert plan.content.title == "Ops Hub"

    def test_blank_title_override_fails_validation(self):
        """Test that a blank title override leads to a rejected plan."""
        plan = plan_ui("Create a dashboard title:   ")

        assert plan.content.title == ""
        assert validate_plan(plan).error == "Plan missing title."

    def test_modify_keeps_components_and_title(self, dashboard_plan):
        """Test that modify builds on the previous plan."""
        titled = plan_ui("rename it title: Ops Hub", dashboard_plan)
        plan = plan_ui("make it playful", titled)

        assert plan.tone == "playful"
        assert plan.components == dashboard_plan.components
        assert plan.content.title == "Ops Hub"

    def test_previous_plan_is_not_modified(self, dashboard_plan):
        """Test that the previous plan is left untouched."""
        before = dashboard_plan.model_copy(deep=True)

        plan_ui("Make a landing page title: Other", dashboard_plan)

        assert dashboard_plan == before

    def test_components_are_unique(self, dashboard_plan):
        """Test that repeating a request does not duplicate components."""
        plan = plan_ui("dashboard with a table and a chart", dashboard_plan)

        assert len(plan.components) == len(set(plan.components))

    @given(st.text(max_size=200))
    def test_plan_is_deterministic(self, text):
        """Property test: the same text always gives the same plan."""
        assert plan_ui(text) == plan_ui(text)

    @given(st.text(max_size=200))
    def test_components_stay_in_whitelist(self, text):
        """Property test: planned components are always whitelisted."""
        plan = plan_ui(text, plan_ui(text))

        assert set(plan.components) <= ALLOWED_COMPONENTS
        assert plan.components

    @given(st.text(max_size=200).filter(lambda s: "title:" not in s.lower() and "name:" not in s.lower()))
    def test_plans_without_title_override_are_valid(self, text):
        """Property test: without a title override every plan validates."""
        assert validate_plan(plan_ui(text)).ok
