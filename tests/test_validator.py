"""Unit tests for plan validation."""
import pytest
from hypothesis import given
from hypothesis import strategies as st

from uistudio.agent import (
    ALLOWED_COMPONENTS,
    PlanContent,
    PlanValidation,
    UIPlan,
    ensure_valid_plan,
    raise_if_rejected,
    validate_plan,
)
from uistudio.agent.validator import (
    MISSING_LAYOUT_OR_TONE,
    MISSING_TITLE,
    NO_COMPONENTS,
    REJECTED_FALLBACK,
)
from uistudio.errors import PlanValidationError, StudioError


class TestValidatePlan:
    """Tests for validate_plan."""

    def test_accepts_valid_plan(self, minimal_plan):
        """Test that a complete whitelisted plan is accepted."""
        result = validate_plan(minimal_plan)

        assert result.ok is True
        assert result.error is None

    def test_rejects_missing_layout(self):
        """Test that a plan without layout is rejected."""
        plan = UIPlan(tone="bold", components=["AppShell"], content=PlanContent(title="T"))

        result = validate_plan(plan)

        assert result.ok is False
        assert result.error == MISSING_LAYOUT_OR_TONE

    def test_rejects_missing_tone(self):
        """Test that a plan without tone is rejected."""
        plan = UIPlan(layout="landing", components=["AppShell"], content=PlanContent(title="T"))

        assert validate_plan(plan).error == "Plan missing layout/tone."

    def test_rejects_empty_components(self):
        """Test that a plan needs at least one component."""
        plan = UIPlan(layout="dashboard", tone="bold", components=[], content=PlanContent(title="T"))

        assert validate_plan(plan).error == NO_COMPONENTS

    def test_rejects_unknown_component(self):
        """Test that a component outside the whitelist is named in the error."""
        plan = UIPlan(
            layout="dashboard",
            tone="bold",
            components=["AppShell", "HeroBanner"],
            content=PlanContent(title="T"),
        )

        assert validate_plan(plan).error == "Component not allowed: HeroBanner"

    def test_rejects_empty_title(self):
        """Test that an empty title is rejected."""
        plan = UIPlan(layout="dashboard", tone="bold", components=["AppShell"])

        assert validate_plan(plan).error == MISSING_TITLE

    def test_checks_run_in_order(self):
        """Test that only the first failing check is reported."""
        plan = UIPlan(components=["Nope"])

        assert validate_plan(plan).error == MISSING_LAYOUT_OR_TONE

        plan = UIPlan(layout="dashboard", tone="bold", components=["Nope"])
        assert validate_plan(plan).error == "Component not allowed: Nope"

    def test_first_unknown_component_reported(self):
        """Test that the first offending component in order is reported."""
        plan = UIPlan(
            layout="dashboard",
            tone="bold",
            components=["Zeta", "Alpha"],
            content=PlanContent(title="T"),
        )

        assert validate_plan(plan).error == "Component not allowed: Zeta"

    @given(st.lists(st.sampled_from(sorted(ALLOWED_COMPONENTS)), min_size=1, max_size=9))
    def test_whitelisted_components_accepted(self, components):
        """Property test: any non-empty whitelisted list with a title passes."""
        plan = UIPlan(
            layout="settings",
            tone="playful",
            components=components,
            content=PlanContent(title="Generated"),
        )

        assert validate_plan(plan).ok

    @given(st.text(min_size=1).filter(lambda s: s not in ALLOWED_COMPONENTS))
    def test_unknown_names_rejected(self, name):
        """Property test: any name outside the whitelist is rejected."""
        plan = UIPlan(
            layout="dashboard",
            tone="bold",
            components=["AppShell", name],
            content=PlanContent(title="T"),
        )

        result = validate_plan(plan)

        assert not result.ok
        assert result.error == f"Component not allowed: {name}"


class TestEnsureValidPlan:
    """Tests for ensure_valid_plan."""

    def test_returns_plan_when_valid(self, minimal_plan):
        """Test that a valid plan is returned unchanged."""
        assert ensure_valid_plan(minimal_plan) is minimal_plan

    def test_raises_with_reason(self):
        """Test that a rejected plan raises PlanValidationError."""
        plan = UIPlan(layout="dashboard", tone="bold", components=["AppShell"])

        with pytest.raises(PlanValidationError) as exc_info:
            ensure_valid_plan(plan)

        assert exc_info.value.reason == MISSING_TITLE
        assert exc_info.value.plan is plan
        assert isinstance(exc_info.value, StudioError)


class TestRaiseIfRejected:
    """Tests for raise_if_rejected."""

    def test_passes_accepted_result(self, minimal_plan):
        """Test that an accepted result returns the plan."""
        assert raise_if_rejected(PlanValidation(ok=True), minimal_plan) is minimal_plan

    def test_raises_result_reason(self, minimal_plan):
        """Test that the result's reason is carried by the exception."""
        with pytest.raises(PlanValidationError) as exc_info:
            raise_if_rejected(PlanValidation(ok=False, error="Too loud."), minimal_plan)

        assert exc_info.value.reason == "Too loud."
        assert exc_info.value.plan is minimal_plan

    def test_missing_reason_uses_fallback(self, minimal_plan):
        """Test the fallback reason when a validator gives none."""
        with pytest.raises(PlanValidationError) as exc_info:
            raise_if_rejected(PlanValidation(ok=False), minimal_plan)

        assert exc_info.value.reason == REJECTED_FALLBACK
