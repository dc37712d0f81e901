"""Pytest configuration and shared fixtures."""
import pytest

from uistudio.agent import PlanContent, UIPlan, plan_ui
from uistudio.session import StudioSession


@pytest.fixture
def session():
    """Return a fresh studio session with the default initial prompt."""
    return StudioSession()


@pytest.fixture
def dashboard_plan():
    """Return the plan for a minimal dashboard with every dashboard component."""
    return plan_ui("Create a dashboard with a sidebar, charts, and a table. Make it minimal.")


@pytest.fixture
def minimal_plan():
    """Return a hand-built valid plan with only the shell components."""
    return UIPlan(
        layout="dashboard",
        tone="bold",
        components=["AppShell", "TopNav"],
        content=PlanContent(title="Hand built"),
    )

