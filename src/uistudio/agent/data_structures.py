"""Data structures for the UI agent.

These models describe a UI plan and the versioned bundle produced from it.
They are frozen: each planning step builds a fresh record instead of
editing the previous one.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Layout(str, Enum):
    """Page layout chosen by the planner."""

    DASHBOARD = "dashboard"
    LANDING = "landing"
    SETTINGS = "settings"


class Tone(str, Enum):
    """Visual tone chosen by the planner."""

    MINIMAL = "minimal"
    BOLD = "bold"
    PLAYFUL = "playful"
    ENTERPRISE = "enterprise"


class ComponentName(str, Enum):
    """The fixed set of components a plan may compose from."""

    APP_SHELL = "AppShell"
    TOP_NAV = "TopNav"
    SIDEBAR = "Sidebar"
    KPI_GRID = "KPIGrid"
    LINE_CHART_CARD = "LineChartCard"
    BAR_CHART_CARD = "BarChartCard"
    DATA_TABLE = "DataTable"
    SETTINGS_MODAL = "SettingsModal"
    EMPTY_STATE = "EmptyState"


ALLOWED_COMPONENTS: frozenset[str] = frozenset(c.value for c in ComponentName)


class KPI(BaseModel):
    """A single metric shown in the KPI grid."""

    model_config = ConfigDict(frozen=True)

    label: str
    value: str
    delta: str | None = None


class TableContent(BaseModel):
    """Column headers plus rows of cell text."""

    model_config = ConfigDict(frozen=True)

    columns: list[str] = Field(default_factory=list)
    rows: list[list[str]] = Field(default_factory=list)


class PlanContent(BaseModel):
    """Copy rendered by the planned components."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(default="", description="Page title, required by validation")
    subtitle: str | None = None
    kpis: list[KPI] | None = None
    table: TableContent | None = None


class UIPlan(BaseModel):
    """Structured description of a UI.

    Layout and tone are optional and components are plain strings so that a
    candidate plan can carry mistakes for the validator to reject.

    Attributes:
        layout: Page layout
        tone: Visual tone
        components: Component names in insertion order
        content: Title, subtitle, KPIs and table
    """

    model_config = ConfigDict(frozen=True, use_enum_values=True)

    layout: Layout | None = None
    tone: Tone | None = None
    components: list[str] = Field(default_factory=list)
    content: PlanContent = Field(default_factory=PlanContent)

    def has(self, component: str) -> bool:
        """Return True if the component is part of the plan."""
        return component in self.components

    def to_json(self, indent: int = 2) -> str:
        """Serialize the plan, leaving out unset optional fields."""
        return self.model_dump_json(indent=indent, exclude_none=True)


class UIModel(BaseModel):
    """A validated plan with its generated code and explanation.

    This is the unit stored in the version history.
    """

    model_config = ConfigDict(frozen=True)

    plan: UIPlan
    code: str
    explanation: str


class PlanValidation(BaseModel):
    """Outcome of validating a plan."""

    model_config = ConfigDict(frozen=True)

    ok: bool
    error: str | None = None
