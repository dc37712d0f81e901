"""Keyword planner that turns chat text into a UI plan.

Hidden design decisions:
- Which keywords signal each intent and tone
- Precedence between competing layouts
- The base plan used when there is nothing to modify
- How layout-specific content overrides earlier choices
"""

import re
from typing import Any

from .data_structures import (
    KPI,
    ComponentName,
    Layout,
    PlanContent,
    TableContent,
    Tone,
    UIPlan,
)
from .text import clamp_text

MAX_TITLE_LENGTH = 80

_DASHBOARD_INTENT = re.compile(r"dashboard|kpi|analytics|chart|table|sidebar")
_SETTINGS_INTENT = re.compile(r"settings|preferences|modal")
_LANDING_INTENT = re.compile(r"landing|hero|marketing|pricing")
_BAR_CHART = re.compile(r"bar chart|bars|revenue|sales")
_EMPTY_STATE = re.compile(r"empty|no data|blank")
_TITLE_MARKER = re.compile(r"title:|name:")
_TITLE_OVERRIDE = re.compile(r"(?:title:|name:)\s*(.+)\Z", re.IGNORECASE)

# First match wins; bold when nothing matches.
_TONE_LADDER: tuple[tuple[re.Pattern[str], Tone], ...] = (
    (re.compile(r"minimal|clean|simple"), Tone.MINIMAL),
    (re.compile(r"playful|fun|bright"), Tone.PLAYFUL),
    (re.compile(r"enterprise|professional|corporate"), Tone.ENTERPRISE),
)

BASE_TITLE = "Deterministic UI Builder"
BASE_SUBTITLE = "Planner → Generator → Explainer (fixed components, safe output)."
LANDING_SUBTITLE = "Describe a UI in chat, and watch it render deterministically."
SETTINGS_SUBTITLE = "Ship safe customization without letting the model freestyle UI."

BASE_KPIS = (
    KPI(label="Iterations", value="7", delta="+2"),
    KPI(label="Latency", value="820ms", delta="-12%"),
    KPI(label="Coverage", value="92%", delta="+4%"),
    KPI(label="Risk", value="Low", delta="Stable"),
)

BASE_TABLE = TableContent(
    columns=["Component", "Purpose", "Status"],
    rows=[
        ["Sidebar", "Navigation", "Allowed"],
        ["DataTable", "Structured data", "Allowed"],
        ["SettingsModal", "Safe edits", "Allowed"],
        ["Custom CSS", "Determinism", "Blocked"],
    ],
)

LANDING_TABLE = TableContent(
    columns=["Feature", "Why it matters"],
    rows=[
        ["Fixed components", "Consistent visuals + controllable output"],
        ["Planner/Generator/Explainer", "Traceable, explainable changes"],
        ["Rollback", "Fast iteration without fear"],
    ],
)

BASE_COMPONENTS = (ComponentName.APP_SHELL.value, ComponentName.TOP_NAV.value)

DASHBOARD_COMPONENTS = (
    ComponentName.SIDEBAR.value,
    ComponentName.KPI_GRID.value,
    ComponentName.LINE_CHART_CARD.value,
    ComponentName.DATA_TABLE.value,
)

LANDING_COMPONENTS = (
    ComponentName.APP_SHELL.value,
    ComponentName.TOP_NAV.value,
    ComponentName.DATA_TABLE.value,
)


def pick_tone(lowered: str) -> Tone:
    """Pick a tone from lower-cased text using the fixed priority ladder."""
    for pattern, tone in _TONE_LADDER:
        if pattern.search(lowered):
            return tone
    return Tone.BOLD


def pick_layout(lowered: str) -> Layout:
    """Pick a layout: landing beats settings, dashboard is the default."""
    if _LANDING_INTENT.search(lowered):
        return Layout.LANDING
    if _SETTINGS_INTENT.search(lowered):
        return Layout.SETTINGS
    return Layout.DASHBOARD


def base_plan(layout: Layout = Layout.DASHBOARD, tone: Tone = Tone.BOLD) -> UIPlan:
    """Build the starting plan used when no previous plan is given."""
    return UIPlan(
        layout=layout,
        tone=tone,
        components=list(BASE_COMPONENTS),
        content=PlanContent(
            title=BASE_TITLE,
            subtitle=BASE_SUBTITLE,
            kpis=list(BASE_KPIS),
            table=BASE_TABLE.model_copy(deep=True),
        ),
    )


def extract_title(text: str) -> str | None:
    """Return the ``title:``/``name:`` override at the end of the text, if any.

    The result is trimmed and clamped to MAX_TITLE_LENGTH. It may be empty
    when the marker is followed only by whitespace.
    """
    if not _TITLE_MARKER.search(text.lower()):
        return None
    match = _TITLE_OVERRIDE.search(text)
    if match is None or not match.group(1):
        return None
    return clamp_text(match.group(1).strip(), MAX_TITLE_LENGTH)


def _add(components: list[str], *names: str) -> None:
    for name in names:
        if name not in components:
            components.append(name)


def plan_ui(text: str, previous: UIPlan | None = None) -> UIPlan:
    """Derive a new plan from chat text and an optional previous plan.

    The previous plan is never modified; a fresh plan is returned.
    Within one step components are only added, except that a landing
    layout replaces the whole set.

    Args:
        text: Free-text request from the user
        previous: Plan to build on, or None to start from the base plan

    Returns:
        The new candidate plan (not yet validated)
    """
    lowered = text.lower()

    want_dashboard = bool(_DASHBOARD_INTENT.search(lowered))
    want_settings = bool(_SETTINGS_INTENT.search(lowered))

    tone = pick_tone(lowered)
    layout = pick_layout(lowered)

    start = previous if previous is not None else base_plan(layout, tone)
    components = list(start.components)
    content_updates: dict[str, Any] = {}

    if want_dashboard:
        _add(components, *DASHBOARD_COMPONENTS)

    if _BAR_CHART.search(lowered):
        _add(components, ComponentName.BAR_CHART_CARD.value)

    if want_settings:
        _add(components, ComponentName.SETTINGS_MODAL.value)

    if _EMPTY_STATE.search(lowered):
        _add(components, ComponentName.EMPTY_STATE.value)

    title = extract_title(text)
    if title is not None:
        content_updates["title"] = title

    if layout == Layout.LANDING:
        content_updates["subtitle"] = LANDING_SUBTITLE
        content_updates["kpis"] = None
        content_updates["table"] = LANDING_TABLE.model_copy(deep=True)
        components = list(LANDING_COMPONENTS)

    if layout == Layout.SETTINGS:
        content_updates["subtitle"] = SETTINGS_SUBTITLE
        _add(components, ComponentName.SETTINGS_MODAL.value, ComponentName.DATA_TABLE.value)

    content = start.content.model_copy(update=content_updates, deep=True)
    return UIPlan(layout=layout, tone=tone, components=components, content=content)
