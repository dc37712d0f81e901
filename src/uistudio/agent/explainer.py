"""Rationale text for a plan."""

from .data_structures import ComponentName, UIPlan

CLOSING_SENTENCE = (
    "All output is constrained to a fixed set of components for consistency and safety."
)

# Checked independently, always in this order.
_COMPONENT_SENTENCES: tuple[tuple[ComponentName, str], ...] = (
    (ComponentName.SIDEBAR, "Sidebar was selected for predictable navigation structure."),
    (ComponentName.KPI_GRID, "KPI grid surfaces key metrics at a glance without custom styling."),
    (
        ComponentName.DATA_TABLE,
        "Table is used for structured information and deterministic rendering.",
    ),
    (
        ComponentName.SETTINGS_MODAL,
        "Settings modal enables iterative changes while keeping a strict component whitelist.",
    ),
)


def explain_plan(plan: UIPlan) -> str:
    """Explain why the plan looks the way it does."""
    parts = [f"Layout: {plan.layout}. Tone: {plan.tone}."]
    for component, sentence in _COMPONENT_SENTENCES:
        if plan.has(component.value):
            parts.append(sentence)
    parts.append(CLOSING_SENTENCE)
    return " ".join(parts)
