"""Template generator that renders a plan as pseudo-markup.

Pure Python string assembly: every optional line is gated only by
component membership, in a fixed order, so the same plan always yields
the same text.
"""

from .data_structures import ComponentName, UIPlan

HEADER_COMMENT = "// Generated deterministically from the plan"

# (component, line) pairs emitted inside <section>, in this order.
_SECTION_LINES: tuple[tuple[ComponentName, str], ...] = (
    (ComponentName.KPI_GRID, "      <KPIGrid items={plan.content.kpis} />"),
    (ComponentName.LINE_CHART_CARD, "      <LineChartCard />"),
    (ComponentName.BAR_CHART_CARD, "      <BarChartCard />"),
    (
        ComponentName.DATA_TABLE,
        "      <DataTable columns={plan.content.table?.columns} rows={plan.content.table?.rows} />",
    ),
    (ComponentName.EMPTY_STATE, "      <EmptyState />"),
    (ComponentName.SETTINGS_MODAL, "      <SettingsModal />"),
)


def generate_code(plan: UIPlan) -> str:
    """Render a validated plan into the static code template.

    Args:
        plan: A plan that has passed validation

    Returns:
        The generated code text
    """
    lines = [
        HEADER_COMMENT,
        f"const plan = {plan.to_json(indent=2)};",
        "",
        "<AppShell>",
    ]
    if plan.has(ComponentName.TOP_NAV.value):
        lines.append("  <TopNav title={plan.content.title} subtitle={plan.content.subtitle} />")
    lines.append("  <main>")
    if plan.has(ComponentName.SIDEBAR.value):
        lines.append("    <Sidebar />")
    lines.append("    <section>")
    for component, line in _SECTION_LINES:
        if plan.has(component.value):
            lines.append(line)
    lines += [
        "    </section>",
        "  </main>",
        "</AppShell>",
    ]
    return "\n".join(lines)
