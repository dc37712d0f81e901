"""Rich renderables for the plan preview.

Hides the details of how a plan is drawn as a mock UI in the terminal.
Every function here is pure: same plan in, same renderable out.
"""

from rich.columns import Columns
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

from ..agent.data_structures import KPI, ComponentName, TableContent, UIModel, UIPlan
from ..session.models import VersionItem

SIDEBAR_ITEMS = ("Overview", "Reports", "Alerts", "Settings")

GUARDRAILS = (
    ("Whitelist", "on"),
    ("Plan validation", "on"),
    ("Safe render", "mock"),
)

# Header border per tone
TONE_STYLES = {
    "minimal": "dim",
    "enterprise": "blue",
    "playful": "magenta",
    "bold": "bold cyan",
}


def render_badges(plan: UIPlan) -> Text:
    """Layout and tone shown as two badges."""
    text = Text()
    text.append(f" {plan.layout} ", style="bold reverse")
    text.append(" ")
    text.append(f" {plan.tone} ", style="italic underline")
    return text


def render_header(plan: UIPlan) -> Panel:
    """Title bar with subtitle and badges."""
    heading = Table.grid(expand=True)
    heading.add_column(ratio=1)
    heading.add_column(justify="right")

    title = Text(plan.content.title, style="bold")
    if plan.content.subtitle:
        title.append("\n")
        title.append(plan.content.subtitle, style="dim")

    heading.add_row(title, render_badges(plan))
    return Panel(heading, border_style=TONE_STYLES.get(str(plan.tone), "dim"))


def render_sidebar() -> Panel:
    """Navigation column shown when the plan has a Sidebar."""
    nav = Text("Navigation\n", style="dim")
    nav.append("\n".join(SIDEBAR_ITEMS))
    return Panel(nav, border_style="dim")


def render_kpis(kpis: list[KPI]) -> Columns:
    """One card per KPI."""
    cards = []
    for kpi in kpis:
        body = Text(kpi.label + "\n", style="dim")
        body.append(kpi.value, style="bold")
        if kpi.delta:
            body.append("\n" + kpi.delta, style="dim")
        cards.append(Panel(body, expand=True))
    return Columns(cards, equal=True, expand=True)


def render_charts(plan: UIPlan) -> Columns | None:
    """Chart placeholders for the line and bar chart cards."""
    cards = []
    if plan.has(ComponentName.LINE_CHART_CARD.value):
        cards.append(Panel(Text("▁▂▃▅▆▇", style="cyan"), title="Trend", title_align="left"))
    if plan.has(ComponentName.BAR_CHART_CARD.value):
        cards.append(Panel(Text("▇ ▅ ▆ ▃ ▇", style="magenta"), title="Breakdown", title_align="left"))
    if not cards:
        return None
    return Columns(cards, equal=True, expand=True)


def render_table(table: TableContent) -> Panel:
    """The "Spec" card holding the plan's table."""
    grid = Table(show_header=True, header_style="bold cyan", expand=True)
    for column in table.columns:
        grid.add_column(column)
    for row in table.rows:
        grid.add_row(*row)
    return Panel(grid, title="Spec", title_align="left", subtitle="whitelist", subtitle_align="right")


def render_empty_state() -> Panel:
    """Placeholder for the EmptyState component."""
    body = Text("No data yet\n", style="bold", justify="center")
    body.append("Ask for a table or metrics in chat.", style="dim")
    return Panel(body)


def render_main(plan: UIPlan) -> Group:
    """The main column: KPIs, charts, table, empty state, settings."""
    parts: list[RenderableType] = []

    if plan.has(ComponentName.KPI_GRID.value) and plan.content.kpis:
        parts.append(render_kpis(plan.content.kpis))

    charts = render_charts(plan)
    if charts is not None:
        parts.append(charts)

    if plan.has(ComponentName.DATA_TABLE.value) and plan.content.table:
        parts.append(render_table(plan.content.table))

    if plan.has(ComponentName.EMPTY_STATE.value):
        parts.append(render_empty_state())

    if plan.has(ComponentName.SETTINGS_MODAL.value):
        parts.append(Text("[ Open settings (mock) ]", style="bold"))

    return Group(*parts)


def render_preview(plan: UIPlan) -> Group:
    """Mock render of the whole plan."""
    if not plan.has(ComponentName.SIDEBAR.value):
        return Group(render_header(plan), render_main(plan))

    body = Table.grid(expand=True, padding=(0, 1))
    body.add_column(ratio=1)
    body.add_column(ratio=3)
    body.add_row(render_sidebar(), render_main(plan))
    return Group(render_header(plan), body)


def render_plan_json(plan: UIPlan) -> Syntax:
    """The plan as highlighted JSON."""
    return Syntax(plan.to_json(indent=2), "json", word_wrap=True)


def render_code(model: UIModel) -> Syntax:
    """The generated code, highlighted as JSX."""
    return Syntax(model.code, "jsx", line_numbers=True, word_wrap=False)


def render_guardrails() -> Table:
    """The guardrails card."""
    table = Table(show_header=False, box=None)
    table.add_column("Guardrail", style="bold cyan")
    table.add_column("State")
    for name, state in GUARDRAILS:
        table.add_row(name, state)
    return table


def format_version_label(item: VersionItem) -> str:
    """One line for the versions dialog."""
    return f"#{int(item.id) + 1}  {item.label}  {item.timestamp:%Y-%m-%d %H:%M:%S}"
