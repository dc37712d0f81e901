"""Main CLI application using Typer."""
from pathlib import Path

import typer
from dotenv import load_dotenv
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..agent import StudioAgent, UIPlan, validate_plan
from ..errors import PlanValidationError
from ..session import Role, RunMode, StudioSession
from ..ui.formatting import render_code, render_plan_json, render_preview
from .providers import get_log_level, get_session, get_theme_mode

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="uistudio",
    help="Deterministic UI builder: planner, generator and explainer over a fixed component whitelist",
    no_args_is_help=True,
    add_completion=True,
)

# Console for rich output
console = Console()

CHAT_HELP = """Commands:
  <text>            generate a new UI from text
  /modify <text>    modify the current UI
  /versions         list versions
  /restore <n>      restore version #n
  /plan /code /explain /preview   show the current model
  exit, quit, q     leave"""


@app.command()
def plan(
    text: str = typer.Argument(..., help="Describe the UI you want"),
    as_json: bool = typer.Option(
        False,
        "--json",
        "-j",
        help="Print only the plan as JSON"
    ),
):
    """Plan a UI from text and print the plan, code and explanation."""
    agent = StudioAgent()
    try:
        model = agent.run(text)
    except PlanValidationError as e:
        console.print(f"[red]Blocked: {escape(e.reason)}[/red]")
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(model.plan.to_json())
        return

    console.print(Panel(render_plan_json(model.plan), title="Plan", border_style="cyan"))
    console.print(Panel(render_code(model), title="Code", border_style="magenta"))
    console.print(f"[bold green]Explanation:[/bold green] {escape(model.explanation)}")


@app.command()
def validate(
    plan_file: Path = typer.Argument(
        ...,
        exists=True,
        file_okay=True,
        dir_okay=False,
        help="JSON file holding a UI plan"
    ),
):
    """Validate a plan file against the component whitelist."""
    try:
        candidate = UIPlan.model_validate_json(plan_file.read_text(encoding="utf-8"))
    except ValidationError as e:
        console.print(f"[red]Error: invalid plan file: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    result = validate_plan(candidate)
    if not result.ok:
        console.print(f"[red]Rejected: {escape(result.error or '')}[/red]")
        raise typer.Exit(code=1)

    console.print(
        f"[green]Plan accepted:[/green] {candidate.layout} • {candidate.tone} • "
        f"{len(candidate.components)} components"
    )


def _print_new_messages(session: StudioSession, shown: int) -> int:
    """Print messages added since the last call and return the new count."""
    messages = session.messages
    for message in messages[shown:]:
        if message.role == Role.ASSISTANT:
            console.print(f"[bold green]Agent:[/bold green] {escape(message.content)}")
    return len(messages)


def _print_versions(session: StudioSession) -> None:
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", width=4)
    table.add_column("Version")
    table.add_column("Time", style="dim")
    current = session.model
    for item in session.version_items():
        idx = int(item.id)
        marker = " (current)" if session.versions.get(idx) is current else ""
        table.add_row(str(idx + 1), item.label + marker, f"{item.timestamp:%H:%M:%S}")
    console.print(table)


def _handle_command(session: StudioSession, line: str) -> None:
    command, _, text = line.partition(" ")
    command = command.strip()
    argument = text.strip()

    if command == "/modify":
        if not argument:
            console.print("[yellow]Usage: /modify <text>[/yellow]")
            return
        session.submit(text, RunMode.MODIFY)
    elif command == "/versions":
        _print_versions(session)
    elif command == "/restore":
        try:
            number = int(argument)
        except ValueError:
            console.print("[yellow]Usage: /restore <n>[/yellow]")
            return
        if session.restore_by_index(number - 1) is None:
            console.print(f"[red]Version #{number} not found[/red]")
    elif command == "/plan":
        console.print(render_plan_json(session.model.plan))
    elif command == "/code":
        console.print(render_code(session.model))
    elif command == "/explain":
        console.print(escape(session.model.explanation))
    elif command == "/preview":
        console.print(render_preview(session.model.plan))
    elif command == "/help":
        console.print(escape(CHAT_HELP))
    else:
        console.print(f"[yellow]Unknown command: {escape(command)}[/yellow] (try /help)")


@app.command()
def chat(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show planner, validator and session log lines"
    ),
):
    """Interactive chat mode with the UI agent."""
    session = get_session(console, verbose=verbose)

    console.print("[bold cyan]UI Studio Chat[/bold cyan]")
    console.print("[dim]Type /help for commands, 'exit', 'quit', or 'q' to leave[/dim]\n")
    shown = _print_new_messages(session, 0)

    while True:
        try:
            user_input = console.input("[bold yellow]You:[/bold yellow] ")
        except (KeyboardInterrupt, EOFError):
            console.print("\n[dim]Goodbye![/dim]")
            break

        # Stripped text only picks the command; prompts go to the agent as typed
        command = user_input.strip()
        if not command:
            continue

        if command.lower() in ("exit", "quit", "q"):
            console.print("[dim]Goodbye![/dim]")
            break

        if command.startswith("/"):
            _handle_command(session, user_input.lstrip())
        else:
            session.submit(user_input, RunMode.GENERATE)

        shown = _print_new_messages(session, shown)


@app.command(name="tui")
def tui_command(
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Show log panel with level: debug (all), info, warning, or error"
    ),
    theme: str | None = typer.Option(
        None,
        "--theme",
        "-t",
        help="Theme: dark or light"
    ),
):
    """Launch interactive TUI."""
    from ..ui import run_textual_tui

    session = get_session(console)
    run_textual_tui(
        session=session,
        log_level=log_level or get_log_level(),
        theme_mode=(theme or get_theme_mode()).lower(),
    )


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
