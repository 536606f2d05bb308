"""Filter translation and task retrieval commands."""

import typer
from rich.box import ROUNDED
from rich.console import Console
from rich.table import Table

from todofilter.config import settings
from todofilter.domains.todoist.client import TaskQueryClient, format_task_list
from todofilter.domains.todoist.errors import TodoistAPIError
from todofilter.domains.todoist.examples import get_filter_examples
from todofilter.domains.todoist.extract import MatchStrategy
from todofilter.domains.todoist.pipeline import format_filter, translate_filter
from todofilter.domains.todoist.priorities import InvalidPriorityError

console = Console()


def format_impl(text: str, strategy: MatchStrategy | None = None, debug: bool = False) -> None:
    """Print the translated filter, optionally with a stage breakdown."""
    result = translate_filter(text, strategy or settings.filter_match_strategy)

    if not debug:
        typer.echo(result.final_filter)
        return

    table = Table(title="Filter Translation", box=ROUNDED, padding=(0, 1))
    table.add_column("Stage", style="cyan")
    table.add_column("Value")
    table.add_row("Input", result.raw_user_text)
    table.add_row("Strategy", result.strategy.value)
    table.add_row("Pass-through", "yes" if result.passthrough else "no")
    table.add_row("Deadline tokens", ", ".join(result.deadline_tokens) or "-")
    table.add_row("Phrase tokens", ", ".join(result.phrase_tokens) or "-")
    table.add_row("Residual", result.residual or "-")
    table.add_row("Filter", f"[bold green]{result.final_filter}[/bold green]")
    table.add_row("Time", f"{result.total_time_ms:.3f} ms")
    console.print(table)


def examples_impl(strategy: MatchStrategy | None = None) -> None:
    """Print the documented examples and whether each still translates as documented."""
    strategy = strategy or settings.filter_match_strategy

    table = Table(title="Filter Examples", box=ROUNDED, padding=(0, 1))
    table.add_column("Input")
    table.add_column("Filter", style="green")
    table.add_column("OK", justify="center")

    failures = 0
    for example in get_filter_examples():
        actual = format_filter(example.input, strategy)
        ok = actual == example.output
        if not ok:
            failures += 1
        table.add_row(
            example.input,
            example.output if ok else f"{example.output}\n[red]got: {actual}[/red]",
            "[green]✓[/green]" if ok else "[red]✗[/red]",
        )

    console.print(table)
    if failures:
        console.print(f"[red]{failures} example(s) do not match[/red]")
        raise typer.Exit(code=1)


def tasks_impl(
    filter: str | None = None,
    project_id: str | None = None,
    priority: str | None = None,
    limit: int = 10,
) -> None:
    """Fetch and print tasks matching a filter."""
    if not settings.todoist_api_token:
        console.print("[red]TODOIST_API_TOKEN is not set[/red]")
        raise typer.Exit(code=1)

    # "2" on the command line means API priority 2, like the number form
    priority_value = int(priority) if priority and priority.isdecimal() else priority

    try:
        with TaskQueryClient(
            settings.todoist_api_token,
            base_url=settings.todoist_api_url,
            timeout=settings.request_timeout,
            strategy=settings.filter_match_strategy,
        ) as client:
            found = client.get_tasks(
                filter=filter, project_id=project_id, priority=priority_value, limit=limit
            )
    except (TodoistAPIError, InvalidPriorityError) as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=1) from e

    typer.echo(format_task_list(found))
