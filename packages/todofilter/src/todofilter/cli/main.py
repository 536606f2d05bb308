"""Main CLI entry point for Todoist filter translation."""

import logging

import typer
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

from todofilter import __version__
from todofilter.domains.todoist.extract import MatchStrategy

app = typer.Typer(
    name="todofilter",
    help="Convert natural-language task filters into Todoist filter syntax.",
    no_args_is_help=True,
)


@app.command("format")
def format_cmd(
    text: str = typer.Argument(..., help="Natural-language filter, e.g. 'urgent tasks due today'"),
    strategy: MatchStrategy = typer.Option(
        None, "--strategy", help="Phrase matching: substring (default) or word"
    ),
    debug: bool = typer.Option(False, "--debug", help="Show every pipeline stage"),
) -> None:
    """Translate a filter request into Todoist syntax."""
    from todofilter.cli.filters import format_impl

    format_impl(text=text, strategy=strategy, debug=debug)


@app.command()
def examples(
    strategy: MatchStrategy = typer.Option(
        None, "--strategy", help="Phrase matching: substring (default) or word"
    ),
) -> None:
    """List documented example translations and check them."""
    from todofilter.cli.filters import examples_impl

    examples_impl(strategy=strategy)


@app.command()
def tasks(
    filter: str = typer.Argument(None, help="Natural-language or Todoist filter"),
    project_id: str = typer.Option(None, "--project-id", help="Restrict to one project"),
    priority: str = typer.Option(None, "--priority", help="Priority: 1-4 or P1-P4"),
    limit: int = typer.Option(10, "--limit", help="Maximum number of tasks to show"),
) -> None:
    """Fetch tasks from Todoist using a natural-language filter."""
    from todofilter.cli.filters import tasks_impl

    tasks_impl(filter=filter, project_id=project_id, priority=priority, limit=limit)


@app.command()
def serve(
    host: str = typer.Option(None, "--host", help="Bind address (default: API_HOST)"),
    port: int = typer.Option(None, "--port", help="Port (default: API_PORT)"),
) -> None:
    """Serve the filter translation HTTP API."""
    import uvicorn

    from todofilter.config import settings
    from todofilter_api.main import app as api_app

    uvicorn.run(api_app, host=host or settings.api_host, port=port or settings.api_port)


@app.callback(invoke_without_command=True)
def main(
    version: bool = typer.Option(False, "--version", help="Show version"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Todoist filter translation CLI."""
    if version:
        print(f"todofilter {__version__}")
        raise typer.Exit()

    from todofilter.config import settings

    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


if __name__ == "__main__":
    app()
