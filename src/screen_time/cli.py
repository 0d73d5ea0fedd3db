"""Command-line interface for the screen time tracker."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from .config import TrackerSettings
from .paths import get_export_path
from .server_runner import run_dashboard

app = typer.Typer(help="Manual screen time tracker with a daily limit.")


@app.callback(no_args_is_help=True)
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logs.")) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


@app.command()
def shell(
    limit_minutes: float = typer.Option(
        120.0,
        "--limit-minutes",
        min=1.0,
        help="Daily screen time limit in minutes.",
    ),
    export_path: Optional[Path] = typer.Option(
        None,
        "--export-path",
        path_type=Path,
        help="Where the Export command writes the CSV file.",
    ),
) -> None:
    """Track screen time from an interactive prompt."""
    from .console import ConsoleSession
    from .controller import TrackerController

    settings = TrackerSettings.from_minutes(limit_minutes)
    controller = TrackerController(settings=settings)
    session = ConsoleSession(
        controller, export_path or get_export_path(settings.export_filename)
    )
    session.run()


@app.command()
def web(
    host: str = typer.Option("127.0.0.1", "--host", help="Interface to bind the dashboard."),
    port: int = typer.Option(
        8766, "--port", min=1, max=65535, help="TCP port for the dashboard."
    ),
    limit_minutes: float = typer.Option(
        120.0,
        "--limit-minutes",
        min=1.0,
        help="Daily screen time limit in minutes.",
    ),
    export_path: Optional[Path] = typer.Option(
        None,
        "--export-path",
        path_type=Path,
        help="Where the Export command writes the CSV file.",
    ),
    open_browser: bool = typer.Option(
        True,
        "--open-browser/--no-open-browser",
        help="Automatically launch the dashboard in your default browser.",
    ),
) -> None:
    """Start the local tracker dashboard."""
    run_dashboard(
        host=host,
        port=port,
        settings=TrackerSettings.from_minutes(limit_minutes),
        export_path=export_path,
        open_browser=open_browser,
    )
