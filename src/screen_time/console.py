"""Interactive terminal front end for the tracker."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import typer

from .controller import TrackerController
from .errors import ScreenTimeError

HELP_TEXT = """Commands:
  start   Start tracking
  stop    Stop tracking and record the session
  status  Show elapsed and total time
  view    Show the usage log
  export  Write the usage log to CSV
  reset   Clear the usage log
  quit    Leave the tracker"""


class ConsoleSession:
    """Read commands from the prompt and print the tracker's responses."""

    def __init__(self, controller: TrackerController, export_path: Path) -> None:
        self.controller = controller
        self.export_path = Path(export_path)
        self._handlers: dict[str, Callable[[], None]] = {
            "start": self.start,
            "stop": self.stop,
            "status": self.status,
            "view": self.view,
            "export": self.export,
            "reset": self.reset,
            "help": self.help,
        }

    def run(self) -> None:
        typer.echo("ScreenTime Tracker. Type 'help' for commands.")
        while True:
            command = typer.prompt(">", prompt_suffix=" ").strip().lower()
            if command in ("quit", "exit"):
                break
            self.dispatch(command)
        if self.controller.is_tracking:
            typer.echo("Open session discarded.")

    def dispatch(self, command: str) -> None:
        handler = self._handlers.get(command)
        if handler is None:
            typer.secho(f"Unknown command: {command}", fg=typer.colors.YELLOW)
            return
        try:
            handler()
        except ScreenTimeError as exc:
            typer.secho(str(exc), fg=typer.colors.RED)

    def start(self) -> None:
        typer.echo(self.controller.start())

    def stop(self) -> None:
        result = self.controller.stop()
        typer.echo(result.last_session)
        typer.echo(result.total_usage)
        if result.warning:
            typer.secho(result.warning, fg=typer.colors.RED, bold=True)

    def status(self) -> None:
        snapshot = self.controller.tick()
        if snapshot.tracking:
            typer.echo(snapshot.elapsed)
        typer.echo(snapshot.total_usage)
        typer.echo(snapshot.today_usage)

    def view(self) -> None:
        typer.echo(self.controller.view())

    def export(self) -> None:
        written = self.controller.export(self.export_path)
        typer.echo(f"Usage log exported to {written.name} successfully!")

    def reset(self) -> None:
        if typer.confirm("Are you sure you want to reset the usage log?"):
            typer.echo(self.controller.reset())
            typer.echo("Total Usage: 0 hours, 0 minutes")

    def help(self) -> None:
        typer.echo(HELP_TEXT)
