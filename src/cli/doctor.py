"""Doctor command for environment diagnostics."""

from __future__ import annotations

import os
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from adapters.json_repository import JsonAnimalRepository
from core.config import AppSettings, get_user_env_file, write_user_env_vars
from core.domain.errors import FormatError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_data_file(path: Path) -> tuple[bool, str]:
    """Try to load the data file the same way the registry does."""

    if not path.exists():
        return True, "Missing (will be created on first save)"
    try:
        animals = JsonAnimalRepository(path).load()
    except FormatError as exc:
        return False, escape(str(exc))
    except OSError as exc:
        return False, escape(f"{type(exc).__name__}: {exc}")
    return True, f"{len(animals)} animal(s)"


def _check_writable(path: Path) -> tuple[bool, str]:
    target = path if path.exists() else path.resolve().parent
    while not target.exists():
        target = target.parent
    if os.access(target, os.W_OK):
        return True, f"Writable: {target}"
    return False, f"No write permission on {target}"


@app.command()
def run(ctx: typer.Context) -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = ctx.obj if isinstance(ctx.obj, AppSettings) else AppSettings()

    table = Table(title="Zoo Registry Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    table.add_row("Data file", "OK", str(settings.data_file))
    table.add_row("Log level", "OK", settings.log_level)
    user_env = get_user_env_file()
    table.add_row("User config", "OK" if user_env.exists() else "OPTIONAL", str(user_env))

    ok_data, detail_data = _check_data_file(settings.data_file)
    table.add_row("Data file content", "OK" if ok_data else "FAIL", detail_data)

    ok_write, detail_write = _check_writable(settings.data_file)
    table.add_row("Save location", "OK" if ok_write else "FAIL", detail_write)

    _console.print(table)

    if not ok_data:
        _console.print(
            "\n[yellow]Note:[/yellow] `load` refuses malformed files; fix or move the file before saving over it."
        )
    if not (ok_data and ok_write):
        raise typer.Exit(code=1)


@app.command(name="set-data-file")
def set_data_file(path: Path = typer.Argument(..., help="JSON file used by every command.")) -> None:
    """Store the default data file in the user config .env."""

    if not str(path).strip():
        raise typer.BadParameter("path is required")
    env_path = write_user_env_vars({"ZOO_DATA_FILE": str(path.expanduser().resolve())})
    _console.print(f"[green]Saved data file setting to:[/green] {env_path}")
