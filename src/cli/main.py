"""Zoo registry CLI (Typer + Rich).

Why a thin shell:
- Every command opens the registry, calls it, and renders the result; the
  domain rules live in `core`.
- User-input leniency (an unreadable age becomes 0 in the menu) belongs here,
  never in the registry.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from adapters.json_repository import JsonAnimalRepository
from cli import doctor
from cli.ui_components import build_animals_table, print_banner, print_menu
from core.config import AppSettings
from core.domain.errors import FormatError, ValidationError
from core.domain.models import Animal, Lion, Parrot, Snake, default_seed
from core.interfaces.capabilities import Feedable, Flyable
from core.services.zoo_service import ZooService

app = typer.Typer(no_args_is_help=True, help="Manage a small zoo registry stored in a JSON file.")
app.add_typer(doctor.app, name="doctor")

_console = Console()
logger = logging.getLogger(__name__)

RECOVERABLE_ERRORS = (ValidationError, FormatError, OSError)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _settings(ctx: typer.Context) -> AppSettings:
    return ctx.obj if isinstance(ctx.obj, AppSettings) else AppSettings()


def _open_zoo(settings: AppSettings) -> ZooService:
    zoo = ZooService(JsonAnimalRepository(settings.data_file))
    zoo.load()
    if settings.seed_on_empty and len(zoo) == 0:
        logger.info("Empty registry; seeding default residents")
        for animal in default_seed():
            zoo.add(animal)
    return zoo


def _fail(exc: Exception) -> typer.Exit:
    _console.print(f"[red]Error:[/red] {escape(str(exc))}")
    return typer.Exit(code=1)


def _add_and_save(ctx: typer.Context, build) -> None:
    try:
        zoo = _open_zoo(_settings(ctx))
        animal = build()
        zoo.add(animal)
        zoo.save()
    except RECOVERABLE_ERRORS as exc:
        raise _fail(exc) from exc
    _console.print(f"[green]{animal.species()} added.[/green]")


def parse_age(text: str | None) -> int:
    """Menu leniency: anything that is not an integer becomes 0."""

    try:
        return int((text or "").strip())
    except ValueError:
        return 0


def parse_yes(text: str | None) -> bool:
    return (text or "n").strip().lower().startswith("y")


def parse_words(text: str | None) -> list[str]:
    return [w.strip() for w in (text or "").split(",") if w.strip()]


@app.callback()
def main(
    ctx: typer.Context,
    data_file: Optional[Path] = typer.Option(
        None,
        "--data-file",
        "-f",
        help="JSON file to use instead of ZOO_DATA_FILE / animals.json.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level."),
) -> None:
    """Load settings once and share them with every command."""

    settings = AppSettings()
    if data_file is not None:
        settings = settings.model_copy(update={"data_file": data_file})
    _configure_logging("DEBUG" if verbose else settings.log_level)
    ctx.obj = settings


@app.command(name="list")
def list_animals(ctx: typer.Context) -> None:
    """List every animal in insertion order."""

    try:
        zoo = _open_zoo(_settings(ctx))
    except RECOVERABLE_ERRORS as exc:
        raise _fail(exc) from exc
    animals = zoo.list_animals()
    if not animals:
        _console.print("No animals.")
        return
    _console.print(build_animals_table(animals))


@app.command()
def sounds(ctx: typer.Context) -> None:
    """Print `<species> <name>: <sound>` for every animal."""

    try:
        zoo = _open_zoo(_settings(ctx))
    except RECOVERABLE_ERRORS as exc:
        raise _fail(exc) from exc
    for line in zoo.make_all_sounds():
        _console.print(line, markup=False, highlight=False)


@app.command(name="add-lion")
def add_lion(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Lion name."),
    age: int = typer.Argument(..., help="Age in years."),
    alpha: bool = typer.Option(False, "--alpha", help="Leader of the pride."),
) -> None:
    """Add a lion and save."""

    _add_and_save(ctx, lambda: Lion(name=name, age=age, is_alpha=alpha))


@app.command(name="add-parrot")
def add_parrot(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Parrot name."),
    age: int = typer.Argument(..., help="Age in years."),
    word: Optional[list[str]] = typer.Option(None, "--word", "-w", help="Known word (repeatable)."),
) -> None:
    """Add a parrot and save."""

    _add_and_save(ctx, lambda: Parrot(name=name, age=age, vocabulary=word or []))


@app.command(name="add-snake")
def add_snake(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Snake name."),
    age: int = typer.Argument(..., help="Age in years."),
    venomous: bool = typer.Option(False, "--venomous", help="Venomous bite."),
) -> None:
    """Add a snake and save."""

    _add_and_save(ctx, lambda: Snake(name=name, age=age, is_venomous=venomous))


@app.command()
def seed(ctx: typer.Context) -> None:
    """Append the default residents (Simba, Polly, Nagini) and save."""

    try:
        zoo = _open_zoo(_settings(ctx))
        for animal in default_seed():
            zoo.add(animal)
        zoo.save()
    except RECOVERABLE_ERRORS as exc:
        raise _fail(exc) from exc
    _console.print(f"[green]Seeded. {len(zoo)} animal(s) in the registry.[/green]")


def _prompt(label: str) -> str:
    return typer.prompt(label, default="", show_default=False)


def _menu_add(zoo: ZooService, choice: str) -> Animal:
    name = _prompt("Name")
    age = parse_age(_prompt("Age"))
    if choice == "2":
        animal: Animal = Lion(name=name, age=age, is_alpha=parse_yes(_prompt("Is alpha (y/n)")))
    elif choice == "3":
        words = parse_words(_prompt("Vocabulary (comma-separated)"))
        animal = Parrot(name=name, age=age, vocabulary=words)
    else:
        animal = Snake(name=name, age=age, is_venomous=parse_yes(_prompt("Is venomous (y/n)")))
    zoo.add(animal)
    return animal


def _feeding_time(zoo: ZooService) -> None:
    for animal in zoo.list_animals():
        if isinstance(animal, Feedable):
            _console.print(animal.feed("dinner"), markup=False, highlight=False)
        if isinstance(animal, Flyable):
            _console.print(animal.fly(), markup=False, highlight=False)


@app.command()
def menu(ctx: typer.Context) -> None:
    """Interactive menu; changes stay in memory until you choose Save."""

    settings = _settings(ctx)
    zoo = ZooService(JsonAnimalRepository(settings.data_file))
    print_banner(_console)
    try:
        zoo.load()
    except RECOVERABLE_ERRORS as exc:
        _console.print(f"[red]Could not load {settings.data_file}:[/red] {escape(str(exc))}")

    while True:
        print_menu(_console)
        choice = _prompt(">").strip()
        try:
            if choice == "1":
                animals = zoo.list_animals()
                if animals:
                    _console.print(build_animals_table(animals))
                else:
                    _console.print("No animals.")
            elif choice in ("2", "3", "4"):
                animal = _menu_add(zoo, choice)
                _console.print(f"{animal.species()} added.")
            elif choice == "5":
                for line in zoo.make_all_sounds():
                    _console.print(line, markup=False, highlight=False)
            elif choice == "6":
                zoo.save()
                _console.print("Saved.")
            elif choice == "7":
                zoo.load()
                _console.print("Loaded.")
            elif choice == "8":
                _feeding_time(zoo)
            elif choice == "0":
                break
            else:
                _console.print("Unknown choice.")
        except RECOVERABLE_ERRORS as exc:
            _console.print(f"[red]Error:[/red] {escape(str(exc))}")


def run() -> None:
    app()
