"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- Tables/panels are reused by the one-shot commands and the interactive menu.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import Animal, Lion, Parrot, Snake

MENU_OPTIONS: Sequence[tuple[str, str]] = (
    ("1", "List animals"),
    ("2", "Add lion"),
    ("3", "Add parrot"),
    ("4", "Add snake"),
    ("5", "Make all sounds"),
    ("6", "Save"),
    ("7", "Load"),
    ("8", "Feeding time"),
    ("0", "Exit"),
)


def print_banner(console: Console) -> None:
    """Welcome banner, only shown by the interactive menu."""

    title = Text("Zoo Registry", style="bold cyan")
    subtitle = Text("Lions • Parrots • Snakes", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def print_menu(console: Console) -> None:
    console.print()
    for key, label in MENU_OPTIONS:
        console.print(f"[bold cyan]{key})[/bold cyan] {label}")


def _details(animal: Animal) -> str:
    if isinstance(animal, Lion):
        return "alpha" if animal.is_alpha else ""
    if isinstance(animal, Parrot):
        return ", ".join(animal.vocabulary)
    if isinstance(animal, Snake):
        return "venomous" if animal.is_venomous else ""
    return ""


def build_animals_table(animals: Iterable[Animal]) -> Table:
    """Table with one row per animal, in registry order."""

    table = Table(title="Animals")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Species", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Age", style="green", justify="right")
    table.add_column("Details", style="magenta")
    for index, animal in enumerate(animals, start=1):
        table.add_row(
            str(index), animal.species(), Text(animal.name), str(animal.age), Text(_details(animal))
        )
    return table
