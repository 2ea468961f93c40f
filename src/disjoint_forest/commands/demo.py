"""Demo command walking through forest operations step by step."""

import click
from rich.console import Console
from rich.table import Table

from disjoint_forest.analysis.union_find import DisjointSetForest
from disjoint_forest.error.cmd import handle_command_errors

console = Console()

DEFAULT_STEPS = ["0-1", "2-3", "0-3", "0-1"]


def _parse_pair(step: str) -> tuple[int, int]:
    parts = step.replace(",", "-").split("-")
    if len(parts) != 2:
        raise ValueError(f"Invalid step '{step}': expected X-Y")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        raise ValueError(f"Invalid step '{step}': indices must be integers") from None


@click.command()
@click.option("--size", "-s", type=int, default=10, show_default=True, help="Number of elements")
@click.option(
    "--unify",
    "-u",
    "steps",
    multiple=True,
    help="Pair to unify as X-Y (repeatable, default: 0-1 2-3 0-3 0-1)",
)
@handle_command_errors
def demo(size: int, steps: tuple[str, ...]):
    """Walk through unify operations on a fresh forest.

    Prints the set count and connectivity after each step.
    """
    pairs = [_parse_pair(step) for step in (steps or DEFAULT_STEPS)]
    forest = DisjointSetForest(size)
    console.print(
        f"[bold blue]Created forest:[/bold blue] {size} elements, {forest.set_count()} sets"
    )

    table = Table(title="Unify Steps")
    table.add_column("Step", style="cyan", justify="right")
    table.add_column("Unify", style="cyan")
    table.add_column("Merged", style="green")
    table.add_column("Root", style="green", justify="right")
    table.add_column("Sets", style="green", justify="right")

    for i, (x, y) in enumerate(pairs, 1):
        before = forest.set_count()
        root = forest.unify(x, y)
        merged = forest.set_count() < before
        table.add_row(
            str(i), f"{x}, {y}", "yes" if merged else "no", str(root), str(forest.set_count())
        )

    console.print(table)

    groups = [members for members in forest.get_groups().values() if len(members) > 1]
    for members in groups:
        console.print(f"[dim]Connected:[/dim] {', '.join(str(m) for m in members)}")

    console.print(f"[bold green]✓[/bold green] Final set count: {forest.set_count()}")
