"""MST command for minimum spanning forest computation."""

from pathlib import Path

import click
from rich.console import Console

from disjoint_forest.analysis.result_presenter import (
    display_spanning_forest_table,
    spanning_forest_to_dataframe,
)
from disjoint_forest.analysis.spanning_tree import KruskalMST
from disjoint_forest.core.config import load_config
from disjoint_forest.core.edge_loader import load_edges
from disjoint_forest.error.cmd import handle_command_errors

console = Console()


@click.command()
@click.argument(
    "input_file", type=click.Path(exists=True, path_type=Path, file_okay=True, dir_okay=False)
)
@click.option(
    "--nodes",
    "-n",
    type=int,
    default=None,
    help="Number of nodes (default: largest endpoint + 1)",
)
@click.option("--no-header", is_flag=True, help="CSV has no header row (source,target[,weight])")
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path, file_okay=True, dir_okay=False),
    help="Output CSV file for the selected edges",
)
@click.pass_context
@handle_command_errors
def mst(
    ctx: click.Context, input_file: Path, nodes: int | None, no_header: bool, output: Path | None
):
    """Compute a minimum spanning forest with Kruskal's algorithm.

    INPUT_FILE: Path to edge-list CSV (columns: source, target, optional weight)
    """
    config = (ctx.obj or {}).get("config") or load_config()
    console.print(f"[bold blue]Computing minimum spanning forest:[/bold blue] {input_file}")

    graph = load_edges(
        input_file,
        num_nodes=nodes,
        header=not no_header,
        validate=config.graph.validate_edges,
    )
    forest = KruskalMST().build(graph.num_nodes, graph.edges)

    display_spanning_forest_table(forest, console)
    if not forest.is_spanning_tree:
        console.print(
            f"[yellow]Warning:[/yellow] graph is disconnected "
            f"({forest.num_components} trees)",
            highlight=False,
        )

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        spanning_forest_to_dataframe(forest).to_csv(output, index=False)
        console.print(f"[green]Results saved to:[/green] {output}")

    console.print("[bold green]✓[/bold green] Spanning forest computed!")
