"""Components command for connected component detection."""

from pathlib import Path

import click
from rich.console import Console

from disjoint_forest.analysis.component_detector import ComponentDetector
from disjoint_forest.analysis.result_presenter import (
    components_to_dataframe,
    display_components_table,
)
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
    help="Output CSV file mapping each node to its component",
)
@click.pass_context
@handle_command_errors
def components(
    ctx: click.Context, input_file: Path, nodes: int | None, no_header: bool, output: Path | None
):
    """Find connected components of a graph.

    INPUT_FILE: Path to edge-list CSV (columns: source, target, optional weight)
    """
    config = (ctx.obj or {}).get("config") or load_config()
    console.print(f"[bold blue]Finding components:[/bold blue] {input_file}")

    graph = load_edges(
        input_file,
        num_nodes=nodes,
        header=not no_header,
        validate=config.graph.validate_edges,
    )
    result = ComponentDetector().detect_components(graph.num_nodes, graph.edges)

    display_components_table(result, console, max_rows=config.graph.max_rows_displayed)

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        components_to_dataframe(result).to_csv(output, index=False)
        console.print(f"[green]Results saved to:[/green] {output}")

    console.print("[bold green]✓[/bold green] Components computed!")
