"""Run command for executing registered analyses by name."""

from pathlib import Path

import click
from rich.console import Console

from disjoint_forest.analysis.graph_types import SpanningForest
from disjoint_forest.analysis.registry import AnalysisRegistry, get_analyses
from disjoint_forest.analysis.result_presenter import (
    display_components_table,
    display_spanning_forest_table,
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
    "--analysis",
    "-a",
    "analysis_names",
    type=str,
    default=None,
    help=f"Comma-separated analyses to run ({', '.join(AnalysisRegistry.available())})",
)
@click.option(
    "--nodes",
    "-n",
    type=int,
    default=None,
    help="Number of nodes (default: largest endpoint + 1)",
)
@click.option("--no-header", is_flag=True, help="CSV has no header row (source,target[,weight])")
@click.pass_context
@handle_command_errors
def run(
    ctx: click.Context,
    input_file: Path,
    analysis_names: str | None,
    nodes: int | None,
    no_header: bool,
):
    """Run one or more registered analyses on an edge list.

    INPUT_FILE: Path to edge-list CSV (columns: source, target, optional weight)
    """
    config = (ctx.obj or {}).get("config") or load_config()
    analyses = get_analyses(analysis_names or config.analysis.default_analyses)

    graph = load_edges(
        input_file,
        num_nodes=nodes,
        header=not no_header,
        validate=config.graph.validate_edges,
    )

    for analysis in analyses:
        console.print(f"[bold blue]Running {analysis.name}:[/bold blue] {analysis.description}")
        result = analysis.run(graph.num_nodes, graph.edges)

        if isinstance(result, SpanningForest):
            display_spanning_forest_table(result, console)
        elif isinstance(result, dict):
            display_components_table(result, console, max_rows=config.graph.max_rows_displayed)
        else:
            console.print(result)

    console.print(f"[bold green]✓[/bold green] {len(analyses)} analyses complete!")
