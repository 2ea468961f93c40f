"""Presentation layer for analysis results.

This module handles the display and export of component and spanning
forest results, separating presentation logic from command orchestration.
"""

import pandas as pd
from rich.console import Console
from rich.table import Table

from disjoint_forest.analysis.graph_types import Component, SpanningForest

# Wide enough that overview titles render on one line
OVERVIEW_MIN_WIDTH = 40


def display_components_table(
    components: dict[int, Component], console: Console, max_rows: int = 20
) -> None:
    """Display connected components as Rich tables.

    Args:
        components: Mapping of component_id -> Component
        console: Rich console for output
        max_rows: Maximum number of components listed (largest first)

    Displays two tables:
    1. Overview (node count, component count, largest component, isolated nodes)
    2. Components (id, size, edges, density, members)
    """
    ordered = sorted(components.values(), key=lambda c: (-c.size, c.component_id))
    num_nodes = sum(c.size for c in ordered)

    overview = Table(title="Connected Components - Overview", min_width=OVERVIEW_MIN_WIDTH)
    overview.add_column("Metric", style="cyan")
    overview.add_column("Value", style="green", justify="right")

    overview.add_row("Nodes", str(num_nodes))
    overview.add_row("Components", str(len(ordered)))
    overview.add_row("Largest component", str(ordered[0].size if ordered else 0))
    overview.add_row("Isolated nodes", str(sum(1 for c in ordered if c.is_isolated)))

    console.print(overview)

    if not ordered:
        return

    table = Table(title="Components")
    table.add_column("Component", style="cyan", justify="right")
    table.add_column("Size", style="green", justify="right")
    table.add_column("Edges", style="green", justify="right")
    table.add_column("Density", style="green", justify="right")
    table.add_column("Members", style="white")

    for component in ordered[:max_rows]:
        table.add_row(
            str(component.component_id),
            str(component.size),
            str(component.edge_count),
            f"{component.density:.2f}",
            _format_members(component.members),
        )

    console.print(table)
    if len(ordered) > max_rows:
        console.print(f"[dim]... {len(ordered) - max_rows} more components not shown[/dim]")


def display_spanning_forest_table(forest: SpanningForest, console: Console) -> None:
    """Display a minimum spanning forest as Rich tables.

    Args:
        forest: Spanning forest result
        console: Rich console for output
    """
    overview = Table(title="Minimum Spanning Forest - Overview", min_width=OVERVIEW_MIN_WIDTH)
    overview.add_column("Metric", style="cyan")
    overview.add_column("Value", style="green", justify="right")

    overview.add_row("Nodes", str(forest.num_nodes))
    overview.add_row("Edges selected", str(len(forest.edges)))
    overview.add_row("Trees", str(forest.num_components))
    overview.add_row("Total weight", f"{forest.total_weight:.4f}")
    overview.add_row("Spanning tree", "yes" if forest.is_spanning_tree else "no")

    console.print(overview)

    if not forest.edges:
        return

    table = Table(title="Selected Edges")
    table.add_column("Source", style="cyan", justify="right")
    table.add_column("Target", style="cyan", justify="right")
    table.add_column("Weight", style="green", justify="right")

    for edge in forest.edges:
        table.add_row(str(edge.source), str(edge.target), f"{edge.weight:.4f}")

    console.print(table)


def components_to_dataframe(components: dict[int, Component]) -> pd.DataFrame:
    """Convert components to a node -> component DataFrame.

    Returns:
        DataFrame with columns node, component_id, component_size, sorted by node
    """
    rows = [
        {"node": node, "component_id": c.component_id, "component_size": c.size}
        for c in components.values()
        for node in c.members
    ]
    df = pd.DataFrame(rows, columns=["node", "component_id", "component_size"])
    return df.sort_values("node").reset_index(drop=True)


def spanning_forest_to_dataframe(forest: SpanningForest) -> pd.DataFrame:
    """Convert the selected edges to a DataFrame with columns source, target, weight."""
    return pd.DataFrame(
        [(e.source, e.target, e.weight) for e in forest.edges],
        columns=["source", "target", "weight"],
    )


def _format_members(members: list[int], limit: int = 10) -> str:
    shown = ", ".join(str(m) for m in members[:limit])
    if len(members) > limit:
        return f"{shown}, ... (+{len(members) - limit})"
    return shown
