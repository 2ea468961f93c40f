"""Data types for graph analyses built on the disjoint-set forest.

This module defines the core data structures shared by the analyses:
- Edge: A weighted edge between two element indices
- Component: A connected component with its internal edges
- SpanningForest: Result of a minimum spanning forest computation
"""

from dataclasses import dataclass, field
import math

import pandas as pd

SOURCE_COLUMN = "source"
TARGET_COLUMN = "target"
WEIGHT_COLUMN = "weight"
DEFAULT_WEIGHT = 1.0


@dataclass(frozen=True)
class Edge:
    """A weighted, undirected edge."""

    source: int
    target: int
    weight: float = DEFAULT_WEIGHT

    @property
    def is_self_loop(self) -> bool:
        return self.source == self.target


@dataclass
class Component:
    """A connected component.

    Attributes:
        component_id: Root element of the component in the forest
        members: Element indices in ascending order
        edges: Edges with both endpoints inside the component
    """

    component_id: int
    members: list[int]
    edges: list[Edge] = field(default_factory=list)

    @property
    def size(self) -> int:
        """Number of members in the component."""
        return len(self.members)

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    @property
    def total_weight(self) -> float:
        return sum(edge.weight for edge in self.edges)

    @property
    def density(self) -> float:
        """Graph density: distinct non-loop edges / possible edges."""
        if self.size <= 1:
            return 0.0
        possible_edges = self.size * (self.size - 1) // 2
        actual_edges = len(
            {tuple(sorted((e.source, e.target))) for e in self.edges if not e.is_self_loop}
        )
        return actual_edges / possible_edges

    @property
    def is_isolated(self) -> bool:
        """True if the component is a single element."""
        return self.size == 1


@dataclass
class SpanningForest:
    """Result of a minimum spanning forest computation.

    Attributes:
        num_nodes: Number of elements in the graph
        edges: Accepted edges, in the order they were accepted
        num_components: Number of trees in the forest
    """

    num_nodes: int
    edges: list[Edge]
    num_components: int

    @property
    def total_weight(self) -> float:
        return sum(edge.weight for edge in self.edges)

    @property
    def is_spanning_tree(self) -> bool:
        """True if the forest is a single tree covering every element."""
        return self.num_components <= 1


def _to_node(value: object) -> object:
    # pandas reads integer columns containing NaN as floats
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def edges_from_dataframe(edges: pd.DataFrame) -> list[Edge]:
    """Convert an edge-list DataFrame into Edge objects.

    Args:
        edges: DataFrame with columns source, target and optional weight.
            Headerless frames are read positionally (0 = source, 1 = target,
            2 = weight).

    Returns:
        List of edges in row order. Endpoints are passed through unchanged
        apart from integral floats, so invalid values surface when the
        forest validates them.

    Raises:
        ValueError: If a weight is missing (NaN)
    """
    if edges.empty:
        return []

    # Support both integer and string column names
    source_col = SOURCE_COLUMN if SOURCE_COLUMN in edges.columns else 0
    target_col = TARGET_COLUMN if TARGET_COLUMN in edges.columns else 1
    if WEIGHT_COLUMN in edges.columns:
        weight_col: str | int | None = WEIGHT_COLUMN
    elif 2 in edges.columns:
        weight_col = 2
    else:
        weight_col = None

    sources = edges[source_col].tolist()
    targets = edges[target_col].tolist()
    if weight_col is None:
        weights = [DEFAULT_WEIGHT] * len(sources)
    else:
        weights = [float(w) for w in edges[weight_col].tolist()]
        for row, weight in enumerate(weights):
            if math.isnan(weight):
                raise ValueError(f"Edge in row {row} has no weight (NaN); weights must be numbers")

    return [
        Edge(source=_to_node(s), target=_to_node(t), weight=w)
        for s, t, w in zip(sources, targets, weights)
    ]
