"""Minimum spanning forest via Kruskal's algorithm.

Edges are considered in ascending weight order and accepted whenever they
join two different trees, which the disjoint-set forest answers in
near-constant amortized time.
"""

import logging

import pandas as pd

from disjoint_forest.analysis.analysis_base import GraphAnalysis
from disjoint_forest.analysis.graph_types import Edge, SpanningForest, edges_from_dataframe
from disjoint_forest.analysis.union_find import DisjointSetForest

logger = logging.getLogger(__name__)


class KruskalMST(GraphAnalysis):
    """Builds a minimum spanning forest of an undirected weighted graph."""

    @property
    def name(self) -> str:
        return "mst"

    @property
    def description(self) -> str:
        return "Minimum spanning forest (Kruskal)"

    def build(self, num_nodes: int, edges: pd.DataFrame) -> SpanningForest:
        """Build a minimum spanning forest.

        Args:
            num_nodes: Number of elements; nodes are 0..num_nodes-1
            edges: DataFrame with columns source, target and optional weight

        Returns:
            SpanningForest with the accepted edges. For a disconnected graph
            this is one tree per component.

        Raises:
            InvalidArgumentError: If num_nodes is negative
            IndexOutOfRangeError: If an edge endpoint is outside 0..num_nodes-1
        """
        forest = DisjointSetForest(num_nodes)
        edge_list = edges_from_dataframe(edges)

        # All endpoints are validated, including edges after the early exit
        for edge in edge_list:
            forest.find(edge.source)
            forest.find(edge.target)

        # sorted() is stable: equal weights keep input order
        accepted: list[Edge] = []
        for edge in sorted(edge_list, key=lambda e: e.weight):
            if forest.set_count() <= 1:
                break
            if forest.connected(edge.source, edge.target):
                continue
            forest.unify(edge.source, edge.target)
            accepted.append(edge)

        logger.debug(
            "Accepted %d of %d edges, %d trees remain",
            len(accepted),
            len(edge_list),
            forest.set_count(),
        )
        return SpanningForest(
            num_nodes=num_nodes, edges=accepted, num_components=forest.set_count()
        )

    def run(self, num_nodes: int, edges: pd.DataFrame) -> SpanningForest:
        return self.build(num_nodes, edges)
