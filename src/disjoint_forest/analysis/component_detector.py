"""Connected component detection using DisjointSetForest."""

import logging

import pandas as pd

from disjoint_forest.analysis.analysis_base import GraphAnalysis
from disjoint_forest.analysis.graph_types import Component, edges_from_dataframe
from disjoint_forest.analysis.union_find import DisjointSetForest

logger = logging.getLogger(__name__)


class ComponentDetector(GraphAnalysis):
    """Detects connected components of an undirected graph."""

    @property
    def name(self) -> str:
        return "components"

    @property
    def description(self) -> str:
        return "Partition nodes into connected components"

    def detect_components(self, num_nodes: int, edges: pd.DataFrame) -> dict[int, Component]:
        """
        Detect connected components in a graph.

        Args:
            num_nodes: Number of elements; nodes are 0..num_nodes-1
            edges: DataFrame with edge information (columns: source, target,
                   optional weight)

        Returns:
            Dictionary mapping component_id -> Component. Every node belongs
            to exactly one component; nodes without edges are singletons.

        Raises:
            InvalidArgumentError: If num_nodes is negative
            IndexOutOfRangeError: If an edge endpoint is outside 0..num_nodes-1
        """
        forest = DisjointSetForest(num_nodes)
        edge_list = edges_from_dataframe(edges)

        for edge in edge_list:
            forest.unify(edge.source, edge.target)

        result: dict[int, Component] = {
            root: Component(component_id=root, members=members)
            for root, members in forest.get_groups().items()
        }

        # Attach each edge to the component holding both endpoints
        for edge in edge_list:
            result[forest.find(edge.source)].edges.append(edge)

        logger.debug(
            "Detected %d components over %d nodes and %d edges",
            forest.set_count(),
            num_nodes,
            len(edge_list),
        )
        return result

    def run(self, num_nodes: int, edges: pd.DataFrame) -> dict[int, Component]:
        return self.detect_components(num_nodes, edges)
