"""Base class for graph analyses."""

from abc import ABC, abstractmethod
from typing import Any

import pandas as pd


class GraphAnalysis(ABC):
    """Abstract base class for analyses over an edge list.

    Each analysis builds its own disjoint-set forest from the edges it is
    given. Subclasses must implement name, description, and run.

    Example:
        >>> class EdgeCount(GraphAnalysis):
        ...     @property
        ...     def name(self) -> str:
        ...         return "edge_count"
        ...
        ...     @property
        ...     def description(self) -> str:
        ...         return "Number of edges"
        ...
        ...     def run(self, num_nodes, edges):
        ...         return len(edges)
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return unique analysis identifier (e.g., "components").

        This name is used to select the analysis from the command line.
        """
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Return human-readable description of what this analysis computes."""
        pass

    @abstractmethod
    def run(self, num_nodes: int, edges: pd.DataFrame) -> Any:
        """Run this analysis on a graph.

        Args:
            num_nodes: Number of elements; nodes are 0..num_nodes-1
            edges: DataFrame with columns source, target and optional weight

        Returns:
            Analysis-specific result
        """
        pass
