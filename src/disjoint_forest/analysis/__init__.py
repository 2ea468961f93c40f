"""Analysis modules built on the disjoint-set forest.

This package provides core analysis functionality including:
- DisjointSetForest data structure (union-find)
- Connected component detection
- Minimum spanning forest (Kruskal)
- Registry of analyses by name
"""

from disjoint_forest.analysis.component_detector import ComponentDetector
from disjoint_forest.analysis.graph_types import Component, Edge, SpanningForest
from disjoint_forest.analysis.registry import AnalysisRegistry, get_analyses
from disjoint_forest.analysis.spanning_tree import KruskalMST
from disjoint_forest.analysis.union_find import DisjointSetForest

__all__ = [
    "DisjointSetForest",
    "ComponentDetector",
    "KruskalMST",
    "AnalysisRegistry",
    "get_analyses",
    "Component",
    "Edge",
    "SpanningForest",
]
