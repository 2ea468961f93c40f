"""Tests for graph data types."""

import pandas as pd
import pytest

from disjoint_forest.analysis.graph_types import (
    Component,
    Edge,
    SpanningForest,
    edges_from_dataframe,
)


class TestComponent:
    """Test Component dataclass and properties."""

    def test_size_and_isolated(self):
        """Test size and is_isolated properties."""
        assert Component(component_id=0, members=[0]).is_isolated
        component = Component(component_id=0, members=[0, 1, 2])
        assert component.size == 3
        assert not component.is_isolated

    def test_density(self):
        """Test density counts distinct non-loop edges."""
        component = Component(
            component_id=0,
            members=[0, 1, 2],
            edges=[Edge(0, 1), Edge(1, 0), Edge(1, 2), Edge(2, 2)],
        )
        # 2 distinct edges out of 3 possible
        assert abs(component.density - 2 / 3) < 1e-9

    def test_total_weight(self):
        """Test total weight sums edge weights."""
        component = Component(component_id=0, members=[0, 1], edges=[Edge(0, 1, 2.5)])
        assert component.total_weight == 2.5
        assert component.edge_count == 1


class TestSpanningForest:
    """Test SpanningForest properties."""

    def test_spanning_tree(self):
        """Test a single tree is a spanning tree."""
        forest = SpanningForest(num_nodes=2, edges=[Edge(0, 1, 3.0)], num_components=1)
        assert forest.is_spanning_tree
        assert forest.total_weight == 3.0

    def test_forest(self):
        """Test multiple trees are not a spanning tree."""
        forest = SpanningForest(num_nodes=3, edges=[Edge(0, 1)], num_components=2)
        assert not forest.is_spanning_tree


class TestEdgesFromDataFrame:
    """Test edges_from_dataframe() conversion."""

    def test_named_columns(self):
        """Test named source/target/weight columns."""
        df = pd.DataFrame({"source": [0, 1], "target": [1, 2], "weight": [0.5, 2]})
        assert edges_from_dataframe(df) == [Edge(0, 1, 0.5), Edge(1, 2, 2.0)]

    def test_positional_columns(self):
        """Test headerless frames use column positions."""
        df = pd.DataFrame([[0, 1, 3.0], [1, 2, 4.0]])
        assert edges_from_dataframe(df) == [Edge(0, 1, 3.0), Edge(1, 2, 4.0)]

    def test_integral_floats_become_ints(self):
        """Test endpoints read as floats are converted back to ints."""
        df = pd.DataFrame({"source": [0.0, 1.0], "target": [1.0, None]})
        edges = edges_from_dataframe(df)
        assert edges[0].source == 0
        assert isinstance(edges[0].source, int)
        assert edges[1].target != edges[1].target  # NaN is passed through

    def test_empty(self):
        """Test an empty frame yields no edges."""
        assert edges_from_dataframe(pd.DataFrame(columns=["source", "target"])) == []

    def test_missing_weight_rejected(self):
        """Test a NaN weight raises ValueError naming the row."""
        df = pd.DataFrame({"source": [0, 1], "target": [1, 2], "weight": [1.0, None]})

        with pytest.raises(ValueError, match="row 1"):
            edges_from_dataframe(df)
