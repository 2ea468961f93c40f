"""Tests for edge-list loading."""

import pandas as pd
import pytest

from disjoint_forest.core.edge_loader import load_edges


class TestLoadEdges:
    """Test load_edges()."""

    @pytest.fixture
    def edges_csv(self, tmp_path):
        """Create sample edge-list CSV."""
        csv_file = tmp_path / "edges.csv"
        pd.DataFrame({"source": [0, 1, 4], "target": [1, 2, 5], "weight": [1.0, 2.0, 3.0]}).to_csv(
            csv_file, index=False
        )
        return csv_file

    def test_infers_node_count(self, edges_csv):
        """Test node count defaults to largest endpoint plus one."""
        graph = load_edges(edges_csv)
        assert graph.num_nodes == 6
        assert len(graph.edges) == 3
        assert graph.source == edges_csv

    def test_explicit_node_count(self, edges_csv):
        """Test an explicit node count is kept."""
        assert load_edges(edges_csv, num_nodes=10).num_nodes == 10

    def test_headerless(self, tmp_path, caplog):
        """Test headerless files get named columns by position."""
        csv_file = tmp_path / "edges.csv"
        csv_file.write_text("0,1,2.5\n1,3,1.0\n")

        graph = load_edges(csv_file, header=False)

        assert graph.num_nodes == 4
        assert list(graph.edges.columns) == ["source", "target", "weight"]
        assert "missing required columns" not in caplog.text

    def test_empty_file(self, tmp_path):
        """Test an empty file is a graph with no edges."""
        csv_file = tmp_path / "edges.csv"
        csv_file.write_text("")

        graph = load_edges(csv_file)

        assert graph.num_nodes == 0
        assert graph.edges.empty

    def test_missing_file(self, tmp_path):
        """Test a nonexistent file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_edges(tmp_path / "missing.csv")

    def test_validation_warnings(self, tmp_path, caplog):
        """Test suspicious rows are logged during loading."""
        csv_file = tmp_path / "edges.csv"
        csv_file.write_text("source,target\n2,2\n")

        load_edges(csv_file)
        assert "self-loops" in caplog.text

    def test_validation_disabled(self, tmp_path, caplog):
        """Test validation can be turned off."""
        csv_file = tmp_path / "edges.csv"
        csv_file.write_text("source,target\n2,2\n")

        load_edges(csv_file, validate=False)
        assert "self-loops" not in caplog.text
