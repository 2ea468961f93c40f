"""End-to-end tests from CSV edge list to saved results."""

import random

from click.testing import CliRunner
import pandas as pd
import pytest

from disjoint_forest.analysis.component_detector import ComponentDetector
from disjoint_forest.analysis.spanning_tree import KruskalMST
from disjoint_forest.cli import main


@pytest.fixture
def random_graph(tmp_path):
    """Write a random weighted graph with 50 nodes and 60 edges."""
    rng = random.Random(3)
    rows = [
        (rng.randrange(50), rng.randrange(50), round(rng.uniform(0, 10), 3)) for _ in range(60)
    ]
    df = pd.DataFrame(rows, columns=["source", "target", "weight"])
    csv_file = tmp_path / "graph.csv"
    df.to_csv(csv_file, index=False)
    return csv_file, df


def test_mst_edge_count_matches_components(random_graph):
    """Test a spanning forest has num_nodes - num_components edges."""
    _, df = random_graph

    components = ComponentDetector().detect_components(50, df)
    forest = KruskalMST().build(50, df)

    assert forest.num_components == len(components)
    assert len(forest.edges) == 50 - len(components)


def test_cli_outputs_agree(random_graph, tmp_path):
    """Test component and MST exports written by the CLI agree."""
    csv_file, _ = random_graph
    components_csv = tmp_path / "components.csv"
    mst_csv = tmp_path / "mst.csv"
    runner = CliRunner()

    result = runner.invoke(
        main, ["components", str(csv_file), "--nodes", "50", "-o", str(components_csv)]
    )
    assert result.exit_code == 0
    result = runner.invoke(main, ["mst", str(csv_file), "--nodes", "50", "-o", str(mst_csv)])
    assert result.exit_code == 0

    node_components = pd.read_csv(components_csv)
    mst_edges = pd.read_csv(mst_csv)
    lookup = dict(zip(node_components["node"], node_components["component_id"]))

    assert len(node_components) == 50
    assert len(mst_edges) == 50 - node_components["component_id"].nunique()
    for source, target in zip(mst_edges["source"], mst_edges["target"]):
        assert lookup[source] == lookup[target]
