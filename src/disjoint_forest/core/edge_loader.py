"""Loading edge lists from CSV files."""

from dataclasses import dataclass
import logging
from pathlib import Path

import pandas as pd

from disjoint_forest.analysis.graph_types import SOURCE_COLUMN, TARGET_COLUMN, WEIGHT_COLUMN
from disjoint_forest.analysis.validation import EdgeListValidator

logger = logging.getLogger(__name__)

EDGE_COLUMN_NAMES = [SOURCE_COLUMN, TARGET_COLUMN, WEIGHT_COLUMN]


@dataclass
class LoadedGraph:
    """An edge list read from disk together with its node count."""

    edges: pd.DataFrame
    num_nodes: int
    source: Path


def load_edges(
    input_file: Path,
    num_nodes: int | None = None,
    header: bool = True,
    validate: bool = True,
) -> LoadedGraph:
    """Read an edge-list CSV.

    Args:
        input_file: CSV with columns source, target and optional weight
        num_nodes: Number of nodes. If None, inferred from the largest endpoint
        header: Whether the file has a header row. Headerless files are read
            positionally (source, target, weight)
        validate: Log warnings for suspicious rows

    Returns:
        LoadedGraph with the edges and node count

    Raises:
        FileNotFoundError: If input_file does not exist
        ValueError: If the node count cannot be inferred
    """
    if not input_file.exists():
        raise FileNotFoundError(f"Edge list not found: {input_file}")

    try:
        edges = pd.read_csv(input_file, header=0 if header else None)
    except pd.errors.EmptyDataError:
        edges = pd.DataFrame(columns=EDGE_COLUMN_NAMES)

    if not header:
        edges = edges.rename(columns=dict(enumerate(EDGE_COLUMN_NAMES)))

    validator = EdgeListValidator()
    if validate:
        validator.validate_edges(edges, source=str(input_file))

    if num_nodes is None:
        num_nodes = validator.infer_num_nodes(edges)
        logger.info(f"Inferred {num_nodes} nodes from {input_file}")

    return LoadedGraph(edges=edges, num_nodes=num_nodes, source=input_file)
