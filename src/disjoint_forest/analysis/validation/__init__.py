"""Data validation module for edge-list files."""

from disjoint_forest.analysis.validation.edge_validator import EdgeListValidator

__all__ = ["EdgeListValidator"]
