"""Disjoint-set forest (union-find) and graph analyses built on it."""

__version__ = "0.1.0"
