"""Analysis registry for looking up graph analyses by name."""

from collections.abc import Callable

from disjoint_forest.analysis.analysis_base import GraphAnalysis
from disjoint_forest.analysis.component_detector import ComponentDetector
from disjoint_forest.analysis.spanning_tree import KruskalMST


class AnalysisRegistry:
    """Central registry mapping analysis names to factories.

    The mapping is fixed at import time; new analyses are added by
    registering a factory, never by scanning modules at runtime.
    """

    _factories: dict[str, Callable[[], GraphAnalysis]] = {
        "components": ComponentDetector,
        "mst": KruskalMST,
    }

    @classmethod
    def register(cls, name: str, factory: Callable[[], GraphAnalysis]) -> None:
        """Register an analysis factory under a name.

        Raises:
            ValueError: If the name is already registered
        """
        if name in cls._factories:
            raise ValueError(f"Analysis already registered: {name}")
        cls._factories[name] = factory

    @classmethod
    def unregister(cls, name: str) -> None:
        cls._factories.pop(name, None)

    @classmethod
    def available(cls) -> list[str]:
        """Get sorted names of all registered analyses."""
        return sorted(cls._factories)

    @classmethod
    def get(cls, name: str) -> GraphAnalysis:
        """Create the analysis registered under name.

        Raises:
            ValueError: If the name is not registered
        """
        if name not in cls._factories:
            available = ", ".join(cls.available())
            raise ValueError(f"Unknown analysis: {name}. Available: {available}")
        return cls._factories[name]()

    @classmethod
    def get_by_names(cls, names: list[str]) -> list[GraphAnalysis]:
        """Create analyses by their names.

        Args:
            names: List of analysis names

        Returns:
            List of analysis instances, in the order requested

        Raises:
            ValueError: If any analysis name is not found
        """
        unknown = set(names) - set(cls._factories)
        if unknown:
            available = ", ".join(cls.available())
            raise ValueError(f"Unknown analyses: {sorted(unknown)}. Available: {available}")

        return [cls._factories[name]() for name in names]


def get_analyses(names: str | list[str] | None = None) -> list[GraphAnalysis]:
    """Get graph analyses.

    Args:
        names: Analysis names to select. Can be:
            - None: Return all analyses
            - str: Comma-separated names (e.g., "components,mst")
            - list[str]: List of names (e.g., ["components", "mst"])

    Returns:
        List of analysis instances

    Raises:
        ValueError: If any analysis name is not found

    Examples:
        >>> get_analyses()  # All analyses
        >>> get_analyses("components,mst")  # Specific analyses
        >>> get_analyses(["mst"])  # List format
    """
    if names is None:
        return AnalysisRegistry.get_by_names(AnalysisRegistry.available())

    if isinstance(names, str):
        names = [name.strip() for name in names.split(",") if name.strip()]

    return AnalysisRegistry.get_by_names(names)
