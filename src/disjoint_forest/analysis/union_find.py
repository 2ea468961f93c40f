"""Disjoint-set forest (union-find) with path compression and union-by-rank.

This module provides the core data structure of the package. It maintains a
partition of a fixed universe of integer elements ``0..n-1`` into disjoint
sets and is used by the connected-component and spanning-tree analyses.
"""

import operator

from disjoint_forest.core.errors import IndexOutOfRangeError, InvalidArgumentError


def _as_index(value: object) -> int | None:
    """Convert an integer-like value to ``int``, or return None if it is not one."""
    if isinstance(value, bool):
        return None
    try:
        return operator.index(value)
    except TypeError:
        return None


class DisjointSetForest:
    """Disjoint-set forest over the elements ``0..n-1``.

    Each set is a tree whose root is the set's representative. ``find``
    flattens every path it walks (path compression) and ``unify`` attaches
    the root of lower rank under the root of higher rank (union-by-rank).
    With both optimizations, any sequence of ``m`` operations on ``n``
    elements runs in ``O(m * alpha(n))`` total time, where ``alpha`` is the
    inverse Ackermann function.

    The structure is not thread-safe. Callers sharing an instance across
    threads must guard every ``find``, ``unify`` and ``connected`` call with a
    single lock, since ``find`` rewrites parent pointers.

    Attributes:
        parent: Snapshot of the parent pointer of each element.
        rank: Snapshot of the rank of each element.
    """

    def __init__(self, size: int) -> None:
        """Create a forest of ``size`` singleton sets.

        Args:
            size: Number of elements in the universe.

        Raises:
            InvalidArgumentError: If size is negative or not an integer.
        """
        n = _as_index(size)
        if n is None or n < 0:
            raise InvalidArgumentError(f"Forest size must be a non-negative integer, got {size!r}")

        self._size = n
        self._parent: list[int] = list(range(n))
        self._rank: list[int] = [0] * n
        self._set_sizes: list[int] = [1] * n
        self._set_count = n

    @classmethod
    def create(cls, size: int) -> "DisjointSetForest":
        """Create a forest of ``size`` singleton sets."""
        return cls(size)

    @property
    def parent(self) -> tuple[int, ...]:
        return tuple(self._parent)

    @property
    def rank(self) -> tuple[int, ...]:
        return tuple(self._rank)

    def _validate(self, x: object) -> int:
        index = _as_index(x)
        if index is None or not 0 <= index < self._size:
            raise IndexOutOfRangeError(x, self._size)
        return index

    def _find_root(self, x: int) -> int:
        root = x
        while self._parent[root] != root:
            root = self._parent[root]

        # Path compression
        while self._parent[x] != root:
            next_node = self._parent[x]
            self._parent[x] = root
            x = next_node
        return root

    def find(self, x: int) -> int:
        """Find the root of element x with path compression.

        Every element visited on the walk from x to its root is re-pointed
        directly at the root, flattening future lookups.

        Args:
            x: Element index.

        Returns:
            The representative element of the set containing x.

        Raises:
            IndexOutOfRangeError: If x is not in ``[0, size)``.
        """
        return self._find_root(self._validate(x))

    def unify(self, x: int, y: int) -> int:
        """Merge the sets containing x and y.

        The root with the smaller rank is attached under the root with the
        larger rank. On a tie, y's root goes under x's root and the rank of
        x's root grows by one. Both indices are validated before anything is
        modified.

        Args:
            x: Element from the first set.
            y: Element from the second set.

        Returns:
            The root of the merged set.

        Raises:
            IndexOutOfRangeError: If x or y is not in ``[0, size)``.
        """
        i = self._validate(x)
        j = self._validate(y)
        root_x = self._find_root(i)
        root_y = self._find_root(j)
        if root_x == root_y:
            return root_x

        if self._rank[root_x] < self._rank[root_y]:
            root_x, root_y = root_y, root_x
        elif self._rank[root_x] == self._rank[root_y]:
            self._rank[root_x] += 1

        self._parent[root_y] = root_x
        self._set_sizes[root_x] += self._set_sizes[root_y]
        self._set_count -= 1
        return root_x

    def connected(self, x: int, y: int) -> bool:
        """Check if x and y are in the same set.

        Args:
            x: First element.
            y: Second element.

        Returns:
            True if x and y share a root, False otherwise.

        Raises:
            IndexOutOfRangeError: If x or y is not in ``[0, size)``.
        """
        i = self._validate(x)
        j = self._validate(y)
        return self._find_root(i) == self._find_root(j)

    def set_count(self) -> int:
        """Get number of disjoint sets."""
        return self._set_count

    def size(self) -> int:
        """Get number of elements in the universe."""
        return self._size

    def set_size(self, x: int) -> int:
        """Get number of elements in the set containing x."""
        return self._set_sizes[self.find(x)]

    def path_length(self, x: int) -> int:
        """Count parent hops from x to its root without compressing the path."""
        node = self._validate(x)
        hops = 0
        while self._parent[node] != node:
            node = self._parent[node]
            hops += 1
        return hops

    def get_groups(self) -> dict[int, list[int]]:
        """Get all sets as {root: [members]}.

        Returns:
            Dictionary mapping each root to the ascending list of elements
            in its set.
        """
        groups: dict[int, list[int]] = {}
        for node in range(self._size):
            groups.setdefault(self._find_root(node), []).append(node)
        return groups

    def __repr__(self) -> str:
        return f"DisjointSetForest(size={self._size}, set_count={self._set_count})"
