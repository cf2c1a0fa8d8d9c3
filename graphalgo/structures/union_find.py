"""
Union-Find (disjoint set) over the integers 0..n-1.

Each slot holds either a parent index (>= 0) or, at a root, the negated size
of its set. Merges attach the smaller tree under the larger one and find()
compresses every visited path, so both operations run in near-constant
amortized time.
"""

from __future__ import annotations

from typing import List


class UnionFind:
    """
    Union-Find with path compression and union by size.

    Used by Kruskal's algorithm for cycle detection.
    """

    def __init__(self, n: int) -> None:
        """
        Create n singleton sets.

        Args:
            n: Number of elements.

        Raises:
            ValueError: If n is negative.
        """
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}.")
        self._parent: List[int] = [-1] * n
        self._count = n

    def __len__(self) -> int:
        return len(self._parent)

    def __repr__(self) -> str:
        return f"UnionFind(n={len(self._parent)}, sets={self._count})"

    def _validate(self, v: int) -> None:
        if not 0 <= v < len(self._parent):
            raise IndexError(
                f"element {v} out of range for UnionFind of size {len(self._parent)}"
            )

    def get_parent(self, v: int) -> int:
        """Return the raw slot of v: its parent, or -(set size) if v is a root."""
        self._validate(v)
        return self._parent[v]

    def find(self, v: int) -> int:
        """
        Return the root of the set containing v, compressing the path.

        Every element visited on the way is repointed directly at the root.

        Args:
            v: Element to look up.

        Returns:
            Root element.

        Raises:
            IndexError: If v is outside [0, n).
        """
        self._validate(v)
        parent = self._parent

        root = v
        while parent[root] >= 0:
            root = parent[root]

        while parent[v] >= 0 and parent[v] != root:
            parent[v], v = root, parent[v]

        return root

    def connected(self, v1: int, v2: int) -> bool:
        """Return True if v1 and v2 belong to the same set."""
        return self.find(v1) == self.find(v2)

    def union(self, v1: int, v2: int) -> bool:
        """
        Merge the sets containing v1 and v2 using union by size.

        The smaller set's root goes under the larger set's root. On equal
        sizes v1's root goes under v2's root.

        Returns:
            True if a merge happened, False if v1 and v2 were already
            connected.

        Raises:
            IndexError: If either element is out of range.
        """
        root1 = self.find(v1)
        root2 = self.find(v2)
        if root1 == root2:
            return False

        size1 = -self._parent[root1]
        size2 = -self._parent[root2]
        if size1 <= size2:
            self._parent[root1] = root2
            self._parent[root2] = -(size1 + size2)
        else:
            self._parent[root2] = root1
            self._parent[root1] = -(size1 + size2)

        self._count -= 1
        return True

    def size_of(self, v: int) -> int:
        """Return the size of the set containing v."""
        return -self._parent[self.find(v)]

    def count(self) -> int:
        """Return the number of disjoint sets."""
        return self._count

    def roots(self) -> List[int]:
        """Return the root of every set in ascending order."""
        return [i for i, slot in enumerate(self._parent) if slot < 0]
