"""
Union-Find (disjoint set) structure with path compression and union by rank.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 21 (Data Structures for Disjoint Sets).
"""

from typing import Dict, Hashable, Iterable, List


class DisjointSet:
    """
    Partition of hashable elements into disjoint sets.

    ``find`` compresses paths iteratively, so long chains do not hit the
    recursion limit. ``union`` attaches the lower-rank root under the
    higher-rank one; on equal ranks the first argument's root survives and
    its rank grows by one. Sets are only ever merged, never split.

    Attributes:
        parent: Mapping element -> parent element (roots map to themselves).
        rank: Mapping element -> upper bound on the height of its tree.
    """

    def __init__(self, elements: Iterable[Hashable] = ()):
        """
        Initialize with one singleton set per element.

        Args:
            elements: Iterable of distinct elements.

        Raises:
            ValueError: If an element is repeated.
        """
        self.parent: Dict[Hashable, Hashable] = {}
        self.rank: Dict[Hashable, int] = {}
        self._count = 0

        for element in elements:
            self.make_set(element)

    def __len__(self) -> int:
        return len(self.parent)

    def __contains__(self, x: Hashable) -> bool:
        return x in self.parent

    @property
    def set_count(self) -> int:
        """Number of disjoint sets currently in the partition."""
        return self._count

    def make_set(self, x: Hashable) -> None:
        """
        Add ``x`` as a new singleton set.

        Raises:
            ValueError: If ``x`` is already present.
        """
        if x in self.parent:
            raise ValueError(f"Element {x!r} already belongs to a set")
        self.parent[x] = x
        self.rank[x] = 0
        self._count += 1

    def find(self, x: Hashable) -> Hashable:
        """
        Return the root of the set containing ``x``.

        Every element visited on the way is re-pointed at the root.

        Raises:
            KeyError: If ``x`` was never added.
        """
        if x not in self.parent:
            raise KeyError(f"Element {x!r} not in disjoint set")

        root = x
        while self.parent[root] != root:
            root = self.parent[root]

        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]

        return root

    def union(self, x: Hashable, y: Hashable) -> bool:
        """
        Merge the sets containing ``x`` and ``y``.

        Returns:
            True if two sets were merged, False if they were already the same set.

        Raises:
            KeyError: If either element was never added.
        """
        root_x = self.find(x)
        root_y = self.find(y)

        if root_x == root_y:
            return False

        if self.rank[root_x] < self.rank[root_y]:
            self.parent[root_x] = root_y
        elif self.rank[root_x] > self.rank[root_y]:
            self.parent[root_y] = root_x
        else:
            self.parent[root_y] = root_x
            self.rank[root_x] += 1

        self._count -= 1
        return True

    def connected(self, x: Hashable, y: Hashable) -> bool:
        return self.find(x) == self.find(y)

    def groups(self) -> List[List[Hashable]]:
        """Return the sets as lists, in first-seen element order."""
        out: Dict[Hashable, List[Hashable]] = {}
        for element in list(self.parent):
            out.setdefault(self.find(element), []).append(element)
        return list(out.values())
