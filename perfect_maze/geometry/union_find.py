"""
Disjoint-set (union-find) over arbitrary hashable nodes.

Used by Kruskal generation as its cycle test: a wall may be opened only if its
two cells are not yet joined.
"""

from __future__ import annotations

from typing import Generic, TypeVar

Node = TypeVar("Node")


class DisjointSet(Generic[Node]):
    """
    Union-find with path halving and no rank balancing.

    Nodes are registered lazily as their own root the first time they are
    looked up.

    Example:
        >>> ds = DisjointSet[int]()
        >>> ds.join(1, 2)
        >>> ds.joined(1, 2)
        True
        >>> ds.joined(1, 3)
        False
    """

    def __init__(self) -> None:
        self._parent: dict[Node, Node] = {}

    def __len__(self) -> int:
        return len(self._parent)

    def __contains__(self, node: object) -> bool:
        return node in self._parent

    def root(self, node: Node) -> Node:
        """Representative of the component containing ``node``."""
        parent = self._parent
        if node not in parent:
            parent[node] = node
        while parent[node] != node:
            # Path halving: skip to the grandparent
            grandparent = parent[parent[node]]
            parent[node] = grandparent
            node = grandparent
        return node

    def join(self, a: Node, b: Node) -> None:
        """Merge the components of ``a`` and ``b`` by repointing a's root."""
        root_a = self.root(a)
        root_b = self.root(b)
        if root_a == root_b:
            return
        self._parent[root_a] = root_b

    def joined(self, a: Node, b: Node) -> bool:
        return self.root(a) == self.root(b)

    def component_count(self) -> int:
        """Number of distinct roots among all registered nodes."""
        return len({self.root(node) for node in list(self._parent)})
