"""
union_find.py — Disjoint-Set Union
===================================
Parent + rank arrays indexed by a dense remapping of node ids.

Node ids are whatever the user typed (5, 12, 40 …), so the first thing
we do is build an id → index table; everything after that is plain list
indexing.  `find` is iterative (two passes: locate the root, then point
every node on the way straight at it) so deep chains can't hit the
recursion limit.
"""

from typing import Dict, Iterable, List


class DisjointSet:
    """
    Attributes:
        index  : {node_id: dense index}
        parent : parent[i] is the parent index of i (root when parent[i] == i)
        rank   : upper bound on the height of the tree rooted at i
    """

    def __init__(self, ids: Iterable[int]):
        self.index:  Dict[int, int] = {}
        for nid in ids:
            self.index.setdefault(nid, len(self.index))
        self.parent: List[int] = list(range(len(self.index)))
        self.rank:   List[int] = [0] * len(self.index)
        self._components: int  = len(self.index)

    def find(self, node_id: int) -> int:
        """Representative index of node_id's set (path compression)."""
        i = self.index[node_id]
        root = i
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[i] != root:
            self.parent[i], i = root, self.parent[i]
        return root

    def union(self, a: int, b: int) -> bool:
        """Merge the sets of a and b.  Returns False if they were already joined."""
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False

        if self.rank[root_a] < self.rank[root_b]:
            self.parent[root_a] = root_b
        elif self.rank[root_a] > self.rank[root_b]:
            self.parent[root_b] = root_a
        else:
            self.parent[root_b] = root_a
            self.rank[root_a] += 1
        self._components -= 1
        return True

    def connected(self, a: int, b: int) -> bool:
        return self.find(a) == self.find(b)

    @property
    def component_count(self) -> int:
        return self._components

    def __len__(self) -> int:
        return len(self.index)
