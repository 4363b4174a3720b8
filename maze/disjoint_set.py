"""
Disjoint set (union-find) over logical maze cells
"""


class DisjointSet:
    """Union-Find data structure for Kruskal's algorithm"""

    def __init__(self, n):
        self.parent = list(range(n))

    def __len__(self):
        return len(self.parent)

    def find(self, x):
        """
        Find the root of the set containing x

        Every node visited on the way is re-pointed at the root.
        """
        root = x
        while self.parent[root] != root:
            root = self.parent[root]

        while self.parent[x] != root:
            nxt = self.parent[x]
            self.parent[x] = root
            x = nxt
        return root

    def union(self, a, b):
        """
        Merge the sets containing a and b

        Returns:
            True if the sets were merged, False if a and b were already joined
        """
        ra = self.find(a)
        rb = self.find(b)
        if ra == rb:
            return False
        self.parent[rb] = ra
        return True
