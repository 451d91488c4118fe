from typing import List, Optional
from dataclasses import dataclass


@dataclass
class SearchNode:
    x: int
    y: int
    pos: int
    g: int
    h: int
    parent: Optional[int] = None  # index in the owning NodeRegistry

    @property
    def f(self) -> int:
        return self.g + self.h

    def relax(self, g: int, parent: int):
        """Record a cheaper route to this cell."""
        self.g = g
        self.parent = parent


class NodeRegistry:
    """Arena owning every node created during one search.

    Nodes refer to their parent by index, so dropping the registry releases
    the whole search tree at once.
    """

    def __init__(self):
        self.nodes: List[SearchNode] = []

    def create(self, x: int, y: int, pos: int, g: int, h: int,
               parent: Optional[int] = None) -> int:
        self.nodes.append(SearchNode(x=x, y=y, pos=pos, g=g, h=h, parent=parent))
        return len(self.nodes) - 1

    def __getitem__(self, index: int) -> SearchNode:
        return self.nodes[index]

    def __len__(self) -> int:
        return len(self.nodes)

    def chain(self, index: int) -> List[int]:
        """Position ids from the root node down to ``index``."""
        path = []
        node: Optional[int] = index
        while node is not None:
            path.append(self.nodes[node].pos)
            node = self.nodes[node].parent
        return path[::-1]
