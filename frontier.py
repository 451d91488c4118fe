from typing import Dict, List, Optional, Set, Tuple

from search_nodes import NodeRegistry


class Frontier:
    """Open set: binary min-heap of registry indices with a position index.

    Entries are ordered by ``(f, seq)`` where ``seq`` is the insertion count,
    so nodes with equal ``f`` leave in the order they were pushed. The
    position index maps each cell to its heap slot, which gives O(1)
    ``find_by_position`` and lets ``decrease_key`` sift a node up in place.
    """

    def __init__(self, registry: NodeRegistry):
        self.registry = registry
        self.heap: List[int] = []
        self.seq: Dict[int, int] = {}    # registry index -> insertion order
        self.slots: Dict[int, int] = {}  # position id -> heap slot
        self.counter = 0

    def __len__(self) -> int:
        return len(self.heap)

    def __contains__(self, pos: int) -> bool:
        return pos in self.slots

    def is_empty(self) -> bool:
        return not self.heap

    def _key(self, index: int) -> Tuple[int, int]:
        return self.registry[index].f, self.seq[index]

    def _place(self, slot: int, index: int):
        self.heap[slot] = index
        self.slots[self.registry[index].pos] = slot

    def _sift_up(self, slot: int):
        index = self.heap[slot]
        key = self._key(index)
        while slot > 0:
            parent = (slot - 1) >> 1
            if self._key(self.heap[parent]) <= key:
                break
            self._place(slot, self.heap[parent])
            slot = parent
        self._place(slot, index)

    def _sift_down(self, slot: int):
        index = self.heap[slot]
        key = self._key(index)
        size = len(self.heap)
        while True:
            child = 2 * slot + 1
            if child >= size:
                break
            right = child + 1
            if right < size and self._key(self.heap[right]) < self._key(self.heap[child]):
                child = right
            if key <= self._key(self.heap[child]):
                break
            self._place(slot, self.heap[child])
            slot = child
        self._place(slot, index)

    def push(self, index: int):
        pos = self.registry[index].pos
        if pos in self.slots:
            raise KeyError(f"position {pos} is already in the frontier")
        self.seq[index] = self.counter
        self.counter += 1
        self.heap.append(index)
        self._sift_up(len(self.heap) - 1)

    def pop_min(self) -> int:
        if not self.heap:
            raise IndexError("pop from empty frontier")
        top = self.heap[0]
        last = self.heap.pop()
        del self.slots[self.registry[top].pos]
        if self.heap:
            self._place(0, last)
            self._sift_down(0)
        del self.seq[top]
        return top

    def find_by_position(self, pos: int) -> Optional[int]:
        slot = self.slots.get(pos)
        if slot is None:
            return None
        return self.heap[slot]

    def decrease_key(self, index: int):
        """Restore heap order after ``index``'s node had its ``g`` lowered."""
        self._sift_up(self.slots[self.registry[index].pos])


class VisitedSet:
    """Closed set: positions that have already been expanded."""

    def __init__(self):
        self.positions: Set[int] = set()

    def __len__(self) -> int:
        return len(self.positions)

    def __contains__(self, pos: int) -> bool:
        return pos in self.positions

    def contains(self, pos: int) -> bool:
        return pos in self.positions

    def mark_visited(self, pos: int):
        self.positions.add(pos)
