from collections import deque

import pytest

from grid import GridMap


def bfs_length(grid: GridMap, start, goal):
    """Reference shortest-path length by plain breadth-first search."""
    if start == goal:
        return 0
    queue = deque([(start, 0)])
    seen = {start}
    while queue:
        (x, y), dist = queue.popleft()
        for nxt in grid.neighbors(x, y):
            if nxt in seen:
                continue
            if nxt == goal:
                return dist + 1
            seen.add(nxt)
            queue.append((nxt, dist + 1))
    return None


@pytest.fixture
def detour_grid():
    return GridMap.from_rows([
        "........",
        ".######.",
        ".#....#.",
        ".#.##.#.",
        "...#....",
    ])
