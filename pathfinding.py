import logging
from typing import List, MutableSequence, Optional, Sequence, Tuple

import config
from frontier import Frontier, VisitedSet
from grid import GridMap, InvalidInputError, manhattan
from search_nodes import NodeRegistry

logger = logging.getLogger(__name__)


class PathFinder:
    """A* over a 4-connected grid with unit step cost."""

    def __init__(self, grid: GridMap):
        self.grid = grid

    def heuristic(self, pos1: Tuple[int, int], pos2: Tuple[int, int]) -> int:
        return manhattan(pos1[0], pos1[1], pos2[0], pos2[1])

    def search(self, start: Tuple[int, int], goal: Tuple[int, int],
               max_length: Optional[int] = None) -> Optional[List[int]]:
        """Shortest path as position ids, first step through goal.

        Returns ``[goal_id]`` when start and goal coincide, and ``None`` when
        the goal is unreachable or every route is longer than ``max_length``
        steps.
        """
        self.grid.require_in_bounds(start[0], start[1], "start")
        self.grid.require_in_bounds(goal[0], goal[1], "goal")

        start_pos = self.grid.pos(*start)
        goal_pos = self.grid.pos(*goal)
        if start_pos == goal_pos:
            return [goal_pos]

        registry = NodeRegistry()
        open_set = Frontier(registry)
        closed_set = VisitedSet()

        open_set.push(registry.create(start[0], start[1], start_pos,
                                      g=0, h=self.heuristic(start, goal)))

        while not open_set.is_empty():
            index = open_set.pop_min()
            current = registry[index]

            # f is a lower bound on any path through the frontier
            if max_length is not None and current.f > max_length:
                logger.debug(f"search {start} -> {goal}: cheapest route needs at least "
                             f"{current.f} steps, limit is {max_length}")
                return None

            closed_set.mark_visited(current.pos)

            if current.pos == goal_pos:
                return registry.chain(index)[1:]

            for nx, ny in self.grid.neighbors(current.x, current.y):
                pos = self.grid.pos(nx, ny)
                if closed_set.contains(pos):
                    continue

                tentative_g = current.g + 1
                h = self.heuristic((nx, ny), goal)

                existing = open_set.find_by_position(pos)
                if existing is None:
                    open_set.push(registry.create(nx, ny, pos, g=tentative_g, h=h, parent=index))
                elif registry[existing].f > tentative_g + h:
                    registry[existing].relax(tentative_g, index)
                    open_set.decrease_key(existing)

        logger.debug(f"search {start} -> {goal}: frontier exhausted after "
                     f"{len(closed_set)} expansions")
        return None


def find_path(start_x: int, start_y: int, target_x: int, target_y: int,
              grid_map: Sequence[int], map_width: int, map_height: int,
              out_buffer: MutableSequence[int], out_buffer_size: int) -> int:
    """Write the shortest path from start to target into ``out_buffer``.

    On success the first ``n`` slots hold the position ids (``x + y * map_width``)
    of every step, ending with the target, and ``n`` is returned. When start
    equals target, slot 0 holds the target id and 0 is returned. Returns
    ``config.NO_PATH`` if the target is unreachable or the path does not fit
    in ``out_buffer_size`` slots; nothing past the path is ever written.

    Raises InvalidInputError for bad dimensions, out-of-map coordinates or a
    buffer that cannot hold ``out_buffer_size`` entries.
    """
    grid = GridMap(grid_map, map_width, map_height)
    if out_buffer is None:
        raise InvalidInputError("output buffer is missing")
    if out_buffer_size < 0:
        raise InvalidInputError(f"output buffer size must not be negative, got {out_buffer_size}")
    if len(out_buffer) < out_buffer_size:
        raise InvalidInputError(
            f"output buffer holds {len(out_buffer)} entries, {out_buffer_size} requested"
        )

    start = (start_x, start_y)
    target = (target_x, target_y)
    path = PathFinder(grid).search(start, target, max_length=out_buffer_size)
    if path is None or len(path) > out_buffer_size:
        return config.NO_PATH

    for i, pos in enumerate(path):
        out_buffer[i] = pos

    if start == target:
        return 0
    return len(path)
