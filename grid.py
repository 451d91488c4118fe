from typing import Iterator, List, Sequence, Tuple, Union

import config


class InvalidInputError(ValueError):
    """Raised when map dimensions, coordinates or buffers are unusable."""


def position_id(x: int, y: int, map_width: int) -> int:
    return x + y * map_width


def position_xy(pos: int, map_width: int) -> Tuple[int, int]:
    return pos % map_width, pos // map_width


def manhattan(x1: int, y1: int, x2: int, y2: int) -> int:
    return abs(x1 - x2) + abs(y1 - y2)


class GridMap:
    """Read-only view over a row-major passability array.

    A cell value of 0 is blocked, anything else is passable.
    """

    def __init__(self, cells: Sequence[int], width: int, height: int):
        if width <= 0 or height <= 0:
            raise InvalidInputError(f"map dimensions must be positive, got {width}x{height}")
        if cells is None:
            raise InvalidInputError("map cells are missing")
        if len(cells) < width * height:
            raise InvalidInputError(
                f"map has {len(cells)} cells, expected {width * height} for {width}x{height}"
            )
        self.cells = cells
        self.width = width
        self.height = height

    @classmethod
    def from_rows(cls, rows: Sequence[Union[str, Sequence[int]]]) -> "GridMap":
        """Build a map from row strings ('#' blocked) or rows of cell values."""
        if not rows:
            raise InvalidInputError("map has no rows")
        width = len(rows[0])
        cells: List[int] = []
        for y, row in enumerate(rows):
            if len(row) != width:
                raise InvalidInputError(f"row {y} has {len(row)} cells, expected {width}")
            for value in row:
                if isinstance(value, str):
                    if value in config.BLOCKED_CHARS:
                        cells.append(config.BLOCKED)
                    elif value in config.PASSABLE_CHARS:
                        cells.append(config.PASSABLE)
                    else:
                        raise InvalidInputError(f"unknown map character {value!r} in row {y}")
                else:
                    cells.append(config.PASSABLE if value else config.BLOCKED)
        return cls(bytes(cells), width, len(rows))

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_passable(self, x: int, y: int) -> bool:
        return self.in_bounds(x, y) and self.cells[self.pos(x, y)] != 0

    def pos(self, x: int, y: int) -> int:
        return position_id(x, y, self.width)

    def xy(self, pos: int) -> Tuple[int, int]:
        return position_xy(pos, self.width)

    def neighbors(self, x: int, y: int) -> Iterator[Tuple[int, int]]:
        for dx, dy in config.NEIGHBOR_OFFSETS:
            nx, ny = x + dx, y + dy
            if self.is_passable(nx, ny):
                yield nx, ny

    def require_in_bounds(self, x: int, y: int, what: str):
        if not self.in_bounds(x, y):
            raise InvalidInputError(
                f"{what} ({x}, {y}) is outside the {self.width}x{self.height} map"
            )
