"""Validation rules for so_long level maps."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence, Set

WALL = "1"
FLOOR = "0"
COLLECTIBLE = "C"
EXIT = "E"
PLAYER = "P"

_PLACEABLE_TILES = frozenset({FLOOR, WALL, COLLECTIBLE, EXIT})

Grid = Sequence[str]
Position = tuple[int, int]


def reachable_tiles(grid: Grid, x: int, y: int) -> set[Position]:
    """Return every (x, y) position reachable from (x, y) without crossing walls.

    Movement is four-directional. Positions on the top row, the left column,
    or outside the map's width and height are never entered.
    """
    height = len(grid)
    width = len(grid[0]) if grid else 0
    reached: set[Position] = {(x, y)}
    queue: deque[Position] = deque([(x, y)])
    while queue:
        cx, cy = queue.popleft()
        for nx, ny in ((cx + 1, cy), (cx, cy + 1), (cx - 1, cy), (cx, cy - 1)):
            if not (0 < nx < width and 0 < ny < height):
                continue
            if (nx, ny) in reached or nx >= len(grid[ny]) or grid[ny][nx] == WALL:
                continue
            reached.add((nx, ny))
            queue.append((nx, ny))
    return reached


def map_is_rectangle(grid: Grid) -> bool:
    """Check that the map is a rectangle at least 3x3 enclosed by walls."""
    if len(grid) < 2:
        return False
    top = grid[0]
    if any(tile != WALL for tile in top):
        return False
    length = len(top)
    for row in grid[1:]:
        if len(row) != length or not row or row[0] != WALL or row[-1] != WALL:
            return False
    bottom = grid[-1]
    return length > 2 and len(grid) > 2 and all(tile == WALL for tile in bottom)


def level_is_ok(grid: Grid, reachable: Set[Position] | None) -> bool:
    """Check exit and collectibles: one reachable exit, at least one collectible, all reachable."""
    if reachable is None:
        return False
    collectibles = 0
    exits = 0
    for y, row in enumerate(grid[1:], start=1):
        for x, tile in enumerate(row[1:], start=1):
            if tile in (EXIT, COLLECTIBLE) and (x, y) not in reachable:
                return False
            collectibles += tile == COLLECTIBLE
            exits += tile == EXIT
    return exits == 1 and collectibles > 0


def map_is_valid(grid: Grid) -> bool:
    """Return whether the map is a playable so_long level."""
    if not map_is_rectangle(grid):
        return False
    reachable: set[Position] | None = None
    for y, row in enumerate(grid[1:], start=1):
        for x, tile in enumerate(row[1:], start=1):
            if tile == PLAYER and reachable is None:
                reachable = reachable_tiles(grid, x, y)
            elif tile not in _PLACEABLE_TILES:
                return False
    return level_is_ok(grid, reachable)