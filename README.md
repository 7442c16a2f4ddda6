# solong

Loads and checks `.ber` maps for a small puzzle game. In the game a player collects every
collectible and then reaches the exit.

## Map format

A map is a plain text file with the `.ber` extension. Each line is one row of tiles:

| Tile | Meaning      |
|------|--------------|
| `1`  | wall         |
| `0`  | empty floor  |
| `P`  | player start |
| `C`  | collectible  |
| `E`  | exit         |

Example:

```
11111
1P0C1
100E1
11111
```

A map is valid when:

- every row has the same length, and the map is at least 3 by 3 tiles;
- walls enclose it: the first and last rows are all `1`, and every row starts and ends with `1`;
- it holds only the tiles above, with exactly one player start;
- it has exactly one exit and at least one collectible;
- the player can reach every collectible and the exit from the start tile, moving up, down,
  left and right without crossing walls.

## Command line

```
solong path/to/level.ber
```

The command can also be run as `python -m solong.cli path/to/level.ber`.

It loads the map and checks it. When the map is valid it prints the rows to standard output
and exits with status 0. If the file name does not end in `.ber` (with at least one
character before the extension), the file cannot be opened, or the map is empty or not
valid, it prints one of `File format error`, `File open error` or `Map Error` to standard
error and exits with status 1. If no file is given it exits with status 1 and prints
nothing.

## Library use

```python
from solong.parser import parse_map, MapError
from solong.checker import map_is_valid

try:
    grid = parse_map("level.ber")
except MapError as exc:
    print("Error:", exc)
else:
    print(len(grid), "rows")
```

- `solong.parser.parse_map(filename)` reads a file and returns the list of rows. It raises
  `MapError` when the file name, the file or the map is rejected.
- `solong.parser.read_lines(stream)` yields the lines of a text stream without their line
  breaks.
- `solong.checker.map_is_valid(grid)` returns `True` or `False` for a list of rows.
- `solong.checker.map_is_rectangle(grid)` checks the shape and the enclosing walls.
- `solong.checker.reachable_tiles(grid, x, y)` returns the set of `(x, y)` positions
  reachable from a start position.
- `solong.checker.level_is_ok(grid, reachable)` checks the exit and collectibles against a
  set of reachable positions; it returns `False` when `reachable` is `None`.

## What it does not do

The package only loads, checks and prints maps. It opens no game window, draws no tiles and
has no playable game: there is no player movement, move counter or win condition at run
time.

## Running the tests

```
pip install -e ".[test]"
pytest
```