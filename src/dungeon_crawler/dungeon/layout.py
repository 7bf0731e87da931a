"""The fixed dungeon layout and its dimensions."""

from typing import Tuple

MAP_ROWS = 10
MAP_COLS = 20

# The exit tile is not drawn here; it is placed at the right boundary of the
# door's row when the grid is initialized. The monster guards the only way
# into the key's chamber.
DEFAULT_LAYOUT: Tuple[str, ...] = (
    "####################",
    "#@.................#",
    "#.###.###.#.######.#",
    "#...#.#...#.#......#",
    "#.###.#.#####.####.#",
    "#.#...#...#...#K.#.#",
    "#.#######.###.##.#.#",
    "#.#.......#...#..#D#",
    "#.........#...M..#.#",
    "####################",
)
