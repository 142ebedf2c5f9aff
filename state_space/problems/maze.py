# state_space/problems/maze.py
# Text mazes: 'X' is a wall, anything else is floor. States are (x, y) with y growing downwards.
from __future__ import annotations
import logging
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from ..core.problem import HeuristicStateSpace

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]

WALL = "X"
# up, right, down, left
_OFFSETS = ((0, -1), (1, 0), (0, 1), (-1, 0))

_RED = "\x1b[31m{}\x1b[0m"
_GREEN = "\x1b[32m{}\x1b[0m"


class Maze(HeuristicStateSpace):
    """4-connected maze with unit step cost and a Manhattan heuristic."""

    def __init__(self, walls: np.ndarray, animate: bool = False, color: bool = True):
        walls = np.asarray(walls, dtype=bool)
        if walls.ndim != 2 or walls.size == 0:
            raise ValueError(f"maze needs a non-empty 2-D wall map, got shape {walls.shape}")
        self.walls = walls
        self.height, self.width = walls.shape
        self.animate = animate
        self.color = color

    @classmethod
    def from_string(cls, text: str, **kwargs) -> "Maze":
        lines = text.replace("\r", "").split("\n")
        while lines and not lines[-1]:
            lines.pop()
        if not lines:
            raise ValueError("maze text is empty")
        width = len(lines[0])
        for i, line in enumerate(lines):
            if len(line) != width:
                raise ValueError(f"maze row {i} has {len(line)} cells, expected {width}")
        walls = np.array([[ch == WALL for ch in line] for line in lines], dtype=bool)
        return cls(walls, **kwargs)

    def in_bounds(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def is_wall(self, cell: Cell) -> bool:
        """Cells outside the maze count as walls."""
        x, y = cell
        return not self.in_bounds(cell) or bool(self.walls[y, x])

    def is_open(self, cell: Cell) -> bool:
        return not self.is_wall(cell)

    def neighbours(self, state: Cell) -> List[Cell]:
        x, y = state
        return [(x + dx, y + dy) for dx, dy in _OFFSETS if self.is_open((x + dx, y + dy))]

    def cost(self, current: Cell, next_state: Cell) -> float:
        return 1.0

    def heuristic(self, state: Cell, goal: Cell) -> float:
        return float(abs(state[0] - goal[0]) + abs(state[1] - goal[1]))

    def draw_maze_path(self, path: Sequence[Cell], open_states: Iterable[Cell] = ()) -> str:
        """Render the maze; S/E mark the path ends, o the path, # the frontier."""
        start = path[0] if path else None
        end = path[-1] if path else None
        on_path = set(path)
        frontier = set(open_states)
        red = _RED if self.color else "{}"
        green = _GREEN if self.color else "{}"

        rows = []
        for y in range(self.height):
            line = []
            for x in range(self.width):
                cell = (x, y)
                if self.walls[y, x]:
                    line.append(WALL)
                elif cell == start:
                    line.append("S")
                elif cell == end:
                    line.append("E")
                elif cell in on_path:
                    line.append(red.format("o"))
                elif cell in frontier:
                    line.append(green.format("#"))
                else:
                    line.append(" ")
            rows.append("".join(line) + "\n")
        return "".join(rows)

    def display_progress(self, init: Cell, goal: Cell, open_states: Sequence[Cell]) -> None:
        if self.animate:
            print(self.draw_maze_path([init, goal], open_states))


def load_maze(path: str, **kwargs) -> Maze:
    with open(path, "r", encoding="utf-8") as fh:
        text = fh.read()
    logger.debug("loaded maze text from %s", path)
    return Maze.from_string(text, **kwargs)


def first_open_cell(maze: Maze, reverse: bool = False) -> Optional[Cell]:
    """Scan row by row (or backwards) for a floor cell; handy default start/goal."""
    ys = range(maze.height - 1, -1, -1) if reverse else range(maze.height)
    xs = range(maze.width - 1, -1, -1) if reverse else range(maze.width)
    for y in ys:
        for x in xs:
            if not maze.walls[y, x]:
                return (x, y)
    return None


DEMO_START: Cell = (1, 43)
DEMO_GOAL: Cell = (21, 47)

DEMO_MAZE = """\
XXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXX
X   X                     X                                           X
X X    XXXX X    XX X  X  XXXXX    X  X    X XX XXX X   XX        XXX X
X   X     X   X X       X               X                       X     X
X X X X X   X X X XXXXX  XXX    X X XX   X XXXX X XX   XXX X    X X   X
X   X     X X X X           X X X X X                 X       X X X   X
X X X   X X        XX  XXXX X   X    XX          XX X   XXXXX   X X X X
X       X     X X           X     X       X       X   X X   X X X     X
X  X  XXXX X    X       X X XXXX XX X     XXX X   X X X X X X X X X X X
X               X                             X   X       X     X     X
X X X  XXX  X X XXX  XXXXX XX   XXX X  X XX   XXX     XX X XX X  X  XXX
X                   X             X X       X   X X                   X
X XXX X   X   X   X   XXXXXX    X X XXX   XXX   X XXX X  XX     X X X X
X   X     X                 X X X   X                 X               X
X X   X   X X XXX X  XXX  X XX    X X X X  XX XX    X X   XX  X   XXX X
X       X X         X   X                           X X       X       X
X X   X X   XXX X       X  X X    X XXX   X XXXXXX XXXX   XXXXX XX  X X
X X X   X       X   X X   X     X         X   X         X           X X
X     XX  X   X X     XXXX XXX  X X X XX XXXX X XX  XXX  XXX X XXXX X X
X   X           X     X           X           X X                     X
X    XX    XX X   X X X  X   XX X X XXXXX   X    XX XX XX X X X   X   X
X X   X   X     X                 X         X           X X           X
X XX  X X XXX X   X X XXX X   XXXXXXX X X    XX X  XXX  X     XXX X XXX
X       X                 X               X       X   X           X   X
X XX X  X X   XX  X XXXX XX XXXXX XXXXX X   X     X X X     XXX X  X  X
X   X   X     X   X   X   X           X     X X X X         X     X   X
X X  X    XX   XX         X XXXX X    X XXX   X X X  XXXX X X  XXXX  XX
X X       X     X                           X     X     X   X X       X
X  X  X X X X X   X X XXXXX XX   XX XXXX  X XXX X X XXXXXX XX  XX XX  X
X             X X         X         X   X X     X             X       X
X X  X  XXX  X  X X   XXX X XXX X X X X X    XX   X X  X    X X   XXX X
X   X   X     X     X         X       X   X             X X   X   X   X
XXX X   X XXX   XX  X X XX  X X     XXX X   X XXXXX  XXX  XX  X X X XXX
X       X   X         X     X     X X   X X X X                       X
XXX X   X X   XXX  XX XX  X  XXXX  X     XX    XX  XXX    X X X X   X X
X           X         X   X     X           X     X     X   X         X
X XXX  XXX XX  XXX    X XXX       X X XXX    X XX   XX   XX X X   XX  X
X                             X                                 X     X
X  X    XXXX   XX X X XXX X     XXX   X X XXX      X  XX   XX  X     XX
X     X         X X         X X               X             X         X
X XXX X X X  XX     X  X    X  XX  X  XX    X X X X X X  X  X    XXXX X
X   X X   X       X             X   X           X   X   X X         X X
X XXX X XXX XXXXXXX  XXX XXX      X   X XX   XXXX X X XXX XXXXX X X   X
X         X         X         X       X     X     X X           X     X
XXX X X X XXX X X XX X  X XXX  XXX  X   X  XX     X X X X XX X X  XX  X
X   X X   X       X               X       X   X     X       X       X X
X X  XX X X X   X X  X  XX     X  XXXXXXXXXXX XXX XXX  XXX  X  XXXX   X
X   X   X X X     X               X       X       X   X         X     X
XXX   XXX X X X XX XXXXX X XX   X   XX  X   X  XX X XXX       X X XX XX
X     X     X                                   X                     X
XXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXX
"""
