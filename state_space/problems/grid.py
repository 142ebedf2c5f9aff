# state_space/problems/grid.py
from __future__ import annotations
from typing import List, Set, Tuple
from ..core.problem import HeuristicStateSpace

Coord = Tuple[int, int]

# up, right, down, left
_MOVES = ((-1, 0), (0, 1), (1, 0), (0, -1))


class GridProblem(HeuristicStateSpace):
    """
    4-neighbor grid pathfinding with unit costs.

    - State: (row, col) tuple
    - neighbours(s): in-bounds, non-wall cells one step away
    - cost(s, s'): 1.0
    - heuristic(s, goal): Manhattan distance (admissible on 4-neighbor grid)
    """
    def __init__(self, rows: int, cols: int, walls: Set[Coord] | None = None):
        if rows <= 0 or cols <= 0:
            raise ValueError(f"grid must be at least 1x1, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        self.walls = set(walls or ())

    def in_bounds(self, cell: Coord) -> bool:
        r, c = cell
        return 0 <= r < self.rows and 0 <= c < self.cols

    def neighbours(self, state: Coord) -> List[Coord]:
        r, c = state
        out = []
        for dr, dc in _MOVES:
            nxt = (r + dr, c + dc)
            if self.in_bounds(nxt) and nxt not in self.walls:
                out.append(nxt)
        return out

    def cost(self, current: Coord, next_state: Coord) -> float:
        return 1.0

    def heuristic(self, state: Coord, goal: Coord) -> float:
        r, c = state
        gr, gc = goal
        return float(abs(r - gr) + abs(c - gc))


def make_grid_problem() -> GridProblem:
    # Example: 5x7 grid, a few walls; route (0,0) -> (4,6)
    walls = {(1,3), (2,3), (3,3), (3,4)}
    return GridProblem(rows=5, cols=7, walls=walls)
