# state_space/problems/knight.py
# Knight's tour style reachability: states are board squares, moves are knight jumps.
# Only the plain tier is implemented, so cost-aware and heuristic searches do not apply.
from __future__ import annotations
from typing import List, Tuple

from ..core.problem import StateSpace

Square = Tuple[int, int]

_JUMPS = ((-1, -2), (1, -2), (2, -1), (2, 1), (1, 2), (-1, 2), (-2, 1), (-2, -1))


class KnightMove(StateSpace):
    def __init__(self, size: Tuple[int, int] = (8, 8)):
        if size[0] <= 0 or size[1] <= 0:
            raise ValueError(f"board must be at least 1x1, got {size}")
        self.size = size

    def is_in_board(self, square: Square) -> bool:
        return 0 <= square[0] < self.size[0] and 0 <= square[1] < self.size[1]

    def neighbours(self, state: Square) -> List[Square]:
        i, j = state
        return [(i + di, j + dj) for di, dj in _JUMPS if self.is_in_board((i + di, j + dj))]
