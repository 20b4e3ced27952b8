"""Admissible, consistent cost estimates for A*.

A heuristic is any ``(board, goal) -> int`` callable.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import StrEnum

from slidingpuzzle.models.board import EMPTY, Board

HeuristicFunction = Callable[[Board, Board], int]


def misplaced_tiles(board: Board, goal: Board) -> int:
    """Number of tiles (blank excluded) not on their goal cell."""
    cost = 0
    for r, row in enumerate(board.tiles):
        for c, tile in enumerate(row):
            if tile != EMPTY and goal.find_tile(tile) != (r, c):
                cost += 1
    return cost


def manhattan_distance(board: Board, goal: Board) -> int:
    """Sum of grid distances from each tile to its goal cell."""
    distance = 0
    for r, row in enumerate(board.tiles):
        for c, tile in enumerate(row):
            if tile == EMPTY:
                continue
            gr, gc = goal.find_tile(tile)
            distance += abs(r - gr) + abs(c - gc)
    return distance


# -- registry -----------------------------------------------------------------


class Heuristic(StrEnum):
    misplaced = "misplaced"
    manhattan = "manhattan"


HEURISTICS: dict[Heuristic, HeuristicFunction] = {
    Heuristic.misplaced: misplaced_tiles,
    Heuristic.manhattan: manhattan_distance,
}
