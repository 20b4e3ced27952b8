"""Breadth-first solver tests.

The 2×2 puzzle has a fully enumerable state graph: the twelve boards reachable
from the goal form a single cycle, so the true distance of the board ``k``
blank-steps around that cycle is ``min(k, 12 - k)``.
"""

from __future__ import annotations

import pytest

from slidingpuzzle.engine.gamegenerator import GameGenerator
from slidingpuzzle.engine.gamesolver import SearchBudgetExceeded, bfs
from slidingpuzzle.models.board import Board, Direction, Move

# Blank path around the 2×2 grid, one lap.
_LAP = [(1, 0), (0, 0), (0, 1), (1, 1)]


# -- helpers ------------------------------------------------------------------


def _walk_blank(board: Board, steps: int) -> Board:
    board = board.copy()
    for i in range(steps):
        cell = _LAP[i % len(_LAP)]
        direction = board.get_allowed_move(cell)
        assert direction is not None
        board.move_tile(cell, direction, record_history=False)
    return board


def _replay(board: Board, moves: list[Move]) -> Board:
    board = board.copy()
    for i, move in enumerate(moves):
        assert board.apply(move) != move.tile, f"Move {i} ({move}) was invalid"
    return board


# -- tests --------------------------------------------------------------------


@pytest.mark.parametrize("steps", range(12))
def test_2x2_distance_matches_cycle(steps: int) -> None:
    goal = GameGenerator.solved(2, 2)
    start = _walk_blank(goal, steps)

    moves = bfs.solve(start, goal)

    assert moves is not None
    assert len(moves) == min(steps, 12 - steps)
    assert _replay(start, moves).key() == goal.key()


def test_2x2_lap_has_twelve_distinct_states() -> None:
    goal = GameGenerator.solved(2, 2)
    keys = {_walk_blank(goal, k).key() for k in range(12)}
    assert len(keys) == 12
    assert _walk_blank(goal, 12).key() == goal.key()


def test_already_solved_returns_empty_list() -> None:
    goal = GameGenerator.solved(3, 3)
    assert bfs.solve(goal.copy(), goal) == []


def test_strip_one_move() -> None:
    moves = bfs.solve(Board([[1, 0, 2]]), Board([[1, 2, 0]]))
    assert moves == [Move((0, 2), Direction.LEFT)]


def test_strip_two_moves() -> None:
    moves = bfs.solve(Board([[0, 1, 2]]), Board([[1, 2, 0]]))
    assert moves == [Move((0, 1), Direction.LEFT), Move((0, 2), Direction.LEFT)]


def test_arbitrary_goal() -> None:
    start = Board([[1, 2], [3, 0]])
    goal = Board([[0, 1], [3, 2]])

    moves = bfs.solve(start, goal)

    assert moves == [Move((0, 1), Direction.DOWN), Move((0, 0), Direction.RIGHT)]


def test_initial_board_is_not_mutated() -> None:
    start = Board([[4, 1, 3], [7, 2, 6], [0, 5, 8]])
    before = [row[:] for row in start.tiles]

    moves = bfs.solve(start, GameGenerator.solved(3, 3))

    assert moves is not None and len(moves) == 6
    assert start.tiles == before
    assert start.blank_pos == (2, 0)
    assert start.history == []


def test_unreachable_2x2_returns_none() -> None:
    assert bfs.solve(Board([[2, 1], [3, 0]]), GameGenerator.solved(2, 2)) is None


def test_mismatched_labels_returns_none() -> None:
    assert bfs.solve(Board([[1, 0, 9]]), Board([[1, 2, 0]])) is None


@pytest.mark.timeout(300)
def test_odd_parity_3x3_exhausts_frontier() -> None:
    # 5 and the blank are swapped relative to the goal: an odd permutation
    # with an even blank displacement, so the goal is unreachable.
    start = Board([[1, 2, 3], [4, 0, 6], [7, 8, 5]])
    assert bfs.solve(start, GameGenerator.solved(3, 3)) is None


def test_budget_exhaustion_is_distinct_from_no_solution() -> None:
    start = Board([[0, 1, 2]])
    goal = Board([[1, 2, 0]])

    with pytest.raises(SearchBudgetExceeded) as excinfo:
        bfs.solve(start, goal, max_expansions=1)
    assert excinfo.value.expanded == 2

    assert bfs.solve(start, goal, max_expansions=10) is not None
