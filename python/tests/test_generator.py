"""GameGenerator tests."""

from __future__ import annotations

import random

import pytest

from slidingpuzzle.engine.gamegenerator import GameGenerator
from slidingpuzzle.engine.gamesolver import Solver
from slidingpuzzle.models.board import Board


@pytest.mark.parametrize("rows, cols", [(1, 1), (1, 4), (2, 3), (3, 3), (4, 4), (5, 2)])
def test_solved_board(rows: int, cols: int) -> None:
    board = GameGenerator.solved(rows, cols)
    assert board.size == (rows, cols)
    assert board.is_solved()
    assert board.blank_pos == (rows - 1, cols - 1)


def test_shuffle_moves_leave_board_untouched() -> None:
    board = GameGenerator.solved(3, 3)
    moves = GameGenerator.shuffle_moves(board, 25, random.Random(0))

    assert len(moves) == 25
    assert board.is_solved()
    assert board.history == []


def test_shuffle_moves_are_legal_and_never_backtrack() -> None:
    board = GameGenerator.solved(4, 4)
    moves = GameGenerator.shuffle_moves(board, 40, random.Random(1))

    for prev, move in zip(moves, moves[1:]):
        assert move != prev.opposite()
    for move in moves:
        assert board.apply(move) == move.target


def test_shuffle_is_reproducible() -> None:
    board = GameGenerator.solved(3, 4)
    first = GameGenerator.shuffle_moves(board, 30, random.Random(9))
    second = GameGenerator.shuffle_moves(board, 30, random.Random(9))
    assert first == second


def test_scramble_records_history() -> None:
    board = GameGenerator.solved(3, 3)
    moves = GameGenerator.scramble(board, 10, random.Random(2))
    assert board.history == moves


@pytest.mark.parametrize("rows, cols", [(2, 2), (3, 3), (3, 5), (4, 4)])
def test_generate_is_shuffled_and_solvable(rows: int, cols: int) -> None:
    board = GameGenerator.generate(rows, cols, rng=random.Random(rows * cols))

    assert not board.is_solved()
    assert board.history == []
    assert Solver.is_solvable(board)


def test_generate_single_cell() -> None:
    board = GameGenerator.generate(1, 1)
    assert board == Board([[0]])
