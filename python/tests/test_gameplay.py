"""Game session tests: moves, undo, reset, shuffle and auto-solve."""

from __future__ import annotations

import random

from slidingpuzzle.engine.gamegenerator import GameGenerator
from slidingpuzzle.engine.gameplay import GamePlay
from slidingpuzzle.engine.gamesolver import SolverSettings, Strategy
from slidingpuzzle.models.board import Board, Direction, Move


def _one_move_game() -> GamePlay:
    return GamePlay.from_board(Board([[1, 2, 3], [4, 5, 6], [7, 0, 8]]))


# -- movement -----------------------------------------------------------------


def test_move_by_direction() -> None:
    game = _one_move_game()

    assert game.move(Direction.LEFT)
    assert game.is_won
    assert game.state.moves == 1


def test_move_off_the_edge_is_rejected() -> None:
    game = _one_move_game()
    assert not game.move(Direction.UP)
    assert game.state.moves == 0


def test_move_tile_by_position() -> None:
    game = _one_move_game()

    assert not game.move_tile(0, 0)
    assert game.move_tile(1, 1)
    assert game.board.tiles == [[1, 2, 3], [4, 0, 6], [7, 5, 8]]
    assert game.board.history == [Move((1, 1), Direction.DOWN)]


# -- undo / reset -------------------------------------------------------------


def test_undo() -> None:
    game = _one_move_game()
    game.move_tile(1, 1)

    assert game.undo() == Move((2, 1), Direction.UP)
    assert game.board.tiles == [[1, 2, 3], [4, 5, 6], [7, 0, 8]]
    assert game.state.moves == 0
    assert game.undo() is None


def test_reset_rewinds_every_move() -> None:
    game = _one_move_game()
    start = game.board.key()
    for direction in (Direction.DOWN, Direction.RIGHT, Direction.UP, Direction.LEFT):
        assert game.move(direction)

    rewind = game.reset()

    assert len(rewind) == 4
    assert game.board.key() == start
    assert game.board.history == []
    assert game.state.moves == 0


def test_shuffle_then_reset() -> None:
    game = GamePlay.from_board(GameGenerator.solved(3, 3), rng=random.Random(4))
    moves = game.shuffle(15)

    assert len(moves) == 15
    assert not game.is_won
    game.reset()
    assert game.is_won


# -- solving ------------------------------------------------------------------


def test_new_game_is_not_solved() -> None:
    game = GamePlay(3, 3, rng=random.Random(5))
    assert not game.is_won


def test_solve_in_place() -> None:
    board = GameGenerator.generate(3, 3, times=12, rng=random.Random(1))
    game = GamePlay.from_board(board)
    game.move_tile(*board.legal_moves()[0].tile)

    moves = game.solve()

    assert moves is not None
    assert game.is_won
    assert game.board.history == []
    assert game.state.moves == 1 + len(moves)


def test_solve_with_bfs_settings() -> None:
    game = GamePlay.from_board(
        Board([[0, 1, 2]]),
        settings=SolverSettings(strategy=Strategy.bfs),
    )
    assert game.solve() == [Move((0, 1), Direction.LEFT), Move((0, 2), Direction.LEFT)]
    assert game.is_won


def test_solve_unsolvable_leaves_board_alone() -> None:
    game = GamePlay.from_board(Board([[2, 1], [3, 0]]))
    assert game.solve() is None
    assert game.board.tiles == [[2, 1], [3, 0]]


def test_hint() -> None:
    assert _one_move_game().hint() == Move((2, 2), Direction.LEFT)
