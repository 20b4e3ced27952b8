"""Core gameplay logic: moves, undo, shuffle and auto-solve."""

from __future__ import annotations

import random

from loguru import logger

from slidingpuzzle.engine.gamegenerator import GameGenerator
from slidingpuzzle.engine.gamesolver import Solver, SolverSettings
from slidingpuzzle.engine.gamestate import GameState
from slidingpuzzle.models.board import Board, Direction, Move


class GamePlay:
    """Orchestrates a single game session."""

    def __init__(
        self,
        rows: int,
        cols: int,
        settings: SolverSettings | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.rng = rng or random.Random()
        self.settings = settings or SolverSettings()
        self.state = GameState(GameGenerator.generate(rows, cols, rng=self.rng))

    @classmethod
    def from_board(
        cls,
        board: Board,
        settings: SolverSettings | None = None,
        rng: random.Random | None = None,
    ) -> "GamePlay":
        """Create a game session from an existing board."""
        obj = object.__new__(cls)
        obj.rng = rng or random.Random()
        obj.settings = settings or SolverSettings()
        obj.state = GameState(board)
        return obj

    @property
    def board(self) -> Board:
        return self.state.board

    # -- movement (direction = where the *tile* moves) ------------------------

    def move(self, direction: Direction) -> bool:
        """Slide the tile next to the blank that travels in *direction*.

        E.g. ``Direction.UP`` moves the tile **below** the blank upward.
        Returns True if the move was valid.
        """
        br, bc = self.board.blank_pos
        dr, dc = direction.offset
        return self.move_tile(br - dr, bc - dc)

    def move_tile(self, row: int, col: int) -> bool:
        """Move the tile at (row, col) into the adjacent blank.

        Returns True if the tile was adjacent to the blank and the move
        was applied.
        """
        direction = self.board.get_allowed_move((row, col))
        if direction is None:
            return False
        self.board.move_tile((row, col), direction)
        self.state.increment_moves()
        return True

    def undo(self) -> Move | None:
        """Take back the last recorded move."""
        move = self.board.undo()
        if move is None:
            logger.debug("GamePlay: no moves to undo")
            return None
        self.state.decrement_moves()
        return move

    def reset(self) -> list[Move]:
        """Play the history backwards to the board the session started from."""
        moves = self.board.chronological_history()
        for move in moves:
            self.board.apply(move, record_history=False)
        self.board.reset_history()
        self.state.reset_moves()
        return moves

    def shuffle(self, times: int = 25) -> list[Move]:
        """Apply *times* random moves; they stay in the history."""
        return GameGenerator.scramble(self.board, times, self.rng)

    def solve(self) -> list[Move] | None:
        """Solve the board in place, one move at a time.

        The solution is not recorded and the history is cleared, so the
        solved board becomes the new reset point.  Returns the moves played,
        or ``None`` if no solution was found.
        """
        solution = Solver.solve(self.board, settings=self.settings)
        if solution is None:
            return None
        for move in solution:
            self.board.apply(move, record_history=False)
            self.state.increment_moves()
        self.board.reset_history()
        return solution

    def hint(self) -> Move | None:
        return Solver.hint(self.board, settings=self.settings)

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.state.is_solved
