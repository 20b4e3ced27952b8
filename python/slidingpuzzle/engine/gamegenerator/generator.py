"""Generates solvable sliding puzzle boards."""

from __future__ import annotations

import random

from slidingpuzzle.models.board import EMPTY, Board, Move

_MAX_ATTEMPTS = 8


class GameGenerator:
    """Creates solvable puzzles by shuffling from the solved state."""

    @staticmethod
    def solved(rows: int, cols: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        flat = list(range(1, rows * cols)) + [EMPTY]
        return Board.from_flat(rows, cols, flat)

    @staticmethod
    def shuffle_moves(
        board: Board,
        times: int,
        rng: random.Random | None = None,
    ) -> list[Move]:
        """Return *times* random legal moves starting from *board*.

        The moves are worked out on a copy; *board* itself is untouched.
        A move never undoes the one before it unless it is the only option.
        """
        rng = rng or random.Random()
        work = board.copy()
        moves: list[Move] = []
        prev: Move | None = None

        for _ in range(times):
            candidates = work.legal_moves()
            if not candidates:
                break
            if prev is not None and len(candidates) > 1:
                undo = prev.opposite()
                candidates = [m for m in candidates if m != undo]
            move = rng.choice(candidates)
            work.apply(move, record_history=False)
            moves.append(move)
            prev = move
        return moves

    @staticmethod
    def scramble(board: Board, times: int, rng: random.Random | None = None) -> list[Move]:
        """Scramble *board* in-place; the moves are recorded in its history."""
        moves = GameGenerator.shuffle_moves(board, times, rng)
        for move in moves:
            board.apply(move)
        return moves

    @staticmethod
    def generate(
        rows: int,
        cols: int,
        times: int = 25,
        rng: random.Random | None = None,
    ) -> Board:
        """Return a random *solvable* board of the given size.

        Retries a few times so the result is not already solved; boards too
        small to leave the solved state are returned as they are.
        """
        rng = rng or random.Random()
        board = GameGenerator.solved(rows, cols)
        for _ in range(_MAX_ATTEMPTS):
            board = GameGenerator.solved(rows, cols)
            GameGenerator.scramble(board, times, rng)
            if not board.is_solved():
                break
        board.reset_history()
        return board
