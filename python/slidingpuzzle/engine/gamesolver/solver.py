"""Sliding puzzle solver."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from loguru import logger

from slidingpuzzle.engine.gamesolver import astar, bfs
from slidingpuzzle.engine.gamesolver.heuristics import HEURISTICS, Heuristic
from slidingpuzzle.models.board import EMPTY, Board, Move


class Strategy(StrEnum):
    bfs = "bfs"
    astar = "astar"


@dataclass(frozen=True)
class SolverSettings:
    """How :class:`Solver` searches.

    ``max_expansions`` caps the number of expanded nodes; ``None`` means no
    cap.
    """

    strategy: Strategy = Strategy.astar
    heuristic: Heuristic = Heuristic.manhattan
    max_expansions: int | None = None


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def solve(
        board: Board,
        goal: Board | None = None,
        settings: SolverSettings | None = None,
    ) -> list[Move] | None:
        """Return a move sequence that turns *board* into *goal*.

        *goal* defaults to the solved layout of the same size.  Returns ``[]``
        if there is nothing to do and ``None`` if *goal* is unreachable.
        Raises :class:`SearchBudgetExceeded` when the settings cap the search
        and the cap is hit.
        """
        goal = goal if goal is not None else Solver.goal_for(board)
        settings = settings or SolverSettings()

        if board.key() == goal.key():
            return []

        if not Solver.is_solvable(board, goal):
            logger.info("Solver: {}x{} board cannot reach its goal", *board.size)
            return None

        if settings.strategy is Strategy.bfs:
            return bfs.solve(board, goal, max_expansions=settings.max_expansions)
        return astar.solve(
            board,
            goal,
            HEURISTICS[settings.heuristic],
            max_expansions=settings.max_expansions,
        )

    @staticmethod
    def hint(
        board: Board,
        goal: Board | None = None,
        settings: SolverSettings | None = None,
    ) -> Move | None:
        """Return the single best next move, or ``None`` if solved / unsolvable."""
        moves = Solver.solve(board, goal, settings)
        return moves[0] if moves else None

    @staticmethod
    def goal_for(board: Board) -> Board:
        """The canonical solved layout with *board*'s dimensions."""
        rows, cols = board.size
        flat = list(range(1, rows * cols)) + [EMPTY]
        return Board.from_flat(rows, cols, flat)

    @staticmethod
    def is_solvable(board: Board, goal: Board | None = None) -> bool:
        """Return True if *board* can reach *goal* by legal moves."""
        goal = goal if goal is not None else Solver.goal_for(board)
        if board.size != goal.size or board.labels() != goal.labels():
            return False

        rows, cols = board.size
        if rows == 1 or cols == 1:
            # A single strip only lets the blank wander; tile order is fixed.
            order = [v for row in board.tiles for v in row if v != EMPTY]
            goal_order = [v for row in goal.tiles for v in row if v != EMPTY]
            return order == goal_order

        # Every move is one transposition with the blank, so the permutation
        # parity must match the parity of the blank's taxicab displacement.
        goal_index = {v: i for i, v in enumerate(v for row in goal.tiles for v in row)}
        perm = [goal_index[v] for row in board.tiles for v in row]
        swaps = 0
        for i in range(len(perm)):
            while perm[i] != i:
                j = perm[i]
                perm[i], perm[j] = perm[j], perm[i]
                swaps += 1

        (br, bc), (gr, gc) = board.blank_pos, goal.blank_pos
        return swaps % 2 == (abs(br - gr) + abs(bc - gc)) % 2
