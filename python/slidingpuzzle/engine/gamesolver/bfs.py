"""Breadth-first search: shortest solution by move count."""

from __future__ import annotations

from collections import deque

from loguru import logger

from slidingpuzzle.engine.gamesolver.tree import SearchNode, SearchTree, check_budget
from slidingpuzzle.models.board import Board, BoardKey, Move


def solve(
    initial: Board,
    goal: Board,
    *,
    max_expansions: int | None = None,
) -> list[Move] | None:
    """Return the moves that turn *initial* into *goal*, or ``None``.

    The goal is matched by :meth:`Board.key` only.  Nodes leave the FIFO
    frontier in non-decreasing depth, so the first goal dequeued is reached by
    a minimum number of moves.  *initial* is never mutated.

    Raises :class:`SearchBudgetExceeded` after ``max_expansions`` expansions.
    """
    goal_key = goal.key()
    tree = SearchTree()
    frontier: deque[int] = deque([tree.add(SearchNode(board=initial.copy()))])
    visited: set[BoardKey] = set()
    expanded = 0

    logger.debug("BFS: start {}x{}", *initial.size)

    while frontier:
        index = frontier.popleft()
        node = tree[index]
        key = node.board.key()
        # A state can sit in the frontier twice; only its first copy counts.
        if key in visited:
            continue
        visited.add(key)

        if key == goal_key:
            moves = tree.path_to(index)
            logger.debug(
                "BFS: solved in {} moves ({} expanded, {} generated)",
                len(moves), expanded, len(tree),
            )
            return moves

        expanded += 1
        check_budget(expanded, max_expansions)
        for child in tree.expand(index):
            if child.board.key() not in visited:
                frontier.append(tree.add(child))

    logger.debug("BFS: frontier exhausted after {} expansions", expanded)
    return None
