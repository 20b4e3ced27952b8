"""A* search over board states.

States are closed when they are *pushed*, not when they are popped, and a
cheaper rediscovery of a pushed state is dropped rather than re-opened.  With
the shipped heuristics (both consistent, both changing by at most one per
move) and ties on ``f`` broken towards lower ``g``, this still returns
shortest solutions.  A heuristic that is not consistent may yield longer
ones.
"""

from __future__ import annotations

from dataclasses import replace

from loguru import logger

from slidingpuzzle.engine.gamesolver.heuristics import HeuristicFunction, misplaced_tiles
from slidingpuzzle.engine.gamesolver.priority_queue import PriorityQueue
from slidingpuzzle.engine.gamesolver.tree import SearchNode, SearchTree, check_budget
from slidingpuzzle.models.board import Board, BoardKey, Move


def solve(
    initial: Board,
    goal: Board,
    heuristic: HeuristicFunction | None = None,
    *,
    max_expansions: int | None = None,
) -> list[Move] | None:
    """Return the moves that turn *initial* into *goal*, or ``None``.

    *heuristic* defaults to :func:`misplaced_tiles`.  *initial* is never
    mutated.  Raises :class:`SearchBudgetExceeded` after ``max_expansions``
    expansions.
    """
    h = heuristic or misplaced_tiles
    goal_key = goal.key()
    tree = SearchTree()

    def higher_priority(a: int, b: int) -> bool:
        na, nb = tree[a], tree[b]
        return (na.f, na.g) < (nb.f, nb.g)

    open_states: PriorityQueue[int] = PriorityQueue(higher_priority)
    root = initial.copy()
    open_states.push(tree.add(SearchNode(board=root, f=h(root, goal))))
    visited: set[BoardKey] = {root.key()}
    expanded = 0

    logger.debug("A*: start {}x{} with {}", *initial.size, getattr(h, "__name__", h))

    while not open_states.is_empty():
        index = open_states.pop()
        node = tree[index]

        if node.board.key() == goal_key:
            moves = tree.path_to(index)
            logger.debug(
                "A*: solved in {} moves ({} expanded, {} generated)",
                len(moves), expanded, len(tree),
            )
            return moves

        expanded += 1
        check_budget(expanded, max_expansions)
        for child in tree.expand(index):
            key = child.board.key()
            if key in visited:
                continue
            child = replace(child, f=child.g + h(child.board, goal))
            open_states.push(tree.add(child))
            visited.add(key)

    logger.debug("A*: open set exhausted after {} expansions", expanded)
    return None
