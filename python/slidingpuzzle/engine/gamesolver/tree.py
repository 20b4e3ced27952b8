"""Search tree shared by the BFS and A* solvers.

Nodes live in a flat arena and point at their parent by index, so the whole
tree is released at once when a search returns.
"""

from __future__ import annotations

from dataclasses import dataclass

from slidingpuzzle.models.board import Board, Move


class SearchBudgetExceeded(RuntimeError):
    """The search expanded more nodes than it was allowed to.

    Distinct from a ``None`` result, which means the goal is unreachable.
    """

    def __init__(self, expanded: int) -> None:
        super().__init__(f"Search budget exhausted after {expanded} expansions.")
        self.expanded = expanded


@dataclass(frozen=True, slots=True, eq=False)
class SearchNode:
    board: Board
    parent: int | None = None
    move: Move | None = None
    g: int = 0
    f: int = 0


class SearchTree:
    """Append-only arena of :class:`SearchNode`."""

    def __init__(self) -> None:
        self._nodes: list[SearchNode] = []

    def add(self, node: SearchNode) -> int:
        self._nodes.append(node)
        return len(self._nodes) - 1

    def __getitem__(self, index: int) -> SearchNode:
        return self._nodes[index]

    def __len__(self) -> int:
        return len(self._nodes)

    def expand(self, index: int) -> list[SearchNode]:
        """Children of node *index*, one per legal move, each on its own copy."""
        parent = self._nodes[index]
        children: list[SearchNode] = []
        for move in parent.board.legal_moves():
            board = parent.board.copy()
            board.apply(move, record_history=False)
            children.append(
                SearchNode(board=board, parent=index, move=move, g=parent.g + 1)
            )
        return children

    def path_to(self, index: int) -> list[Move]:
        """Moves from the root to node *index*, in the order they are played."""
        moves: list[Move] = []
        node: SearchNode | None = self._nodes[index]
        while node is not None:
            if node.move is not None:
                moves.append(node.move)
            node = self._nodes[node.parent] if node.parent is not None else None
        moves.reverse()
        return moves


def check_budget(expanded: int, max_expansions: int | None) -> None:
    if max_expansions is not None and expanded > max_expansions:
        raise SearchBudgetExceeded(expanded)
