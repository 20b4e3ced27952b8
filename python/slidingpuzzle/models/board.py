"""Board model for the sliding puzzle.

Tiles are stored as a 2D list of ints. ``EMPTY`` (0) marks the blank cell;
every other cell holds a distinct positive label.  Directions always describe
where the *tile* travels, so ``Move((2, 1), Direction.UP)`` slides the tile
at row 2, column 1 up into a blank at row 1, column 1.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

EMPTY = 0

TileIndex = tuple[int, int]
BoardKey = tuple[tuple[int, ...], ...]


# -- errors -------------------------------------------------------------------


class BoardError(Exception):
    """Base class for board errors."""


class InvalidBoardError(BoardError, ValueError):
    """The grid is not a valid single-blank puzzle."""


class TileNotFoundError(BoardError, LookupError):
    """A label was looked up that the grid does not contain."""


# -- moves --------------------------------------------------------------------


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def offset(self) -> TileIndex:
        return _OFFSETS[self]

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


_OFFSETS: dict[Direction, TileIndex] = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}

_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


@dataclass(frozen=True)
class Move:
    """Slide the tile at ``tile`` one cell in ``direction``."""

    tile: TileIndex
    direction: Direction

    @property
    def target(self) -> TileIndex:
        """Where the tile ends up (the blank before the move)."""
        dr, dc = self.direction.offset
        return (self.tile[0] + dr, self.tile[1] + dc)

    def opposite(self) -> Move:
        """Return the move that puts the tile back where it came from."""
        return Move(tile=self.target, direction=self.direction.opposite)


# -- board --------------------------------------------------------------------


@dataclass(eq=False)
class Board:
    """One puzzle configuration.

    ``size`` and ``blank_pos`` are derived from ``tiles`` at construction and
    ``blank_pos`` is kept in sync by :meth:`move_tile`, the only mutation
    primitive.  Malformed grids raise :class:`InvalidBoardError`.
    """

    tiles: list[list[int]]
    size: TileIndex = field(init=False)
    blank_pos: TileIndex = field(init=False)
    history: list[Move] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        self.size = _validate(self.tiles)
        self.blank_pos = next(
            (r, c)
            for r, row in enumerate(self.tiles)
            for c, v in enumerate(row)
            if v == EMPTY
        )

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, rows: int, cols: int, flat: list[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, 3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        if rows < 1 or cols < 1:
            raise InvalidBoardError(f"Board must be at least 1×1, got {rows}×{cols}.")
        if len(flat) != rows * cols:
            raise InvalidBoardError(
                f"Expected {rows * cols} tiles for a {rows}×{cols} board, "
                f"got {len(flat)}."
            )
        tiles = [list(flat[r * cols : (r + 1) * cols]) for r in range(rows)]
        return cls(tiles)

    # -- queries --------------------------------------------------------------

    @property
    def rows(self) -> int:
        return self.size[0]

    @property
    def cols(self) -> int:
        return self.size[1]

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row][col]

    def in_bounds(self, tile: TileIndex) -> bool:
        return 0 <= tile[0] < self.rows and 0 <= tile[1] < self.cols

    def is_solved(self) -> bool:
        """Check if all tiles are in their goal positions."""
        rows, cols = self.size
        for r in range(rows):
            for c in range(cols):
                if r == rows - 1 and c == cols - 1:
                    return self.tiles[r][c] == EMPTY
                if self.tiles[r][c] != r * cols + c + 1:
                    return False
        return True

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        rows, cols = self.size
        val = self.tiles[row][col]
        if val == EMPTY:
            return row == rows - 1 and col == cols - 1
        return (row, col) == divmod(val - 1, cols)

    def find_tile(self, label: int) -> TileIndex:
        for r, row in enumerate(self.tiles):
            for c, v in enumerate(row):
                if v == label:
                    return (r, c)
        raise TileNotFoundError(f"Tile {label} is not on the board.")

    def get_allowed_move(self, tile: TileIndex) -> Direction | None:
        """Return the direction that slides *tile* into the blank, if any."""
        if not self.in_bounds(tile):
            return None
        br, bc = self.blank_pos
        delta = (br - tile[0], bc - tile[1])
        for direction, offset in _OFFSETS.items():
            if offset == delta:
                return direction
        return None

    def legal_moves(self) -> list[Move]:
        """Every move available on this board.

        Ordered by the blank's neighbour above, below, left, then right; each
        neighbour travels towards the blank.
        """
        br, bc = self.blank_pos
        moves: list[Move] = []
        for direction in (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT):
            dr, dc = direction.offset
            tile = (br + dr, bc + dc)
            if self.in_bounds(tile):
                moves.append(Move(tile=tile, direction=direction.opposite))
        return moves

    def key(self) -> BoardKey:
        """Canonical, hashable fingerprint of the tile arrangement."""
        return tuple(tuple(row) for row in self.tiles)

    def labels(self) -> frozenset[int]:
        return frozenset(v for row in self.tiles for v in row if v != EMPTY)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.tiles == other.tiles

    # -- mutation -------------------------------------------------------------

    def move_tile(
        self,
        tile: TileIndex,
        direction: Direction,
        record_history: bool = True,
    ) -> TileIndex:
        """Slide *tile* one cell in *direction* if that cell is the blank.

        Returns the tile's new position, or *tile* unchanged when the move is
        not legal (a no-op, not an error).
        """
        if self.get_allowed_move(tile) != direction:
            return tile

        tr, tc = tile
        br, bc = self.blank_pos
        self.tiles[br][bc], self.tiles[tr][tc] = self.tiles[tr][tc], EMPTY
        self.blank_pos = (tr, tc)
        if record_history:
            self.history.append(Move(tile=tile, direction=direction))
        return (br, bc)

    def apply(self, move: Move, record_history: bool = True) -> TileIndex:
        return self.move_tile(move.tile, move.direction, record_history)

    def copy(self) -> Board:
        """Deep copy of the grid with an empty history.

        Skips re-validation: the source board is already well-formed.
        """
        obj = object.__new__(Board)
        obj.tiles = [row[:] for row in self.tiles]
        obj.size = self.size
        obj.blank_pos = self.blank_pos
        obj.history = []
        return obj

    # -- history --------------------------------------------------------------

    def reset_history(self) -> None:
        self.history = []

    def move_for_undo(self) -> Move | None:
        """The move that reverts the last recorded move, or ``None``."""
        if not self.history:
            return None
        return self.history[-1].opposite()

    def undo_from_history(self) -> None:
        if self.history:
            self.history.pop()

    def undo(self) -> Move | None:
        """Revert the last recorded move and drop it from the history."""
        move = self.move_for_undo()
        if move is None:
            return None
        self.apply(move, record_history=False)
        self.undo_from_history()
        return move

    def chronological_history(self) -> list[Move]:
        """Moves that walk the board back to its last history reset, in order."""
        return [move.opposite() for move in reversed(self.history)]


def clone_board(board: Board) -> Board:
    """Deep copy of *board*'s grid, with a fresh history."""
    return board.copy()


# -- validation ---------------------------------------------------------------


def _validate(tiles: list[list[int]]) -> TileIndex:
    if not tiles or not tiles[0]:
        raise InvalidBoardError("Board must have at least one row and one column.")
    cols = len(tiles[0])
    if any(len(row) != cols for row in tiles):
        raise InvalidBoardError("All rows must have the same length.")

    blanks = 0
    seen: set[int] = set()
    for row in tiles:
        for v in row:
            if isinstance(v, bool) or not isinstance(v, int):
                raise InvalidBoardError(f"Tile labels must be integers, got {v!r}.")
            if v == EMPTY:
                blanks += 1
            elif v < 0:
                raise InvalidBoardError(f"Tile labels must be positive, got {v}.")
            elif v in seen:
                raise InvalidBoardError(f"Duplicate tile label {v}.")
            else:
                seen.add(v)
    if blanks != 1:
        raise InvalidBoardError(f"Board must have exactly one empty cell, found {blanks}.")
    return (len(tiles), cols)
