from slidingpuzzle.models.board import (
    EMPTY,
    Board,
    BoardError,
    Direction,
    InvalidBoardError,
    Move,
    TileNotFoundError,
    clone_board,
)

__all__ = [
    "EMPTY",
    "Board",
    "BoardError",
    "Direction",
    "InvalidBoardError",
    "Move",
    "TileNotFoundError",
    "clone_board",
]
