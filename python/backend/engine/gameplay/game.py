"""Core gameplay logic: move validation and the win condition."""

from __future__ import annotations

import logging
from typing import NamedTuple

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gamestate import GameClock
from backend.models.board import Board, Direction, adjacent

logger = logging.getLogger(__name__)


class MoveResult(NamedTuple):
    accepted: bool
    solved: bool


# -- engine operations ---------------------------------------------------------


def create(size: int) -> Board:
    """Return a freshly shuffled, solvable board with ``moves == 0``."""
    return GameGenerator.generate(size)


def attempt_move(board: Board, target: int) -> MoveResult:
    """Slide the tile at *target* into the empty slot if that is legal.

    A move is legal when the board is not yet solved and *target* is
    4-adjacent to the empty slot.  Rejected moves leave the board untouched.
    *target* must be a position on the board; anything else is a caller bug.
    """
    if not board.contains(target):
        raise ValueError(
            f"Position {target} is outside a {board.size}×{board.size} board."
        )

    if board.is_solved():
        logger.debug("Rejected move at %d: board already solved", target)
        return MoveResult(accepted=False, solved=True)

    if target not in adjacent(board.empty_pos, board.size):
        logger.debug(
            "Rejected move at %d: not adjacent to empty slot %d",
            target, board.empty_pos,
        )
        return MoveResult(accepted=False, solved=False)

    board.swap_empty(target)
    board.moves += 1
    return MoveResult(accepted=True, solved=board.is_solved())


# -- session -------------------------------------------------------------------


class GamePlay:
    """Orchestrates a single game session: one board plus its clock."""

    def __init__(self, size: int) -> None:
        self.size = size
        self.board = create(size)
        self.clock = GameClock()

    @classmethod
    def from_board(cls, board: Board, *, running: bool = True) -> "GamePlay":
        """Create a game session from an existing board."""
        obj = object.__new__(cls)
        obj.size = board.size
        obj.board = board
        obj.clock = GameClock(running=running and not board.is_solved())
        return obj

    def restart(self) -> None:
        """Reshuffle the board in place and restart the clock."""
        self.board = create(self.size)
        self.clock.reset()

    # -- movement -------------------------------------------------------------

    def move_tile(self, position: int) -> MoveResult:
        """Move the tile at *position* into the adjacent empty slot."""
        result = attempt_move(self.board, position)
        if result.solved:
            self.clock.stop()
        return result

    def move(self, direction: Direction) -> MoveResult:
        """Slide a tile in *direction* into the empty slot.

        E.g. ``Direction.UP`` moves the tile **below** the gap upward.
        """
        board = self.board
        er, ec = board.row_col(board.empty_pos)

        # The offset points to the tile that will slide into the gap.
        dr, dc = {
            Direction.UP: (1, 0),
            Direction.DOWN: (-1, 0),
            Direction.LEFT: (0, 1),
            Direction.RIGHT: (0, -1),
        }[direction]
        tr, tc = er + dr, ec + dc

        if not (0 <= tr < board.size and 0 <= tc < board.size):
            return MoveResult(accepted=False, solved=board.is_solved())

        return self.move_tile(tr * board.size + tc)

    # -- queries --------------------------------------------------------------

    @property
    def moves(self) -> int:
        return self.board.moves

    @property
    def is_won(self) -> bool:
        return self.board.is_solved()
