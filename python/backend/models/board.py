"""Board model for the sliding puzzle game."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from backend.config import MIN_SIZE


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


def adjacent(position: int, size: int) -> frozenset[int]:
    """Return the positions 4-adjacent to *position* on a *size*×*size* grid.

    Corners have two neighbours, edge cells three, interior cells four::

        adjacent(0, 3) == {1, 3}
        adjacent(4, 3) == {1, 3, 5, 7}
    """
    row, col = divmod(position, size)
    neighbors: list[int] = []
    if row > 0:
        neighbors.append(position - size)
    if row < size - 1:
        neighbors.append(position + size)
    if col > 0:
        neighbors.append(position - 1)
    if col < size - 1:
        neighbors.append(position + 1)
    return frozenset(neighbors)


@dataclass
class Board:
    """Represents the sliding puzzle board.

    ``placement[p]`` is the tile-id sitting at position ``p`` (row-major).
    Tile-ids run ``0 .. size²-1`` and each equals its position in the solved
    picture; the last id, ``size²-1``, is the empty slot.
    """

    size: int
    placement: list[int]
    empty_pos: int
    moves: int = 0

    # -- construction helpers -------------------------------------------------

    @classmethod
    def identity(cls, size: int) -> Board:
        """Return the solved board (empty slot bottom-right)."""
        _check_size(size)
        total = size * size
        return cls(size=size, placement=list(range(total)), empty_pos=total - 1)

    @classmethod
    def from_flat(cls, size: int, flat: list[int]) -> Board:
        """Create a board from a flat row-major placement.

        Example::

            Board.from_flat(3, [0, 1, 2, 3, 4, 5, 6, 8, 7])
        """
        _check_size(size)
        total = size * size
        if len(flat) != total:
            raise ValueError(
                f"Expected {total} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        if sorted(flat) != list(range(total)):
            raise ValueError(
                f"Placement must be a permutation of 0..{total - 1}, got {flat}."
            )
        placement = list(flat)
        return cls(size=size, placement=placement, empty_pos=placement.index(total - 1))

    # -- queries --------------------------------------------------------------

    @property
    def empty_tile(self) -> int:
        return self.size * self.size - 1

    def row_col(self, position: int) -> tuple[int, int]:
        return divmod(position, self.size)

    def rows(self) -> list[list[int]]:
        """Return the placement split into rows, top to bottom."""
        s = self.size
        return [self.placement[r * s : (r + 1) * s] for r in range(s)]

    def contains(self, position: int) -> bool:
        return 0 <= position < self.size * self.size

    def is_solved(self) -> bool:
        """Check if every tile sits on its own position."""
        return all(tile == pos for pos, tile in enumerate(self.placement))

    def is_tile_correct(self, position: int) -> bool:
        """Check if the tile at *position* is in its goal position."""
        return self.placement[position] == position

    def copy(self) -> Board:
        return Board(
            size=self.size,
            placement=self.placement[:],
            empty_pos=self.empty_pos,
            moves=self.moves,
        )

    # -- mutation -------------------------------------------------------------

    def swap_empty(self, target: int) -> None:
        """Slide the tile at *target* into the empty slot.

        No legality check; callers decide whether the slide is allowed.
        """
        e = self.empty_pos
        self.placement[e], self.placement[target] = (
            self.placement[target],
            self.placement[e],
        )
        self.empty_pos = target


def _check_size(size: int) -> None:
    if size < MIN_SIZE:
        raise ValueError(f"Grid size must be at least {MIN_SIZE}, got {size}.")
