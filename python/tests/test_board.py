"""Board model and adjacency rule."""

from __future__ import annotations

import pytest

from backend.models.board import Board, adjacent


# -- adjacency ----------------------------------------------------------------


def test_adjacent_3x3_examples() -> None:
    assert adjacent(0, 3) == {1, 3}
    assert adjacent(4, 3) == {1, 3, 5, 7}
    assert adjacent(8, 3) == {5, 7}
    assert adjacent(1, 3) == {0, 2, 4}


@pytest.mark.parametrize("size", [3, 4, 5])
def test_adjacent_counts_by_cell_kind(size: int) -> None:
    last = size - 1
    for pos in range(size * size):
        row, col = divmod(pos, size)
        on_edge = (row in (0, last)) + (col in (0, last))
        expected = {2: 2, 1: 3, 0: 4}[on_edge]
        assert len(adjacent(pos, size)) == expected, pos


@pytest.mark.parametrize("size", [3, 4, 5])
def test_adjacent_is_symmetric_and_in_bounds(size: int) -> None:
    for pos in range(size * size):
        for other in adjacent(pos, size):
            assert 0 <= other < size * size
            assert pos in adjacent(other, size)


def test_adjacent_does_not_wrap_rows() -> None:
    # Position 2 ends the first row; 3 starts the second.
    assert 3 not in adjacent(2, 3)
    assert 2 not in adjacent(3, 3)


# -- construction -------------------------------------------------------------


def test_identity_board() -> None:
    board = Board.identity(4)
    assert board.placement == list(range(16))
    assert board.empty_pos == 15
    assert board.empty_tile == 15
    assert board.moves == 0
    assert board.is_solved()


def test_from_flat_locates_empty_tile() -> None:
    board = Board.from_flat(3, [0, 1, 2, 3, 8, 5, 6, 7, 4])
    assert board.empty_pos == 4
    assert board.rows() == [[0, 1, 2], [3, 8, 5], [6, 7, 4]]


@pytest.mark.parametrize(
    "flat",
    [
        [0, 1, 2, 3, 4, 5, 6, 7],
        [0, 1, 2, 3, 4, 5, 6, 7, 7],
        [0, 1, 2, 3, 4, 5, 6, 7, 9],
    ],
    ids=["short", "duplicate", "gap"],
)
def test_from_flat_rejects_non_permutations(flat: list[int]) -> None:
    with pytest.raises(ValueError):
        Board.from_flat(3, flat)


@pytest.mark.parametrize("size", [0, 1, 2])
def test_sizes_below_three_are_rejected(size: int) -> None:
    with pytest.raises(ValueError):
        Board.identity(size)


# -- win detection ------------------------------------------------------------


def test_identity_placement_is_solved() -> None:
    assert Board.from_flat(3, [0, 1, 2, 3, 4, 5, 6, 7, 8]).is_solved()


def test_any_single_transposition_is_not_solved() -> None:
    for i in range(9):
        for j in range(i + 1, 9):
            flat = list(range(9))
            flat[i], flat[j] = flat[j], flat[i]
            assert not Board.from_flat(3, flat).is_solved(), (i, j)


def test_copy_is_independent() -> None:
    board = Board.from_flat(3, [0, 1, 2, 3, 4, 5, 6, 8, 7])
    clone = board.copy()
    clone.swap_empty(8)
    assert board.placement == [0, 1, 2, 3, 4, 5, 6, 8, 7]
    assert board.empty_pos == 7
    assert clone.is_solved()
