"""Solver: parity check and breadth-first search.

Solutions are replayed through the real engine to verify them, the same
way the frontends apply them.
"""

from __future__ import annotations

import pytest

from backend.engine.gameplay.game import GamePlay
from backend.engine.gamesolver.solver import Solver
from backend.models.board import Board

# (id, flat placement, optimal length)
_CASES_3x3 = [
    ("one-move", [0, 1, 2, 3, 4, 5, 6, 8, 7], 1),
    ("column-move", [0, 1, 2, 3, 4, 8, 6, 7, 5], 1),
    ("corner-walk", [0, 1, 2, 3, 8, 4, 6, 7, 5], 2),
    ("left-column", [8, 1, 2, 0, 4, 5, 3, 6, 7], 4),
]


# -- helpers ------------------------------------------------------------------


def _assert_solve(flat: list[int], expected_len: int) -> None:
    board = Board.from_flat(3, flat)

    path = Solver.solve(board)

    assert path is not None
    assert len(path) == expected_len
    assert all(isinstance(p, int) for p in path)

    game = GamePlay.from_board(board)
    for i, position in enumerate(path):
        result = game.move_tile(position)
        assert result.accepted, f"Move {i} at {position} was rejected"

    assert game.is_won


# -- tests --------------------------------------------------------------------


@pytest.mark.parametrize(
    ("flat", "expected_len"),
    [(flat, n) for _, flat, n in _CASES_3x3],
    ids=[case_id for case_id, _, _ in _CASES_3x3],
)
def test_solve_3x3(flat: list[int], expected_len: int) -> None:
    _assert_solve(flat, expected_len)


def test_solved_board_needs_no_moves() -> None:
    assert Solver.solve(Board.identity(3)) == []


@pytest.mark.parametrize("size", [3, 4, 5])
def test_identity_is_solvable(size: int) -> None:
    assert Solver.is_solvable(Board.identity(size))


@pytest.mark.parametrize("size", [3, 4, 5])
def test_swapping_two_tiles_is_unsolvable(size: int) -> None:
    flat = list(range(size * size))
    flat[0], flat[1] = flat[1], flat[0]
    board = Board.from_flat(size, flat)
    assert not Solver.is_solvable(board)
    if size == 3:
        assert Solver.solve(board) is None


def test_even_width_accounts_for_empty_row() -> None:
    # Sliding the empty tile up one row on 4×4 keeps the board solvable
    # even though it introduces three inversions.
    flat = list(range(16))
    flat[11], flat[15] = flat[15], flat[11]
    assert Solver.is_solvable(Board.from_flat(4, flat))


def test_depth_limit_gives_up() -> None:
    board = Board.from_flat(3, [8, 1, 2, 0, 4, 5, 3, 6, 7])
    assert Solver.solve(board, max_depth=2) is None
