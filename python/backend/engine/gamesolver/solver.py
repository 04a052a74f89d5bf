"""Sliding puzzle solver."""

from __future__ import annotations

import logging
from collections import deque

from backend.config import SOLVER_MAX_DEPTH
from backend.models.board import Board, adjacent

logger = logging.getLogger(__name__)


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach the goal state.

        Counts inversions among the non-empty tiles.  On odd widths the count
        must be even; on even widths the count plus the empty slot's row
        distance from the bottom row must be even.
        """
        empty = board.empty_tile
        tiles = [t for t in board.placement if t != empty]
        inversions = sum(
            1
            for i in range(len(tiles))
            for j in range(i + 1, len(tiles))
            if tiles[i] > tiles[j]
        )
        if board.size % 2 == 1:
            return inversions % 2 == 0
        empty_row, _ = board.row_col(board.empty_pos)
        return (inversions + (board.size - 1 - empty_row)) % 2 == 0

    @staticmethod
    def solve(board: Board, max_depth: int = SOLVER_MAX_DEPTH) -> list[int] | None:
        """Return the positions to click, in order, to solve *board*.

        Breadth-first, so the answer is a shortest one.  Returns ``[]`` for a
        solved board and ``None`` when the board is unsolvable or needs more
        than *max_depth* moves.  Practical for 3×3 only.
        """
        if board.is_solved():
            return []
        if not Solver.is_solvable(board):
            return None

        size = board.size
        goal = tuple(range(size * size))
        start = (tuple(board.placement), board.empty_pos)
        parents: dict[tuple[int, ...], tuple[tuple[int, ...], int] | None] = {
            start[0]: None
        }
        frontier = deque([(start, 0)])

        while frontier:
            (state, empty), depth = frontier.popleft()
            if depth >= max_depth:
                continue
            for target in adjacent(empty, size):
                nxt = list(state)
                nxt[empty], nxt[target] = nxt[target], nxt[empty]
                key = tuple(nxt)
                if key in parents:
                    continue
                parents[key] = (state, target)
                if key == goal:
                    path = Solver._unwind(parents, key)
                    logger.debug(
                        "Solved in %d moves after visiting %d states",
                        len(path), len(parents),
                    )
                    return path
                frontier.append(((key, target), depth + 1))

        return None

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _unwind(
        parents: dict[tuple[int, ...], tuple[tuple[int, ...], int] | None],
        key: tuple[int, ...],
    ) -> list[int]:
        path: list[int] = []
        link = parents[key]
        while link is not None:
            prev, clicked = link
            path.append(clicked)
            link = parents[prev]
        path.reverse()
        return path
