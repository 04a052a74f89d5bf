"""Generates solvable sliding puzzle boards."""

from __future__ import annotations

import logging
import random

from backend.config import SHUFFLE_STEPS_PER_SIZE
from backend.models.board import Board, adjacent

logger = logging.getLogger(__name__)


class GameGenerator:
    """Creates solvable puzzles by shuffling from the solved state.

    Every shuffle step is a real slide of the empty tile, so any board
    produced here is reachable from the identity and therefore solvable.
    """

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state board (tiles in order, empty slot bottom-right)."""
        return Board.identity(size)

    @staticmethod
    def scramble(board: Board, rng: random.Random | None = None) -> None:
        """Scramble *board* in-place using ``size * 20`` random legal slides.

        The position the empty tile just left is excluded from the next
        step's candidates so the shuffle never undoes its own last slide.
        """
        choose = rng.choice if rng is not None else random.choice
        num_shuffles = board.size * SHUFFLE_STEPS_PER_SIZE
        prev_pos: int | None = None

        for _ in range(num_shuffles):
            neighbors = sorted(adjacent(board.empty_pos, board.size))
            candidates = [p for p in neighbors if p != prev_pos] or neighbors
            target = choose(candidates)
            prev_pos = board.empty_pos
            board.swap_empty(target)

        board.moves = 0

    @staticmethod
    def generate(size: int, rng: random.Random | None = None) -> Board:
        """Return a random *solvable*, not-yet-solved board of the given size."""
        board = GameGenerator.solved(size)
        attempts = 1
        GameGenerator.scramble(board, rng)

        # Ensure the board is not already solved
        while board.is_solved():
            attempts += 1
            GameGenerator.scramble(board, rng)

        logger.debug(
            "Generated %d×%d board in %d attempt(s): %s",
            size, size, attempts, board.placement,
        )
        return board
