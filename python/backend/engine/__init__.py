"""Puzzle state engine: the three operations frontends call."""

from backend.engine.gameplay.game import MoveResult, attempt_move, create
from backend.models.board import adjacent

__all__ = ["MoveResult", "adjacent", "attempt_move", "create"]
