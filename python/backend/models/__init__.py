from backend.models.board import Board, Direction, adjacent

__all__ = ["Board", "Direction", "adjacent"]
