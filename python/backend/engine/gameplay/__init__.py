from backend.engine.gameplay.game import GamePlay, MoveResult, attempt_move, create

__all__ = ["GamePlay", "MoveResult", "attempt_move", "create"]
