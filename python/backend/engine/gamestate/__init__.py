from backend.engine.gamestate.state import GameClock

__all__ = ["GameClock"]
