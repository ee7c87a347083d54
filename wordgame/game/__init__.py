from .session import MAX_ATTEMPTS, Attempt, AttemptResult, GameState, Session

__all__ = ["MAX_ATTEMPTS", "Attempt", "AttemptResult", "GameState", "Session"]
