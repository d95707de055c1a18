"""Domain models with strict data contracts for frontend-agnostic architecture."""

from .player import (
    DISCIPLINARY_RISK_YELLOW_CARDS,
    FixtureDifficulty,
    PlayerDomain,
    Position,
)
from .squad import (
    SQUAD_SIZE,
    STARTING_XI_SIZE,
    Formation,
    SquadDomain,
    SquadSummary,
    Strategy,
)

__all__ = [
    "PlayerDomain",
    "Position",
    "FixtureDifficulty",
    "DISCIPLINARY_RISK_YELLOW_CARDS",
    "Strategy",
    "Formation",
    "SquadDomain",
    "SquadSummary",
    "SQUAD_SIZE",
    "STARTING_XI_SIZE",
]
