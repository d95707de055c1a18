"""Squad domain models: strategies, formations and recommended squads."""

from enum import Enum
from typing import Dict, List, NamedTuple, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .player import PlayerDomain, Position

SQUAD_SIZE = 15
STARTING_XI_SIZE = 11


class Strategy(str, Enum):
    """Named scoring strategies, one recommended squad ("set") each."""

    BALANCED = "balanced"
    VALUE = "value"
    AGGRESSIVE = "aggressive"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def description(self) -> str:
        return _STRATEGY_DESCRIPTIONS[self]

    @property
    def set_number(self) -> int:
        """1-based position of the strategy in the recommendation sets."""
        return list(Strategy).index(self) + 1


_STRATEGY_DESCRIPTIONS = {
    Strategy.BALANCED: "Premium picks balanced with points per million",
    Strategy.VALUE: "Value players that return the most for their price",
    Strategy.AGGRESSIVE: "Form and easy fixtures",
}


class Formation(NamedTuple):
    """Outfield shape of a starting XI (the goalkeeper is implied)."""

    defenders: int
    midfielders: int
    forwards: int

    @property
    def name(self) -> str:
        return f"{self.defenders}-{self.midfielders}-{self.forwards}"

    @property
    def outfield_count(self) -> int:
        return self.defenders + self.midfielders + self.forwards

    def required(self) -> Dict[Position, int]:
        """Players needed per outfield position."""
        return {
            Position.DEF: self.defenders,
            Position.MID: self.midfielders,
            Position.FWD: self.forwards,
        }


class SquadSummary(BaseModel):
    """Derived values shown next to a squad and in its export."""

    model_config = ConfigDict(frozen=True)

    strategy: Strategy
    player_count: int = Field(ge=0, le=SQUAD_SIZE)
    total_cost: float
    budget_remaining: float
    total_projected_points: float
    disciplinary_risk_count: int = Field(ge=0)
    formation: str
    is_complete: bool


class SquadDomain(BaseModel):
    """
    A recommended squad for one strategy and one budget snapshot.

    Produced atomically by the squad builder and never mutated afterwards.
    Degraded builds (fewer than 15 admissible players, no feasible formation)
    still validate; ``is_complete`` and ``used_fallback_formation`` let the
    caller warn the user.
    """

    model_config = ConfigDict(frozen=True)

    strategy: Strategy
    budget: float = Field(..., gt=0.0, description="Budget the squad was built for")
    selected: Tuple[PlayerDomain, ...] = Field(
        default_factory=tuple, max_length=SQUAD_SIZE
    )
    starting: Tuple[PlayerDomain, ...] = Field(
        default_factory=tuple, max_length=STARTING_XI_SIZE
    )
    bench: Tuple[PlayerDomain, ...] = Field(default_factory=tuple)
    captain: Optional[PlayerDomain] = None
    vice_captain: Optional[PlayerDomain] = None
    formation: str = Field(default="", description="Fielded formation, e.g. 4-4-2")
    used_fallback_formation: bool = False

    @model_validator(mode="after")
    def validate_squad_structure(self):
        """Starting and bench partition the selection; captains start."""
        selected_ids = [p.player_id for p in self.selected]
        starting_ids = [p.player_id for p in self.starting]
        bench_ids = [p.player_id for p in self.bench]

        if len(set(selected_ids)) != len(selected_ids):
            raise ValueError("Selected players must be unique")
        if set(starting_ids) & set(bench_ids):
            raise ValueError("A player cannot be both starting and on the bench")
        if sorted(starting_ids + bench_ids) != sorted(selected_ids):
            raise ValueError("Starting XI and bench must partition the selected squad")

        goalkeepers = sum(1 for p in self.starting if p.is_goalkeeper)
        if goalkeepers > 1:
            raise ValueError(f"Starting XI fields {goalkeepers} goalkeepers (max 1)")

        if self.captain is not None and self.captain.player_id not in starting_ids:
            raise ValueError("Captain must be in the starting XI")
        if self.vice_captain is not None:
            if self.vice_captain.player_id not in starting_ids:
                raise ValueError("Vice-captain must be in the starting XI")
            if self.captain is None:
                raise ValueError("Vice-captain set without a captain")
            if self.vice_captain.player_id == self.captain.player_id:
                raise ValueError("Captain and vice-captain must be different players")
        if self.starting and self.captain is None:
            raise ValueError("A non-empty starting XI needs a captain")
        return self

    @property
    def goalkeeper(self) -> Optional[PlayerDomain]:
        """The starting goalkeeper, if one was selected."""
        return next((p for p in self.starting if p.is_goalkeeper), None)

    @property
    def total_cost(self) -> float:
        return sum(p.price for p in self.selected)

    @property
    def budget_remaining(self) -> float:
        return self.budget - self.total_cost

    @property
    def total_projected_points(self) -> float:
        """Projected points of the whole selection over the planning horizon."""
        return sum(p.projected_points for p in self.selected)

    @property
    def disciplinary_risk_count(self) -> int:
        return sum(1 for p in self.selected if p.is_disciplinary_risk)

    @property
    def is_complete(self) -> bool:
        return len(self.selected) == SQUAD_SIZE

    def starting_by_position(self) -> Dict[Position, List[PlayerDomain]]:
        """Starting XI grouped GKP, DEF, MID, FWD (empty groups included)."""
        grouped: Dict[Position, List[PlayerDomain]] = {pos: [] for pos in Position}
        for player in self.starting:
            grouped[player.position].append(player)
        return grouped

    def summary(self) -> SquadSummary:
        return SquadSummary(
            strategy=self.strategy,
            player_count=len(self.selected),
            total_cost=round(self.total_cost, 1),
            budget_remaining=round(self.budget_remaining, 1),
            total_projected_points=round(self.total_projected_points, 2),
            disciplinary_risk_count=self.disciplinary_risk_count,
            formation=self.formation,
            is_complete=self.is_complete,
        )
