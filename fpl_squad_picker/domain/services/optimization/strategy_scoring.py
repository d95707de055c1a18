"""Strategy scoring for FPL squad generation.

Each strategy is a fixed linear re-weighting of the player signals:
- BALANCED: points per million, projected points and form
- VALUE: leans on points per million
- AGGRESSIVE: projected points, heavy form weight and a fixture bonus
"""

from typing import Dict, List, Sequence

from fpl_squad_picker.domain.models.player import FixtureDifficulty, PlayerDomain
from fpl_squad_picker.domain.models.squad import Strategy

from .optimization_base import OptimizationBaseMixin

# Signal weights per strategy: ppm, projected points, form, fixture bonus
STRATEGY_WEIGHTS: Dict[Strategy, Dict[str, float]] = {
    Strategy.BALANCED: {"ppm": 0.3, "projected": 0.5, "form": 2.0, "fixture": 0.0},
    Strategy.VALUE: {"ppm": 0.6, "projected": 0.3, "form": 1.0, "fixture": 0.0},
    Strategy.AGGRESSIVE: {"ppm": 0.0, "projected": 0.7, "form": 3.0, "fixture": 1.0},
}

FIXTURE_BONUS: Dict[FixtureDifficulty, float] = {
    FixtureDifficulty.EASY: 15.0,
    FixtureDifficulty.MEDIUM: 5.0,
    FixtureDifficulty.HARD: 0.0,
}


class StrategyScoringMixin(OptimizationBaseMixin):
    """Mixin providing per-strategy player desirability scores."""

    def score_player(self, player: PlayerDomain, strategy: Strategy) -> float:
        """Desirability of a player under a strategy (higher is better).

        Args:
            player: Catalog player
            strategy: Scoring strategy

        Returns:
            Weighted score; pure function of the player's signals
        """
        weights = STRATEGY_WEIGHTS[Strategy(strategy)]
        return (
            weights["ppm"] * player.points_per_million
            + weights["projected"] * player.projected_points
            + weights["form"] * player.form
            + weights["fixture"] * FIXTURE_BONUS[player.fixture_difficulty]
        )

    def rank_players(
        self, players: Sequence[PlayerDomain], strategy: Strategy
    ) -> List[PlayerDomain]:
        """Players ordered by descending strategy score, ties in catalog order."""
        return sorted(
            players, key=lambda p: self.score_player(p, strategy), reverse=True
        )
