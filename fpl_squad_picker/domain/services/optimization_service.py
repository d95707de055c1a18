"""Optimization service for FPL squad recommendation.

This service contains the squad-construction algorithm:
- Strategy scoring of catalog players
- Greedy selection under budget, position and club caps
- Starting XI selection with formation optimization
- Bench ordering
- Captain selection

This is a thin facade that composes all optimization mixins.
"""

from typing import Sequence

from loguru import logger

from fpl_squad_picker.domain.models.player import PlayerDomain
from fpl_squad_picker.domain.models.squad import SquadDomain, Strategy

from .optimization import (
    CaptainServiceMixin,
    SquadGenerationMixin,
    SquadSelectionMixin,
)


class OptimizationService(
    SquadGenerationMixin,
    SquadSelectionMixin,
    CaptainServiceMixin,
):
    """Service for FPL squad construction and constraint satisfaction.

    This class composes all optimization functionality through mixins:
    - OptimizationBaseMixin: Shared constants and helpers (inherited via other mixins)
    - StrategyScoringMixin: Per-strategy scores (inherited via SquadGenerationMixin)
    - SquadGenerationMixin: Greedy 15-player selection
    - SquadSelectionMixin: Starting XI and bench
    - CaptainServiceMixin: Captain recommendations

    Holds no state between builds; every call uses fresh accumulators.
    """

    def build_squad(
        self,
        players: Sequence[PlayerDomain],
        budget: float,
        strategy: Strategy,
    ) -> SquadDomain:
        """Build one squad: score, select, pick the XI, order the bench, captain.

        Args:
            players: Catalog snapshot, validated by the caller
            budget: Budget in millions
            strategy: Scoring strategy

        Returns:
            Immutable SquadDomain (possibly incomplete in degraded cases)
        """
        strategy = Strategy(strategy)
        selected = self.select_squad(players, budget, strategy)
        lineup = self.find_optimal_starting_11(selected)
        bench = self.find_bench_players(selected, lineup.starting)
        captaincy = self.get_captain_recommendation(lineup.starting)

        squad = SquadDomain(
            strategy=strategy,
            budget=budget,
            selected=selected,
            starting=lineup.starting,
            bench=bench,
            captain=captaincy["captain"],
            vice_captain=captaincy["vice_captain"],
            formation=lineup.formation,
            used_fallback_formation=lineup.used_fallback,
        )

        logger.info(
            f"✅ {strategy.label} squad: {len(selected)} players, {lineup.formation}, "
            f"£{squad.total_cost:.1f}m, captain "
            f"{squad.captain.web_name if squad.captain else '-'}"
        )
        return squad
