"""Greedy squad generation for FPL optimization.

This module builds a 15-player squad in a single pass over the catalog ranked
by strategy score. A player is admitted when its position cap, its club cap
and the remaining budget all allow it. There is no backtracking: a player
skipped for a cap is never reconsidered, so the result is a heuristic, not the
integer-program optimum.
"""

from typing import Dict, List, Sequence

from loguru import logger

from fpl_squad_picker.domain.models.player import PlayerDomain, Position
from fpl_squad_picker.domain.models.squad import Strategy

from .optimization_base import (
    BUDGET_TOLERANCE,
    MAX_PLAYERS_PER_TEAM,
    POSITION_CAPS,
    SQUAD_SIZE,
)
from .strategy_scoring import StrategyScoringMixin


class SquadGenerationMixin(StrategyScoringMixin):
    """Mixin providing constrained greedy squad selection."""

    def select_squad(
        self,
        players: Sequence[PlayerDomain],
        budget: float,
        strategy: Strategy,
    ) -> List[PlayerDomain]:
        """Select up to 15 players under budget, position and club caps.

        Args:
            players: Catalog snapshot (read only)
            budget: Budget in millions
            strategy: Strategy used to rank the catalog

        Returns:
            Selected players in admission order. Fewer than 15 when the pool or
            the budget cannot fill the squad.
        """
        ranked = self.rank_players(players, strategy)

        selected: List[PlayerDomain] = []
        total_cost = 0.0
        position_counts: Dict[Position, int] = {pos: 0 for pos in POSITION_CAPS}
        team_counts: Dict[str, int] = {}

        for player in ranked:
            if position_counts[player.position] >= POSITION_CAPS[player.position]:
                continue
            if team_counts.get(player.team, 0) >= MAX_PLAYERS_PER_TEAM:
                continue
            if total_cost + player.price > budget + BUDGET_TOLERANCE:
                continue

            selected.append(player)
            total_cost += player.price
            position_counts[player.position] += 1
            team_counts[player.team] = team_counts.get(player.team, 0) + 1

            if len(selected) == SQUAD_SIZE:
                break

        if len(selected) < SQUAD_SIZE:
            logger.warning(
                f"⚠️ {Strategy(strategy).label}: only {len(selected)}/{SQUAD_SIZE} players "
                f"fit the constraints (budget £{budget:.1f}m, "
                f"positions {self._format_counts(position_counts)})"
            )
        else:
            logger.debug(
                f"{Strategy(strategy).label}: selected {SQUAD_SIZE} players "
                f"for £{total_cost:.1f}m of £{budget:.1f}m"
            )

        return selected

    @staticmethod
    def _format_counts(position_counts: Dict[Position, int]) -> str:
        return ", ".join(
            f"{pos.value} {count}/{POSITION_CAPS[pos]}"
            for pos, count in position_counts.items()
        )
