"""Squad selection utilities for FPL optimization.

This module handles:
- Starting XI selection with formation optimization
- Bench ordering
"""

from typing import List, NamedTuple, Optional, Sequence

from loguru import logger

from fpl_squad_picker.domain.models.player import PlayerDomain, Position
from fpl_squad_picker.domain.models.squad import Formation

from .optimization_base import FALLBACK_FORMATION, FORMATIONS, OptimizationBaseMixin


class StartingXI(NamedTuple):
    """Outcome of the formation search."""

    starting: List[PlayerDomain]
    formation: str
    total_projected_points: float
    used_fallback: bool

    @property
    def goalkeeper(self) -> Optional[PlayerDomain]:
        return next((p for p in self.starting if p.is_goalkeeper), None)


class SquadSelectionMixin(OptimizationBaseMixin):
    """Mixin providing squad selection functionality.

    Handles starting XI selection and bench ordering.
    Inherits shared utilities from OptimizationBaseMixin.
    """

    def find_optimal_starting_11(self, squad: Sequence[PlayerDomain]) -> StartingXI:
        """Find the best starting XI from the selected squad.

        The first goalkeeper in squad order starts. Every legal formation that
        the outfield buckets can fill is scored by the projected points of its
        top players; the first formation reaching the maximum wins. When none
        fits, up to 4 defenders, 4 midfielders and 1 forward are fielded.

        Args:
            squad: Selected players (normally 15, fewer in degraded builds)

        Returns:
            StartingXI ordered GKP, DEF, MID, FWD
        """
        by_position = self._group_by_position(squad)
        goalkeeper = by_position[Position.GKP][:1]
        outfield = {
            pos: self._sort_by_projected_points(by_position[pos])
            for pos in (Position.DEF, Position.MID, Position.FWD)
        }

        best_formation: Optional[Formation] = None
        best_points = 0.0
        for formation in FORMATIONS:
            required = formation.required()
            if any(len(outfield[pos]) < count for pos, count in required.items()):
                continue
            points = sum(
                p.projected_points
                for pos, count in required.items()
                for p in outfield[pos][:count]
            )
            if best_formation is None or points > best_points:
                best_formation = formation
                best_points = points

        used_fallback = best_formation is None
        chosen = FALLBACK_FORMATION if used_fallback else best_formation

        starting = list(goalkeeper)
        for pos, count in chosen.required().items():
            starting.extend(outfield[pos][:count])

        fielded = Formation(
            *(
                sum(1 for p in starting if p.position == pos)
                for pos in (Position.DEF, Position.MID, Position.FWD)
            )
        )
        if used_fallback:
            logger.warning(
                f"⚠️ No legal formation fits the squad "
                f"(DEF {len(outfield[Position.DEF])}, MID {len(outfield[Position.MID])}, "
                f"FWD {len(outfield[Position.FWD])}) - fielding {fielded.name}"
            )

        return StartingXI(
            starting=starting,
            formation=fielded.name,
            total_projected_points=sum(p.projected_points for p in starting),
            used_fallback=used_fallback,
        )

    def find_bench_players(
        self, squad: Sequence[PlayerDomain], starting_11: Sequence[PlayerDomain]
    ) -> List[PlayerDomain]:
        """Get bench players from the squad in substitution priority order.

        Outfield players come first by projected points (highest first); any
        benched goalkeeper goes last regardless of points.

        Args:
            squad: Selected players
            starting_11: Starting XI drawn from the squad

        Returns:
            Players in squad but not in the starting XI
        """
        starting_ids = {player.player_id for player in starting_11}
        bench = [p for p in squad if p.player_id not in starting_ids]
        return sorted(bench, key=lambda p: (p.is_goalkeeper, -p.projected_points))
