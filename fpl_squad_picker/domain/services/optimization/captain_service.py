"""Captain selection service for FPL optimization.

Captain and vice-captain are the two starters with the highest projected
points. Ties go to the player met first in starting XI order.
"""

from typing import Dict, Optional, Sequence

from fpl_squad_picker.domain.models.player import PlayerDomain

from .optimization_base import OptimizationBaseMixin


class CaptainServiceMixin(OptimizationBaseMixin):
    """Mixin providing captain selection functionality."""

    def get_captain_recommendation(
        self, starting_11: Sequence[PlayerDomain]
    ) -> Dict[str, Optional[PlayerDomain]]:
        """Pick captain and vice-captain from the starting XI.

        Args:
            starting_11: Starting players in XI order

        Returns:
            {"captain": PlayerDomain | None, "vice_captain": PlayerDomain | None}
            None only when the XI is too small to provide the pick.
        """
        captain = self._first_highest_projected(starting_11)
        vice_captain = None
        if captain is not None:
            vice_captain = self._first_highest_projected(
                [p for p in starting_11 if p.player_id != captain.player_id]
            )
        return {"captain": captain, "vice_captain": vice_captain}

    @staticmethod
    def _first_highest_projected(
        players: Sequence[PlayerDomain],
    ) -> Optional[PlayerDomain]:
        best = None
        for player in players:
            if best is None or player.projected_points > best.projected_points:
                best = player
        return best
