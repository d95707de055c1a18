"""Base utilities and design constants for FPL squad optimization.

This module contains shared functionality used across all optimization modules:
- Squad composition constants (position caps, club cap, squad size)
- The legal formation table and its fallback
- Catalog / budget input validation
- Position grouping and sorting helpers
"""

import math
from typing import Dict, List, Sequence

from fpl_squad_picker.domain.common.exceptions import SquadInputError
from fpl_squad_picker.domain.models.player import PlayerDomain, Position
from fpl_squad_picker.domain.models.squad import SQUAD_SIZE, Formation

# Maximum players per position in a 15-man squad (sums to SQUAD_SIZE)
POSITION_CAPS: Dict[Position, int] = {
    Position.GKP: 2,
    Position.DEF: 5,
    Position.MID: 5,
    Position.FWD: 3,
}

MAX_PLAYERS_PER_TEAM = 3

# Legal starting formations, in tie-break order
FORMATIONS: List[Formation] = [
    Formation(3, 5, 2),
    Formation(3, 4, 3),
    Formation(4, 5, 1),
    Formation(4, 4, 2),
    Formation(4, 3, 3),
    Formation(5, 4, 1),
    Formation(5, 3, 2),
]

# Best-effort shape when no legal formation fits the selected players
FALLBACK_FORMATION = Formation(4, 4, 1)

# Absorbs float drift when summing prices such as 4.5 + 5.5 + ...
BUDGET_TOLERANCE = 1e-9


class OptimizationBaseMixin:
    """Mixin providing shared optimization utilities.

    This mixin provides core functionality used by all optimization modules:
    - Input validation for the catalog and budget
    - Grouping players by position
    - Sorting by projected points
    """

    def validate_catalog(self, players: Sequence[PlayerDomain]) -> None:
        """Fail fast on an unusable catalog.

        Raises:
            SquadInputError: empty catalog, non-player entries, duplicate IDs or
                a player violating its invariants
        """
        if players is None or len(players) == 0:
            raise SquadInputError(
                "Player catalog is empty - load the catalog before building squads",
                invariant="catalog_not_empty",
            )

        seen_ids = set()
        for index, player in enumerate(players):
            if not isinstance(player, PlayerDomain):
                raise SquadInputError(
                    f"Catalog entry {index} is {type(player).__name__}, expected PlayerDomain",
                    invariant="catalog_entry_type",
                )
            # model_construct() skips field validation
            if not player.price > 0:
                raise SquadInputError(
                    f"Player {player.player_id} ({player.web_name}) has non-positive price {player.price}",
                    invariant="player_price_positive",
                )
            signals = (player.projected_points, player.form, player.points_per_million)
            if not all(math.isfinite(value) for value in signals):
                raise SquadInputError(
                    f"Player {player.player_id} ({player.web_name}) has a non-finite scoring signal",
                    invariant="player_signals_finite",
                )
            if player.position not in POSITION_CAPS:
                raise SquadInputError(
                    f"Player {player.player_id} ({player.web_name}) has unknown position {player.position!r}",
                    invariant="player_position_known",
                )
            if player.player_id in seen_ids:
                raise SquadInputError(
                    f"Duplicate player ID {player.player_id} in catalog",
                    invariant="player_id_unique",
                )
            seen_ids.add(player.player_id)

    def validate_budget(self, budget: float) -> float:
        """Return the budget as float, raising SquadInputError unless finite and > 0."""
        try:
            value = float(budget)
        except (TypeError, ValueError):
            raise SquadInputError(
                f"Budget must be a number, got {budget!r}", invariant="budget_positive"
            )
        if not math.isfinite(value) or value <= 0:
            raise SquadInputError(
                f"Budget must be a positive amount, got {budget!r}",
                invariant="budget_positive",
            )
        return value

    def _group_by_position(
        self, players: Sequence[PlayerDomain]
    ) -> Dict[Position, List[PlayerDomain]]:
        """Group players by position, preserving input order within each group."""
        by_position: Dict[Position, List[PlayerDomain]] = {pos: [] for pos in Position}
        for player in players:
            by_position[player.position].append(player)
        return by_position

    def _sort_by_projected_points(
        self, players: Sequence[PlayerDomain]
    ) -> List[PlayerDomain]:
        """Descending projected points; stable, so ties keep input order."""
        return sorted(players, key=lambda p: p.projected_points, reverse=True)


__all__ = [
    "POSITION_CAPS",
    "MAX_PLAYERS_PER_TEAM",
    "SQUAD_SIZE",
    "FORMATIONS",
    "FALLBACK_FORMATION",
    "BUDGET_TOLERANCE",
    "OptimizationBaseMixin",
]
