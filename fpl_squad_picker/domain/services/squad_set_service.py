"""Squad set service: one recommended squad per strategy."""

from typing import Dict, Optional, Sequence

from loguru import logger

from fpl_squad_picker.domain.common.exceptions import SquadInputError
from fpl_squad_picker.domain.common.result import DomainError, Result
from fpl_squad_picker.domain.models.player import PlayerDomain
from fpl_squad_picker.domain.models.squad import SquadDomain, Strategy
from fpl_squad_picker.domain.services.optimization_service import OptimizationService


class SquadSetService:
    """Builds the Balanced, Value and Aggressive squads from one catalog snapshot.

    The three builds share only the read-only catalog and budget, so calling
    the service repeatedly (for example with a new budget) never carries state
    over from a previous call.
    """

    def __init__(self, optimization_service: Optional[OptimizationService] = None):
        self.optimization_service = optimization_service or OptimizationService()

    def build_all_squads(
        self, catalog: Sequence[PlayerDomain], budget: float
    ) -> Dict[Strategy, SquadDomain]:
        """Build one squad per strategy.

        Args:
            catalog: Non-empty list of validated players
            budget: Budget in millions (> 0)

        Returns:
            Mapping of every Strategy to its SquadDomain, in Strategy order

        Raises:
            SquadInputError: empty catalog, invalid budget or invalid players
        """
        self.optimization_service.validate_catalog(catalog)
        budget = self.optimization_service.validate_budget(budget)
        snapshot = tuple(catalog)

        logger.debug(
            f"Building {len(Strategy)} squads from {len(snapshot)} players "
            f"with £{budget:.1f}m"
        )
        return {
            strategy: self.optimization_service.build_squad(snapshot, budget, strategy)
            for strategy in Strategy
        }

    def recommend(
        self, catalog: Sequence[PlayerDomain], budget: float
    ) -> Result[Dict[Strategy, SquadDomain]]:
        """Frontend-friendly variant of build_all_squads returning a Result."""
        try:
            return Result.success(self.build_all_squads(catalog, budget))
        except SquadInputError as e:
            logger.error(f"❌ Cannot build squads: {e}")
            return Result.failure(
                DomainError.validation_error(
                    str(e),
                    field_errors={e.invariant: str(e)} if e.invariant else None,
                )
            )


def build_all_squads(
    catalog: Sequence[PlayerDomain], budget: float
) -> Dict[Strategy, SquadDomain]:
    """Build the Balanced, Value and Aggressive squads for a catalog and budget."""
    return SquadSetService().build_all_squads(catalog, budget)
