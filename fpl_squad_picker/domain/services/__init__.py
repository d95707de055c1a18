"""Domain services for squad recommendation."""

from .optimization_service import OptimizationService
from .squad_set_service import SquadSetService, build_all_squads

__all__ = [
    "OptimizationService",
    "SquadSetService",
    "build_all_squads",
]
