"""Optimization module for FPL squad recommendation.

This module provides:
- Strategy scoring of catalog players
- Greedy squad generation under budget, position and club caps
- Starting XI formation search and bench ordering
- Captain and vice-captain selection

Usage:
    from fpl_squad_picker.domain.services.optimization_service import OptimizationService

    service = OptimizationService()
    squad = service.build_squad(players, budget=100.0, strategy=Strategy.VALUE)
"""

from .optimization_base import (
    FALLBACK_FORMATION,
    FORMATIONS,
    MAX_PLAYERS_PER_TEAM,
    POSITION_CAPS,
    OptimizationBaseMixin,
)
from .strategy_scoring import FIXTURE_BONUS, STRATEGY_WEIGHTS, StrategyScoringMixin
from .squad_generation import SquadGenerationMixin
from .squad_selection import SquadSelectionMixin, StartingXI
from .captain_service import CaptainServiceMixin

__all__ = [
    "OptimizationBaseMixin",
    "StrategyScoringMixin",
    "SquadGenerationMixin",
    "SquadSelectionMixin",
    "CaptainServiceMixin",
    "StartingXI",
    "POSITION_CAPS",
    "MAX_PLAYERS_PER_TEAM",
    "FORMATIONS",
    "FALLBACK_FORMATION",
    "STRATEGY_WEIGHTS",
    "FIXTURE_BONUS",
]
