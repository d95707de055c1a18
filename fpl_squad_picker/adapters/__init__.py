"""Adapters that load the player catalog from external sources."""

from .catalog_repositories import (
    CsvPlayerRepository,
    FPLApiPlayerRepository,
    normalize_bootstrap_payload,
    players_from_dataframe,
)

__all__ = [
    "FPLApiPlayerRepository",
    "CsvPlayerRepository",
    "normalize_bootstrap_payload",
    "players_from_dataframe",
]
