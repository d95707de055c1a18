"""Repository interface for player catalog access."""

from abc import ABC, abstractmethod
from typing import List

from ..common.result import Result
from ..models.player import PlayerDomain


class PlayerRepository(ABC):
    """
    Abstract repository for the player catalog.

    Provides a consistent interface for loading the catalog regardless of the
    underlying data source (FPL API, CSV snapshot, cache, etc.). The squad
    builder never calls a repository itself; frontends load the catalog first
    and surface any failure to the user.
    """

    @abstractmethod
    def get_current_players(self) -> Result[List[PlayerDomain]]:
        """
        Get all players available for selection.

        Returns:
            Result containing a non-empty list of players or error information
        """
        pass
