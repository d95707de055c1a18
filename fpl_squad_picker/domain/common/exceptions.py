"""Exceptions raised by the squad-construction core."""

from typing import Optional


class SquadInputError(ValueError):
    """Raised when the catalog or budget handed to the core is invalid.

    ``invariant`` names the violated rule so frontends can map it to a field.
    """

    def __init__(self, message: str, invariant: Optional[str] = None):
        super().__init__(message)
        self.invariant = invariant
