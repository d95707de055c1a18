"""Player domain model with strict FPL validation."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Yellow cards at which a player is flagged as a suspension risk
DISCIPLINARY_RISK_YELLOW_CARDS = 4

# FPL short names of Premier League clubs, current and recent seasons
KNOWN_TEAM_CODES = frozenset(
    {
        "ARS", "AVL", "BHA", "BOU", "BRE", "BUR", "CAR", "CHE", "CRY", "EVE",
        "FUL", "HUD", "HUL", "IPS", "LEE", "LEI", "LIV", "LUT", "MCI", "MID",
        "MUN", "NEW", "NFO", "NOR", "SHU", "SOU", "STK", "SUN", "SWA", "TOT",
        "WAT", "WBA", "WHU", "WOL",
    }
)


class Position(str, Enum):
    """FPL player positions."""

    GKP = "GKP"
    DEF = "DEF"
    MID = "MID"
    FWD = "FWD"


class FixtureDifficulty(str, Enum):
    """Upcoming fixture difficulty label."""

    EASY = "EASY"
    MEDIUM = "MEDIUM"
    HARD = "HARD"


class PlayerDomain(BaseModel):
    """
    Domain model for a catalog player.

    Immutable for the duration of a squad build. Construction enforces the
    catalog invariants (positive price, known position, known team code).
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True, allow_inf_nan=False)

    player_id: int = Field(..., gt=0, description="Unique FPL player ID")
    web_name: str = Field(..., min_length=1, max_length=100, description="Display name")
    team: str = Field(
        ..., min_length=2, max_length=3, description="Club short code, e.g. ARS"
    )
    position: Position = Field(..., description="Player position")
    price: float = Field(..., gt=0.0, description="Price in millions")
    points_per_million: float = Field(
        default=0.0, ge=0.0, description="Points per £1m price"
    )
    form: float = Field(default=0.0, description="Recent form (can be negative)")
    fixture_difficulty: FixtureDifficulty = Field(
        ..., description="Difficulty label of the upcoming fixtures"
    )
    projected_points: float = Field(
        ..., description="Projected points over the planning horizon"
    )
    yellow_cards: int = Field(default=0, ge=0, description="Yellow cards received")
    minutes: int = Field(default=0, ge=0, description="Total minutes played")
    selected_by_percent: float = Field(
        default=0.0, ge=0.0, le=100.0, description="Selection percentage"
    )

    @field_validator("team")
    @classmethod
    def validate_team_code(cls, v: str) -> str:
        """Club codes are FPL short names of known clubs."""
        code = v.upper()
        if not code.isalpha():
            raise ValueError(f"Team code must be letters only, got {v!r}")
        if code not in KNOWN_TEAM_CODES:
            raise ValueError(f"Unknown team code {v!r}")
        return code

    @field_validator("position", mode="before")
    @classmethod
    def normalize_position(cls, v):
        """Accept position codes in any case ('gkp', 'GKP')."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("fixture_difficulty", mode="before")
    @classmethod
    def normalize_fixture_difficulty(cls, v):
        """Accept labels in any case ('Easy', 'EASY')."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @property
    def is_goalkeeper(self) -> bool:
        """Is a goalkeeper."""
        return self.position == Position.GKP

    @property
    def is_disciplinary_risk(self) -> bool:
        """Close to a suspension."""
        return self.yellow_cards >= DISCIPLINARY_RISK_YELLOW_CARDS
