"""Player catalog repository implementations.

Two sources feed the squad builder:
- FPLApiPlayerRepository: the public FPL ``bootstrap-static`` endpoint
- CsvPlayerRepository: an already-normalized CSV snapshot

Both normalize into validated PlayerDomain models and report failures as
Result errors; neither ever hands an empty catalog to the caller.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

import pandas as pd
import requests
from loguru import logger
from pydantic import ValidationError

from fpl_squad_picker.config import config
from fpl_squad_picker.domain.common.result import DomainError, Result
from fpl_squad_picker.domain.models.player import (
    FixtureDifficulty,
    PlayerDomain,
    Position,
)
from fpl_squad_picker.domain.repositories.player_repository import PlayerRepository

POSITION_BY_ELEMENT_TYPE = {
    1: Position.GKP,
    2: Position.DEF,
    3: Position.MID,
    4: Position.FWD,
}

PLAYER_COLUMNS = list(PlayerDomain.model_fields)


def _numeric(df: pd.DataFrame, column: str) -> pd.Series:
    """Column as floats with missing / unparsable values set to 0."""
    if column not in df.columns:
        return pd.Series(0.0, index=df.index)
    return pd.to_numeric(df[column], errors="coerce").fillna(0.0)


def normalize_bootstrap_payload(
    payload: Dict[str, Any],
    fixture_difficulty: Union[FixtureDifficulty, str, None] = None,
) -> pd.DataFrame:
    """Normalize a ``bootstrap-static`` payload into catalog rows.

    Args:
        payload: Decoded JSON with ``elements`` and ``teams``
        fixture_difficulty: Label applied to every player, the feed has no
            per-player fixture signal (defaults to the configured label)

    Returns:
        DataFrame with one column per PlayerDomain field. Players with an
        unknown team, unknown element type or a non-positive price are dropped.
    """
    if fixture_difficulty is None:
        fixture_difficulty = config.catalog.default_fixture_difficulty
    fixture_difficulty = FixtureDifficulty(fixture_difficulty)

    elements = pd.DataFrame(payload["elements"])
    teams = pd.DataFrame(payload["teams"])
    if elements.empty:
        return pd.DataFrame(columns=PLAYER_COLUMNS)

    team_codes = dict(zip(teams["id"], teams["short_name"])) if not teams.empty else {}
    df = pd.DataFrame(index=elements.index)
    df["player_id"] = elements["id"].astype(int)

    first = elements.get("first_name", pd.Series("", index=elements.index)).fillna("")
    second = elements.get("second_name", pd.Series("", index=elements.index)).fillna("")
    full_name = (first + " " + second).str.strip()
    if "web_name" in elements.columns:
        full_name = full_name.where(full_name != "", elements["web_name"])
    df["web_name"] = full_name

    df["team"] = elements["team"].map(team_codes)
    df["position"] = elements["element_type"].map(POSITION_BY_ELEMENT_TYPE)
    df["price"] = _numeric(elements, "now_cost") / 10.0
    df["points_per_million"] = _numeric(elements, "points_per_million")
    df["form"] = _numeric(elements, "form")
    df["fixture_difficulty"] = fixture_difficulty
    raw_projection = (
        _numeric(elements, "expected_goals")
        + _numeric(elements, "expected_assists")
        + 2 * df["form"]
    )
    # Round half up to whole points
    df["projected_points"] = (raw_projection + 0.5) // 1
    df["yellow_cards"] = _numeric(elements, "yellow_cards").astype(int)
    df["minutes"] = _numeric(elements, "minutes").astype(int)
    df["selected_by_percent"] = _numeric(elements, "selected_by_percent")

    unknown_team = df["team"].isna()
    if unknown_team.any():
        logger.warning(
            f"⚠️ Dropping {int(unknown_team.sum())} players with unknown team ids"
        )
    unknown_position = df["position"].isna()
    if unknown_position.any():
        logger.warning(
            f"⚠️ Dropping {int(unknown_position.sum())} players with unknown element types"
        )

    keep = ~unknown_team & ~unknown_position & (df["price"] > 0)
    return df[keep].reset_index(drop=True)


def players_from_dataframe(
    df: pd.DataFrame,
) -> Tuple[List[PlayerDomain], List[str]]:
    """Validate catalog rows into PlayerDomain models.

    Returns:
        (players, errors) where each error names the offending row
    """
    players: List[PlayerDomain] = []
    errors: List[str] = []
    for index, row in enumerate(df.to_dict("records")):
        record = {
            key: value
            for key, value in row.items()
            if key in PLAYER_COLUMNS and not (isinstance(value, float) and pd.isna(value))
        }
        try:
            players.append(PlayerDomain(**record))
        except ValidationError as e:
            first_error = e.errors()[0]
            field = ".".join(str(part) for part in first_error["loc"]) or "player"
            errors.append(
                f"Row {index} (player {record.get('player_id', 'unknown')}): "
                f"{field} - {first_error['msg']}"
            )
    return players, errors


class FPLApiPlayerRepository(PlayerRepository):
    """PlayerRepository backed by the FPL ``bootstrap-static`` endpoint."""

    def __init__(
        self,
        url: Optional[str] = None,
        timeout: Optional[float] = None,
        fixture_difficulty: Optional[FixtureDifficulty] = None,
        session: Optional[requests.Session] = None,
    ):
        self.url = url or config.catalog.bootstrap_static_url
        self.timeout = timeout or config.catalog.request_timeout_seconds
        self.fixture_difficulty = fixture_difficulty
        self.session = session or requests.Session()
        self._payload: Optional[Dict[str, Any]] = None

    def fetch_bootstrap(self) -> Result[Dict[str, Any]]:
        """Fetch (once) and return the decoded bootstrap payload."""
        if self._payload is not None:
            return Result.success(self._payload)

        try:
            response = self.session.get(
                self.url, headers={"Accept": "application/json"}, timeout=self.timeout
            )
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as e:
            logger.error(f"❌ FPL API request failed: {e}")
            return Result.failure(
                DomainError.external_api_error(
                    f"Unable to load FPL data: {e}", details={"url": self.url}
                )
            )
        except ValueError as e:
            logger.error(f"❌ FPL API returned invalid JSON: {e}")
            return Result.failure(
                DomainError.external_api_error(
                    "FPL API returned a response that is not JSON",
                    details={"url": self.url},
                )
            )

        if not isinstance(payload, dict) or "elements" not in payload or "teams" not in payload:
            return Result.failure(
                DomainError.data_access_error(
                    "FPL API response is missing 'elements' or 'teams'",
                    details={"url": self.url},
                )
            )

        self._payload = payload
        return Result.success(payload)

    def get_current_players(self) -> Result[List[PlayerDomain]]:
        """Get all players from the live FPL feed."""
        payload_result = self.fetch_bootstrap()
        if payload_result.is_failure:
            return Result.failure(payload_result.error)

        try:
            catalog_df = normalize_bootstrap_payload(
                payload_result.value, self.fixture_difficulty
            )
        except (KeyError, TypeError) as e:
            return Result.failure(
                DomainError.data_access_error(f"Unexpected FPL payload layout: {e}")
            )

        players, errors = players_from_dataframe(catalog_df)
        if errors:
            logger.warning(
                f"⚠️ {len(errors)} players failed validation and were skipped: {errors[:3]}"
            )
        if not players:
            return Result.failure(
                DomainError.data_not_found("FPL API returned no selectable players")
            )

        logger.info(f"✅ Loaded {len(players)} players from the FPL API")
        return Result.success(players)

    def get_current_gameweek(self) -> Result[int]:
        """Current gameweek from the feed's events (1 when none is current)."""
        payload_result = self.fetch_bootstrap()
        if payload_result.is_failure:
            return Result.failure(payload_result.error)

        current = next(
            (
                event.get("id")
                for event in payload_result.value.get("events", [])
                if event.get("is_current")
            ),
            None,
        )
        return Result.success(int(current) if current else 1)


class CsvPlayerRepository(PlayerRepository):
    """PlayerRepository backed by a normalized CSV snapshot.

    Columns are named after PlayerDomain fields (``player_id``, ``web_name``,
    ``team``, ``position``, ``price``, ...). Any invalid row fails the load.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def get_current_players(self) -> Result[List[PlayerDomain]]:
        if not self.path.exists():
            return Result.failure(
                DomainError.data_not_found(
                    f"Catalog file not found: {self.path}", details={"path": str(self.path)}
                )
            )

        try:
            catalog_df = pd.read_csv(self.path)
        except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
            return Result.failure(
                DomainError.data_access_error(f"Could not read catalog {self.path}: {e}")
            )

        if catalog_df.empty:
            return Result.failure(
                DomainError.data_not_found(f"Catalog file {self.path} has no players")
            )

        players, errors = players_from_dataframe(catalog_df)
        if errors:
            return Result.failure(
                DomainError.validation_error(
                    f"{len(errors)} invalid catalog rows in {self.path}: {errors[0]}",
                    details={"errors": errors},
                )
            )

        logger.info(f"✅ Loaded {len(players)} players from {self.path}")
        return Result.success(players)
