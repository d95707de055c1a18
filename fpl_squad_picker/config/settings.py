"""
Global Configuration System for FPL Squad Picker

Centralized configuration for the values around the squad builder: default
budget, planning horizon, catalog source and logging. Provides type-safe
configuration with validation and environment variable support.

Scoring weights, position caps and the formation table are design constants of
the optimizer and live next to it.
"""

import json
import os
from pathlib import Path
from typing import Dict, Optional

from loguru import logger
from pydantic import BaseModel, Field, field_validator

from fpl_squad_picker.domain.models.player import FixtureDifficulty


class RecommendationConfig(BaseModel):
    """Squad Recommendation Configuration"""

    default_budget: float = Field(
        default=100.0, description="Squad budget in millions", gt=0.0, le=200.0
    )
    planning_horizon_gameweeks: int = Field(
        default=8,
        description="Gameweeks covered by projected points (export label)",
        ge=1,
        le=38,
    )
    default_gameweek: int = Field(
        default=1, description="Gameweek used when none is supplied", ge=1, le=38
    )


class CatalogConfig(BaseModel):
    """Player Catalog Source Configuration"""

    bootstrap_static_url: str = Field(
        default="https://fantasy.premierleague.com/api/bootstrap-static/",
        description="FPL endpoint with players, teams and events",
    )
    request_timeout_seconds: float = Field(
        default=10.0, description="HTTP timeout for catalog requests", gt=0.0, le=120.0
    )
    default_fixture_difficulty: str = Field(
        default="MEDIUM",
        description="Fixture label for players whose feed has no fixture signal",
    )

    @field_validator("default_fixture_difficulty")
    @classmethod
    def validate_fixture_difficulty(cls, v: str) -> str:
        label = v.strip().upper()
        valid = [d.value for d in FixtureDifficulty]
        if label not in valid:
            raise ValueError(f"default_fixture_difficulty must be one of {valid}")
        return label


class LoggingConfig(BaseModel):
    """Logging Configuration"""

    level: str = Field(default="INFO", description="Console log level")
    log_file: Optional[str] = Field(
        default=None, description="Optional rotating log file path"
    )

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        level = v.strip().upper()
        valid = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]
        if level not in valid:
            raise ValueError(f"level must be one of {valid}")
        return level


class FPLConfig(BaseModel):
    """Master FPL Configuration Container"""

    recommendation: RecommendationConfig = Field(
        default_factory=RecommendationConfig,
        description="Squad Recommendation Configuration",
    )
    catalog: CatalogConfig = Field(
        default_factory=CatalogConfig, description="Player Catalog Configuration"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging Configuration"
    )


def _parse_env_value(value: str):
    """Convert an environment string to bool, int, float or leave as str."""
    if value.lower() in ("true", "false"):
        return value.lower() == "true"
    if value.isdigit() or (value.startswith("-") and value[1:].isdigit()):
        return int(value)
    if "." in value:
        try:
            return float(value)
        except ValueError:
            return value
    return value


def load_config(
    config_path: Optional[Path] = None,
    config_data: Optional[Dict] = None,
    environ: Optional[Dict[str, str]] = None,
) -> FPLConfig:
    """
    Load configuration with environment variable overrides and optional config file

    Args:
        config_path: Optional path to a JSON configuration file
        config_data: Optional dictionary of configuration data
        environ: Environment mapping to read overrides from (defaults to os.environ)

    Environment variables can override any config value using the pattern:
    FPL_{SECTION}_{FIELD} = value

    Example: FPL_RECOMMENDATION_DEFAULT_BUDGET=95.5
    """
    config_dict: Dict = {}

    if config_path and config_path.exists():
        try:
            with open(config_path, "r") as f:
                if config_path.suffix.lower() == ".json":
                    config_dict = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"⚠️ Failed to load config file {config_path}: {e}")

    if config_data:
        for section, fields in config_data.items():
            config_dict.setdefault(section, {}).update(fields)

    env_overrides: Dict[str, Dict] = {}
    for env_var, value in (os.environ if environ is None else environ).items():
        if not env_var.startswith("FPL_"):
            continue
        # FPL_SECTION_FIELD - section names are single words
        parts = env_var.split("_")[1:]
        if len(parts) < 2:
            continue
        section = parts[0].lower()
        field = "_".join(parts[1:]).lower()
        env_overrides.setdefault(section, {})[field] = _parse_env_value(value)

    for section, fields in env_overrides.items():
        config_dict.setdefault(section, {}).update(fields)

    try:
        return FPLConfig(**config_dict)
    except ValueError as e:
        logger.warning(f"⚠️ Configuration validation failed: {e}")
        logger.warning("Using default configuration...")
        return FPLConfig()


# Global configuration instance
config = load_config()
