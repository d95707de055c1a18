"""
Configuration Utilities

Helper functions for exporting and templating the FPL configuration.
"""

import json
from pathlib import Path

from loguru import logger

from .settings import FPLConfig


def export_config_to_json(config: FPLConfig, output_path: Path) -> None:
    """
    Export configuration to JSON file

    Args:
        config: FPLConfig instance to export
        output_path: Path where to save the JSON file
    """
    with open(output_path, "w") as f:
        json.dump(config.model_dump(), f, indent=2, default=str)

    logger.info(f"✅ Configuration exported to {output_path}")


def create_config_template() -> str:
    """
    Create a configuration template with all available options

    Returns:
        JSON string template
    """
    return FPLConfig().model_dump_json(indent=2)
