"""Tests for loguru sink configuration."""

import sys

from loguru import logger

from fpl_squad_picker.utils.logging import configure_logging


class TestConfigureLogging:
    def test_file_sink_receives_debug(self, tmp_path):
        log_file = tmp_path / "picker.log"
        try:
            configure_logging("WARNING", str(log_file))
            logger.debug("squad debug line")
        finally:
            logger.remove()
            logger.add(sys.stderr)

        assert "squad debug line" in log_file.read_text()
