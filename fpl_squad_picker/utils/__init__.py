"""
FPL Utility Functions

This package contains common utility functions for:
- Logging sink configuration
"""

from .logging import configure_logging

__all__ = ["configure_logging"]
