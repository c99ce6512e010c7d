"""Utility functions for pathfit.

This module provides utility functions including:

- Logging setup and configuration
- Render statistics tracking
"""

from pathfit.utils.logging import (
    RenderLogger,
    RenderStats,
    configure_logging,
)

__all__ = [
    "RenderLogger",
    "RenderStats",
    "configure_logging",
]
