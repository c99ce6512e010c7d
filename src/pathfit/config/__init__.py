"""Configuration management for pathfit.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- StrokeConfig: Stroke expansion settings
- FitConfig: Fit policy settings
- CanvasConfig: Reference rectangle and preview colors
- LoggingConfig: Logging settings
- PathfitSettings: Main application settings
"""

from pathfit.config.settings import (
    CanvasConfig,
    FitConfig,
    FitMode,
    LoggingConfig,
    PathfitSettings,
    StrokeConfig,
    get_default_settings,
)

__all__ = [
    "CanvasConfig",
    "FitConfig",
    "FitMode",
    "LoggingConfig",
    "PathfitSettings",
    "StrokeConfig",
    "get_default_settings",
]
