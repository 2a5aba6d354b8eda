"""Configuration management for fourierpath.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- QuadratureConfig: Integration tolerance and depth
- SeriesConfig: Coefficient count and worker settings
- PreviewConfig: Curve sampling settings
- LoggingConfig: Logging settings
- FourierPathSettings: Main application settings
"""

from fourierpath.config.settings import (
    FourierPathSettings,
    LoggingConfig,
    PreviewConfig,
    QuadratureConfig,
    SeriesConfig,
    get_default_settings,
)

__all__ = [
    "FourierPathSettings",
    "LoggingConfig",
    "PreviewConfig",
    "QuadratureConfig",
    "SeriesConfig",
    "get_default_settings",
]
