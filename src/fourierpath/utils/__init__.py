"""Utility functions for fourierpath.

This module provides logging setup and run statistics.
"""

from fourierpath.utils.logging import (
    AnalysisLogger,
    AnalysisStats,
    configure_logging,
)

__all__ = [
    "AnalysisLogger",
    "AnalysisStats",
    "configure_logging",
]
