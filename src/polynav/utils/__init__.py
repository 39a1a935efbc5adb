"""Utility functions for polynav.

This module provides utility functions including:

- Logging setup and configuration
- Planning statistics collection
"""

from polynav.utils.logging import (
    PlanningLogger,
    PlanningStats,
    configure_logging,
)

__all__ = [
    "PlanningLogger",
    "PlanningStats",
    "configure_logging",
]
