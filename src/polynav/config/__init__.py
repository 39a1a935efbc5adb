"""Configuration management for polynav.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- GeometryConfig: Point comparison tolerance
- VisibilityConfig: Candidate selection and sight-line rules
- TriangulationConfig: Ear selection rules
- PlanningConfig: Route endpoint validation
- LoggingConfig: Logging settings
- PolynavSettings: Main application settings
"""

from polynav.config.settings import (
    CandidateMode,
    GeometryConfig,
    LoggingConfig,
    PlanningConfig,
    PolynavSettings,
    TriangulationConfig,
    VisibilityConfig,
    get_default_settings,
)

__all__ = [
    "CandidateMode",
    "GeometryConfig",
    "LoggingConfig",
    "PlanningConfig",
    "PolynavSettings",
    "TriangulationConfig",
    "VisibilityConfig",
    "get_default_settings",
]
