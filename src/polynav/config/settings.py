"""Configuration settings for polynav."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class CandidateMode(str, Enum):
    """Which polygon vertices become visibility candidates."""

    CONCAVE = "concave"
    ALL_VERTICES = "all_vertices"


class GeometryConfig(BaseModel):
    """Configuration for geometric comparisons."""

    point_tolerance: float = Field(
        default=1e-6,
        gt=0.0,
        le=1.0,
        description="Per-axis distance below which two points are the same location",
    )


class VisibilityConfig(BaseModel):
    """Configuration for visibility graph construction."""

    candidate_mode: CandidateMode = Field(
        default=CandidateMode.CONCAVE,
        description="Use only concave vertices, or every vertex, as candidates",
    )
    interior_only: bool = Field(
        default=True,
        description="Reject sight lines that run outside the polygon without crossing an edge",
    )


class TriangulationConfig(BaseModel):
    """Configuration for ear-reduction triangulation."""

    check_ears: bool = Field(
        default=True,
        description="Only clip convex ears that contain no other vertex",
    )


class PlanningConfig(BaseModel):
    """Configuration for route planning."""

    require_inside_endpoints: bool = Field(
        default=True,
        description="Reject start/goal points that lie outside the polygon",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class PolynavSettings(BaseModel):
    """Main application settings."""

    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    visibility: VisibilityConfig = Field(default_factory=VisibilityConfig)
    triangulation: TriangulationConfig = Field(default_factory=TriangulationConfig)
    planning: PlanningConfig = Field(default_factory=PlanningConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> PolynavSettings:
    """Get default application settings."""
    return PolynavSettings()
