"""Logging utilities for polynav."""

import logging
from dataclasses import dataclass
from pathlib import Path

import structlog

# Handlers installed by configure_logging, replaced on reconfiguration
_installed_handlers: list[logging.Handler] = []


@dataclass
class PlanningStats:
    """Statistics from one planning run."""

    vertex_count: int = 0
    candidate_count: int = 0
    visible_pairs: int = 0
    graph_nodes: int = 0
    graph_edges: int = 0
    path_nodes: int = 0
    path_length: float = 0.0
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate planning duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def path_found(self) -> bool:
        """Whether the run produced a path."""
        return self.path_nodes > 0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)
        _installed_handlers.append(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("polynav")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class PlanningLogger:
    """Logger for tracking planning stages and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger if logger is not None else structlog.get_logger("polynav")
        self._stats = PlanningStats()

    def log_polygon(self, vertex_count: int, winding: str, area: float) -> None:
        """Log the polygon being planned over."""
        self._logger.debug(
            "Polygon loaded",
            vertices=vertex_count,
            winding=winding,
            area=round(area, 4),
        )
        self._stats.vertex_count = vertex_count

    def log_candidates(self, candidate_count: int, concave_count: int) -> None:
        """Log candidate selection."""
        self._logger.debug(
            "Candidates selected",
            candidates=candidate_count,
            concave=concave_count,
        )
        self._stats.candidate_count = candidate_count

    def log_visibility(self, visible_pairs: int, duration_ms: float) -> None:
        """Log visibility computation results."""
        self._logger.info(
            "Visibility computed",
            pairs=visible_pairs,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.visible_pairs = visible_pairs

    def log_graph(self, node_count: int, edge_count: int) -> None:
        """Log navigation graph size."""
        self._logger.debug("Graph built", nodes=node_count, edges=edge_count)
        self._stats.graph_nodes = node_count
        self._stats.graph_edges = edge_count

    def log_path(self, path_nodes: int, length: float) -> None:
        """Log a found path."""
        self._logger.info(
            "Path found",
            nodes=path_nodes,
            length=round(length, 4),
        )
        self._stats.path_nodes = path_nodes
        self._stats.path_length = length

    def log_no_path(self, reason: str) -> None:
        """Log a failed search."""
        self._logger.warning("No path found", reason=reason)
        self._stats.path_nodes = 0
        self._stats.path_length = 0.0

    def log_triangulation(self, vertex_count: int, triangle_count: int, duration_ms: float) -> None:
        """Log triangulation results."""
        self._logger.info(
            "Polygon triangulated",
            vertices=vertex_count,
            triangles=triangle_count,
            duration_ms=round(duration_ms, 2),
        )

    @property
    def stats(self) -> PlanningStats:
        """Get current planning statistics."""
        return self._stats
