"""Configuration validation for aoc-solver."""

import logging

from omegaconf import DictConfig

logger = logging.getLogger(__name__)

QUEUE_KINDS = ('heap', 'sorted')
HEURISTICS = ('zero', 'manhattan')
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class ConfigValidationError(Exception):
    """Exception raised when configuration validation fails."""
    pass


def validate_config(config: DictConfig) -> None:
    """Validate the complete configuration.

    Args:
        config: Configuration to validate

    Raises:
        ConfigValidationError: If validation fails
    """
    try:
        validate_solver_config(config.get('solver', {}))
        validate_search_config(config.get('search', {}))
        validate_puzzles_config(config.get('puzzles', {}))
        validate_logging_config(config.get('logging', {}))
    except ConfigValidationError:
        raise
    except Exception as e:
        raise ConfigValidationError(f"Configuration validation failed: {e}") from e

    logger.info("Configuration validation passed")


def validate_solver_config(solver_config: DictConfig) -> None:
    """Validate solver configuration section."""
    if not solver_config:
        return

    data_dir = solver_config.get('data_dir', 'data')
    if not isinstance(data_dir, str) or not data_dir:
        raise ConfigValidationError(f"solver.data_dir must be a non-empty string, got {data_dir!r}")


def validate_search_config(search_config: DictConfig) -> None:
    """Validate search configuration section."""
    if not search_config:
        return

    queue = search_config.get('queue', 'heap')
    if queue not in QUEUE_KINDS:
        raise ConfigValidationError(f"search.queue must be one of {QUEUE_KINDS}, got {queue!r}")

    max_nodes = search_config.get('max_nodes_expanded', None)
    if max_nodes is not None and (not isinstance(max_nodes, int) or isinstance(max_nodes, bool)
                                  or max_nodes < 0):
        raise ConfigValidationError(
            f"search.max_nodes_expanded must be null or a non-negative integer, got {max_nodes!r}"
        )

    log_interval = search_config.get('log_interval', 50000)
    if not isinstance(log_interval, int) or isinstance(log_interval, bool) or log_interval < 0:
        raise ConfigValidationError(
            f"search.log_interval must be a non-negative integer, got {log_interval!r}"
        )


def validate_puzzles_config(puzzles_config: DictConfig) -> None:
    """Validate per-puzzle configuration sections."""
    if not puzzles_config:
        return

    chiton = puzzles_config.get('chiton', {})
    if chiton:
        tile_factor = chiton.get('tile_factor', 5)
        if not isinstance(tile_factor, int) or isinstance(tile_factor, bool) or tile_factor < 1:
            raise ConfigValidationError(
                f"puzzles.chiton.tile_factor must be a positive integer, got {tile_factor!r}"
            )
        heuristic = chiton.get('heuristic', 'manhattan')
        if heuristic not in HEURISTICS:
            raise ConfigValidationError(
                f"puzzles.chiton.heuristic must be one of {HEURISTICS}, got {heuristic!r}"
            )

    amphipod = puzzles_config.get('amphipod', {})
    if amphipod:
        use_heuristic = amphipod.get('use_heuristic', True)
        if not isinstance(use_heuristic, bool):
            raise ConfigValidationError(
                f"puzzles.amphipod.use_heuristic must be a boolean, got {use_heuristic!r}"
            )


def validate_logging_config(logging_config: DictConfig) -> None:
    """Validate logging configuration section."""
    if not logging_config:
        return

    level = str(logging_config.get('level', 'WARNING')).upper()
    if level not in LOG_LEVELS:
        raise ConfigValidationError(f"logging.level must be one of {LOG_LEVELS}, got {level!r}")
