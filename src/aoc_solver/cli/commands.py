"""CLI command implementations."""

import logging
import time
from typing import Any, Dict, List, Optional

from omegaconf import DictConfig, OmegaConf

from aoc_solver.config import (
    load_config, default_config, validate_config, ConfigValidationError
)
from aoc_solver.core.errors import ParseError, PuzzleInputError
from aoc_solver.integration.io import DATASETS, PuzzleInputLoader
from aoc_solver.puzzles import CONFIG_SECTIONS, PARTS, Puzzle, available_days, get_puzzle
from aoc_solver.search.engine import SearchConfig

from .utils import format_answer, resolve_log_level, save_results

logger = logging.getLogger(__name__)


def load_solver_config(overrides: Optional[List[str]] = None) -> DictConfig:
    """Load the Hydra configuration, falling back to built-in defaults without a conf dir."""
    try:
        return load_config(overrides=overrides or [])
    except FileNotFoundError as e:
        logger.warning(f"{e}; using built-in defaults")
        return default_config(overrides)


class AocSolver:
    """Runs registered puzzles against sample or real input."""

    def __init__(self, config_overrides: Optional[List[str]] = None,
                 config: Optional[DictConfig] = None):
        """Initialize the solver.

        Args:
            config_overrides: List of configuration overrides
            config: Preloaded configuration (skips loading)
        """
        self.config = config if config is not None else load_solver_config(config_overrides)
        self.search_config = SearchConfig.from_mapping(self.config.get('search'))
        data_dir = OmegaConf.select(self.config, 'solver.data_dir', default='data')
        self.loader = PuzzleInputLoader(data_dir)
        logger.info(f"Solver initialized (data_dir={data_dir}, queue={self.search_config.queue})")

    def create_puzzle(self, day: int) -> Puzzle:
        puzzle_cls = get_puzzle(day)
        section = OmegaConf.select(self.config, f"puzzles.{CONFIG_SECTIONS[day]}", default=None)
        options = OmegaConf.to_container(section, resolve=True) if section is not None else {}
        return puzzle_cls(self.search_config, options)

    def run(self, day: int, part: int, dataset: str = 'test') -> Dict[str, Any]:
        """Solve one part of one day against one dataset.

        Input and parse failures are reported in the result instead of raised,
        so a bad input never stops the other runs.
        """
        puzzle = self.create_puzzle(day)
        logger.info(f"[Day {day}][Part {part}][{dataset}] Starting")
        start_time = time.perf_counter()

        result: Dict[str, Any] = {'day': day, 'part': part, 'dataset': dataset, 'title': puzzle.title}
        try:
            fallback = puzzle.sample_input if dataset == 'test' else None
            lines = self.loader.load_lines(day, dataset, fallback=fallback)
            answer = puzzle.solve(lines, part)
            result.update(answer.to_dict())
            if not answer.success:
                result['error'] = f"no path found ({answer.details.get('termination_reason')})"
        except (ParseError, PuzzleInputError) as e:
            logger.error(f"[Day {day}][Part {part}][{dataset}] {type(e).__name__}: {e}")
            result.update({'success': False, 'value': None, 'error': str(e)})

        result['total_time'] = time.perf_counter() - start_time
        logger.info(f"[Day {day}][Part {part}][{dataset}] Duration {result['total_time'] * 1000:.0f} ms")
        return result

    def run_all(self, day: int, parts: List[int], datasets: List[str]) -> List[Dict[str, Any]]:
        """Run every part against every dataset, parts outermost."""
        return [self.run(day, part, dataset) for part in parts for dataset in datasets]


def solve_command(args) -> int:
    """Handle solve command.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code
    """
    if args.day not in available_days():
        logger.error(f"No puzzle registered for day {args.day} (available: {available_days()})")
        return 1

    try:
        config_overrides = []
        if getattr(args, 'data_dir', None):
            config_overrides.append(f"solver.data_dir={args.data_dir}")
        if getattr(args, 'queue', None):
            config_overrides.append(f"search.queue={args.queue}")
        if getattr(args, 'config', None):
            config_overrides.append(args.config)

        solver = AocSolver(config_overrides)
        if not getattr(args, 'verbose', 0) and not getattr(args, 'quiet', False):
            configured = OmegaConf.select(solver.config, 'logging.level', default='WARNING')
            logging.getLogger().setLevel(resolve_log_level(0, False, configured))

        parts = list(PARTS) if args.part == 'all' else [int(args.part)]
        datasets = list(DATASETS) if args.dataset == 'all' else [args.dataset]
        results = solver.run_all(args.day, parts, datasets)

        if args.output:
            save_results(results, args.output)
            logger.info(f"Results saved to {args.output}")

        for result in results:
            print(format_answer(result))

        return 0 if all(result['success'] for result in results) else 1

    except ConfigValidationError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1


def list_command(args) -> int:
    """Handle list command."""
    for day in available_days():
        print(f"Day {day:2d}: {get_puzzle(day).title}")
    return 0


def config_command(args) -> int:
    """Handle config command.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code
    """
    overrides = [args.config] if getattr(args, 'config', None) else []

    if args.config_action == 'show':
        config = load_solver_config(overrides)
        print("Current Configuration:")
        print("=" * 50)
        print(OmegaConf.to_yaml(config, resolve=True))
        return 0

    if args.config_action == 'validate':
        try:
            config = load_solver_config(overrides)
            validate_config(config)
        except ConfigValidationError as e:
            print(f"Configuration validation failed: {e}")
            return 1
        print("Configuration is valid")
        return 0

    print("Unknown config action")
    return 1
