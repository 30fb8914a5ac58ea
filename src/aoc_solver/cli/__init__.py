"""Command-line interface for aoc-solver.

This module provides CLI commands for running puzzle days against sample and
real input.
"""

from .main import main_cli
from .commands import AocSolver, solve_command, list_command, config_command
from .utils import setup_logging, save_results, format_duration

__all__ = [
    'main_cli',
    'AocSolver',
    'solve_command',
    'list_command',
    'config_command',
    'setup_logging',
    'save_results',
    'format_duration',
]
