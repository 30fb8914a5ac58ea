"""Main CLI entry point for aoc-solver."""

import sys
import argparse
import logging
from typing import List, Optional

from . import commands
from .utils import resolve_log_level, setup_logging


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog='aoc-solver',
        description='Daily puzzle solvers built on a shared best-first search engine',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  aoc-solver solve 15                           # Both parts on the sample input
  aoc-solver solve 15 --part 2 --dataset real   # Part 2 on data/day_15.txt
  aoc-solver solve 23 --queue sorted            # Use the sorted-list frontier
  aoc-solver list                               # Show registered days
  aoc-solver config show                        # Show current configuration
        """
    )

    # Global options
    parser.add_argument(
        '--config', '-c',
        type=str,
        help='Configuration override (e.g., search.max_nodes_expanded=100000)'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='count',
        default=0,
        help='Increase verbosity (use -v or -vv)'
    )

    parser.add_argument(
        '--quiet', '-q',
        action='store_true',
        help='Suppress all output except results'
    )

    parser.add_argument(
        '--output', '-o',
        type=str,
        help='Output file for results (JSON format)'
    )

    subparsers = parser.add_subparsers(
        dest='command',
        help='Available commands',
        metavar='COMMAND'
    )

    # Solve command
    solve_parser = subparsers.add_parser(
        'solve',
        help='Solve a puzzle day',
        description='Solve one or both parts of a puzzle day'
    )

    solve_parser.add_argument(
        'day',
        type=int,
        help='Puzzle day number'
    )

    solve_parser.add_argument(
        '--part', '-p',
        choices=['1', '2', 'all'],
        default='all',
        help='Part to solve (default: all)'
    )

    solve_parser.add_argument(
        '--dataset', '-d',
        choices=['test', 'real', 'all'],
        default='test',
        help='Input dataset: sample or real data (default: test)'
    )

    solve_parser.add_argument(
        '--data-dir',
        type=str,
        help='Directory containing day_<n>.txt input files'
    )

    solve_parser.add_argument(
        '--queue',
        choices=['heap', 'sorted'],
        help='Frontier priority queue implementation'
    )

    # List command
    subparsers.add_parser(
        'list',
        help='List registered puzzle days'
    )

    # Config command
    config_parser = subparsers.add_parser(
        'config',
        help='Configuration management',
        description='Inspect solver configuration'
    )

    config_subparsers = config_parser.add_subparsers(
        dest='config_action',
        help='Configuration actions'
    )

    config_subparsers.add_parser(
        'show',
        help='Show current configuration'
    )

    config_subparsers.add_parser(
        'validate',
        help='Validate configuration'
    )

    return parser


def main_cli(args: Optional[List[str]] = None) -> int:
    """Main CLI entry point.

    Args:
        args: Command line arguments (uses sys.argv if None)

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    setup_logging(resolve_log_level(parsed_args.verbose, parsed_args.quiet))
    logger = logging.getLogger(__name__)

    try:
        if not parsed_args.command:
            parser.print_help()
            return 1

        if parsed_args.command == 'solve':
            return commands.solve_command(parsed_args)
        if parsed_args.command == 'list':
            return commands.list_command(parsed_args)
        if parsed_args.command == 'config':
            return commands.config_command(parsed_args)

        logger.error(f"Unknown command: {parsed_args.command}")
        return 1

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130  # Standard exit code for SIGINT
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        return 1


def main() -> None:
    """Entry point for console script."""
    sys.exit(main_cli())


if __name__ == '__main__':
    main()
