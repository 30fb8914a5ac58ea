"""CLI utility functions."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union


def setup_logging(level: int = logging.INFO,
                  format_string: Optional[str] = None) -> None:
    """Setup logging configuration.

    Args:
        level: Logging level
        format_string: Custom format string
    """
    if format_string is None:
        if level <= logging.DEBUG:
            format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_string = "%(levelname)s: %(message)s"

    logging.basicConfig(
        level=level,
        format=format_string,
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True
    )

    # Hydra is chatty at DEBUG
    logging.getLogger('hydra').setLevel(max(level, logging.INFO))


def resolve_log_level(verbose: int, quiet: bool, configured: str = "WARNING") -> int:
    """Map -v/-q flags onto a logging level, falling back to the configured level."""
    if quiet:
        return logging.ERROR
    if verbose == 1:
        return logging.INFO
    if verbose >= 2:
        return logging.DEBUG
    return logging.getLevelName(str(configured).upper())


def save_results(results: Union[Dict[str, Any], List[Dict[str, Any]]],
                 output_path: Union[str, Path],
                 pretty: bool = True) -> None:
    """Save results to JSON file.

    Args:
        results: Results dictionary or list of dictionaries
        output_path: Output file path
        pretty: Whether to pretty-print JSON
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    # Convert numpy scalars and tuples for JSON serialization
    def convert(obj):
        if hasattr(obj, 'tolist'):
            return obj.tolist()
        elif isinstance(obj, dict):
            return {str(k): convert(v) for k, v in obj.items()}
        elif isinstance(obj, (list, tuple)):
            return [convert(item) for item in obj]
        else:
            return obj

    with open(output_path, 'w') as f:
        if pretty:
            json.dump(convert(results), f, indent=2, sort_keys=True)
        else:
            json.dump(convert(results), f)


def format_duration(seconds: float) -> str:
    """Format duration in human-readable format.

    Args:
        seconds: Duration in seconds

    Returns:
        Formatted duration string
    """
    if seconds < 0.001:
        return f"{seconds*1000000:.1f}µs"
    elif seconds < 1:
        return f"{seconds*1000:.1f}ms"
    elif seconds < 60:
        return f"{seconds:.2f}s"
    else:
        minutes = int(seconds // 60)
        secs = seconds % 60
        return f"{minutes}m {secs:.1f}s"


def format_answer(result: Dict[str, Any]) -> str:
    """One-line summary of a puzzle run."""
    label = f"[Day {result['day']}][Part {result['part']}][{result['dataset']}]"
    duration = format_duration(result.get('total_time', 0.0))
    if not result.get('success'):
        return f"{label} FAILED: {result.get('error', 'no answer')} ({duration})"
    explored = result.get('details', {}).get('nodes_explored')
    suffix = f", {explored} nodes explored" if explored is not None else ""
    return f"{label} Result {result['value']} ({duration}{suffix})"
