"""Daily puzzle adapters registered by day number."""

from typing import Dict, List, Type

from .base import Puzzle, PARTS
from .chiton import ChitonPuzzle
from .amphipod import AmphipodPuzzle

PUZZLES: Dict[int, Type[Puzzle]] = {
    ChitonPuzzle.day: ChitonPuzzle,
    AmphipodPuzzle.day: AmphipodPuzzle,
}

# Config section name under ``puzzles`` for each day
CONFIG_SECTIONS: Dict[int, str] = {
    ChitonPuzzle.day: 'chiton',
    AmphipodPuzzle.day: 'amphipod',
}


def get_puzzle(day: int) -> Type[Puzzle]:
    """Look up the puzzle class for a day.

    Raises:
        KeyError: If no puzzle is registered for the day
    """
    try:
        return PUZZLES[day]
    except KeyError:
        raise KeyError(f"No puzzle registered for day {day} "
                       f"(available: {available_days()})") from None


def available_days() -> List[int]:
    return sorted(PUZZLES)


__all__ = [
    'Puzzle',
    'PARTS',
    'ChitonPuzzle',
    'AmphipodPuzzle',
    'PUZZLES',
    'CONFIG_SECTIONS',
    'get_puzzle',
    'available_days',
]
