"""Core data models and errors."""

from .data_models import (
    Position, StateKey, FrontierNode, SearchStatistics, SearchResult, PuzzleAnswer
)
from .errors import ParseError, UnreachableError, PuzzleInputError

__all__ = [
    'Position',
    'StateKey',
    'FrontierNode',
    'SearchStatistics',
    'SearchResult',
    'PuzzleAnswer',
    'ParseError',
    'UnreachableError',
    'PuzzleInputError',
]
