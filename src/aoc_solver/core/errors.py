"""Exception types raised by the solver."""


class ParseError(ValueError):
    """Raised when puzzle input text is malformed."""
    pass


class UnreachableError(Exception):
    """Raised when a caller requires a path that does not exist."""
    pass


class PuzzleInputError(FileNotFoundError):
    """Raised when a puzzle data file cannot be found."""
    pass
