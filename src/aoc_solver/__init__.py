"""Daily puzzle solvers built on a shared best-first search engine."""

__version__ = "0.1.0"
