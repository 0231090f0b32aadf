"""Royal Chess: a standard chess rules engine with a thin game layer."""

__version__ = "0.1.0"
