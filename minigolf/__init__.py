"""An endless top-down mini golf game with procedurally generated walled paths."""

__version__ = "0.1.0"