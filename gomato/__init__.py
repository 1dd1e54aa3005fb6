"""A terminal Pomodoro timer with a persistent task list."""

__version__ = "0.1.0"
__all__ = ["__version__"]