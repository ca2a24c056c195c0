"""Session logging for case codec runs."""

from .logger import SessionLogger

__all__ = ["SessionLogger"]
