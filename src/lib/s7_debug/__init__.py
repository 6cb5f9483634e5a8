"""Module s7_debug : logs structurés des résolutions."""

from .logger import DebugLogger, SolveLog, log_solve

__all__ = [
    "DebugLogger",
    "SolveLog",
    "log_solve",
]
