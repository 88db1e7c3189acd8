# Area: Shared
"""
Shared infrastructure used across the package.
"""

from .logging_config import setup_logging, log_rejected_action, JSONFormatter, TerminalFormatter

__all__ = [
    "setup_logging",
    "log_rejected_action",
    "JSONFormatter",
    "TerminalFormatter",
]
