"""
Utilities module for mdchunker.
"""

from .logging import get_logger, setup_logging, LogCapture, log_performance
from .helpers import sanitize_filename, format_duration, Timer

__all__ = [
   "get_logger",
   "setup_logging",
   "LogCapture",
   "log_performance",
   "sanitize_filename",
   "format_duration",
   "Timer"
]
