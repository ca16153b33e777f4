"""
Helper utilities for mdchunker.
"""

import re
import time


def sanitize_filename(filename: str, max_length: int = 200) -> str:
   """Sanitize a string to be safe for use as a filename or source id."""
   # Remove or replace dangerous characters
   sanitized = re.sub(r'[<>:"/\\|?*]', '_', filename)

   # Remove control characters
   sanitized = ''.join(char for char in sanitized if ord(char) >= 32)

   # Collapse multiple underscores/spaces
   sanitized = re.sub(r'[_\s]+', '_', sanitized)

   # Remove leading/trailing underscores and dots
   sanitized = sanitized.strip('_. ')

   if len(sanitized) > max_length:
       sanitized = sanitized[:max_length].rstrip('_. ')

   if not sanitized:
       sanitized = "unnamed"

   return sanitized


def format_duration(seconds: float) -> str:
   """Format duration in seconds as human-readable string."""
   if seconds < 1:
       return f"{seconds*1000:.0f}ms"
   elif seconds < 60:
       return f"{seconds:.1f}s"
   elif seconds < 3600:
       minutes = int(seconds // 60)
       secs = int(seconds % 60)
       return f"{minutes}m {secs}s"
   else:
       hours = int(seconds // 3600)
       minutes = int((seconds % 3600) // 60)
       return f"{hours}h {minutes}m"


class Timer:
   """Simple timer context manager."""

   def __init__(self, name: str = "Operation"):
       """Initialize timer with optional name."""
       self.name = name
       self.start_time = None
       self.end_time = None

   def __enter__(self):
       self.start_time = time.time()
       return self

   def __exit__(self, exc_type, exc_val, exc_tb):
       self.end_time = time.time()

   @property
   def elapsed(self) -> float:
       """Get elapsed time in seconds."""
       if self.start_time is None:
           return 0.0

       end = self.end_time if self.end_time else time.time()
       return end - self.start_time

   def __str__(self) -> str:
       return f"{self.name}: {format_duration(self.elapsed)}"
