"""
Utilities package for charmff.

Terminal colors and logger configuration for the command line.
"""

from .colors import tcolors
from .logging import configure_logger

__all__ = ["tcolors", "configure_logger"]
