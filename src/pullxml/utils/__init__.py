"""Utility modules for pullxml.

Provides:
- logger: get_logger for logging
"""

from pullxml.utils.logger import get_logger

__all__ = ["get_logger"]
