"""Utility modules for Kara.

Provides:
- logger: get_logger for logging
"""

from kara.utils.logger import get_logger

__all__ = ["get_logger"]
