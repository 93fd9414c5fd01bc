"""
Logging configuration and utilities for the colour contrast package.
"""
from .config import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
