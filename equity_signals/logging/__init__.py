"""
Logging configuration and utilities for the equity signals engine.
"""
from .config import configure_logging, get_logger, get_signal_logger

__all__ = ["configure_logging", "get_logger", "get_signal_logger"]
