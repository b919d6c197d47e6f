"""Utility functions and helpers."""

from .logger import get_logger, setup_logger, set_level

__all__ = ['get_logger', 'setup_logger', 'set_level']
