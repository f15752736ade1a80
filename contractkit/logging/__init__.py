# contractkit/logging/__init__.py
"""Logging helpers for contractkit."""

from contractkit.logging.logger import get_logger

__all__ = ["get_logger"]
