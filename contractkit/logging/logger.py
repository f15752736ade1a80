# contractkit/logging/logger.py
"""
Logger access for contractkit modules.

All modules use:
    from contractkit.logging.logger import get_logger
    logger = get_logger(__name__)

contractkit is a library and never installs handlers or sets levels. Records
go to the "contractkit.*" logger namespace; the host application decides
whether and where they are shown.
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """
    Return the logger for a contractkit module.

    Example:
        logger = get_logger(__name__)
    """
    return logging.getLogger(name)
