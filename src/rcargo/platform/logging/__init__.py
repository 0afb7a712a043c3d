"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export the shared logger, setup helper, and Rich console handler.
Why: Provide a single canonical import path for every layer.
"""

from __future__ import annotations

from .config import logger, setup_logger
from .handlers import RcargoRichHandler

__all__ = [
    "RcargoRichHandler",
    "logger",
    "setup_logger",
]
