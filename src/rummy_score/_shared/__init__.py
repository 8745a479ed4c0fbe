# Area: Shared
"""Shared infrastructure: logging setup."""

from .logging_config import setup_logging, log_persistence_failure

__all__ = ["setup_logging", "log_persistence_failure"]
