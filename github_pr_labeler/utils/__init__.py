"""Utility modules for shared functionality."""

from .github import split_repository_in_configuration
from .log_config import configure_logging

__all__ = [
    "configure_logging",
    "split_repository_in_configuration",
]
