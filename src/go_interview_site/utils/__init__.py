"""Utility modules for logging."""

from go_interview_site.utils.logging import get_logger, log_performance, setup_logging

__all__ = [
    "get_logger",
    "log_performance",
    "setup_logging",
]
