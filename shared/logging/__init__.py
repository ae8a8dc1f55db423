"""Structured logging module using structlog."""

from .structured_logger import (
    bind_context,
    clear_context,
    configure_logging,
    unbind_context,
)

__all__ = [
    "bind_context",
    "clear_context",
    "configure_logging",
    "unbind_context",
]
