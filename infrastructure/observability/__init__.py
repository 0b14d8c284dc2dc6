"""
Observability: structured logging and context management.

Provides:
- Contextual logging with the current spec source
- Log rotation and file management
"""

from infrastructure.observability.logging import (
    clear_log_context,
    configure_logging,
    get_log_context,
    set_log_context,
)

__all__ = [
    "configure_logging",
    "set_log_context",
    "get_log_context",
    "clear_log_context",
]
