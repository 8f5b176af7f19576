"""
Observability helpers for the itinerary form.

Usage
-----
>>> from itinerary_form.monitoring import configure_logging, get_logger
>>> configure_logging()
>>> logger = get_logger(__name__)
"""

from itinerary_form.monitoring.logging import (
    configure_logging,
    get_logger,
    redact_pii,
    sanitize_log_message,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "redact_pii",
    "sanitize_log_message",
]
