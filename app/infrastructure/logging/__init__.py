"""Structured logging infrastructure.

Public API:
    - configure_logging(): Initialize logging for the application
    - get_module_logger(): Get a logger for the calling module
    - mask_sensitive_data(): Processor to redact sensitive fields

Example:
    from infrastructure.logging import get_module_logger

    logger = get_module_logger()
    logger.info("module_initialized")
"""

from infrastructure.logging.setup import configure_logging, get_module_logger
from infrastructure.logging.formatters import SENSITIVE_PATTERNS, mask_sensitive_data

__all__ = [
    "configure_logging",
    "get_module_logger",
    "mask_sensitive_data",
    "SENSITIVE_PATTERNS",
]
