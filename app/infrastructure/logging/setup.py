"""structlog configuration for the resolver.

Usage:
    from infrastructure.logging import get_module_logger

    logger = get_module_logger()
    logger.info("allowlist_resolved", resolved=3)

Configuration runs once at import time from ``settings``; call
configure_logging() again to override the level or renderer.
"""

import inspect
import logging
import sys
from typing import List, Optional

import structlog
from structlog.stdlib import BoundLogger
from structlog.typing import Processor

from infrastructure.configuration import settings
from infrastructure.logging.formatters import mask_sensitive_data

# Above CRITICAL, so nothing is emitted
SILENT_LEVEL = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    return "pytest" in sys.modules


def _build_processors(json_output: bool) -> List[Processor]:
    processors: List[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        mask_sensitive_data(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog on top of the stdlib logging module.

    Under pytest the chain is kept minimal and every record is dropped.

    Args:
        log_level: Level name; settings.LOG_LEVEL when omitted.
        is_production: JSON output when true, console output otherwise;
            settings.is_production when omitted.

    Returns:
        A root structlog logger.
    """
    if _is_test_environment():
        processors: List[Processor] = [
            structlog.stdlib.add_log_level,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ]
        level = SILENT_LEVEL
        logging.root.setLevel(SILENT_LEVEL)
    else:
        json_output = (
            settings.is_production if is_production is None else is_production
        )
        processors = _build_processors(json_output)
        level_name = (log_level or settings.LOG_LEVEL).upper()
        level = getattr(logging, level_name, logging.INFO)

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(
        format="%(message)s", level=level, force=_is_test_environment()
    )
    return structlog.stdlib.get_logger()


logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Logger bound to the calling module.

    Binds ``component`` (last dotted segment) and ``module_path`` (full
    module name), e.g. ``strategies`` / ``modules.allowlist.strategies``.
    """
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    module = inspect.getmodule(caller) if caller is not None else None
    if module is None:
        return logger.bind(component="unknown")

    module_name = module.__name__
    return logger.bind(
        component=module_name.rsplit(".", 1)[-1], module_path=module_name
    )
