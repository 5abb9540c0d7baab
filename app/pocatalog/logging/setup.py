"""Structlog configuration for pocatalog.

Console rendering in development, JSON in production, and nothing at all
while pytest is running.

Usage:
    from pocatalog.logging import get_module_logger

    logger = get_module_logger()
    logger.info("catalog_loaded", locale="fr-FR", key_count=120)
"""

import inspect
import logging
import sys
from typing import List, Optional

import structlog
from structlog.stdlib import BoundLogger

from pocatalog.configuration import settings

SILENT = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    return "pytest" in sys.modules


def _processors(prod_mode: bool) -> List:
    renderer = (
        structlog.processors.JSONRenderer()
        if prod_mode
        else structlog.dev.ConsoleRenderer()
    )
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        renderer,
    ]


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog over the standard library logger.

    Args:
        log_level: Level name; defaults to ``settings.LOG_LEVEL``.
        is_production: JSON output when true; defaults to
            ``settings.is_production``.

    Returns:
        The root pocatalog logger.
    """
    if _is_test_environment():
        processors = [
            structlog.stdlib.add_log_level,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ]
        logging.basicConfig(format="%(message)s", level=SILENT, force=True)
    else:
        prod_mode = settings.is_production if is_production is None else is_production
        processors = _processors(prod_mode)
        level_name = (log_level or settings.LOG_LEVEL).upper()
        logging.basicConfig(
            format="%(message)s", level=getattr(logging, level_name, logging.INFO)
        )

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    return structlog.stdlib.get_logger()


logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Logger bound with the calling module's ``component`` and ``module_path``.

    Example:
        # In pocatalog/po/parser.py
        logger = get_module_logger()
        # context: {"component": "parser", "module_path": "pocatalog.po.parser"}
    """
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    module = inspect.getmodule(caller) if caller is not None else None
    if module is None:
        return logger.bind(component="unknown")
    return logger.bind(
        component=module.__name__.rsplit(".", 1)[-1],
        module_path=module.__name__,
    )
