"""
Intake context logger.

Provides logging interface for intake context with automatic [intake] prefix.
All intake modules should import from this module, not from loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[intake]"


def _log_info(message: str) -> None:
    """Log info message with [intake] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [intake] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [intake] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_parse_result(parser_name: str, record) -> None:
    """
    Log the outcome of a parser run.

    Args:
        parser_name: "text" or "table"
        record: ResumeRecord produced by the parser
    """
    if record.is_empty():
        _log_warning(f"{parser_name} parser found no resume content")
    else:
        _log_info(f"{parser_name} parser produced record ({record.summary()})")
