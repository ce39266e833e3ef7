"""
Session context logger.

Provides logging interface for session context with automatic [session] prefix.
All session modules should import from this module, not from utils.logger directly.
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from loguru import logger

from resumetab.utils.logger import setup_logger as _setup_logger

load_dotenv()

CONTEXT_PREFIX = "[session]"


def setup_session_logger(log_dir: Path, input_path: Optional[Path] = None) -> Path:
    """
    Setup logger for a conversion session.

    Configures loguru with provenance tracking and session-specific context.

    Args:
        log_dir: Directory for this session's log
        input_path: File being converted (recorded in the provenance header)

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="session",
        log_dir=log_dir,
        extra_provenance={
            "Input": input_path,
            "Style override": os.getenv("RESUMETAB_STYLE_PATH") or "none",
        },
    )


# Wrapper functions with automatic [session] prefix


def _log_info(message: str) -> None:
    """Log info message with [session] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [session] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [session] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [session] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [session] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level session-specific logging helpers


def log_import_result(origin: str, record) -> None:
    """Log a successful import that replaced the session record."""
    if record.is_empty():
        _log_warning(f"Imported {origin} but found no resume content")
    else:
        _log_success(f"Imported {origin}")
    _log_debug(f"  {record.summary()}")


def log_import_failure(origin: str, error: Exception) -> None:
    """Log an aborted import; the previous record stays in place."""
    _log_error(f"Import of {origin} failed: {error}")
    _log_debug("  Previous record kept")
