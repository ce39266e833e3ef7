"""
Shared loguru setup for conversion runs.

A run logs to two sinks: a per-run file that keeps everything, and stdout for
INFO and above. Every run starts with a provenance block naming the command,
the package version and the run's inputs.

Contexts do not call this directly; they wrap it in contexts/{context}/logger.py.
"""

import sys
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from loguru import logger

from resumetab import __version__

load_dotenv()

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"
RULE = "=" * 80


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: Optional[Dict[str, Any]] = None,
    console_level: str = "INFO",
) -> Path:
    """
    Replace loguru's default sink with a run log file plus console output.

    Args:
        context_name: Log file stem (e.g., "session" -> session.log)
        log_dir: Directory for this run, created if missing
        extra_provenance: Run inputs recorded in the provenance block
        console_level: Minimum level echoed to stdout

    Returns:
        Path to log file
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    logger.add(log_file, format=FILE_FORMAT, level="DEBUG", encoding="utf-8")
    logger.add(sys.stdout, format=CONSOLE_FORMAT, level=console_level, colorize=True)

    log_provenance(extra_provenance)
    return log_file


def log_provenance(extra_context: Optional[Dict[str, Any]] = None) -> None:
    """Log the command, package and Python versions, then any run inputs."""
    logger.info(RULE)
    logger.info(f"Command: {' '.join(sys.argv)}")
    logger.info(f"Working directory: {Path.cwd()}")
    logger.info(f"resumetab {__version__} on Python {sys.version.split()[0]}")

    for key, value in (extra_context or {}).items():
        logger.info(f"{key}: {value}")

    logger.info(RULE)
