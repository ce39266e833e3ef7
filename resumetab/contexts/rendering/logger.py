"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from loguru directly.
"""

from loguru import logger

from resumetab.contexts.rendering.layout_blocks import SectionHeader

CONTEXT_PREFIX = "[render]"


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_layout_result(blocks: list) -> None:
    """Log the block sequence produced by the layout renderer."""
    kinds = [type(block).__name__ for block in blocks]
    headers = [block.text for block in blocks if isinstance(block, SectionHeader)]
    _log_debug(f"Laid out {len(blocks)} blocks: {', '.join(kinds)}")
    _log_info(f"Layout sections: {', '.join(['Contact'] + headers)}")


def log_document_written(num_blocks: int, num_bytes: int) -> None:
    """Log a finished .docx encode."""
    _log_success(f"Wrote document: {num_blocks} blocks, {num_bytes} bytes")


def log_preview_fallback(previewer_name: str, reason: str) -> None:
    """Log that native preview was skipped or failed and the text preview is used instead."""
    _log_warning(f"{previewer_name} preview unavailable ({reason}); using text preview")
