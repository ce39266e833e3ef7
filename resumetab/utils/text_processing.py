"""
Text processing utilities shared across contexts.
"""

import re
from typing import List, Optional

_WHITESPACE_RUN = re.compile(r"\s+")


def clean_lines(text: str) -> List[str]:
    """
    Split text into stripped, non-empty lines.

    Handles \\r\\n and \\r line endings as well as \\n.

    Args:
        text: Raw text blob

    Returns:
        List of lines with surrounding whitespace removed, empty lines dropped

    Example:
        >>> clean_lines("  Jane Doe \\n\\n  Skills\\r\\n")
        ['Jane Doe', 'Skills']
    """
    if not text:
        return []
    return [line.strip() for line in text.splitlines() if line.strip()]


def underscore_whitespace(text: str) -> str:
    """
    Collapse every run of whitespace into a single underscore.

    Example:
        >>> underscore_whitespace("Jane  Q. Doe")
        'Jane_Q._Doe'
    """
    return _WHITESPACE_RUN.sub("_", text)


def export_stem(name: Optional[str], suffix: str, fallback: str) -> str:
    """
    Build an export filename stem from a person's name.

    Args:
        name: Contact name (may be None or blank)
        suffix: Suffix appended after the name (e.g., "_Resume")
        fallback: Stem used when no name is available (e.g., "Resume")

    Returns:
        Filename stem without extension

    Example:
        >>> export_stem("Jane Doe", "_Resume", "Resume")
        'Jane_Doe_Resume'
        >>> export_stem(None, "_resume", "resume")
        'resume'
    """
    if not name or not name.strip():
        return fallback
    return f"{underscore_whitespace(name.strip())}{suffix}"


def collapse_blank_lines(content: str, max_consecutive: int = 1) -> str:
    """
    Limit runs of blank lines to max_consecutive.

    Args:
        content: Text to normalize
        max_consecutive: Blank lines allowed in a row (0 removes them all)

    Returns:
        Content with long blank-line runs shortened

    Example:
        >>> collapse_blank_lines("a\\n\\n\\n\\nb")
        'a\\n\\nb'
    """
    if max_consecutive == 0:
        pattern = r"\n\s*\n(\s*\n)*"
    else:
        pattern = r"\n\s*\n(\s*\n)+"
    return re.sub(pattern, "\n" * (max_consecutive + 1), content)
