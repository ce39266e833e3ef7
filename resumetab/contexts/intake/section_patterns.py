"""
Pattern matching for résumé text parsing.

This module provides section header aliases, contact detectors and line
classifiers used by the text heuristic parser.

Pattern classes follow the project convention:
- Dataclasses with frozen=True for immutability
- Class-level constants for patterns
- Helper functions that use these patterns
"""

import re
from dataclasses import dataclass
from typing import List, Optional

# =============================================================================
# SECTION HEADERS
# =============================================================================

# Checked in this order; the first section with a matching alias wins
SECTION_HEADER_ALIASES = {
    "objective": ("objective", "summary", "professional summary"),
    "skills": ("skills", "technical skills", "core competencies"),
    "certificates": ("certificates", "certifications", "licenses"),
    "education": ("education", "education and training"),
    "experience": ("experience", "work experience", "career history", "employment history"),
}


def match_section_header(line: str) -> Optional[str]:
    """
    Identify which section a header line opens.

    A line is a header when its lowercase form equals or starts with one of the
    section's aliases, so "SKILLS" and "Skills & Tools" both open the skills section.

    Args:
        line: Stripped text line

    Returns:
        Section name, or None if the line is not a header

    Examples:
        >>> match_section_header("WORK EXPERIENCE")
        'experience'
        >>> match_section_header("Acme Corp") is None
        True
    """
    lower = line.lower()
    for section, aliases in SECTION_HEADER_ALIASES.items():
        if any(lower == alias or lower.startswith(alias) for alias in aliases):
            return section
    return None


# =============================================================================
# CONTACT DETECTORS
# =============================================================================


@dataclass(frozen=True)
class ContactPatterns:
    """
    Regex patterns for contact fields in the résumé header area.

    Only the first CONTACT_SCAN_LINES lines are searched.
    """

    # local@domain.tld
    EMAIL: str = r"([a-zA-Z0-9._-]+@[a-zA-Z0-9._-]+\.[a-zA-Z0-9_-]+)"

    # 3-3-4 digit grouping: (555) 123-4567, 555.123.4567, 5551234567
    PHONE: str = r"(\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4})"

    # "City, ST" or "City, Region"
    LOCATION: str = r"([A-Z][a-z]+,\s*[A-Z]{2}|[A-Z][a-z]+,\s*[A-Z][a-z]+)"

    # Profile URLs, with or without scheme
    LINKEDIN: str = r"((?:https?://)?(?:[a-z]{2,3}\.)?linkedin\.com/[^\s|,;]+)"
    GITHUB: str = r"((?:https?://)?(?:www\.)?github\.com/[^\s|,;]+)"


CONTACT_SCAN_LINES = 10


def find_contact_field(line: str, pattern: str, flags: int = 0) -> Optional[str]:
    """Return the first capture of pattern in line, or None."""
    match = re.search(pattern, line, flags)
    return match.group(1) if match else None


# =============================================================================
# LINE CLASSIFIERS
# =============================================================================


@dataclass(frozen=True)
class LinePatterns:
    """Regex patterns for classifying content lines within sections."""

    # Standalone 4-digit number (a year, in practice)
    YEAR: str = r"(?<!\d)\d{4}(?!\d)"

    # Skill separators: bullet, comma, pipe
    SKILL_DELIMITERS: str = r"[•,|]"

    # Leading bullet or hyphen plus optional whitespace
    BULLET_PREFIX: str = r"^[•\-]\s*"


BULLET_MARKS = ("•", "-")
EN_DASH = "–"

# Lines longer than this are treated as a new institution/company name
NEW_ENTRY_MIN_LENGTH = 20


def has_year(line: str) -> bool:
    """True if the line contains a 4-digit year token."""
    return re.search(LinePatterns.YEAR, line) is not None


def is_bullet(line: str) -> bool:
    """True if the line starts with a bullet mark or hyphen."""
    return line.startswith(BULLET_MARKS)


def strip_bullet(line: str) -> str:
    """
    Remove a leading bullet/hyphen prefix.

    Examples:
        >>> strip_bullet("• Led backend team")
        'Led backend team'
        >>> strip_bullet("AWS Certified")
        'AWS Certified'
    """
    return re.sub(LinePatterns.BULLET_PREFIX, "", line)


def is_date_range(line: str) -> bool:
    """
    True if the line looks like an employment date range.

    A date range has a 4-digit year and a dash (en dash or hyphen).

    Examples:
        >>> is_date_range("2019 - 2022")
        True
        >>> is_date_range("Jan 2019 – Present")
        True
        >>> is_date_range("Graduated 2019")
        False
    """
    return has_year(line) and (EN_DASH in line or "-" in line)


def split_skills(line: str) -> List[str]:
    """
    Split a skills line on bullets, commas and pipes.

    Examples:
        >>> split_skills("Python, SQL | Docker • Kubernetes")
        ['Python', 'SQL', 'Docker', 'Kubernetes']
    """
    pieces = re.split(LinePatterns.SKILL_DELIMITERS, line)
    return [piece.strip() for piece in pieces if piece.strip()]
