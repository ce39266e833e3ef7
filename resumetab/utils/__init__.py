"""
Shared utilities for resumetab.

Common functionality used across contexts:
- Logger setup with provenance
- Text processing
- Timestamps
"""

from resumetab.utils.timestamp import now

__all__ = ["now"]
