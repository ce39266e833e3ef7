"""
Intake Context

Responsibilities:
- Reads résumé documents (.docx trees, .docx/.pdf/.txt raw text)
- Parses free text into a ResumeRecord with line heuristics
- Parses the six-table document layout into a ResumeRecord

Owns: Document decoding, section detection, contact detection
Never: Lays out output or holds the session's current record
"""

from resumetab.contexts.intake.extractors import extract_text, read_document_tree
from resumetab.contexts.intake.table_parser import parse_resume_tables
from resumetab.contexts.intake.text_parser import parse_resume_text

__all__ = [
    "extract_text",
    "read_document_tree",
    "parse_resume_tables",
    "parse_resume_text",
]
