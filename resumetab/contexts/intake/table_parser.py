"""
Table-layout résumé parsing for the Intake context.

Converts the table tree of a word-processor résumé (the layout written by the
rendering context's template: six borderless tables) into a ResumeRecord.

Positional mapping:
    Table 0: contact grid      row 0 = name | phone, row 1 = location | email
    Table 1: objective         row 0, cell 0
    Table 2: skills            every paragraph of every cell
    Table 3: certificates      every cell's full text
    Table 4: education         entry rows (institution/degree | dates) + optional detail row
    Table 5: experience        entry rows (company | title | dates) + responsibilities row

Documents with fewer tables are not an error; the missing sections stay empty.
"""

from typing import Any, List, Optional

from resumetab.contexts.intake.document_tree import (
    TABLE,
    find_descendants,
    node_text,
    paragraph_texts,
    table_rows,
)
from resumetab.contexts.intake.logger import _log_debug, _log_warning, log_parse_result
from resumetab.contexts.templating.resume_record import (
    ContactInfo,
    EducationEntry,
    ExperienceEntry,
    ResumeRecord,
)

EXPECTED_TABLE_COUNT = 6

# Template placeholder row that is not an education detail
EDUCATION_PLACEHOLDER_MARKER = "educational institute"


def _optional(text: str) -> Optional[str]:
    return text or None


def parse_contact_table(table: Any) -> ContactInfo:
    """
    Parse the 2x2 contact grid.

    Each row is read independently; a row with fewer than two cells leaves its
    fields undetected.
    """
    contact = ContactInfo()
    rows = table_rows(table)

    if len(rows) > 0 and len(rows[0]) >= 2:
        contact.name = _optional(node_text(rows[0][0]))
        contact.phone = _optional(node_text(rows[0][1]))
    if len(rows) > 1 and len(rows[1]) >= 2:
        contact.location = _optional(node_text(rows[1][0]))
        contact.email = _optional(node_text(rows[1][1]))

    return contact


def parse_objective_table(table: Any) -> str:
    rows = table_rows(table)
    if rows and rows[0]:
        return node_text(rows[0][0])
    return ""


def parse_skills_table(table: Any) -> List[str]:
    """Skills in row-major order, one per non-empty paragraph."""
    skills = []
    for row in table_rows(table):
        for cell in row:
            skills.extend(paragraph_texts(cell))
    return skills


def parse_certificates_table(table: Any) -> List[str]:
    """Certificates in row-major order, one per non-empty cell."""
    certificates = []
    for row in table_rows(table):
        for cell in row:
            text = node_text(cell)
            if text:
                certificates.append(text)
    return certificates


def parse_education_table(table: Any) -> List[EducationEntry]:
    """
    Parse education entries with detail-row lookahead.

    A row with at least two cells starts an entry: the first cell's paragraphs
    are [institution, degree], the second cell holds the dates. A following row
    whose first cell has text (other than the template placeholder) is taken as
    the entry's single detail line and skipped.
    """
    rows = table_rows(table)
    entries = []

    i = 0
    while i < len(rows):
        cells = rows[i]
        if len(cells) >= 2:
            heading = paragraph_texts(cells[0])
            entry = EducationEntry(
                institution=heading[0] if len(heading) > 0 else "",
                degree=heading[1] if len(heading) > 1 else "",
                dates=node_text(cells[1]),
            )

            if i + 1 < len(rows) and rows[i + 1]:
                detail = node_text(rows[i + 1][0])
                if detail and EDUCATION_PLACEHOLDER_MARKER not in detail:
                    entry.details = [detail]
                    i += 1

            if entry.has_identity:
                entries.append(entry)
            else:
                _log_debug(f"Skipped education row {i} without institution or degree")
        i += 1

    return entries


def parse_experience_table(table: Any) -> List[ExperienceEntry]:
    """
    Parse experience entries with responsibilities-row lookahead.

    A row with at least three cells starts an entry (company | title | dates).
    The next row, if it has any cell, always belongs to the entry: its first
    cell's paragraphs are the responsibilities, one per paragraph.
    """
    rows = table_rows(table)
    entries = []

    i = 0
    while i < len(rows):
        cells = rows[i]
        if len(cells) >= 3:
            entry = ExperienceEntry(
                company=node_text(cells[0]),
                title=node_text(cells[1]),
                dates=node_text(cells[2]),
            )

            if i + 1 < len(rows) and rows[i + 1]:
                entry.responsibilities = paragraph_texts(rows[i + 1][0])
                i += 1

            if entry.has_identity:
                entries.append(entry)
            else:
                _log_debug(f"Skipped experience row {i} without company or title")
        i += 1

    return entries


def parse_resume_tables(root: Any) -> ResumeRecord:
    """
    Parse a word-processor document tree into a ResumeRecord.

    Args:
        root: Root element of the document XML (lxml or ElementTree)

    Returns:
        ResumeRecord; sections whose table is missing stay empty
    """
    tables = find_descendants(root, TABLE)
    _log_debug(f"Found {len(tables)} tables")
    if len(tables) < EXPECTED_TABLE_COUNT:
        _log_warning(f"Expected at least {EXPECTED_TABLE_COUNT} tables, found {len(tables)}")

    def table(index: int) -> Optional[Any]:
        return tables[index] if index < len(tables) else None

    record = ResumeRecord()
    if table(0) is not None:
        record.contact = parse_contact_table(table(0))
    if table(1) is not None:
        record.objective = parse_objective_table(table(1))
    if table(2) is not None:
        record.skills = parse_skills_table(table(2))
    if table(3) is not None:
        record.certificates = parse_certificates_table(table(3))
    if table(4) is not None:
        record.education = parse_education_table(table(4))
    if table(5) is not None:
        record.experience = parse_experience_table(table(5))

    log_parse_result("table", record)
    return record
