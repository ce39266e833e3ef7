"""
Free-text résumé parsing for the Intake context.

Converts loosely formatted, line-oriented text (e.g., text extracted from a PDF
or pasted from an email) into a ResumeRecord. This is a best-effort heuristic
pass, not an NLP system: it never raises, and the worst case is a record with
mostly empty fields.

Parsing happens in three steps:
1. The first line is the person's name
2. The header area (first 10 lines) is searched for email, phone, location and profile links
3. Every line is folded through a section state machine; header lines switch the
   active section and drop any entry still open, content lines are accumulated by
   that section's rules. Only the last section's open entry is kept at the end
"""

import re
from dataclasses import dataclass, field
from typing import List, Optional, Union

from resumetab.contexts.intake.logger import _log_debug, log_parse_result
from resumetab.contexts.intake.section_patterns import (
    CONTACT_SCAN_LINES,
    NEW_ENTRY_MIN_LENGTH,
    ContactPatterns,
    find_contact_field,
    has_year,
    is_bullet,
    is_date_range,
    match_section_header,
    split_skills,
    strip_bullet,
)
from resumetab.contexts.templating.resume_record import (
    ContactInfo,
    EducationEntry,
    ExperienceEntry,
    ResumeRecord,
)
from resumetab.utils.text_processing import clean_lines

Entry = Union[EducationEntry, ExperienceEntry]


@dataclass
class EntryFold:
    """
    Accumulator for a section that builds a list of entries.

    State is either "no open entry" (open_item is None) or "entry in progress".
    Transitions:
        start(item) - flush the entry in progress, then open item
        flush()     - move the entry in progress to entries if it has an identity
        discard()   - drop the entry in progress without keeping it
    """

    entries: List[Entry] = field(default_factory=list)
    open_item: Optional[Entry] = None

    def start(self, item: Entry) -> Entry:
        self.flush()
        self.open_item = item
        return item

    def flush(self) -> None:
        if self.open_item is not None:
            if self.open_item.has_identity:
                self.entries.append(self.open_item)
            else:
                _log_debug(f"Discarded entry without identity: {self.open_item}")
        self.open_item = None

    def discard(self) -> None:
        if self.open_item is not None:
            _log_debug(f"Discarded open entry at section switch: {self.open_item}")
        self.open_item = None


def detect_contact(lines: List[str]) -> ContactInfo:
    """
    Detect contact fields from the header area of a résumé.

    The first line is taken as the name. Each of the first 10 lines is then
    searched independently; when several lines match the same field, the later
    line wins. Location is not taken from a line that holds an email or phone
    number, since "Doe, Jane" style fragments there are rarely a city.

    Args:
        lines: Stripped, non-empty lines

    Returns:
        ContactInfo with detected fields (undetected fields stay None)
    """
    contact = ContactInfo(name=lines[0] if lines else None)

    for line in lines[:CONTACT_SCAN_LINES]:
        email = find_contact_field(line, ContactPatterns.EMAIL)
        if email:
            contact.email = email

        phone = find_contact_field(line, ContactPatterns.PHONE)
        if phone:
            contact.phone = phone

        location = find_contact_field(line, ContactPatterns.LOCATION)
        if location and "@" not in line and not phone:
            contact.location = location

        linkedin = find_contact_field(line, ContactPatterns.LINKEDIN, re.IGNORECASE)
        if linkedin:
            contact.linkedin = linkedin

        github = find_contact_field(line, ContactPatterns.GITHUB, re.IGNORECASE)
        if github:
            contact.github = github

    return contact


def _fold_education_line(fold: EntryFold, line: str) -> None:
    """
    Education rules.

    A line with a year, or any long line once an entry is open, starts a new
    entry named after the line. Otherwise the first short line is the degree
    and later ones are details. Short lines before any entry are dropped.
    """
    item = fold.open_item
    if has_year(line) or (item is not None and len(line) > NEW_ENTRY_MIN_LENGTH):
        fold.start(EducationEntry(institution=line))
    elif item is not None:
        if not item.degree:
            item.degree = line
        else:
            item.details.append(line)


def _fold_experience_line(fold: EntryFold, lines: List[str], index: int) -> None:
    """
    Experience rules.

    Date ranges anchor entries. A date range right after an entry's header lines
    (no dates, no bullets yet) completes that entry; otherwise it starts a new
    entry whose company is the preceding line. Bullets become responsibilities,
    the first plain line after the company is the title, and a long plain line
    after the title starts a new entry.
    """
    line = lines[index]
    item = fold.open_item

    if is_date_range(line):
        if item is not None and not item.dates and not item.responsibilities:
            item.dates = line
        else:
            previous = lines[index - 1] if index > 0 else ""
            if match_section_header(previous):
                previous = ""
            fold.start(ExperienceEntry(company=previous, dates=line))
    elif is_bullet(line):
        if item is not None:
            item.responsibilities.append(strip_bullet(line))
    elif item is not None and not item.title:
        item.title = line
    elif item is None or len(line) > NEW_ENTRY_MIN_LENGTH:
        fold.start(ExperienceEntry(company=line))


def parse_resume_text(text: str) -> ResumeRecord:
    """
    Parse free résumé text into a ResumeRecord.

    Section headers are recognized case-insensitively by alias (see
    section_patterns.SECTION_HEADER_ALIASES). Leaving a section closes its open
    entry; entries without an identifying field are dropped.

    Args:
        text: Raw text blob, paragraphs separated by newlines

    Returns:
        ResumeRecord (never raises; empty input gives an empty record)

    Example:
        >>> record = parse_resume_text("Jane Doe\\nSkills\\nPython, SQL")
        >>> record.contact.name, record.skills
        ('Jane Doe', ['Python', 'SQL'])
    """
    lines = clean_lines(text)
    if not lines:
        log_parse_result("text", ResumeRecord())
        return ResumeRecord()

    contact = detect_contact(lines)
    objective_parts: List[str] = []
    skills: List[str] = []
    certificates: List[str] = []
    education = EntryFold()
    experience = EntryFold()

    section = None
    for index, line in enumerate(lines):
        header = match_section_header(line)
        if header:
            _log_debug(f"Line {index}: '{line}' opens {header} section")
            # A header closes the section without keeping its open entry
            education.discard()
            experience.discard()
            section = header
            continue

        if section == "objective":
            objective_parts.append(line)
        elif section == "skills":
            skills.extend(split_skills(line))
        elif section == "certificates":
            certificates.append(strip_bullet(line))
        elif section == "education":
            _fold_education_line(education, line)
        elif section == "experience":
            _fold_experience_line(experience, lines, index)

    if section == "education":
        education.flush()
    elif section == "experience":
        experience.flush()

    record = ResumeRecord(
        contact=contact,
        objective=" ".join(objective_parts),
        skills=skills,
        certificates=certificates,
        education=education.entries,
        experience=experience.entries,
    )
    log_parse_result("text", record)
    return record
