"""
Layout Renderer

Turns a ResumeRecord into the fixed section-block layout of the exported
document. Pure function of the record: same record, same blocks.

Section order (empty sections omitted, contact always present):
    contact       2x2 grid: name | phone, location | email
    objective     header + one justified cell
    skills        header + 2-column grid, items paired row by row
    certificates  header + 2-column grid, bulleted items
    education     header + one 70/30 grid per entry (+ spanning details row)
    experience    header + one 40/30/30 grid per entry (+ spanning responsibilities row)
"""

from typing import List, Optional, Sequence

from resumetab.contexts.rendering.layout_blocks import (
    ALIGN_CENTER,
    ALIGN_JUSTIFY,
    ALIGN_RIGHT,
    Block,
    CellParagraph,
    Grid,
    GridCell,
    GridRow,
    SectionHeader,
    Spacer,
)
from resumetab.contexts.rendering.logger import log_layout_result
from resumetab.contexts.templating.resume_record import (
    ContactInfo,
    EducationEntry,
    ExperienceEntry,
    ResumeRecord,
)

# Section titles as printed in the document
OBJECTIVE_HEADER = "Objective"
SKILLS_HEADER = "Skills and Qualifications"
CERTIFICATES_HEADER = "Certificates"
EDUCATION_HEADER = "Education and Training"
EXPERIENCE_HEADER = "Career History"

# Placeholders for missing identifying fields
NAME_PLACEHOLDER = "Your Name"
COMPANY_PLACEHOLDER = "Company Name"
TITLE_PLACEHOLDER = "Job Title"

# Column widths in percent
CONTACT_WIDTHS = (50, 50)
PAIRED_WIDTHS = (50, 50)
EDUCATION_WIDTHS = (70, 30)
EXPERIENCE_WIDTHS = (40, 30, 30)

# Spacing in twips
SECTION_SPACING = 200
EDUCATION_ENTRY_SPACING = 100


def _cell(*paragraphs: CellParagraph, width: Optional[int] = None, span: int = 1) -> GridCell:
    return GridCell(paragraphs=tuple(paragraphs), span=span, width=width)


def _row(*cells: GridCell) -> GridRow:
    return GridRow(cells=tuple(cells))


def pair_items(items: Sequence[str]) -> List[tuple]:
    """
    Pair consecutive items into two-column rows.

    Example:
        >>> pair_items(["A", "B", "C"])
        [('A', 'B'), ('C', '')]
    """
    return [
        (items[i], items[i + 1] if i + 1 < len(items) else "")
        for i in range(0, len(items), 2)
    ]


def contact_blocks(contact: ContactInfo) -> List[Block]:
    name_line = CellParagraph(
        contact.name or NAME_PLACEHOLDER, bold=True, name_size=True, heading_font=True
    )
    phone_line = CellParagraph(
        contact.phone or "", bold=True, name_size=True, align=ALIGN_RIGHT, heading_font=True
    )
    location_line = CellParagraph(contact.location or "")
    email_line = CellParagraph(contact.email or "", align=ALIGN_RIGHT)

    grid = Grid(
        rows=(
            _row(_cell(name_line, width=50), _cell(phone_line, width=50)),
            _row(_cell(location_line, width=50), _cell(email_line, width=50)),
        ),
        column_widths=CONTACT_WIDTHS,
    )
    return [grid, Spacer(SECTION_SPACING)]


def objective_blocks(objective: str) -> List[Block]:
    grid = Grid(
        rows=(_row(_cell(CellParagraph(objective, align=ALIGN_JUSTIFY), width=100)),),
        column_widths=(100,),
    )
    return [SectionHeader(OBJECTIVE_HEADER), grid, Spacer(SECTION_SPACING)]


def paired_blocks(header: str, items: Sequence[str], bullet: bool = False) -> List[Block]:
    """
    Header plus a 2-column grid holding items pairwise.

    A blank partner cell gets an empty, unbulleted paragraph so no stray bullet
    is rendered.
    """
    rows = []
    for left, right in pair_items(items):
        rows.append(
            _row(
                _cell(CellParagraph(left, bullet=bullet), width=50),
                _cell(CellParagraph(right, bullet=bullet and bool(right)), width=50),
            )
        )
    grid = Grid(rows=tuple(rows), column_widths=PAIRED_WIDTHS)
    return [SectionHeader(header), grid, Spacer(SECTION_SPACING)]


def education_entry_grid(entry: EducationEntry) -> Grid:
    heading = [CellParagraph(entry.institution or "", bold=True)]
    if entry.degree:
        heading.append(CellParagraph(entry.degree, bold=True))

    rows = [
        _row(
            _cell(*heading, width=EDUCATION_WIDTHS[0]),
            _cell(
                CellParagraph(entry.dates or "", bold=True, align=ALIGN_RIGHT),
                width=EDUCATION_WIDTHS[1],
            ),
        )
    ]
    if entry.details:
        details = [CellParagraph(detail) for detail in entry.details]
        rows.append(_row(_cell(*details, width=100, span=len(EDUCATION_WIDTHS))))

    return Grid(rows=tuple(rows), column_widths=EDUCATION_WIDTHS)


def experience_entry_grid(entry: ExperienceEntry) -> Grid:
    rows = [
        _row(
            _cell(
                CellParagraph(entry.company or COMPANY_PLACEHOLDER, bold=True),
                width=EXPERIENCE_WIDTHS[0],
            ),
            _cell(
                CellParagraph(entry.title or TITLE_PLACEHOLDER, bold=True, align=ALIGN_CENTER),
                width=EXPERIENCE_WIDTHS[1],
            ),
            _cell(
                CellParagraph(entry.dates or "", bold=True, align=ALIGN_RIGHT),
                width=EXPERIENCE_WIDTHS[2],
            ),
        )
    ]
    if entry.responsibilities:
        bullets = [
            CellParagraph(item, align=ALIGN_JUSTIFY, bullet=True)
            for item in entry.responsibilities
        ]
        rows.append(_row(_cell(*bullets, width=100, span=len(EXPERIENCE_WIDTHS))))

    return Grid(rows=tuple(rows), column_widths=EXPERIENCE_WIDTHS)


def render_layout(record: ResumeRecord) -> List[Block]:
    """
    Lay out a record as an ordered block sequence.

    Args:
        record: Record to lay out

    Returns:
        Blocks in document order; every section and entry grid is followed
        by a Spacer

    Example:
        >>> blocks = render_layout(ResumeRecord())
        >>> blocks[0].rows[0].cells[0].text
        'Your Name'
    """
    blocks: List[Block] = []
    blocks.extend(contact_blocks(record.contact))

    if record.objective:
        blocks.extend(objective_blocks(record.objective))

    if record.skills:
        blocks.extend(paired_blocks(SKILLS_HEADER, record.skills))

    if record.certificates:
        blocks.extend(paired_blocks(CERTIFICATES_HEADER, record.certificates, bullet=True))

    if record.education:
        blocks.append(SectionHeader(EDUCATION_HEADER))
        for entry in record.education:
            blocks.append(education_entry_grid(entry))
            blocks.append(Spacer(EDUCATION_ENTRY_SPACING))

    if record.experience:
        blocks.append(SectionHeader(EXPERIENCE_HEADER))
        for entry in record.experience:
            blocks.append(experience_entry_grid(entry))
            blocks.append(Spacer(SECTION_SPACING))

    log_layout_result(blocks)
    return blocks
