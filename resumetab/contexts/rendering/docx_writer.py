"""
Tabular document encoder.

Writes the block sequence from the layout renderer as a Word (.docx) document
with python-docx. Every Grid becomes a borderless table sized in percent of the
text column; spanning cells are merged horizontally; bulleted paragraphs use the
template's list-bullet style so they stay real Word lists.
"""

from io import BytesIO
from typing import Iterable, Optional

from omegaconf import DictConfig

from resumetab.contexts.rendering.document_style import load_document_style
from resumetab.contexts.rendering.layout_blocks import (
    ALIGN_CENTER,
    ALIGN_JUSTIFY,
    ALIGN_LEFT,
    ALIGN_RIGHT,
    Block,
    CellParagraph,
    Grid,
    SectionHeader,
    Spacer,
)
from resumetab.contexts.rendering.logger import _log_debug, log_document_written
from resumetab.contexts.templating.exceptions import MissingDependencyError

try:
    from docx import Document
    from docx.enum.text import WD_ALIGN_PARAGRAPH
    from docx.oxml import OxmlElement
    from docx.oxml.ns import qn
    from docx.shared import Emu, Inches, Pt, Twips

    DOCX_AVAILABLE = True
except ImportError:
    DOCX_AVAILABLE = False

# Table border edges cleared on every grid
BORDER_EDGES = ("top", "left", "bottom", "right", "insideH", "insideV")


def _alignment(align: str):
    return {
        ALIGN_LEFT: WD_ALIGN_PARAGRAPH.LEFT,
        ALIGN_CENTER: WD_ALIGN_PARAGRAPH.CENTER,
        ALIGN_RIGHT: WD_ALIGN_PARAGRAPH.RIGHT,
        ALIGN_JUSTIFY: WD_ALIGN_PARAGRAPH.JUSTIFY,
    }[align]


def _apply_base_style(doc: "Document", style: DictConfig) -> None:
    """Page margins plus the Normal style's font and spacing."""
    margin = Inches(style.page.margin_inches)
    for section in doc.sections:
        section.top_margin = margin
        section.bottom_margin = margin
        section.left_margin = margin
        section.right_margin = margin

    normal = doc.styles["Normal"]
    normal.font.name = style.body.font
    normal.font.size = Pt(style.body.size)
    pf = normal.paragraph_format
    pf.line_spacing = style.body.line_spacing
    pf.space_before = Pt(0)
    pf.space_after = Pt(0)


def _text_width(doc: "Document"):
    section = doc.sections[0]
    return section.page_width - section.left_margin - section.right_margin


def _remove_borders(table) -> None:
    tbl_pr = table._tbl.tblPr
    borders = OxmlElement("w:tblBorders")
    for edge in BORDER_EDGES:
        element = OxmlElement(f"w:{edge}")
        element.set(qn("w:val"), "none")
        element.set(qn("w:sz"), "0")
        element.set(qn("w:space"), "0")
        borders.append(element)

    # tblBorders must directly follow tblW in the tblPr child sequence
    table_width = tbl_pr.find(qn("w:tblW"))
    if table_width is not None:
        table_width.addnext(borders)
    else:
        tbl_pr.insert(0, borders)


def _write_paragraph(paragraph, spec: CellParagraph, style: DictConfig) -> None:
    if spec.bullet:
        paragraph.style = style.list_style
    paragraph.alignment = _alignment(spec.align)

    run = paragraph.add_run(spec.text)
    run.bold = spec.bold
    if spec.name_size:
        run.font.size = Pt(style.name.size)
    if spec.heading_font:
        run.font.name = style.heading.font


def _write_cell(cell, paragraphs: Iterable[CellParagraph], style: DictConfig) -> None:
    # A fresh (or merged) cell always holds one empty paragraph; fill that first
    for index, spec in enumerate(paragraphs):
        paragraph = cell.paragraphs[0] if index == 0 else cell.add_paragraph()
        _write_paragraph(paragraph, spec, style)


def _write_grid(doc: "Document", grid: Grid, style: DictConfig) -> None:
    num_cols = len(grid.column_widths)
    table = doc.add_table(rows=len(grid.rows), cols=num_cols)
    table.autofit = False
    _remove_borders(table)

    text_width = _text_width(doc)
    for col, percent in zip(table.columns, grid.column_widths):
        col.width = Emu(int(text_width * percent / 100))

    for row_index, row in enumerate(grid.rows):
        col = 0
        for spec in row.cells:
            last = min(col + spec.span, num_cols) - 1
            cell = table.cell(row_index, col)
            if last > col:
                cell = cell.merge(table.cell(row_index, last))
            percent = spec.width or sum(grid.column_widths[col : last + 1])
            cell.width = Emu(int(text_width * percent / 100))
            _write_cell(cell, spec.paragraphs, style)
            col = last + 1


def _write_header(doc: "Document", header: SectionHeader, style: DictConfig) -> None:
    paragraph = doc.add_paragraph()
    paragraph.alignment = WD_ALIGN_PARAGRAPH.CENTER
    paragraph.paragraph_format.space_before = Twips(style.heading.space_before)
    paragraph.paragraph_format.space_after = Twips(style.heading.space_after)

    run = paragraph.add_run(header.text)
    run.bold = True
    run.font.name = style.heading.font
    run.font.size = Pt(style.heading.size)


def _write_spacer(doc: "Document", spacer: Spacer) -> None:
    paragraph = doc.add_paragraph()
    paragraph.paragraph_format.space_after = Twips(spacer.after)


def write_docx(blocks: Iterable[Block], style: Optional[DictConfig] = None) -> bytes:
    """
    Encode a block sequence as .docx bytes.

    Args:
        blocks: Output of render_layout()
        style: Document style (defaults to load_document_style())

    Returns:
        Complete .docx file contents

    Raises:
        MissingDependencyError: If python-docx is not installed
    """
    if not DOCX_AVAILABLE:
        raise MissingDependencyError("python-docx", "writing .docx documents")

    if style is None:
        style = load_document_style()

    doc = Document()
    _apply_base_style(doc, style)

    blocks = list(blocks)
    for block in blocks:
        if isinstance(block, Grid):
            _write_grid(doc, block, style)
        elif isinstance(block, SectionHeader):
            _write_header(doc, block, style)
        elif isinstance(block, Spacer):
            _write_spacer(doc, block)
        else:
            raise TypeError(f"Unknown block type: {type(block).__name__}")

    buffer = BytesIO()
    doc.save(buffer)
    data = buffer.getvalue()

    _log_debug(f"Text column width: {_text_width(doc)} EMU")
    log_document_written(len(blocks), len(data))
    return data
