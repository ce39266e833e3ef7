"""
Rendering Context

Responsibilities:
- Lays out a ResumeRecord as an ordered sequence of section blocks
- Encodes the block sequence as a borderless-table Word document
- Renders on-screen previews (native when available, markdown otherwise)

Owns: Layout rules, document style, previews
Never: Parses documents or changes record content
"""

from resumetab.contexts.rendering.document_style import load_document_style
from resumetab.contexts.rendering.docx_writer import write_docx
from resumetab.contexts.rendering.layout_blocks import (
    CellParagraph,
    Grid,
    GridCell,
    GridRow,
    SectionHeader,
    Spacer,
)
from resumetab.contexts.rendering.layout_renderer import render_layout
from resumetab.contexts.rendering.native_preview import (
    LibreOfficePreviewer,
    NativePreviewer,
    Preview,
    preview_record,
)
from resumetab.contexts.rendering.preview_renderer import render_preview

__all__ = [
    # Blocks
    "SectionHeader",
    "Grid",
    "GridRow",
    "GridCell",
    "CellParagraph",
    "Spacer",
    # Layout and encoding
    "render_layout",
    "write_docx",
    "load_document_style",
    # Previews
    "render_preview",
    "preview_record",
    "Preview",
    "NativePreviewer",
    "LibreOfficePreviewer",
]
