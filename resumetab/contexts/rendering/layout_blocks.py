"""
Section-block data types.

The layout renderer describes a document as an ordered sequence of blocks; the
.docx writer (or any other encoder) turns those blocks into a concrete format.
Blocks are immutable and carry no format-specific objects.

Sizes are in points, spacing in twips (1/20 pt), widths in percent of the
text column.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

ALIGN_LEFT = "left"
ALIGN_CENTER = "center"
ALIGN_RIGHT = "right"
ALIGN_JUSTIFY = "justify"


@dataclass(frozen=True)
class CellParagraph:
    """
    One paragraph inside a grid cell.

    Attributes:
        text: Paragraph text ("" for an empty paragraph)
        bold: Bold run
        name_size: Use the style's name size (name.size) instead of the body size
        align: One of the ALIGN_* constants
        bullet: Render as a level-0 list bullet
        heading_font: Use the heading font instead of the body font
    """

    text: str
    bold: bool = False
    name_size: bool = False
    align: str = ALIGN_LEFT
    bullet: bool = False
    heading_font: bool = False


@dataclass(frozen=True)
class GridCell:
    """
    A table cell.

    Attributes:
        paragraphs: Cell content, at least one paragraph
        span: Number of grid columns this cell covers
        width: Width in percent of the text column
    """

    paragraphs: Tuple[CellParagraph, ...]
    span: int = 1
    width: Optional[int] = None

    @property
    def text(self) -> str:
        return "\n".join(paragraph.text for paragraph in self.paragraphs)


@dataclass(frozen=True)
class GridRow:
    cells: Tuple[GridCell, ...]


@dataclass(frozen=True)
class Grid:
    """
    A borderless table.

    Attributes:
        rows: Table rows; each row's spans sum to len(column_widths)
        column_widths: Column widths in percent of the text column
    """

    rows: Tuple[GridRow, ...]
    column_widths: Tuple[int, ...] = field(default=(100,))


@dataclass(frozen=True)
class SectionHeader:
    """Centered bold section title in the heading font."""

    text: str


@dataclass(frozen=True)
class Spacer:
    """Vertical space, in twips."""

    after: int


Block = Union[SectionHeader, Grid, Spacer]
