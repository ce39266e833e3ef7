"""
Namespace-agnostic tree walking for word-processor XML.

Works on any ElementTree-compatible element (lxml.etree or xml.etree) and
matches tags by local name only, so "w:tbl", "{http://...}tbl" and "tbl"
are all the same table tag.
"""

from typing import Any, List, Optional

# WordprocessingML local names used by the table parser
TABLE = "tbl"
ROW = "tr"
CELL = "tc"
PARAGRAPH = "p"
TEXT_RUN = "t"


def local_name(element: Any) -> Optional[str]:
    """
    Local part of an element's tag.

    Comments and processing instructions (whose tag is not a string) have no
    local name.

    Examples:
        >>> from xml.etree.ElementTree import Element
        >>> local_name(Element("{http://schemas.openxmlformats.org/wordprocessingml/2006/main}tbl"))
        'tbl'
        >>> local_name(Element("w:p"))
        'p'
    """
    tag = getattr(element, "tag", None)
    if not isinstance(tag, str):
        return None
    if "}" in tag:
        tag = tag.rsplit("}", 1)[1]
    return tag.rsplit(":", 1)[-1]


def find_descendants(node: Any, name: str) -> List[Any]:
    """
    All descendants of node with the given local name, in document order.

    The node itself is never included; nested matches are (a table inside a
    cell is returned along with its parent table).

    Args:
        node: Element to search below
        name: Local tag name (e.g., "tbl", "tr", "tc", "p", "t")

    Returns:
        List of matching elements
    """
    if node is None:
        return []
    return [
        element
        for element in node.iter()
        if element is not node and local_name(element) == name
    ]


def node_text(node: Any) -> str:
    """
    Concatenated text of every text run below node, stripped.

    Args:
        node: Cell, paragraph or any other element

    Returns:
        Joined text ("" when there are no runs)
    """
    return "".join(run.text or "" for run in find_descendants(node, TEXT_RUN)).strip()


def paragraph_texts(node: Any) -> List[str]:
    """
    Non-empty text of each paragraph below node, in order.

    Args:
        node: Usually a table cell

    Returns:
        List of paragraph strings with empty paragraphs dropped
    """
    texts = (node_text(paragraph) for paragraph in find_descendants(node, PARAGRAPH))
    return [text for text in texts if text]


def table_rows(table: Any) -> List[List[Any]]:
    """
    Rows of a table as lists of cell elements.

    Args:
        table: Table element

    Returns:
        One list of cells per row
    """
    return [find_descendants(row, CELL) for row in find_descendants(table, ROW)]
