"""
Document readers for the Intake context.

Two readers feed the parsers:
    read_document_tree(data) - .docx bytes -> root element of word/document.xml
    extract_text(data, suffix) - .docx/.pdf/.txt bytes -> plain text, one paragraph per line

Both raise InvalidDocumentError for byte streams that are not the claimed format.
"""

import io
import logging
import re
import warnings
import zipfile
from typing import Any

from lxml import etree

from resumetab.contexts.intake.logger import _log_debug
from resumetab.contexts.templating.exceptions import (
    InvalidDocumentError,
    MissingDependencyError,
)

# silence noisy PDF logging
logging.getLogger("pdfplumber").setLevel(logging.ERROR)
logging.getLogger("pdfminer").setLevel(logging.ERROR)
warnings.filterwarnings("ignore", category=UserWarning, module="pdfminer")

DOCUMENT_PART = "word/document.xml"
TEXT_SUFFIXES = {".txt", ".text", ".md"}

_CID_RE = re.compile(r"\(cid:\d+\)")

# No network access, no entity expansion for untrusted uploads
_XML_PARSER = etree.XMLParser(resolve_entities=False, no_network=True, huge_tree=False)


def read_document_tree(data: bytes) -> Any:
    """
    Decode .docx bytes into the document XML tree.

    Args:
        data: Raw .docx file contents

    Returns:
        lxml root element of word/document.xml

    Raises:
        InvalidDocumentError: If data is not a ZIP, lacks the document part, or holds bad XML
    """
    try:
        with zipfile.ZipFile(io.BytesIO(data)) as zf:
            document_xml = zf.read(DOCUMENT_PART)
    except zipfile.BadZipFile as e:
        raise InvalidDocumentError(f"Not a valid .docx file ({e})") from e
    except KeyError as e:
        raise InvalidDocumentError(f"Not a valid .docx file: missing {DOCUMENT_PART}") from e

    try:
        root = etree.fromstring(document_xml, parser=_XML_PARSER)
    except etree.XMLSyntaxError as e:
        raise InvalidDocumentError(f"Not a valid .docx file: malformed XML ({e})") from e

    _log_debug(f"Decoded {DOCUMENT_PART} ({len(document_xml)} bytes)")
    return root


def _docx_to_text(data: bytes) -> str:
    try:
        from docx import Document
        from docx.opc.exceptions import PackageNotFoundError
        from docx.oxml.ns import qn
        from docx.text.paragraph import Paragraph
    except ImportError as e:
        raise MissingDependencyError("python-docx", "reading .docx text") from e

    try:
        document = Document(io.BytesIO(data))
    except (PackageNotFoundError, zipfile.BadZipFile, KeyError, ValueError) as e:
        raise InvalidDocumentError(f"Not a valid .docx file ({e})") from e

    # Paragraphs in document order, including those inside table cells
    body = document.element.body
    paragraphs = [Paragraph(p, document) for p in body.iter(qn("w:p"))]
    return "\n".join(paragraph.text for paragraph in paragraphs)


def _pdf_to_text(data: bytes) -> str:
    try:
        import pdfplumber
    except ImportError as e:
        raise MissingDependencyError("pdfplumber", "reading .pdf text") from e

    try:
        with pdfplumber.open(io.BytesIO(data)) as pdf:
            pages = [page.extract_text() or "" for page in pdf.pages]
    except Exception as e:
        raise InvalidDocumentError(f"Not a valid .pdf file ({e})") from e
    return _CID_RE.sub("", "\n".join(pages))


def _bytes_to_text(data: bytes) -> str:
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise InvalidDocumentError(f"Text file is not UTF-8 ({e})") from e


def extract_text(data: bytes, suffix: str) -> str:
    """
    Extract plain text from document bytes.

    Args:
        data: Raw file contents
        suffix: File suffix selecting the reader (".docx", ".pdf", ".txt", ...)

    Returns:
        Text with paragraph breaks as newlines

    Raises:
        InvalidDocumentError: If data cannot be read as the given format
        MissingDependencyError: If the reader's library is not installed
        ValueError: If the suffix is not supported
    """
    suffix = suffix.lower()
    if suffix == ".docx":
        text = _docx_to_text(data)
    elif suffix == ".pdf":
        text = _pdf_to_text(data)
    elif suffix in TEXT_SUFFIXES:
        text = _bytes_to_text(data)
    else:
        raise ValueError(f"Unsupported document type: {suffix}")

    _log_debug(f"Extracted {len(text)} characters from {suffix} document")
    return text
