"""
Résumé Session

Holds the one résumé record a user is working on and runs the import and export
operations against it.

Every import builds a fresh record and publishes it only after parsing fully
succeeds, so a failed import leaves the previous record in place. Exports read
the published record and never modify it.

Import sources:
    text         free text -> text heuristic parser
    .txt / .pdf  raw text extraction -> text heuristic parser
    .docx        document tree -> table structure parser
    .yaml / .json serialized record

Export targets:
    .docx document, serialized record (YAML/JSON), preview (native or markdown)
"""

from pathlib import Path
from typing import Callable, Optional, Union

from omegaconf import DictConfig

from resumetab.contexts.intake.extractors import extract_text, read_document_tree
from resumetab.contexts.intake.table_parser import parse_resume_tables
from resumetab.contexts.intake.text_parser import parse_resume_text
from resumetab.contexts.rendering.docx_writer import write_docx
from resumetab.contexts.rendering.layout_renderer import render_layout
from resumetab.contexts.rendering.native_preview import NativePreviewer, Preview, preview_record
from resumetab.contexts.session.logger import (
    _log_debug,
    _log_info,
    log_import_failure,
    log_import_result,
)
from resumetab.contexts.templating.exceptions import (
    NoRecordLoadedError,
    ResumeConversionError,
)
from resumetab.contexts.templating.record_io import (
    RECORD_FORMATS,
    deserialize_record,
    document_filename,
    format_for_path,
    record_filename,
    save_record,
    serialize_record,
)
from resumetab.contexts.templating.resume_record import ResumeRecord

RECORD_SUFFIXES = {".yaml", ".yml", ".json"}
DOCUMENT_SUFFIX = ".docx"
TEXT_DOCUMENT_SUFFIXES = {".pdf", ".txt", ".text", ".md"}


class ResumeSession:
    """
    Import/export orchestration around a single current record.

    Args:
        previewer: Optional native preview collaborator (markdown preview otherwise)
        style: Document style for .docx export (defaults from load_document_style())

    Example:
        >>> session = ResumeSession()
        >>> session.import_text("Jane Doe\\nSkills\\nPython, SQL").skills
        ['Python', 'SQL']
        >>> session.document_filename()
        'Jane_Doe_Resume.docx'
    """

    def __init__(
        self,
        previewer: Optional[NativePreviewer] = None,
        style: Optional[DictConfig] = None,
    ):
        self.previewer = previewer
        self.style = style
        self._record: Optional[ResumeRecord] = None

    @property
    def record(self) -> Optional[ResumeRecord]:
        """Currently published record (None before the first import)."""
        return self._record

    @property
    def has_record(self) -> bool:
        return self._record is not None

    def require_record(self) -> ResumeRecord:
        """
        Get the published record for an export.

        Raises:
            NoRecordLoadedError: If nothing has been imported yet
        """
        if self._record is None:
            raise NoRecordLoadedError()
        return self._record

    def reset(self) -> None:
        """Drop the current record so the session is ready for a new file."""
        self._record = None
        _log_info("Session reset")

    def _publish(self, origin: str, build: Callable[[], ResumeRecord]) -> ResumeRecord:
        try:
            record = build()
        except ResumeConversionError as e:
            log_import_failure(origin, e)
            raise

        self._record = record
        log_import_result(origin, record)
        return record

    # Imports

    def import_text(self, text: str) -> ResumeRecord:
        """Replace the record with one parsed from free text."""
        return self._publish("text", lambda: parse_resume_text(text))

    def import_docx(self, data: bytes) -> ResumeRecord:
        """
        Replace the record with one parsed from a table-layout .docx.

        Raises:
            InvalidDocumentError: If data is not a valid .docx
        """
        return self._publish(
            "word document", lambda: parse_resume_tables(read_document_tree(data))
        )

    def import_text_document(self, data: bytes, suffix: str) -> ResumeRecord:
        """
        Replace the record with one parsed from a document's raw text.

        Any readable document works, since only its text is used.

        Raises:
            InvalidDocumentError: If data cannot be read as the given format
            MissingDependencyError: If the format's reader is not installed
        """
        return self._publish(
            f"{suffix} text", lambda: parse_resume_text(extract_text(data, suffix))
        )

    def import_record(
        self, text: str, fmt: str = "yaml", source: Optional[Path] = None
    ) -> ResumeRecord:
        """
        Replace the record with a deserialized one.

        Raises:
            InvalidRecordError: If text is not a valid record
        """
        return self._publish(
            f"{fmt} record", lambda: deserialize_record(text, fmt, source=source)
        )

    def import_file(self, path: Union[str, Path]) -> ResumeRecord:
        """
        Import a file, choosing the reader from its suffix.

        .yaml/.yml/.json are records, .docx is parsed by its table layout,
        .pdf/.txt/.md are parsed as free text.

        Raises:
            FileNotFoundError: If path does not exist
            ValueError: If the suffix is not supported
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Input file not found: {path}")

        suffix = path.suffix.lower()
        _log_debug(f"Importing {path} as {suffix}")

        if suffix in RECORD_SUFFIXES:
            return self.import_record(
                path.read_text(encoding="utf-8"), format_for_path(path), source=path
            )
        if suffix == DOCUMENT_SUFFIX:
            return self.import_docx(path.read_bytes())
        if suffix in TEXT_DOCUMENT_SUFFIXES:
            return self.import_text_document(path.read_bytes(), suffix)

        raise ValueError(
            f"Unsupported input type: {suffix}. "
            f"Expected one of {sorted(RECORD_SUFFIXES | TEXT_DOCUMENT_SUFFIXES | {DOCUMENT_SUFFIX})}"
        )

    # Exports

    def export_docx(self) -> bytes:
        """
        Render the record as .docx bytes.

        Raises:
            NoRecordLoadedError: If nothing has been imported yet
            MissingDependencyError: If python-docx is not installed
        """
        record = self.require_record()
        return write_docx(render_layout(record), self.style)

    def export_record(self, fmt: str = "yaml") -> str:
        """
        Serialize the record.

        Raises:
            NoRecordLoadedError: If nothing has been imported yet
        """
        return serialize_record(self.require_record(), fmt)

    def preview(self) -> Preview:
        """
        Preview the record, natively when the previewer can, else as markdown.

        Raises:
            NoRecordLoadedError: If nothing has been imported yet
        """
        return preview_record(self.require_record(), self.previewer)

    def document_filename(self) -> str:
        return document_filename(self._record)

    def record_filename(self, fmt: str = "yaml") -> str:
        return record_filename(self._record, fmt)

    def save_docx(self, out_dir: Union[str, Path]) -> Path:
        """
        Write the .docx export into out_dir under its suggested filename.

        Returns:
            Path written
        """
        data = self.export_docx()
        out_dir = Path(out_dir)
        out_dir.mkdir(parents=True, exist_ok=True)
        path = out_dir / self.document_filename()
        path.write_bytes(data)
        _log_info(f"Saved document: {path}")
        return path

    def save_record(self, out_dir: Union[str, Path], fmt: str = "yaml") -> Path:
        """
        Write the record export into out_dir under its suggested filename.

        Returns:
            Path written
        """
        if fmt not in RECORD_FORMATS:
            raise ValueError(f"Unknown record format: {fmt}. Must be one of {list(RECORD_FORMATS)}")
        record = self.require_record()
        return save_record(record, Path(out_dir) / self.record_filename(fmt))
