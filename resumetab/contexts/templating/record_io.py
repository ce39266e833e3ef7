"""
Record Serialization

Converts ResumeRecord instances to and from the record export format.

YAML is the native format: human readable, key order preserved, 2-space
indentation. Record text is data, not config, so it goes through PyYAML
safe_dump/safe_load and "${...}" or "???" stay literal strings. JSON is
accepted as well so records exported by older tooling can be imported unchanged.
"""

import json
from pathlib import Path
from typing import Optional, Union

import yaml

from resumetab.contexts.templating.exceptions import (
    InvalidRecordError,
    InvalidRecordStructureError,
)
from resumetab.contexts.templating.logger import _log_debug, _log_info
from resumetab.contexts.templating.resume_record import ResumeRecord
from resumetab.utils.text_processing import export_stem

RECORD_FORMATS = {"yaml": ".yaml", "json": ".json"}
JSON_INDENT = 2
YAML_INDENT = 2


def format_for_path(path: Union[str, Path]) -> str:
    """
    Pick the record format from a file suffix.

    Args:
        path: Record file path

    Returns:
        "json" for .json files, "yaml" otherwise
    """
    return "json" if Path(path).suffix.lower() == ".json" else "yaml"


def serialize_record(record: ResumeRecord, fmt: str = "yaml") -> str:
    """
    Serialize a record to text.

    Args:
        record: Record to serialize
        fmt: "yaml" or "json"

    Returns:
        Pretty-printed record text ending with a newline

    Raises:
        ValueError: If fmt is not a known format
    """
    if fmt not in RECORD_FORMATS:
        raise ValueError(f"Unknown record format: {fmt}. Must be one of {list(RECORD_FORMATS)}")

    data = record.to_dict()
    if fmt == "json":
        return json.dumps(data, indent=JSON_INDENT, ensure_ascii=False) + "\n"
    return yaml.safe_dump(
        data, sort_keys=False, indent=YAML_INDENT, allow_unicode=True, default_flow_style=False
    )


def deserialize_record(text: str, fmt: str = "yaml", source: Optional[Path] = None) -> ResumeRecord:
    """
    Parse record text into a ResumeRecord.

    Args:
        text: Serialized record
        fmt: "yaml" or "json"
        source: File the text came from (used in error messages)

    Returns:
        ResumeRecord instance

    Raises:
        InvalidRecordError: If the text is empty or not valid YAML/JSON
        InvalidRecordStructureError: If the text parses but is not a résumé record
    """
    if fmt not in RECORD_FORMATS:
        raise ValueError(f"Unknown record format: {fmt}. Must be one of {list(RECORD_FORMATS)}")
    if not text or not text.strip():
        raise InvalidRecordError("Record file is empty", source=source)

    if fmt == "json":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise InvalidRecordError("Invalid JSON file", source=source, original_error=e) from e
    else:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise InvalidRecordError("Invalid YAML file", source=source, original_error=e) from e

    try:
        record = ResumeRecord.from_dict(data)
    except InvalidRecordStructureError as e:
        raise InvalidRecordStructureError(e.message, source=source) from e

    _log_debug(f"Deserialized {fmt} record ({record.summary()})")
    return record


def load_record(path: Union[str, Path]) -> ResumeRecord:
    """
    Load a record file, choosing the format from its suffix.

    Args:
        path: Path to .yaml/.yml/.json record

    Returns:
        ResumeRecord instance

    Raises:
        FileNotFoundError: If path does not exist
        InvalidRecordError: If the file cannot be deserialized
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Record file not found: {path}")
    return deserialize_record(path.read_text(encoding="utf-8"), format_for_path(path), source=path)


def save_record(record: ResumeRecord, path: Union[str, Path]) -> Path:
    """
    Write a record file, choosing the format from its suffix.

    Returns:
        Path written
    """
    path = Path(path)
    fmt = format_for_path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(serialize_record(record, fmt), encoding="utf-8")
    _log_info(f"Saved {fmt} record: {path}")
    return path


def record_filename(record: Optional[ResumeRecord], fmt: str = "yaml") -> str:
    """
    Suggested filename for a record export (e.g., "Jane_Doe_resume.yaml").

    Falls back to "resume.<ext>" when the record has no contact name.
    """
    name = record.contact.name if record else None
    return export_stem(name, "_resume", "resume") + RECORD_FORMATS[fmt]


def document_filename(record: Optional[ResumeRecord]) -> str:
    """
    Suggested filename for a document export (e.g., "Jane_Doe_Resume.docx").

    Falls back to "Resume.docx" when the record has no contact name.
    """
    name = record.contact.name if record else None
    return export_stem(name, "_Resume", "Resume") + ".docx"
