"""
Templating Context

Responsibilities:
- Owns the résumé record representation (ResumeRecord and its entries)
- Converts records to and from the serialized record format (YAML/JSON)
- Defines the user-facing error taxonomy shared by all contexts

Owns: Record shape, record serialization, export filenames
Never: Parses documents or lays out output
"""

from resumetab.contexts.templating.exceptions import (
    InvalidDocumentError,
    InvalidRecordError,
    InvalidRecordStructureError,
    MissingDependencyError,
    NativePreviewError,
    NoRecordLoadedError,
    ResumeConversionError,
)
from resumetab.contexts.templating.record_io import (
    deserialize_record,
    document_filename,
    load_record,
    record_filename,
    save_record,
    serialize_record,
)
from resumetab.contexts.templating.resume_record import (
    ContactInfo,
    EducationEntry,
    ExperienceEntry,
    ResumeRecord,
)

__all__ = [
    # Data structure classes
    "ResumeRecord",
    "ContactInfo",
    "EducationEntry",
    "ExperienceEntry",
    # Serialization
    "serialize_record",
    "deserialize_record",
    "load_record",
    "save_record",
    "record_filename",
    "document_filename",
    # Errors
    "ResumeConversionError",
    "InvalidRecordError",
    "InvalidRecordStructureError",
    "InvalidDocumentError",
    "MissingDependencyError",
    "NoRecordLoadedError",
    "NativePreviewError",
]
