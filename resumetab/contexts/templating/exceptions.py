"""Custom exceptions for résumé conversion with source references."""

from pathlib import Path
from typing import Optional


class ResumeConversionError(Exception):
    """
    Base exception for user-facing conversion failures.

    Attributes:
        message: Error description
        source: File the failing input came from (if known)
    """

    def __init__(self, message: str, source: Optional[Path] = None):
        self.message = message
        self.source = source

        parts = [message]
        if source:
            parts.append(f"Source: {source}")

        super().__init__("\n".join(parts))


class InvalidRecordError(ResumeConversionError, ValueError):
    """
    Exception raised when serialized record text cannot be deserialized.

    Attributes:
        message: Error description
        source: File the record came from
        original_error: The underlying YAML/JSON error
    """

    def __init__(
        self,
        message: str,
        source: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.original_error = original_error
        if original_error:
            message = f"{message}: {original_error}"
        super().__init__(message, source)


class InvalidRecordStructureError(InvalidRecordError):
    """
    Exception raised when a record deserializes but does not have the résumé shape.

    Raised for a top level that is not a mapping, list fields holding scalars,
    or entries that are not mappings.
    """

    pass


class InvalidDocumentError(ResumeConversionError):
    """Exception raised when document bytes are not a valid container (.docx/.pdf)."""

    pass


class MissingDependencyError(ResumeConversionError):
    """
    Exception raised when an optional rendering/decoding library is not importable.

    Attributes:
        package: Distribution name to install
    """

    def __init__(self, package: str, purpose: str):
        self.package = package
        super().__init__(
            f"The '{package}' package is required for {purpose} but is not available. "
            f"Please reinstall it (pip install {package}) and try again."
        )


class NoRecordLoadedError(ResumeConversionError):
    """Exception raised when an export is requested before any résumé was imported."""

    def __init__(self):
        super().__init__("No resume data loaded")


class NativePreviewError(ResumeConversionError):
    """
    Exception raised when the native (word-processor) preview fails.

    Never reaches the user: callers fall back to the markdown preview.
    """

    pass
