"""
Résumé Record Structure

Defines the canonical structured representation of a résumé.
This structure is the interface between the Intake context (which builds records)
and the Rendering context (which reads them).

Intake owns:
- Parsing free text into ResumeRecord instances
- Parsing table-based document trees into ResumeRecord instances

Templating owns:
- The record shape and its plain-container form (to_dict / from_dict)
- Serialization to and from the record export format

Rendering only reads records; nothing mutates a record once it is published.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from resumetab.contexts.templating.exceptions import InvalidRecordStructureError

CONTACT_FIELDS = ("name", "phone", "email", "location", "linkedin", "github")
RECORD_KEYS = ("contact", "objective", "skills", "certificates", "education", "experience")


def _as_text(value: Any, path: str) -> str:
    """Coerce a scalar record value to str; None becomes the empty string."""
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        raise InvalidRecordStructureError(f"Expected text at '{path}', got {type(value).__name__}")
    return str(value)


def _as_text_list(value: Any, path: str) -> List[str]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise InvalidRecordStructureError(f"Expected a list at '{path}', got {type(value).__name__}")
    return [_as_text(item, f"{path}[{i}]") for i, item in enumerate(value)]


def _as_mapping(value: Any, path: str) -> Dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise InvalidRecordStructureError(
            f"Expected a mapping at '{path}', got {type(value).__name__}"
        )
    return value


@dataclass
class ContactInfo:
    """
    Contact block of a résumé.

    Every field is optional; None means "not detected" and is never an error.
    """

    name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    location: Optional[str] = None
    linkedin: Optional[str] = None
    github: Optional[str] = None

    def to_dict(self) -> Dict[str, str]:
        """Mapping holding only the detected fields, in canonical order."""
        return {
            name: getattr(self, name)
            for name in CONTACT_FIELDS
            if getattr(self, name) is not None
        }

    @classmethod
    def from_dict(cls, data: Any) -> "ContactInfo":
        data = _as_mapping(data, "contact")
        values = {}
        for name in CONTACT_FIELDS:
            if data.get(name) is not None:
                values[name] = _as_text(data[name], f"contact.{name}")
        return cls(**values)


@dataclass
class EducationEntry:
    """Single education entry (institution, degree, dates, location, details)."""

    institution: str = ""
    degree: str = ""
    dates: str = ""
    location: str = ""
    details: List[str] = field(default_factory=list)

    @property
    def has_identity(self) -> bool:
        return bool(self.institution or self.degree)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "institution": self.institution,
            "degree": self.degree,
            "dates": self.dates,
            "location": self.location,
            "details": list(self.details),
        }

    @classmethod
    def from_dict(cls, data: Any, path: str = "education") -> "EducationEntry":
        data = _as_mapping(data, path)
        return cls(
            institution=_as_text(data.get("institution"), f"{path}.institution"),
            degree=_as_text(data.get("degree"), f"{path}.degree"),
            dates=_as_text(data.get("dates"), f"{path}.dates"),
            location=_as_text(data.get("location"), f"{path}.location"),
            details=_as_text_list(data.get("details"), f"{path}.details"),
        )


@dataclass
class ExperienceEntry:
    """Single work-history entry (company, title, dates, responsibilities)."""

    company: str = ""
    title: str = ""
    dates: str = ""
    responsibilities: List[str] = field(default_factory=list)

    @property
    def has_identity(self) -> bool:
        return bool(self.company or self.title)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "company": self.company,
            "title": self.title,
            "dates": self.dates,
            "responsibilities": list(self.responsibilities),
        }

    @classmethod
    def from_dict(cls, data: Any, path: str = "experience") -> "ExperienceEntry":
        data = _as_mapping(data, path)
        return cls(
            company=_as_text(data.get("company"), f"{path}.company"),
            title=_as_text(data.get("title"), f"{path}.title"),
            dates=_as_text(data.get("dates"), f"{path}.dates"),
            responsibilities=_as_text_list(
                data.get("responsibilities"), f"{path}.responsibilities"
            ),
        )


@dataclass
class ResumeRecord:
    """
    Structured representation of a complete résumé.

    This is the primary data model shared between the Intake and Rendering contexts.
    List fields always exist (possibly empty) so renderers only ever check lengths.

    Attributes:
        contact: Detected contact fields
        objective: Objective/summary paragraph (space-joined lines)
        skills: Skills in detection order, duplicates kept
        certificates: Certificates with bullet markers stripped
        education: Education entries, each with an institution or degree
        experience: Experience entries, each with a company or title
    """

    contact: ContactInfo = field(default_factory=ContactInfo)
    objective: str = ""
    skills: List[str] = field(default_factory=list)
    certificates: List[str] = field(default_factory=list)
    education: List[EducationEntry] = field(default_factory=list)
    experience: List[ExperienceEntry] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to plain containers in canonical key order.

        Returns:
            Dict with keys contact, objective, skills, certificates, education, experience
        """
        return {
            "contact": self.contact.to_dict(),
            "objective": self.objective,
            "skills": list(self.skills),
            "certificates": list(self.certificates),
            "education": [entry.to_dict() for entry in self.education],
            "experience": [entry.to_dict() for entry in self.experience],
        }

    @classmethod
    def from_dict(cls, data: Any) -> "ResumeRecord":
        """
        Build a record from plain containers (e.g., a loaded YAML/JSON document).

        Missing keys fall back to their defaults. Numbers are accepted where text
        is expected (a hand-written `dates: 2019` loads as "2019").

        Args:
            data: Mapping with any subset of the record keys

        Returns:
            ResumeRecord instance

        Raises:
            InvalidRecordStructureError: If a value has the wrong container type
        """
        if not isinstance(data, dict):
            raise InvalidRecordStructureError(
                f"Resume record must be a mapping, got {type(data).__name__}"
            )
        if data and not set(data) & set(RECORD_KEYS):
            raise InvalidRecordStructureError(
                f"Mapping does not look like a resume record (keys: {sorted(data)[:5]})"
            )

        education = data.get("education") or []
        experience = data.get("experience") or []
        if not isinstance(education, list):
            raise InvalidRecordStructureError("Expected a list at 'education'")
        if not isinstance(experience, list):
            raise InvalidRecordStructureError("Expected a list at 'experience'")

        return cls(
            contact=ContactInfo.from_dict(data.get("contact")),
            objective=_as_text(data.get("objective"), "objective"),
            skills=_as_text_list(data.get("skills"), "skills"),
            certificates=_as_text_list(data.get("certificates"), "certificates"),
            education=[
                EducationEntry.from_dict(entry, f"education[{i}]")
                for i, entry in enumerate(education)
            ],
            experience=[
                ExperienceEntry.from_dict(entry, f"experience[{i}]")
                for i, entry in enumerate(experience)
            ],
        )

    def is_empty(self) -> bool:
        """True when no field carries any content."""
        return not (
            self.contact.to_dict()
            or self.objective
            or self.skills
            or self.certificates
            or self.education
            or self.experience
        )

    def summary(self) -> str:
        """One-line description used in log messages."""
        detected = ", ".join(self.contact.to_dict()) or "none"
        return (
            f"contact fields: {detected}; objective: {len(self.objective)} chars; "
            f"skills: {len(self.skills)}; certificates: {len(self.certificates)}; "
            f"education: {len(self.education)}; experience: {len(self.experience)}"
        )

