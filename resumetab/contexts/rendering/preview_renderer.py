"""
Preview Renderer

Renders a ResumeRecord as markdown for on-screen review. Follows the same six
sections and placeholders as the exported document, but as headings and flat
lists instead of grids.
"""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from resumetab.contexts.rendering.layout_renderer import (
    CERTIFICATES_HEADER,
    COMPANY_PLACEHOLDER,
    EDUCATION_HEADER,
    EXPERIENCE_HEADER,
    NAME_PLACEHOLDER,
    OBJECTIVE_HEADER,
    SKILLS_HEADER,
    TITLE_PLACEHOLDER,
)
from resumetab.contexts.rendering.logger import _log_debug
from resumetab.contexts.templating.resume_record import ResumeRecord
from resumetab.utils.text_processing import collapse_blank_lines

TEMPLATES_PATH = Path(__file__).parent / "templates"
PREVIEW_TEMPLATE = "preview.md.jinja"

# Heading for an education entry with neither institution nor degree
INSTITUTION_PLACEHOLDER = "Institution Name"

HEADERS = {
    "objective": OBJECTIVE_HEADER,
    "skills": SKILLS_HEADER,
    "certificates": CERTIFICATES_HEADER,
    "education": EDUCATION_HEADER,
    "experience": EXPERIENCE_HEADER,
}

_env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_PATH)),
    # Catches silent failures
    undefined=StrictUndefined,
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
)


def contact_line(record: ResumeRecord) -> str:
    """
    Contact fields after the name, joined with " | ".

    Example:
        >>> from resumetab.contexts.templating.resume_record import ContactInfo
        >>> contact_line(ResumeRecord(contact=ContactInfo(phone="555-1234", email="a@b.co")))
        '555-1234 | a@b.co'
    """
    contact = record.contact
    fields = [contact.phone, contact.email, contact.location, contact.linkedin, contact.github]
    return " | ".join(value for value in fields if value)


def render_preview(record: ResumeRecord) -> str:
    """
    Render a record as markdown.

    Args:
        record: Record to preview

    Returns:
        Markdown text ending with a single newline
    """
    template = _env.get_template(PREVIEW_TEMPLATE)
    markdown = template.render(
        record=record,
        contact=record.contact,
        contact_line=contact_line(record),
        headers=HEADERS,
        name_placeholder=NAME_PLACEHOLDER,
        institution_placeholder=INSTITUTION_PLACEHOLDER,
        company_placeholder=COMPANY_PLACEHOLDER,
        title_placeholder=TITLE_PLACEHOLDER,
    )
    markdown = collapse_blank_lines(markdown).strip() + "\n"
    _log_debug(f"Rendered preview ({len(markdown)} chars)")
    return markdown
