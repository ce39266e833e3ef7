"""Unit tests for the markdown preview."""

import pytest

from resumetab.contexts.rendering.preview_renderer import contact_line, render_preview
from resumetab.contexts.templating.resume_record import (
    ContactInfo,
    EducationEntry,
    ExperienceEntry,
    ResumeRecord,
)


@pytest.mark.unit
def test_empty_record_preview():
    """Test that an empty record previews as the placeholder name only."""
    assert render_preview(ResumeRecord()) == "# Your Name\n"


@pytest.mark.unit
def test_contact_line_skips_missing_fields():
    """Test contact line joining."""
    record = ResumeRecord(
        contact=ContactInfo(name="Jane", email="j@x.io", github="github.com/jane")
    )

    assert contact_line(record) == "j@x.io | github.com/jane"
    assert contact_line(ResumeRecord()) == ""


@pytest.mark.unit
def test_full_preview():
    """Test headings, lists and entry formatting."""
    record = ResumeRecord(
        contact=ContactInfo(name="Jane Doe", phone="555-0100"),
        objective="Build things.",
        skills=["Python", "SQL"],
        certificates=["CKA"],
        education=[
            EducationEntry(institution="MIT", degree="BSc", dates="2015", details=["Honors"])
        ],
        experience=[
            ExperienceEntry(
                company="Acme", title="Engineer", dates="2019 - 2022", responsibilities=["Led team"]
            )
        ],
    )
    markdown = render_preview(record)

    assert markdown.startswith("# Jane Doe\n\n555-0100\n\n## Objective\n\nBuild things.\n")
    assert "## Skills and Qualifications\n\n- Python\n- SQL\n" in markdown
    assert "## Certificates\n\n- CKA\n" in markdown
    assert "### MIT\n**BSc**\n*2015*\n\n- Honors\n" in markdown
    assert "### Acme\n**Engineer** | *2019 - 2022*\n\n- Led team\n" in markdown
    assert markdown.index("## Education and Training") < markdown.index("## Career History")


@pytest.mark.unit
def test_empty_sections_are_omitted():
    """Test that only sections with content get a heading."""
    markdown = render_preview(ResumeRecord(skills=["Go"]))

    assert "## Skills and Qualifications" in markdown
    for header in ("## Objective", "## Certificates", "## Education", "## Career History"):
        assert header not in markdown


@pytest.mark.unit
def test_experience_placeholders():
    """Test placeholder company and title without dates."""
    markdown = render_preview(ResumeRecord(experience=[ExperienceEntry()]))

    assert "### Company Name\n**Job Title**\n" in markdown
    assert " | *" not in markdown


@pytest.mark.unit
def test_education_degree_only_entry():
    """Test that a degree-only entry uses the degree as its heading."""
    markdown = render_preview(ResumeRecord(education=[EducationEntry(degree="Bootcamp")]))

    assert "### Bootcamp\n" in markdown
    assert "**Bootcamp**" not in markdown


@pytest.mark.unit
def test_preview_has_no_runs_of_blank_lines():
    """Test blank line collapsing and the single trailing newline."""
    markdown = render_preview(
        ResumeRecord(
            skills=["a"],
            education=[EducationEntry(institution="X")],
            experience=[ExperienceEntry(company="Y")],
        )
    )

    assert "\n\n\n" not in markdown
    assert markdown.endswith("\n") and not markdown.endswith("\n\n")


@pytest.mark.unit
def test_education_entry_without_identity_gets_placeholder():
    """Test that a loaded entry with only dates still has a heading."""
    markdown = render_preview(ResumeRecord(education=[EducationEntry(dates="2015")]))

    assert "### Institution Name\n*2015*\n" in markdown
    assert "### \n" not in markdown
