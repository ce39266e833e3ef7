"""Unit tests for the free-text résumé parser."""

import pytest

from resumetab.contexts.intake.text_parser import (
    EntryFold,
    detect_contact,
    parse_resume_text,
)
from resumetab.contexts.templating.resume_record import (
    EducationEntry,
    ExperienceEntry,
    ResumeRecord,
)

JANE_DOE = """Jane Doe
jane.doe@example.com
(555) 123-4567
Springfield, IL
Experience
Acme Corp
Senior Engineer
2019 - 2022
• Led backend team
• Shipped v2 API
"""


@pytest.mark.unit
def test_jane_doe_contact():
    """Test contact detection on a typical header block."""
    record = parse_resume_text(JANE_DOE)

    assert record.contact.to_dict() == {
        "name": "Jane Doe",
        "phone": "(555) 123-4567",
        "email": "jane.doe@example.com",
        "location": "Springfield, IL",
    }


@pytest.mark.unit
def test_jane_doe_experience():
    """Test that company, title and date range lines form a single entry."""
    record = parse_resume_text(JANE_DOE)

    assert record.experience == [
        ExperienceEntry(
            company="Acme Corp",
            title="Senior Engineer",
            dates="2019 - 2022",
            responsibilities=["Led backend team", "Shipped v2 API"],
        )
    ]
    assert record.education == []
    assert record.skills == []


@pytest.mark.unit
@pytest.mark.parametrize("text", ["", "   \n\n  \t\n", "no headers at all\njust prose"])
def test_parser_is_total(text):
    """Test that any input yields a well-shaped record."""
    record = parse_resume_text(text)

    assert isinstance(record, ResumeRecord)
    for field_value in (record.skills, record.certificates, record.education, record.experience):
        assert isinstance(field_value, list)
    assert isinstance(record.objective, str)


@pytest.mark.unit
def test_empty_text_gives_empty_record():
    """Test that blank input produces a record with no detected fields."""
    record = parse_resume_text("")

    assert record == ResumeRecord()
    assert record.is_empty()


@pytest.mark.unit
@pytest.mark.parametrize("header", ["SKILLS", "skills", "Skills", "Technical Skills"])
def test_skills_header_is_case_insensitive(header):
    """Test that header detection ignores case."""
    record = parse_resume_text(f"Jane Doe\n{header}\nPython, SQL | Docker")

    assert record.skills == ["Python", "SQL", "Docker"]


@pytest.mark.unit
def test_objective_lines_are_space_joined():
    """Test that multi-line objectives become one paragraph."""
    text = "Jane Doe\nProfessional Summary\nBuilding reliable systems\nfor growing teams.\nSkills\nGo"
    record = parse_resume_text(text)

    assert record.objective == "Building reliable systems for growing teams."
    assert record.skills == ["Go"]


@pytest.mark.unit
def test_certificates_strip_bullets():
    """Test that certificate bullets and hyphens are removed."""
    text = "Jane Doe\nCertifications\n• AWS Solutions Architect\n- CKA\nPMP"
    record = parse_resume_text(text)

    assert record.certificates == ["AWS Solutions Architect", "CKA", "PMP"]


@pytest.mark.unit
def test_education_entries():
    """Test institution, degree and detail accumulation."""
    text = "\n".join(
        [
            "Jane Doe",
            "Education",
            "State University 2015",
            "BSc Physics",
            "Minor in Math",
            "Community College of Springfield",
            "AA",
        ]
    )
    record = parse_resume_text(text)

    assert record.education == [
        EducationEntry(
            institution="State University 2015",
            degree="BSc Physics",
            details=["Minor in Math"],
        ),
        EducationEntry(institution="Community College of Springfield", degree="AA"),
    ]


@pytest.mark.unit
def test_education_short_lines_before_entry_are_dropped():
    """Test that a short line with no open entry is ignored."""
    record = parse_resume_text("Jane Doe\nEducation\nBSc\nMIT 2015")

    assert record.education == [EducationEntry(institution="MIT 2015")]


@pytest.mark.unit
def test_experience_date_range_after_bullets_starts_new_entry():
    """Test that a date range after responsibilities opens a new entry named by the previous line."""
    text = "\n".join(
        [
            "Jane Doe",
            "Work Experience",
            "Acme Corp",
            "Engineer",
            "2019 – 2022",
            "• Built things",
            "Globex",
            "2016 - 2019",
            "• Fixed things",
        ]
    )
    record = parse_resume_text(text)

    assert [entry.company for entry in record.experience] == ["Acme Corp", "Globex"]
    assert record.experience[0].dates == "2019 – 2022"
    assert record.experience[1].dates == "2016 - 2019"
    assert record.experience[1].responsibilities == ["Fixed things"]


@pytest.mark.unit
def test_experience_leading_date_range_after_header_has_blank_company():
    """Test that a date range right after the header does not take the header as company."""
    record = parse_resume_text("Jane Doe\nExperience\n2019 - 2022\nEngineer")

    assert record.experience == [ExperienceEntry(company="", title="Engineer", dates="2019 - 2022")]


@pytest.mark.unit
def test_bullets_without_open_entry_are_dropped():
    """Test that responsibilities need an open entry."""
    record = parse_resume_text("Jane Doe\nExperience\n• Orphan bullet")

    assert record.experience == []


@pytest.mark.unit
def test_section_switch_drops_open_entry():
    """Test that a header line discards the entry still open in the previous section."""
    record = parse_resume_text("Jane Doe\nExperience\nAcme Corp\nEngineer\nSkills\nPython")

    assert record.experience == []
    assert record.skills == ["Python"]


@pytest.mark.unit
def test_only_last_section_is_flushed_at_end():
    """Test that an education entry followed by another section is not kept."""
    text = "Jane Doe\nEducation\nMIT 2019\nBSc\nExperience\nAcme Corp\nEngineer"
    record = parse_resume_text(text)

    assert record.education == []
    assert record.experience == [ExperienceEntry(company="Acme Corp", title="Engineer")]


@pytest.mark.unit
def test_closed_entries_survive_section_switch():
    """Test that entries already started over are kept when the section changes."""
    text = "Jane Doe\nEducation\nMIT 2015\nBSc\nCMU 2017\nMSc\nSkills\nGo"
    record = parse_resume_text(text)

    assert record.education == [EducationEntry(institution="MIT 2015", degree="BSc")]
    assert record.skills == ["Go"]


@pytest.mark.unit
def test_entry_fold_discards_entries_without_identity():
    """Test that flush drops entries lacking an identifying field."""
    fold = EntryFold()
    fold.start(ExperienceEntry(dates="2019 - 2022", responsibilities=["x"]))
    fold.start(ExperienceEntry(company="Acme"))
    fold.flush()

    assert fold.entries == [ExperienceEntry(company="Acme")]
    assert fold.open_item is None


@pytest.mark.unit
def test_entry_fold_discard_keeps_earlier_entries():
    """Test that discard drops only the entry in progress."""
    fold = EntryFold()
    fold.start(ExperienceEntry(company="Acme"))
    fold.start(ExperienceEntry(company="Globex", title="Manager"))
    fold.discard()
    fold.flush()

    assert fold.entries == [ExperienceEntry(company="Acme")]
    assert fold.open_item is None


@pytest.mark.unit
def test_detect_contact_profile_links():
    """Test LinkedIn and GitHub detection in the header area."""
    contact = detect_contact(
        ["Jane Doe", "linkedin.com/in/janedoe | GitHub.com/janedoe", "Springfield, IL"]
    )

    assert contact.linkedin == "linkedin.com/in/janedoe"
    assert contact.github == "GitHub.com/janedoe"
    assert contact.location == "Springfield, IL"


@pytest.mark.unit
def test_detect_contact_only_scans_first_ten_lines():
    """Test that contact fields past the header area are ignored."""
    lines = ["Jane Doe"] + [f"filler {i}" for i in range(9)] + ["late@example.com"]
    contact = detect_contact(lines)

    assert contact.email is None


@pytest.mark.unit
def test_detect_contact_later_line_wins():
    """Test that the last matching line in the header area is kept."""
    contact = detect_contact(["Jane Doe", "old@example.com", "new@example.com"])

    assert contact.email == "new@example.com"


@pytest.mark.unit
def test_location_suppressed_on_phone_line():
    """Test that a phone line never supplies the location."""
    contact = detect_contact(["Jane Doe", "Springfield, IL 555-123-4567"])

    assert contact.phone == "555-123-4567"
    assert contact.location is None
