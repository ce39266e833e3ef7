"""
Integration test for .docx round-trip conversion.
Tests: record -> layout -> .docx -> document tree -> record produces an identical record.

The table parser reads one entry per education/experience table and a single
detail line per education entry, so the sample stays within that shape.
"""

import pytest

pytest.importorskip("docx")

from resumetab.contexts.intake.extractors import extract_text, read_document_tree
from resumetab.contexts.intake.table_parser import parse_resume_tables
from resumetab.contexts.rendering.docx_writer import write_docx
from resumetab.contexts.rendering.layout_renderer import render_layout
from resumetab.contexts.templating.resume_record import (
    ContactInfo,
    EducationEntry,
    ExperienceEntry,
    ResumeRecord,
)


def sample_record() -> ResumeRecord:
    return ResumeRecord(
        contact=ContactInfo(
            name="Jane Doe",
            phone="(555) 123-4567",
            email="jane.doe@example.com",
            location="Springfield, IL",
        ),
        objective="Ship reliable software for growing teams.",
        skills=["Python", "SQL", "Docker"],
        certificates=["AWS Solutions Architect", "CKA"],
        education=[
            EducationEntry(
                institution="State University",
                degree="BSc Physics",
                dates="2011 - 2015",
                details=["Magna cum laude"],
            )
        ],
        experience=[
            ExperienceEntry(
                company="Acme Corp",
                title="Senior Engineer",
                dates="2019 – 2022",
                responsibilities=["Led backend team", "Shipped v2 API"],
            )
        ],
    )


@pytest.mark.integration
def test_docx_is_a_zip_package():
    """Test that the writer produces a .docx (ZIP) byte stream."""
    data = write_docx(render_layout(sample_record()))

    assert data[:2] == b"PK"


@pytest.mark.integration
def test_record_survives_docx_round_trip():
    """Test converting a record to .docx and parsing it back by table layout."""
    record = sample_record()

    data = write_docx(render_layout(record))
    parsed = parse_resume_tables(read_document_tree(data))

    assert parsed == record


@pytest.mark.integration
def test_sparse_record_shifts_table_positions():
    """Test that missing sections shift later tables into earlier positions."""
    record = ResumeRecord(
        contact=ContactInfo(name="Jane Doe"),
        skills=["Go"],
        experience=[ExperienceEntry(company="Acme Corp", title="Engineer", dates="2020 - 2021")],
    )

    parsed = parse_resume_tables(read_document_tree(write_docx(render_layout(record))))

    # Sections are written only when present, so tables shift position
    assert parsed.contact.name == "Jane Doe"
    assert parsed.objective == "Go"


@pytest.mark.integration
def test_extract_text_from_written_docx():
    """Test raw text extraction covers paragraphs inside table cells."""
    data = write_docx(render_layout(sample_record()))

    text = extract_text(data, ".docx")

    for expected in (
        "Jane Doe",
        "jane.doe@example.com",
        "Career History",
        "Acme Corp",
        "Led backend team",
        "Magna cum laude",
    ):
        assert expected in text
