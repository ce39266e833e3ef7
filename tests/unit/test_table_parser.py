"""Unit tests for the table-layout parser and namespace-agnostic tree walking."""

import xml.etree.ElementTree as ET

import pytest
from lxml import etree

from resumetab.contexts.intake.document_tree import (
    find_descendants,
    local_name,
    node_text,
    paragraph_texts,
    table_rows,
)
from resumetab.contexts.intake.table_parser import (
    parse_contact_table,
    parse_education_table,
    parse_experience_table,
    parse_resume_tables,
)
from resumetab.contexts.templating.resume_record import (
    ContactInfo,
    EducationEntry,
    ExperienceEntry,
)

W_NS = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"


def w(tag: str) -> str:
    return f"{{{W_NS}}}{tag}"


def cell(*paragraphs: str) -> ET.Element:
    """Table cell with one paragraph per argument; each paragraph may hold split runs."""
    tc = ET.Element(w("tc"))
    for text in paragraphs:
        p = ET.SubElement(tc, w("p"))
        for piece in text.split("|"):
            r = ET.SubElement(p, w("r"))
            t = ET.SubElement(r, w("t"))
            t.text = piece
    return tc


def row(*cells: ET.Element) -> ET.Element:
    tr = ET.Element(w("tr"))
    tr.extend(cells)
    return tr


def table(*rows: ET.Element) -> ET.Element:
    tbl = ET.Element(w("tbl"))
    tbl.extend(rows)
    return tbl


def document(*tables: ET.Element) -> ET.Element:
    root = ET.Element(w("document"))
    body = ET.SubElement(root, w("body"))
    for tbl in tables:
        body.append(tbl)
        ET.SubElement(body, w("p"))
    return root


def full_document() -> ET.Element:
    return document(
        table(
            row(cell("Jane Doe"), cell("(555) 123-4567")),
            row(cell("Springfield, IL"), cell("jane.doe@example.com")),
        ),
        table(row(cell("Ship reliable software.")),),
        table(
            row(cell("Python"), cell("SQL")),
            row(cell("Go"), cell("")),
        ),
        table(row(cell("AWS SA"), cell("CKA"))),
        table(
            row(cell("State University", "BSc Physics"), cell("2015")),
            row(cell("Magna cum laude")),
        ),
        table(
            row(cell("Acme Corp"), cell("Senior Engineer"), cell("2019 - 2022")),
            row(cell("Led backend team", "Shipped v2 API")),
        ),
    )


@pytest.mark.unit
def test_local_name_ignores_namespace_and_prefix():
    """Test that Clark-notation and prefixed tags reduce to their local name."""
    assert local_name(ET.Element(w("tbl"))) == "tbl"
    assert local_name(ET.Element("w:tc")) == "tc"
    assert local_name(ET.Element("p")) == "p"
    assert local_name(etree.Comment("note")) is None


@pytest.mark.unit
def test_find_descendants_excludes_node_itself():
    """Test that the search root is never part of its own results."""
    outer = table(row(cell("x")))
    inner = table(row(cell("y")))
    outer[0][0].append(inner)

    found = find_descendants(outer, "tbl")

    assert found == [inner]


@pytest.mark.unit
def test_node_text_joins_runs():
    """Test that split runs are concatenated and stripped."""
    assert node_text(cell("  Jane| Doe  ")) == "Jane Doe"
    assert paragraph_texts(cell("A", "", "B")) == ["A", "B"]


@pytest.mark.unit
def test_lxml_tree_works_too():
    """Test tree walking on an lxml tree parsed from document XML."""
    xml = (
        f'<w:document xmlns:w="{W_NS}"><w:body><w:tbl><w:tr>'
        "<w:tc><w:p><w:r><w:t>Jane</w:t></w:r></w:p></w:tc>"
        "<w:tc><w:p><w:r><w:t>555</w:t></w:r></w:p></w:tc>"
        "</w:tr></w:tbl></w:body></w:document>"
    )
    root = etree.fromstring(xml.encode("utf-8"))
    rows = table_rows(find_descendants(root, "tbl")[0])

    assert [node_text(c) for c in rows[0]] == ["Jane", "555"]


@pytest.mark.unit
def test_parse_full_document():
    """Test positional mapping of all six tables."""
    record = parse_resume_tables(full_document())

    assert record.contact == ContactInfo(
        name="Jane Doe",
        phone="(555) 123-4567",
        location="Springfield, IL",
        email="jane.doe@example.com",
    )
    assert record.objective == "Ship reliable software."
    assert record.skills == ["Python", "SQL", "Go"]
    assert record.certificates == ["AWS SA", "CKA"]
    assert record.education == [
        EducationEntry(
            institution="State University",
            degree="BSc Physics",
            dates="2015",
            details=["Magna cum laude"],
        )
    ]
    assert record.experience == [
        ExperienceEntry(
            company="Acme Corp",
            title="Senior Engineer",
            dates="2019 - 2022",
            responsibilities=["Led backend team", "Shipped v2 API"],
        )
    ]


@pytest.mark.unit
def test_fewer_tables_leave_sections_empty():
    """Test that missing tables are not an error."""
    root = document(
        table(row(cell("Jane Doe"), cell(""))),
        table(row(cell("Objective text"))),
    )
    record = parse_resume_tables(root)

    assert record.contact.name == "Jane Doe"
    assert record.contact.phone is None
    assert record.objective == "Objective text"
    assert record.skills == []
    assert record.education == []
    assert record.experience == []


@pytest.mark.unit
def test_no_tables_gives_empty_record():
    """Test a document without any tables."""
    record = parse_resume_tables(document())

    assert record.is_empty()


@pytest.mark.unit
def test_contact_rows_are_independent():
    """Test that a short second row does not discard the first."""
    contact = parse_contact_table(table(row(cell("Jane Doe"), cell("555-0100")), row(cell("x"))))

    assert contact.name == "Jane Doe"
    assert contact.phone == "555-0100"
    assert contact.location is None
    assert contact.email is None


@pytest.mark.unit
def test_education_placeholder_row_is_not_a_detail():
    """Test that the template placeholder row is skipped."""
    tbl = table(
        row(cell("State University"), cell("2015")),
        row(cell("Name of educational institute")),
        row(cell("City College", "AA"), cell("2012")),
    )
    entries = parse_education_table(tbl)

    assert entries == [
        EducationEntry(institution="State University", dates="2015"),
        EducationEntry(institution="City College", degree="AA", dates="2012"),
    ]


@pytest.mark.unit
def test_education_entry_without_identity_is_dropped():
    """Test the identity rule for table education rows."""
    entries = parse_education_table(table(row(cell(""), cell("2015"))))

    assert entries == []


@pytest.mark.unit
def test_experience_lookahead_always_consumes_next_row():
    """Test that the row after an entry header is taken as its responsibilities."""
    tbl = table(
        row(cell("Acme"), cell("Engineer"), cell("2019")),
        row(cell("Globex"), cell("Manager"), cell("2016")),
    )
    entries = parse_experience_table(tbl)

    assert entries == [
        ExperienceEntry(
            company="Acme",
            title="Engineer",
            dates="2019",
            responsibilities=["Globex"],
        )
    ]
