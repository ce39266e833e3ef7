"""Unit tests for document style loading."""

import pytest

from resumetab.contexts.rendering.document_style import DEFAULT_STYLE, load_document_style


@pytest.fixture(autouse=True)
def no_style_env(monkeypatch):
    monkeypatch.delenv("RESUMETAB_STYLE_PATH", raising=False)


@pytest.mark.unit
def test_defaults():
    """Test the default page and font settings."""
    style = load_document_style()

    assert style.page.margin_inches == 1.0
    assert style.body.font == "Times New Roman"
    assert style.body.size == 11
    assert style.heading.font == "Calibri"
    assert style.name.size == 16
    assert style.list_style == "List Bullet"


@pytest.mark.unit
def test_override_merges_onto_defaults(tmp_path):
    """Test that an override file changes only the keys it names."""
    path = tmp_path / "style.yaml"
    path.write_text("body:\n  font: Georgia\npage:\n  margin_inches: 0.75\n", encoding="utf-8")

    style = load_document_style(path)

    assert style.body.font == "Georgia"
    assert style.body.size == 11
    assert style.page.margin_inches == 0.75
    assert style.heading.font == "Calibri"


@pytest.mark.unit
def test_override_from_environment(tmp_path, monkeypatch):
    """Test that RESUMETAB_STYLE_PATH is used when no path is passed."""
    path = tmp_path / "style.yaml"
    path.write_text("heading:\n  size: 12\n", encoding="utf-8")
    monkeypatch.setenv("RESUMETAB_STYLE_PATH", str(path))

    assert load_document_style().heading.size == 12


@pytest.mark.unit
def test_defaults_are_not_mutated(tmp_path):
    """Test that merging leaves the module defaults untouched."""
    path = tmp_path / "style.yaml"
    path.write_text("body:\n  font: Arial\n", encoding="utf-8")

    load_document_style(path)

    assert DEFAULT_STYLE["body"]["font"] == "Times New Roman"
