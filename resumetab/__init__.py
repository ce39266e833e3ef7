"""
resumetab - tabular résumé conversion

Converts résumés between free text, a six-table Word document layout and a
structured record, with a preview for on-screen review.

Architecture:
- Intake Context: Document decoding and résumé parsing (text heuristics, table layout)
- Templating Context: Résumé record, record serialization, error taxonomy
- Rendering Context: Block layout, .docx encoding, previews
- Session Context: Current record and import/export orchestration
"""

__version__ = "0.1.0"
