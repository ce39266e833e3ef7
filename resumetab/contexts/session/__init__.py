"""
Session Context

Responsibilities:
- Owns the current résumé record of a single-user session
- Runs imports (text, documents, records) with replace-on-success semantics
- Runs exports (document, record, preview) against the published record

Owns: The current record and its lifecycle
Never: Parses or lays out content itself
"""

from resumetab.contexts.session.resume_session import ResumeSession

__all__ = ["ResumeSession"]
