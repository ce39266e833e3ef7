"""
Native Preview

Optional word-processor preview of the exported document. A NativePreviewer is a
capability-checked collaborator: callers ask is_available() first and fall back
to the markdown preview when it is not, or when render() fails for any reason.

LibreOfficePreviewer converts the .docx to HTML with a headless soffice run.
"""

import os
import shutil
import subprocess
import tempfile
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from resumetab.contexts.rendering.docx_writer import write_docx
from resumetab.contexts.rendering.layout_renderer import render_layout
from resumetab.contexts.rendering.logger import _log_debug, _log_info, log_preview_fallback
from resumetab.contexts.rendering.preview_renderer import render_preview
from resumetab.contexts.templating.exceptions import NativePreviewError
from resumetab.contexts.templating.resume_record import ResumeRecord

load_dotenv()

SOFFICE_ENV = "RESUMETAB_SOFFICE"
SOFFICE_CANDIDATES = ("soffice", "libreoffice")
DEFAULT_TIMEOUT_SECONDS = 60


@dataclass
class Preview:
    """
    A rendered preview.

    Attributes:
        content: Preview text (HTML or markdown)
        format: "html" for a native preview, "markdown" for the fallback
    """

    content: str
    format: str


class NativePreviewer(ABC):
    """Renders .docx bytes the way a word processor would display them."""

    name = "native"

    @abstractmethod
    def is_available(self) -> bool:
        """True when render() can be attempted."""

    @abstractmethod
    def render(self, docx_bytes: bytes) -> str:
        """
        Render a document for display.

        Raises:
            NativePreviewError: On any rendering failure
        """


class LibreOfficePreviewer(NativePreviewer):
    """HTML preview through `soffice --headless --convert-to html`."""

    name = "LibreOffice"

    def __init__(self, binary: Optional[str] = None, timeout: int = DEFAULT_TIMEOUT_SECONDS):
        self.binary = binary or os.getenv(SOFFICE_ENV) or self._find_binary()
        self.timeout = timeout

    @staticmethod
    def _find_binary() -> Optional[str]:
        for candidate in SOFFICE_CANDIDATES:
            path = shutil.which(candidate)
            if path:
                return path
        return None

    def is_available(self) -> bool:
        return bool(self.binary) and shutil.which(self.binary) is not None

    def render(self, docx_bytes: bytes) -> str:
        if not self.is_available():
            raise NativePreviewError(f"{self.name} binary not found")

        with tempfile.TemporaryDirectory(prefix="resumetab_preview_") as tmp:
            work_dir = Path(tmp)
            docx_path = work_dir / "preview.docx"
            docx_path.write_bytes(docx_bytes)

            cmd = [
                self.binary,
                "--headless",
                "--convert-to",
                "html",
                "--outdir",
                str(work_dir),
                str(docx_path),
            ]
            _log_debug(f"Running: {' '.join(cmd)}")

            try:
                result = subprocess.run(
                    cmd,
                    cwd=work_dir,
                    capture_output=True,
                    text=True,
                    encoding="utf-8",
                    errors="replace",
                    timeout=self.timeout,
                )
            except (OSError, subprocess.TimeoutExpired) as e:
                raise NativePreviewError(f"{self.name} conversion did not run: {e}") from e

            html_path = work_dir / "preview.html"
            if result.returncode != 0 or not html_path.exists():
                raise NativePreviewError(
                    f"{self.name} conversion failed (exit {result.returncode}): "
                    f"{result.stderr.strip() or 'no HTML produced'}"
                )

            return html_path.read_text(encoding="utf-8", errors="replace")


def preview_record(record: ResumeRecord, previewer: Optional[NativePreviewer] = None) -> Preview:
    """
    Preview a record natively when possible, otherwise as markdown.

    Native preview failures are logged and never raised.

    Args:
        record: Record to preview
        previewer: Native collaborator to try first (None = markdown only)

    Returns:
        Preview with its format
    """
    if previewer is None:
        return Preview(content=render_preview(record), format="markdown")

    if not previewer.is_available():
        log_preview_fallback(previewer.name, "not installed")
        return Preview(content=render_preview(record), format="markdown")

    try:
        html = previewer.render(write_docx(render_layout(record)))
    except Exception as e:
        log_preview_fallback(previewer.name, str(e))
        return Preview(content=render_preview(record), format="markdown")

    _log_info(f"Rendered {previewer.name} preview ({len(html)} chars)")
    return Preview(content=html, format="html")
