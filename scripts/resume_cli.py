#!/usr/bin/env python3
"""
Résumé Conversion CLI

Imports a résumé from free text, a table-layout Word document or a saved record,
then writes any combination of outputs.

Commands:
    from-text    - Parse a .txt/.pdf/.md (or any .docx's raw text) with line heuristics
    from-docx    - Parse a six-table .docx résumé by its table layout
    from-record  - Load a saved .yaml/.json record

Examples:\n

    resume_cli.py from-text resume.pdf                     # Write Jane_Doe_Resume.docx

    resume_cli.py from-text resume.txt --record yaml       # Also save Jane_Doe_resume.yaml

    resume_cli.py from-docx Jane_Doe_Resume.docx --no-docx --record json

    resume_cli.py from-record Jane_Doe_resume.yaml --preview --native
"""

import os
from pathlib import Path
from typing import Callable, Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from resumetab.contexts.rendering.native_preview import LibreOfficePreviewer
from resumetab.contexts.session.logger import setup_session_logger
from resumetab.contexts.session.resume_session import ResumeSession
from resumetab.contexts.templating.exceptions import ResumeConversionError
from resumetab.contexts.templating.record_io import RECORD_FORMATS
from resumetab.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("RESUMETAB_LOGS_PATH", "outs/logs"))


app = typer.Typer(
    help="Convert résumés between free text, table-layout Word documents and records",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


InputFile = Annotated[
    Path,
    typer.Argument(
        help="File to import",
        exists=True,
        dir_okay=False,
        resolve_path=True,
    ),
]
OutDir = Annotated[
    Path,
    typer.Option("--out-dir", "-o", help="Directory for written files", file_okay=False),
]
WriteDocx = Annotated[
    bool,
    typer.Option("--docx/--no-docx", help="Write the .docx document"),
]
RecordFormat = Annotated[
    Optional[str],
    typer.Option("--record", "-r", help="Also save the record as 'yaml' or 'json'"),
]
ShowPreview = Annotated[
    bool,
    typer.Option("--preview", "-p", help="Print a preview of the imported résumé"),
]
NativePreview = Annotated[
    bool,
    typer.Option("--native", help="Try a LibreOffice HTML preview before the markdown one"),
]
LogDir = Annotated[
    Optional[Path],
    typer.Option("--log-dir", help="Log directory (defaults to RESUMETAB_LOGS_PATH/session_<timestamp>)"),
]


def _run(
    input_file: Path,
    load: Callable[[ResumeSession, Path], object],
    out_dir: Path,
    write_docx: bool,
    record_format: Optional[str],
    preview: bool,
    native: bool,
    log_dir: Optional[Path],
) -> None:
    if record_format is not None and record_format not in RECORD_FORMATS:
        typer.echo(
            f"Error: --record must be one of {', '.join(RECORD_FORMATS)}, got '{record_format}'",
            err=True,
        )
        raise typer.Exit(code=1)

    setup_session_logger(log_dir or LOGS_PATH / f"session_{now()}", input_path=input_file)

    session = ResumeSession(previewer=LibreOfficePreviewer() if native else None)
    try:
        load(session, input_file)
        written = []
        if write_docx:
            written.append(session.save_docx(out_dir))
        if record_format:
            written.append(session.save_record(out_dir, record_format))
        shown = session.preview() if preview else None
    except (ResumeConversionError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if shown is not None:
        typer.echo("")
        typer.echo(shown.content)

    for path in written:
        typer.echo(f"Wrote: {path}")


@app.command("from-text")
def from_text_command(
    input_file: InputFile,
    out_dir: OutDir = Path("."),
    write_docx: WriteDocx = True,
    record_format: RecordFormat = None,
    preview: ShowPreview = False,
    native: NativePreview = False,
    log_dir: LogDir = None,
):
    """
    Import a résumé from a document's raw text.

    Lines are scanned for contact details and section headers (Objective,
    Skills, Certificates, Education, Experience and their aliases).

    Examples:\n

        $ resume_cli.py from-text resume.txt

        $ resume_cli.py from-text resume.pdf --record yaml --preview
    """

    def load(session: ResumeSession, path: Path):
        return session.import_text_document(path.read_bytes(), path.suffix.lower())

    _run(input_file, load, out_dir, write_docx, record_format, preview, native, log_dir)


@app.command("from-docx")
def from_docx_command(
    input_file: InputFile,
    out_dir: OutDir = Path("."),
    write_docx: WriteDocx = True,
    record_format: RecordFormat = None,
    preview: ShowPreview = False,
    native: NativePreview = False,
    log_dir: LogDir = None,
):
    """
    Import a résumé from a six-table Word document.

    Tables are read by position: contact, objective, skills, certificates,
    education, experience.

    Examples:\n

        $ resume_cli.py from-docx Jane_Doe_Resume.docx --no-docx --record yaml
    """

    def load(session: ResumeSession, path: Path):
        return session.import_docx(path.read_bytes())

    _run(input_file, load, out_dir, write_docx, record_format, preview, native, log_dir)


@app.command("from-record")
def from_record_command(
    input_file: InputFile,
    out_dir: OutDir = Path("."),
    write_docx: WriteDocx = True,
    record_format: RecordFormat = None,
    preview: ShowPreview = False,
    native: NativePreview = False,
    log_dir: LogDir = None,
):
    """
    Import a saved .yaml or .json record.

    Examples:\n

        $ resume_cli.py from-record Jane_Doe_resume.yaml

        $ resume_cli.py from-record Jane_Doe_resume.json --record yaml --no-docx
    """

    def load(session: ResumeSession, path: Path):
        return session.import_file(path)

    _run(input_file, load, out_dir, write_docx, record_format, preview, native, log_dir)


if __name__ == "__main__":
    app()
