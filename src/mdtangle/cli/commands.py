"""CLI command implementations"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from mdtangle.config import Settings, load_config
from mdtangle.core.parse import read_document
from mdtangle.core.pipeline import run_tangle, tangle
from mdtangle.core.utils.text import split_lines


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None, verbose: bool = False) -> Settings:
    """Load config with standard CLI error handling and configure logging."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return settings


def _read(path: str, settings: Settings) -> str:
    try:
        return read_document(Path(path), settings.encoding).text
    except (OSError, UnicodeError) as e:
        _fail(f"Cannot read {path}", e)


def tangle_cmd(
    paths: Annotated[list[str], typer.Argument(help="Source documents or directories to tangle")],
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Base directory for output files")] = None,
    passes: Annotated[Optional[int], typer.Option("--passes", help="Macro expansion passes")] = None,
    final_newline: Annotated[bool, typer.Option("--final-newline", help="Ensure files end with a line break")] = False,
    dry_run: Annotated[bool, typer.Option("--dry-run", help="Report files without writing them")] = False,
    strict: Annotated[bool, typer.Option("--strict", help="Exit 1 when any macro is unresolved")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging")] = False,
    ):
    """Assemble output files from the named code blocks of each document."""
    settings = _settings(overrides={
        "out_dir": out, "passes": passes, "final_newline": final_newline or None,
    }, verbose=verbose)

    docs = []
    for path in paths:
        try:
            docs.extend(run_tangle(path, settings, dry_run=dry_run))
        except RuntimeError as e:
            _fail(str(e))

    n_files = 0
    n_warnings = 0
    for doc in docs:
        for d in doc.diagnostics:
            typer.echo(f"warning: {doc.source}: {d}", err=True)
        n_warnings += len(doc.diagnostics)
        for w in doc.written:
            typer.echo(f"  {doc.source} -> {w.path} ({w.status})")
        n_files += len(doc.written)

    verb = "Would tangle" if dry_run else "Tangled"
    typer.echo(f"{verb} {n_files} file(s) from {len(docs)} document(s)")
    if strict and n_warnings:
        _fail(f"{n_warnings} unresolved macro reference(s)")


def list_cmd(
    path: Annotated[str, typer.Argument(help="Source document")],
    files_only: Annotated[bool, typer.Option("--files", help="Only list output files")] = False,
    passes: Annotated[Optional[int], typer.Option("--passes", help="Macro expansion passes")] = None,
    ):
    """List the processed blocks of a document with their line counts."""
    settings = _settings(overrides={"passes": passes})
    result = tangle(_read(path, settings), settings.passes)

    if files_only:
        for f in result.files:
            typer.echo(f.path)
        return
    for b in result.blocks:
        typer.echo(f"{b.name}\t{len(split_lines(b.body))} line(s)")


def show_cmd(
    path: Annotated[str, typer.Argument(help="Source document")],
    name: Annotated[str, typer.Argument(help="Block name, e.g. 'file:out.txt'")],
    passes: Annotated[Optional[int], typer.Option("--passes", help="Macro expansion passes")] = None,
    ):
    """Print one fully processed block body."""
    settings = _settings(overrides={"passes": passes})
    result = tangle(_read(path, settings), settings.passes)

    for b in result.blocks:
        if b.name == name:
            typer.echo(b.body)
            return
    _fail(f"No block named '{name}' in {path}")
