"""Pipeline step functions: the pure tangle core and the file-level driver"""

import logging
from pathlib import Path

from mdtangle.config import Settings
from mdtangle.core.extract.blocks import extract_blocks
from mdtangle.core.extract.indent import unindent_blocks
from mdtangle.core.models import CodeBlock, TangledDoc, TangleResult, UnresolvedMacro
from mdtangle.core.parse import discover_files, read_document
from mdtangle.core.transform.concat import concatenate
from mdtangle.core.transform.escape import unescape_blocks
from mdtangle.core.transform.macros import expand_blocks
from mdtangle.core.transform.select import select_files
from mdtangle.core.write import write_file


logger = logging.getLogger(__name__)


def expand_passes(blocks: list[CodeBlock], passes: int = 1) -> tuple[list[CodeBlock], list[UnresolvedMacro]]:
    """Run up to `passes` expansion passes over the whole collection.

    Stops early once a pass changes nothing. Diagnostics come from the last
    pass run, so each unresolved reference is reported once.
    """
    diagnostics: list[UnresolvedMacro] = []
    for n in range(max(passes, 1)):
        expanded, diagnostics = expand_blocks(blocks)
        if expanded == blocks:
            logger.debug("Expansion reached a fixed point after %d pass(es)", n + 1)
            break
        blocks = expanded
    return blocks, diagnostics


def tangle(document: str, passes: int = 1) -> TangleResult:
    """Extract, unindent, concatenate, expand, unescape, and select files from one document."""
    blocks = extract_blocks(document)
    logger.debug("Extracted %d block(s)", len(blocks))
    blocks = concatenate(unindent_blocks(blocks))
    blocks, diagnostics = expand_passes(blocks, passes)
    blocks = unescape_blocks(blocks)
    return TangleResult(blocks=blocks, files=select_files(blocks), diagnostics=diagnostics)


def tangle_file(source: Path, settings: Settings, dry_run: bool = False) -> TangledDoc:
    """Tangle one source document and write its files.

    Files go to settings.out_dir when set, else next to the source document.
    """
    doc = read_document(source, settings.encoding)
    result = tangle(doc.text, settings.passes)
    for d in result.diagnostics:
        logger.debug("%s: %s", source, d)

    base_dir = Path(settings.out_dir) if settings.out_dir else source.parent
    written = [
        write_file(f, base_dir, settings.encoding, settings.final_newline, dry_run)
        for f in result.files
    ]
    return TangledDoc(source=source, written=written, diagnostics=result.diagnostics)


def run_tangle(path: str, settings: Settings, dry_run: bool = False) -> list[TangledDoc]:
    """Tangle every document found at path. Raises RuntimeError naming the failing file."""
    try:
        sources = discover_files(Path(path))
    except OSError as e:
        raise RuntimeError(f"Failed to tangle {path}: {e}") from e

    results = []
    for p in sources:
        try:
            results.append(tangle_file(p, settings, dry_run))
        except (OSError, UnicodeError) as e:
            raise RuntimeError(f"Failed to tangle {p}: {e}") from e
    return results
