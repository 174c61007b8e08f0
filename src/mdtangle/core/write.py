"""Write selected output files relative to a base directory"""

import logging
from pathlib import Path

from mdtangle.core.models import OutputFile, WrittenFile
from mdtangle.core.utils.hashing import sha256_bytes


logger = logging.getLogger(__name__)


def resolve_path(output: OutputFile, base_dir: Path) -> Path:
    """Destination for output; surrounding whitespace in the block name is ignored.

    Absolute paths and '..' segments are honoured, but a destination outside
    base_dir is logged as a warning.
    """
    dest = base_dir / output.path.strip()
    if not dest.resolve().is_relative_to(base_dir.resolve()):
        logger.warning("%s resolves outside %s", output.path, base_dir)
    return dest


def file_status(dest: Path, contents: str, encoding: str = 'utf-8') -> str:
    """created if dest is missing, unchanged if its bytes match contents, else updated.

    Compares raw bytes so an existing file that does not decode is just 'updated'.
    """
    if not dest.exists():
        return 'created'
    if sha256_bytes(dest.read_bytes()) == sha256_bytes(contents.encode(encoding)):
        return 'unchanged'
    return 'updated'


def write_file(
    output: OutputFile,
    base_dir: Path,
    encoding: str = 'utf-8',
    final_newline: bool = False,
    dry_run: bool = False,
    ) -> WrittenFile:
    """Write one output file, creating parent directories. Returns its path and status.

    The file is always rewritten; status only reports how it compares with what
    was on disk before. With dry_run nothing is touched and status is 'skipped'.
    """
    dest = resolve_path(output, base_dir)
    contents = output.contents
    if final_newline and not contents.endswith('\n'):
        contents += '\n'

    if dry_run:
        logger.info("Would write %s", dest)
        return WrittenFile(path=dest, status='skipped')

    status = file_status(dest, contents, encoding)
    dest.parent.mkdir(parents=True, exist_ok=True)
    dest.write_text(contents, encoding=encoding)
    logger.info("Wrote %s (%s)", dest, status)
    return WrittenFile(path=dest, status=status)
