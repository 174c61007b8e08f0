"""Source document discovery and reading"""

from pathlib import Path

from mdtangle.core.models import SourceDoc


MD_EXTENSIONS = {'.md', '.markdown', '.mdx'}


def discover_files(path: Path) -> list[Path]:
    """Return [path] for a file, or sorted markdown files found recursively under a directory."""
    if path.is_file():
        return [path]
    if not path.exists():
        raise FileNotFoundError(f"No such file or directory: '{path}'")
    return sorted(p for p in path.rglob('*') if p.is_file() and p.suffix in MD_EXTENSIONS)


def read_document(path: Path, encoding: str = 'utf-8') -> SourceDoc:
    """Read a whole source document; OSError/UnicodeError propagate to the caller."""
    return SourceDoc(path=path, text=path.read_text(encoding=encoding))
