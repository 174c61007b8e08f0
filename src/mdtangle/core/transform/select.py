"""Output-file selection from the processed block collection"""

from mdtangle.core.models import CodeBlock, OutputFile
from mdtangle.core.utils.text import FILE_PREFIX


def select_files(blocks: list[CodeBlock]) -> list[OutputFile]:
    """Keep blocks named 'file:<path>', in collection order, as (path, contents)."""
    return [
        OutputFile(path=b.name[len(FILE_PREFIX):], contents=b.body)
        for b in blocks
        if b.name.startswith(FILE_PREFIX)
    ]
