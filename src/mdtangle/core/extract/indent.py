"""Indentation normalization for extracted block bodies"""

from mdtangle.core.models import CodeBlock
from mdtangle.core.utils.text import join_lines, leading_whitespace, split_lines


def indent_prefix(body: str) -> str | None:
    """Leading whitespace of the first line holding a non-whitespace character.

    Returns None when every line is blank.
    """
    for line in split_lines(body):
        if line.strip():
            return leading_whitespace(line)
    return None


def unindent(body: str) -> str:
    """Strip the block's indentation prefix from every line that starts with it.

    Lines with less leading whitespace than the prefix are kept as-is. Lines are
    rejoined with '\\n', so a trailing line break on body is dropped.
    """
    prefix = indent_prefix(body)
    if prefix is None:
        return body
    return join_lines([
        line[len(prefix):] if line.startswith(prefix) else line
        for line in split_lines(body)
    ])


def unindent_blocks(blocks: list[CodeBlock]) -> list[CodeBlock]:
    return [CodeBlock(name=b.name, body=unindent(b.body)) for b in blocks]
