"""Escape resolution: turn escaped marker tokens back into literal ones"""

from mdtangle.core.models import CodeBlock
from mdtangle.core.utils.text import ESCAPED_MARKER, MARKER


def unescape(body: str) -> str:
    r"""Replace every ``\######`` with ``######``; run after macro expansion."""
    return body.replace(ESCAPED_MARKER, MARKER)


def unescape_blocks(blocks: list[CodeBlock]) -> list[CodeBlock]:
    return [CodeBlock(name=b.name, body=unescape(b.body)) for b in blocks]
