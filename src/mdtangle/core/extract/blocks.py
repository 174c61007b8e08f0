"""Block extraction: split a literate document into named code blocks"""

import re

from mdtangle.core.models import CodeBlock
from mdtangle.core.utils.text import BLOCK_START, FENCE


# A line break followed by a non-whitespace character ends an indented body.
INDENTED_END_RE = re.compile(r'\n(?=\S)')


def _collect_name(text: str, pos: int) -> tuple[str, int]:
    """Return (name, position after the name's line break); name runs to end of line."""
    end = text.find('\n', pos)
    if end == -1:
        return text[pos:], len(text)
    return text[pos:end], end + 1


def _collect_fenced(text: str, pos: int) -> tuple[str, int]:
    """Collect a fenced body starting at an opening fence; the closing fence is consumed."""
    hint_end = text.find('\n', pos)
    if hint_end == -1:
        return '', len(text)
    close = text.find('\n' + FENCE, hint_end)
    if close == -1:
        return text[hint_end + 1:], len(text)
    if close == hint_end:
        return '', close + 1 + len(FENCE)
    return text[hint_end + 1:close], close + 1 + len(FENCE)


def _collect_indented(text: str, pos: int) -> tuple[str, int]:
    """Collect up to the next line starting with non-whitespace; that line break is left in place."""
    m = INDENTED_END_RE.search(text, pos)
    if m is None:
        return text[pos:], len(text)
    return text[pos:m.start()], m.start()


def extract_blocks(document: str) -> list[CodeBlock]:
    """Return one CodeBlock per marker occurrence, in document order.

    The start of the document counts as a line break, so a marker on the first
    line is recognised. Unterminated bodies simply end at end of input.
    """
    text = '\n' + document
    blocks: list[CodeBlock] = []
    pos = 0

    while (start := text.find(BLOCK_START, pos)) != -1:
        name, pos = _collect_name(text, start + len(BLOCK_START))
        if text.startswith(FENCE, pos):
            body, pos = _collect_fenced(text, pos)
        else:
            body, pos = _collect_indented(text, pos)
        blocks.append(CodeBlock(name=name, body=body))

    return blocks
