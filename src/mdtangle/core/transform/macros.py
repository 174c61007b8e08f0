"""Single-pass macro expansion with per-line prefix/suffix wrapping

A line holding an unescaped marker token is a macro reference:

    <prefix>###### <name> ######<suffix>

or, without a closing marker, ``<prefix>###### <name>`` with an empty suffix.
The line is replaced by every line of the named block, each wrapped as
``prefix + line + suffix``. Substituted text is not expanded again in the
same pass; callers wanting nested references resolved run another pass over
the whole collection.
"""

from typing import Mapping, NamedTuple, Optional

from mdtangle.core.models import CodeBlock, UnresolvedMacro
from mdtangle.core.transform.concat import as_map
from mdtangle.core.utils.text import MARKER, join_lines, split_lines


class MacroRef(NamedTuple):
    name: str
    prefix: str
    suffix: str


def find_marker(line: str, start: int = 0) -> int:
    """Index of the next marker at or after start not preceded by a backslash, else -1."""
    i = line.find(MARKER, start)
    while i > 0 and line[i - 1] == '\\':
        i = line.find(MARKER, i + len(MARKER))
    return i


def parse_ref(line: str) -> Optional[MacroRef]:
    """Return the macro reference on line, or None when there is none (or its name is empty)."""
    first = find_marker(line)
    if first == -1:
        return None
    rest = first + len(MARKER)
    second = find_marker(line, rest)
    if second == -1:
        name, suffix = line[rest:], ''
    else:
        name, suffix = line[rest:second], line[second + len(MARKER):]
    name = name.strip()
    if not name:
        return None
    return MacroRef(name=name, prefix=line[:first], suffix=suffix)


def expand_body(body: str, blocks: Mapping[str, str]) -> tuple[str, list[tuple[int, str]]]:
    """Expand each macro reference in body once.

    Returns (new_body, missing) where missing holds (line_number, name) for each
    reference whose name is absent from blocks. Those lines are left unchanged.
    """
    out: list[str] = []
    missing: list[tuple[int, str]] = []
    for number, line in enumerate(split_lines(body), start=1):
        ref = parse_ref(line)
        if ref is None:
            out.append(line)
        elif ref.name not in blocks:
            missing.append((number, ref.name))
            out.append(line)
        else:
            out.append(join_lines([
                ref.prefix + inner + ref.suffix for inner in split_lines(blocks[ref.name])
            ]))
    return join_lines(out), missing


def expand_blocks(blocks: list[CodeBlock]) -> tuple[list[CodeBlock], list[UnresolvedMacro]]:
    """Run one expansion pass over the collection against a fixed snapshot of it."""
    snapshot = as_map(blocks)
    expanded: list[CodeBlock] = []
    diagnostics: list[UnresolvedMacro] = []

    for b in blocks:
        body, missing = expand_body(b.body, snapshot)
        diagnostics.extend(UnresolvedMacro(block=b.name, name=name, line=number) for number, name in missing)
        expanded.append(CodeBlock(name=b.name, body=body))

    return expanded, diagnostics
