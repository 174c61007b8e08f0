"""Merge same-named blocks into one body per name"""

from mdtangle.core.models import CodeBlock


def concatenate(blocks: list[CodeBlock]) -> list[CodeBlock]:
    """Join bodies sharing a name with '\\n', keeping first-occurrence order of names."""
    bodies: dict[str, list[str]] = {}
    for b in blocks:
        bodies.setdefault(b.name, []).append(b.body)
    return [CodeBlock(name=name, body='\n'.join(parts)) for name, parts in bodies.items()]


def as_map(blocks: list[CodeBlock]) -> dict[str, str]:
    """Name -> body lookup in collection order. Later duplicates win; concatenate first."""
    return {b.name: b.body for b in blocks}
