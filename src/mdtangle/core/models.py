"""Value types passed between the tangle stages"""

from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, ConfigDict


class CodeBlock(BaseModel):
    """One named code body; name is kept verbatim from the marker line."""
    model_config = ConfigDict(frozen=True)

    name: str
    body: str


class OutputFile(BaseModel):
    """A block selected for writing: path relative to the base directory."""
    model_config = ConfigDict(frozen=True)

    path: str
    contents: str


class UnresolvedMacro(BaseModel):
    """Non-fatal diagnostic: a macro reference naming a block that does not exist."""
    model_config = ConfigDict(frozen=True)

    block: str                      # block containing the reference
    name: str                       # trimmed name that failed lookup
    line: int                       # 1-based line within the block body

    def __str__(self) -> str:
        return f"unresolved macro '{self.name}' in block '{self.block}' (line {self.line})"


class TangleResult(BaseModel):
    """Everything the core produces for one document."""
    blocks: list[CodeBlock]         # fully processed, unique names, first-occurrence order
    files: list[OutputFile]
    diagnostics: list[UnresolvedMacro] = []


@dataclass
class SourceDoc:
    """A source document read from disk; not persisted."""
    path: Path
    text: str


@dataclass
class WrittenFile:
    """Result of handing one OutputFile to the writer."""
    path: Path
    status: str                     # created | updated | unchanged | skipped (dry run)


@dataclass
class TangledDoc:
    """Per-document outcome of run_tangle."""
    source: Path
    written: list[WrittenFile]
    diagnostics: list[UnresolvedMacro]
