"""Minimal parsed-document tree consumed by rules.

Parsing source text into this tree happens elsewhere; rules only read
declarations and ask nodes to locate offsets within themselves.
"""

from dataclasses import dataclass, field
from typing import Iterator, Sequence

from sheetlint.models import Position


@dataclass
class Declaration:
  """A ``prop: value`` declaration and where it starts in the source."""

  prop: str
  value: str
  between: str = ": "
  source: Position = field(default_factory=lambda: Position(line=1, column=1))

  def to_string(self) -> str:
    return f"{self.prop}{self.between}{self.value}"

  @property
  def value_offset(self) -> int:
    """Offset of the value within the node string."""
    return len(self.prop) + len(self.between)

  def position_at(self, index: int) -> Position:
    """Translate an offset in the node string to a document position."""
    line = self.source.line
    column = self.source.column
    for char in self.to_string()[:index]:
      if char == "\n":
        line += 1
        column = 1
      else:
        column += 1
    return Position(line=line, column=column)

  def range_by(
    self,
    index: int | None = None,
    end_index: int | None = None,
  ) -> tuple[Position, Position]:
    """Return start and end positions for a span of this node.

    With no offsets the whole node is covered. ``end_index`` is exclusive.
    """
    text = self.to_string()
    start_offset = index if index is not None else 0
    if end_index is not None:
      end_offset = end_index
    elif index is not None:
      end_offset = index + 1
    else:
      end_offset = len(text)
    return self.position_at(start_offset), self.position_at(end_offset)


@dataclass
class Root:
  """Top of a document tree."""

  nodes: Sequence[Declaration] = field(default_factory=list)

  def walk_decls(self) -> Iterator[Declaration]:
    yield from self.nodes
