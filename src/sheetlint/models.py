"""Core domain models for diagnostics and fixes."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Generic, Protocol, Sequence, TypeVar

T = TypeVar("T")


class Severity(Enum):
  """Diagnostic severity levels."""

  ERROR = "error"
  WARNING = "warning"


@dataclass(frozen=True)
class Position:
  """A 1-based line/column location in a source document."""

  line: int
  column: int


@dataclass(frozen=True)
class EditRange:
  """Region of a document changed by a fix."""

  start: Position
  end: Position

  def overlaps(self, other: "EditRange") -> bool:
    """Check if two ranges share at least one position."""
    return (
      (self.start.line, self.start.column) <= (other.end.line, other.end.column)
      and (other.start.line, other.start.column) <= (self.end.line, self.end.column)
    )


class SourceNode(Protocol):
  """A document node that can locate offsets within itself."""

  def range_by(
    self,
    index: int | None = None,
    end_index: int | None = None,
  ) -> tuple[Position, Position]:
    ...


@dataclass(frozen=True)
class Static(Generic[T]):
  """A value known up front."""

  value: T

  def resolve(self, *args: Any) -> T:
    return self.value


@dataclass(frozen=True)
class Computed(Generic[T]):
  """A value produced from the problem's message arguments."""

  fn: Callable[..., T]

  def resolve(self, *args: Any) -> T:
    return self.fn(*args)


def as_variant(value: Any) -> Static | Computed | None:
  """Wrap a plain value or callable into its tagged variant."""
  if value is None or isinstance(value, (Static, Computed)):
    return value
  if callable(value):
    return Computed(value)
  return Static(value)


FixCallback = Callable[[], EditRange | None]


@dataclass(frozen=True)
class Problem:
  """A candidate violation reported by a rule.

  Either ``line`` or ``node`` must be given so that the problem can be
  placed on a line. ``start``/``end`` take precedence over
  ``index``/``end_index`` when the diagnostic position is assembled.

  ``severity`` and ``message`` accept a plain value or a callable taking
  ``message_args``; both are normalized to ``Static``/``Computed``.
  """

  rule_name: str
  message: Static[str] | Computed[str] | str | Callable[..., str]
  message_args: Sequence[Any] = ()
  node: SourceNode | None = None
  index: int | None = None
  end_index: int | None = None
  line: int | None = None
  start: Position | None = None
  end: Position | None = None
  severity: Any = None
  word: str | None = None
  fix: FixCallback | None = None

  def __post_init__(self) -> None:
    object.__setattr__(self, "message", as_variant(self.message))
    object.__setattr__(self, "severity", as_variant(self.severity))
    object.__setattr__(self, "message_args", tuple(self.message_args))


@dataclass(frozen=True)
class Diagnostic:
  """A finalized, reported issue."""

  rule: str
  severity: Severity
  text: str
  line: int
  column: int
  end_line: int | None = None
  end_column: int | None = None
  index: int | None = None
  end_index: int | None = None
  word: str | None = None
  url: str | None = None
  node: SourceNode | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class SuppressionHit:
  """A violation that fell inside a suppression range."""

  rule: str
  line: int


@dataclass(frozen=True)
class RuleMeta:
  """Static facts a rule declares about itself."""

  url: str | None = None
  fixable: bool = False


@dataclass(frozen=True)
class FixOutcome:
  """A single fix decision made during a pass."""

  fixed: bool
  range: EditRange | None = None
