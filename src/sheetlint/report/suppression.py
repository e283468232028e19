"""Suppression ranges and lookup."""

from dataclasses import dataclass
from typing import Mapping, Sequence

# Key under which ranges that apply to every rule are stored
RULE_NAME_ALL = "all"


@dataclass(frozen=True)
class SuppressionRange:
  """Lines in which a rule's violations are not reported.

  ``end`` of None means the range runs to the end of the document.
  ``rules`` restricts a blanket range to the listed rules.
  """

  start: int
  end: int | None = None
  rules: Sequence[str] | None = None

  def __post_init__(self) -> None:
    if self.end is not None and self.end < self.start:
      raise ValueError(f"Range end {self.end} precedes start {self.start}")

  def covers(self, rule_name: str, line: int) -> bool:
    return (
      self.start <= line
      and (self.end is None or self.end >= line)
      and (self.rules is None or rule_name in self.rules)
    )


SuppressionTable = Mapping[str, Sequence[SuppressionRange]]


def is_suppressed(
  rule_name: str,
  line: int,
  ranges: SuppressionTable,
) -> bool:
  """Check if a rule's violation on a line falls in a suppression range.

  Ranges stored under the rule itself take priority; the blanket
  ``all`` ranges are consulted only when the rule has no entry.
  Ranges may overlap and need not be sorted.
  """
  if rule_name in ranges:
    candidates = ranges[rule_name]
  else:
    candidates = ranges.get(RULE_NAME_ALL, ())

  return any(r.covers(rule_name, line) for r in candidates)
