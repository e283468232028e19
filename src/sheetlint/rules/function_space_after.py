"""function-space-after: whitespace after closing parentheses in values."""

from typing import TYPE_CHECKING, Any

from sheetlint.document import Declaration, Root
from sheetlint.models import Problem, RuleMeta
from sheetlint.report import report, rule_messages
from sheetlint.rules.base import validate_options
from sheetlint.rules.registry import register_rule
from sheetlint.rules.utils import is_whitespace, style_search

if TYPE_CHECKING:
  from sheetlint.result import LintResult

rule_name = "function-space-after"

messages = rule_messages(rule_name, {
  "expected": 'Expected single space after ")"',
  "rejected": 'Unexpected whitespace after ")"',
})

meta = RuleMeta(url="https://sheetlint.dev/rules/function-space-after")

ALWAYS = "always"
NEVER = "never"

# Characters allowed right after ")" in "always" mode, besides one space
_ALLOWED_NEXT = (")", ",", None)


class FunctionSpaceAfterRule:
  """Requires a single space, or no whitespace, after ``)`` in values.

  ``always``: the delimiter must be followed by exactly one space, another
  ``)``, a comma, or the end of the value.
  ``never``: the delimiter must not be followed by whitespace.
  """

  name = rule_name
  meta = meta

  def __init__(self, primary: Any, secondary_options: dict[str, Any] | None = None):
    """Takes only a primary option; secondary options are accepted and ignored."""
    self._expectation = primary

  def check(self, root: Root, result: "LintResult") -> None:
    if not validate_options(result, rule_name, self._expectation, (ALWAYS, NEVER)):
      return

    for decl in root.walk_decls():
      value = decl.value
      for index in style_search(value, ")"):
        self._check_closing_paren(value, index, decl, result)

  def _check_closing_paren(
    self,
    source: str,
    index: int,
    node: Declaration,
    result: "LintResult",
  ) -> None:
    next_char = _char_at(source, index + 1)

    if self._expectation == ALWAYS:
      if next_char == " " and not is_whitespace(_char_at(source, index + 2)):
        return
      if next_char in _ALLOWED_NEXT:
        return
      message = messages["expected"]
    elif is_whitespace(next_char):
      message = messages["rejected"]
    else:
      return

    node_index = node.value_offset + index
    report(result, Problem(
      rule_name=rule_name,
      message=message,
      node=node,
      index=node_index,
      end_index=node_index + 1,
    ))


def _char_at(source: str, index: int) -> str | None:
  return source[index] if index < len(source) else None


def _create_function_space_after(
  primary: Any,
  secondary_options: dict[str, Any] | None = None,
) -> FunctionSpaceAfterRule:
  return FunctionSpaceAfterRule(primary, secondary_options)


register_rule(rule_name, _create_function_space_after, meta)
