"""Rendering of diagnostic messages."""

import re
from typing import Any, Callable, Iterator, Mapping, Sequence

from sheetlint.models import Computed, Static

_PLACEHOLDER = re.compile(r"%[ds]")


def printf_like(template: str, args: Sequence[Any]) -> str:
  """Substitute ``%s``/``%d`` placeholders left to right.

  Extra arguments are ignored; placeholders without an argument stay as-is.
  """
  remaining: Iterator[Any] = iter(args)
  missing = object()

  def substitute(match: re.Match[str]) -> str:
    arg = next(remaining, missing)
    if arg is missing:
      return match.group(0)
    return str(arg)

  return _PLACEHOLDER.sub(substitute, template)


def render(message: Static | Computed, args: Sequence[Any]) -> str:
  """Render a message template or message function with its arguments."""
  if isinstance(message, Computed):
    return message.resolve(*args)
  return printf_like(message.resolve(), args)


def rule_messages(
  rule_name: str,
  messages: Mapping[str, str | Callable[..., str]],
) -> dict[str, str | Callable[..., str]]:
  """Suffix every message of a rule with the rule name."""
  suffixed: dict[str, str | Callable[..., str]] = {}
  for key, message in messages.items():
    if isinstance(message, str):
      suffixed[key] = f"{message} ({rule_name})"
    else:
      suffixed[key] = _suffix_fn(message, rule_name)
  return suffixed


def _suffix_fn(fn: Callable[..., str], rule_name: str) -> Callable[..., str]:
  def wrapped(*args: Any) -> str:
    return f"{fn(*args)} ({rule_name})"

  return wrapped
