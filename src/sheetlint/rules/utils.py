"""Text helpers shared by rules."""

from typing import Iterator

_WHITESPACE = frozenset(" \t\n\r\f")


def is_whitespace(char: str | None) -> bool:
  """Check if a single character is whitespace. None is not."""
  return char is not None and char in _WHITESPACE


def style_search(source: str, target: str) -> Iterator[int]:
  """Yield indices of ``target`` in ``source``.

  Matches inside quoted strings, ``/* */`` comments, or escaped by a
  backslash are skipped.
  """
  quote: str | None = None
  in_comment = False
  i = 0
  length = len(source)

  while i < length:
    char = source[i]

    if in_comment:
      if source.startswith("*/", i):
        in_comment = False
        i += 2
        continue
      i += 1
      continue

    if quote is not None:
      if char == "\\":
        i += 2
        continue
      if char == quote:
        quote = None
      i += 1
      continue

    if char == "\\":
      i += 2
      continue

    if char in ("'", '"'):
      quote = char
      i += 1
      continue

    if source.startswith("/*", i):
      in_comment = True
      i += 2
      continue

    if source.startswith(target, i):
      yield i
      i += len(target)
      continue

    i += 1
