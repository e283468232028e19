"""Exceptions raised by the reporting core."""


class SheetlintError(Exception):
  """Base class for sheetlint errors."""


class ConfigError(SheetlintError):
  """Configuration could not be parsed."""


class MisusedFixCallbackError(SheetlintError):
  """A fix callback was passed for a rule that is not fixable."""

  def __init__(self, rule_name: str):
    self.rule_name = rule_name
    super().__init__(
      f'The "{rule_name}" rule requires "meta.fixable" to be truthy '
      'if the "fix" callback is being passed'
    )


class UnresolvableLineError(SheetlintError):
  """A problem carried neither a line number nor a node."""

  def __init__(self, rule_name: str):
    self.rule_name = rule_name
    super().__init__(
      f'The "{rule_name}" rule failed to pass either a node or a line number '
      "to the report() function"
    )
