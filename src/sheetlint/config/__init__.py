"""Configuration management."""

from sheetlint.config.loader import load_config
from sheetlint.config.settings import LintConfig, RuleSettings

__all__ = ["LintConfig", "RuleSettings", "load_config"]
