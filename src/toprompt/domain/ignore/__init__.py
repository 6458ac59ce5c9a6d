"""Ignore pattern matching."""

from toprompt.domain.ignore.rules import IgnorePattern, IgnoreRuleSet, InvalidIgnorePatternError, glob_to_regex

__all__ = ["IgnorePattern", "IgnoreRuleSet", "InvalidIgnorePatternError", "glob_to_regex"]
