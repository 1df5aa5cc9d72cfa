"""
Exceptions raised by countnoun.

Only rule registration and rules-file loading can fail. Queries never raise:
a word no rule matches is returned unchanged.
"""


class CountnounError(Exception):
    """Base class for all countnoun errors."""


class InvalidRuleError(CountnounError, ValueError):
    """A rule pattern, template or irregular pair cannot be registered."""


class RulesConfigError(CountnounError):
    """An extra-rules file is unreadable or malformed."""
