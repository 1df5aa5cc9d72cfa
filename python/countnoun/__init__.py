"""
countnoun - English singular/plural inflection.

    >>> import countnoun
    >>> countnoun.pluralize("peach", 2, inclusive=True)
    '2 peaches'
    >>> countnoun.singular("Geese")
    'Goose'

Module-level functions use a shared default Inflector, built on first use
(and extended with COUNTNOUN_RULES_FILE when set). Construct your own
Inflector for isolated rule sets.
"""

import re
import threading
from typing import Optional, Union

from countnoun.engine import Inflector
from countnoun.exceptions import CountnounError, InvalidRuleError, RulesConfigError
from countnoun.rules import RulePattern

__version__ = "0.1.0"

_default: Optional[Inflector] = None
_default_lock = threading.Lock()


def get_default_inflector() -> Inflector:
    """Shared seeded Inflector behind the module-level functions."""
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                from countnoun.config import apply_env_rules

                inflector = Inflector()
                apply_env_rules(inflector)
                _default = inflector
    return _default


def set_default_inflector(inflector: Optional[Inflector]) -> None:
    """Replace the shared Inflector (None rebuilds it on next use)."""
    global _default
    with _default_lock:
        _default = inflector


def pluralize(word: str, count: int = 0, inclusive: bool = False) -> str:
    return get_default_inflector().pluralize(word, count, inclusive)


def plural(word: str) -> str:
    return get_default_inflector().plural(word)


def singular(word: str) -> str:
    return get_default_inflector().singular(word)


def is_plural(word: str) -> bool:
    return get_default_inflector().is_plural(word)


def is_singular(word: str) -> bool:
    return get_default_inflector().is_singular(word)


def add_plural_rule(pattern: RulePattern, template: str) -> None:
    get_default_inflector().add_plural_rule(pattern, template)


def add_singular_rule(pattern: RulePattern, template: str) -> None:
    get_default_inflector().add_singular_rule(pattern, template)


def add_irregular_rule(singular: str, plural: str) -> None:
    get_default_inflector().add_irregular_rule(singular, plural)


def add_uncountable_rule(word_or_pattern: Union[str, re.Pattern]) -> None:
    get_default_inflector().add_uncountable_rule(word_or_pattern)


__all__ = [
    "Inflector",
    "CountnounError",
    "InvalidRuleError",
    "RulesConfigError",
    "get_default_inflector",
    "set_default_inflector",
    "pluralize",
    "plural",
    "singular",
    "is_plural",
    "is_singular",
    "add_plural_rule",
    "add_singular_rule",
    "add_irregular_rule",
    "add_uncountable_rule",
]
