"""
Ordered rule stores for pluralization and singularization.

Each direction owns one append-only sequence of rules. Matching walks the
sequence backwards, so the most recently registered rule wins:

    store.append("thou", "you")         # registered first, tried last
    store.append(re.compile("ou$"), "")  # registered last, tried first

The built-in catch-all (append an "s") is registered before every special
case, which is what gives it the lowest effective priority.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Union

from countnoun.exceptions import InvalidRuleError

logger = logging.getLogger("countnoun.rules")

RulePattern = Union[str, re.Pattern]


class Direction(Enum):
    """Which way a rule inflects a word."""

    PLURAL = "plural"  # singular -> plural
    SINGULAR = "singular"  # plural -> singular


@dataclass(frozen=True)
class Rule:
    """A compiled matcher and its replacement template."""

    matcher: re.Pattern
    template: str
    source: RulePattern


def compile_rule(pattern: RulePattern) -> re.Pattern:
    """
    Turn a registration pattern into a matcher.

    Plain strings match the whole word, case-insensitively (``^word$``).
    Compiled patterns are used exactly as given, flags included.

    Raises:
        InvalidRuleError: the string is not a valid regular expression, or
            the pattern is neither a string nor a compiled pattern.
    """
    if isinstance(pattern, re.Pattern):
        return pattern

    if isinstance(pattern, str):
        try:
            return re.compile(f"^{pattern}$", re.IGNORECASE)
        except re.error as e:
            raise InvalidRuleError(f"Invalid rule pattern {pattern!r}: {e}") from e

    raise InvalidRuleError(
        f"Rule pattern must be a string or compiled pattern, got {type(pattern).__name__}"
    )


class RuleStore:
    """
    Append-only rule sequence for one direction.

    The sequence is published as an immutable tuple that is swapped on every
    append, so readers iterating ``by_priority()`` never observe a partially
    applied registration.
    """

    def __init__(self, direction: Direction):
        self.direction = direction
        self._rules: tuple[Rule, ...] = ()

    def __len__(self) -> int:
        return len(self._rules)

    @property
    def rules(self) -> tuple[Rule, ...]:
        """Rules in registration order."""
        return self._rules

    def append(self, pattern: RulePattern, template: str) -> Rule:
        """Compile and register a rule; nothing is stored if compilation fails."""
        if not isinstance(template, str):
            raise InvalidRuleError(
                f"Rule template must be a string, got {type(template).__name__}"
            )

        rule = Rule(matcher=compile_rule(pattern), template=template, source=pattern)
        self._rules = self._rules + (rule,)
        logger.debug(
            f"Registered {self.direction.value} rule #{len(self._rules)}: "
            f"{rule.matcher.pattern!r} -> {template!r}"
        )
        return rule

    def by_priority(self) -> Iterator[Rule]:
        """Most recently registered rule first."""
        return reversed(self._rules)

    def find(self, word: str) -> Optional[tuple[Rule, re.Match]]:
        """First rule (by priority) whose matcher finds ``word``, with its match."""
        for rule in self.by_priority():
            match = rule.matcher.search(word)
            if match is not None:
                return rule, match
        return None
