"""
Words that have no distinct plural ("rice", "news", "software").

Literal words live in a set and short-circuit both directions. Whole
families ("...fish", "...sheep") are patterns; those become self-mapping
rules in both rule stores and so compete with other rules by registration
order instead of overriding them.
"""

import logging
import re
from typing import Callable, Union

from countnoun.exceptions import InvalidRuleError

logger = logging.getLogger("countnoun.uncountables")

# Template that reproduces the whole match verbatim
IDENTITY_TEMPLATE = "$0"


class UncountableSet:
    """Case-insensitive set of literal uncountable words."""

    def __init__(self, register_pattern: Callable[[re.Pattern, str], None]):
        """
        Args:
            register_pattern: Called with ``(pattern, "$0")`` for pattern
                families; expected to add the rule to both rule stores.
        """
        self._words: set[str] = set()
        self._register_pattern = register_pattern

    def __contains__(self, word: str) -> bool:
        return word.lower() in self._words

    def __len__(self) -> int:
        return len(self._words)

    def mark(self, word_or_pattern: Union[str, re.Pattern]) -> None:
        if isinstance(word_or_pattern, str):
            self._words.add(word_or_pattern.lower())
            logger.debug(f"Registered uncountable word: {word_or_pattern.lower()!r}")
            return

        if isinstance(word_or_pattern, re.Pattern):
            self._register_pattern(word_or_pattern, IDENTITY_TEMPLATE)
            logger.debug(f"Registered uncountable family: {word_or_pattern.pattern!r}")
            return

        raise InvalidRuleError(
            f"Uncountable entry must be a string or compiled pattern, "
            f"got {type(word_or_pattern).__name__}"
        )
