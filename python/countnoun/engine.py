"""
The inflection engine.

An Inflector owns four stores (plural rules, singular rules, irregular pairs,
uncountable words) and answers plural/singular/is-plural/is-singular queries
against them. Lookups are case-insensitive; results are re-cased to match the
caller's word.

Resolution order for ``plural`` (``singular`` mirrors it):
1. Empty or literal uncountable word -> unchanged
2. Already an irregular plural -> itself, re-cased
3. Irregular singular -> its plural, re-cased
4. First matching plural rule, most recently registered first
5. No match -> unchanged
"""

import logging
import re
import threading
from typing import Optional, Union

from countnoun.casing import restore_case
from countnoun.interpolation import interpolate, match_captures
from countnoun.irregulars import IrregularMap
from countnoun.rules import Direction, Rule, RulePattern, RuleStore
from countnoun.uncountables import UncountableSet

logger = logging.getLogger("countnoun.engine")


def apply_rule(word: str, rule: Rule, match: re.Match) -> str:
    """
    Replace the matched part of ``word`` using ``rule``'s template.

    ``match`` may come from the lowercased word; its offsets index ``word``
    directly and captures are taken from ``word``'s own casing.

    Case is restored against the matched substring. A zero-length match (an
    "append a suffix" rule like ``s?$`` on "test") has nothing to copy case
    from, so the character just before the match position is used instead.
    """
    result = interpolate(rule.template, match_captures(match, word))

    matched = word[match.start() : match.end()]
    if matched:
        basis = matched
    else:
        basis = word[match.start() - 1] if match.start() > 0 else ""

    return word[: match.start()] + restore_case(basis, result) + word[match.end() :]


class Inflector:
    """
    English singular/plural converter.

    Args:
        seed: Load the built-in tables (countnoun.constants). Pass False to
            build an empty engine, mainly for tests and custom rule sets.

    Example:
        >>> inflector = Inflector()
        >>> inflector.plural("Goose")
        'Geese'
        >>> inflector.pluralize("peach", 2, inclusive=True)
        '2 peaches'
    """

    def __init__(self, seed: bool = True):
        # Serialises registrations; queries read immutable snapshots and never lock
        self._lock = threading.Lock()

        self.plural_rules = RuleStore(Direction.PLURAL)
        self.singular_rules = RuleStore(Direction.SINGULAR)
        self.irregulars = IrregularMap()
        self.uncountables = UncountableSet(self._register_identity_rule)

        if seed:
            from countnoun.seed import load_seed_rules

            load_seed_rules(self)

    def __repr__(self) -> str:
        return (
            f"Inflector(plural_rules={len(self.plural_rules)}, "
            f"singular_rules={len(self.singular_rules)}, "
            f"irregulars={len(self.irregulars)}, "
            f"uncountables={len(self.uncountables)})"
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def plural(self, word: str) -> str:
        """Plural form of ``word``, with the caller's casing."""
        return self._inflect(
            word,
            keep=self.irregulars.plural_to_singular,
            replace=self.irregulars.singular_to_plural,
            rules=self.plural_rules,
        )

    def singular(self, word: str) -> str:
        """Singular form of ``word``, with the caller's casing."""
        return self._inflect(
            word,
            keep=self.irregulars.singular_to_plural,
            replace=self.irregulars.plural_to_singular,
            rules=self.singular_rules,
        )

    def is_plural(self, word: str) -> bool:
        """True if pluralizing ``word`` would leave it unchanged."""
        return self._check(
            word,
            keep=self.irregulars.plural_to_singular,
            replace=self.irregulars.singular_to_plural,
            rules=self.plural_rules,
        )

    def is_singular(self, word: str) -> bool:
        """True if singularizing ``word`` would leave it unchanged."""
        return self._check(
            word,
            keep=self.irregulars.singular_to_plural,
            replace=self.irregulars.plural_to_singular,
            rules=self.singular_rules,
        )

    def pluralize(self, word: str, count: int = 0, inclusive: bool = False) -> str:
        """
        Inflect ``word`` to agree with ``count``.

        A count of exactly 1 gives the singular, anything else the plural.
        With ``inclusive`` the count is prefixed: ``"2 peaches"``.
        """
        inflected = self.singular(word) if count == 1 else self.plural(word)
        return f"{count} {inflected}" if inclusive else inflected

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def add_plural_rule(self, pattern: RulePattern, template: str) -> None:
        """Register a pluralization rule, checked before every earlier rule."""
        with self._lock:
            self.plural_rules.append(pattern, template)

    def add_singular_rule(self, pattern: RulePattern, template: str) -> None:
        """Register a singularization rule, checked before every earlier rule."""
        with self._lock:
            self.singular_rules.append(pattern, template)

    def add_irregular_rule(self, singular: str, plural: str) -> None:
        """Register an irregular pair; both forms are stored lowercased."""
        with self._lock:
            self.irregulars.add(singular, plural)

    def add_uncountable_rule(self, word_or_pattern: Union[str, re.Pattern]) -> None:
        """
        Mark a word, or a family of words matching a pattern, as uncountable.

        Literal words are exempt from every rule. Patterns are registered as
        identity rules in both directions and take normal rule priority.
        """
        with self._lock:
            self.uncountables.mark(word_or_pattern)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _register_identity_rule(self, pattern: re.Pattern, template: str) -> None:
        # Called by UncountableSet.mark with the lock already held
        self.plural_rules.append(pattern, template)
        self.singular_rules.append(pattern, template)

    def _inflect(
        self, word: str, keep: dict[str, str], replace: dict[str, str], rules: RuleStore
    ) -> str:
        token = word.lower()

        if not token or token in self.uncountables:
            return word

        if token in keep:
            return restore_case(word, token)

        irregular: Optional[str] = replace.get(token)
        if irregular is not None:
            return restore_case(word, irregular)

        return self._apply_rules(word, rules)

    def _check(
        self, word: str, keep: dict[str, str], replace: dict[str, str], rules: RuleStore
    ) -> bool:
        token = word.lower()

        if not token or token in self.uncountables or token in keep:
            return True

        if token in replace:
            return False

        return self._apply_rules(token, rules) == token

    @staticmethod
    def _apply_rules(word: str, rules: RuleStore) -> str:
        token = word.lower()
        if len(token) != len(word):
            # Lowercasing changed the length (e.g. "İ"); offsets would not line up
            token = word

        found = rules.find(token)
        if found is None:
            return word

        rule, match = found
        return apply_rule(word, rule, match)
