"""
Exact-match overrides for words no suffix rule handles (goose/geese, I/we).
"""

import logging
from typing import Optional

from countnoun.exceptions import InvalidRuleError

logger = logging.getLogger("countnoun.irregulars")


class IrregularMap:
    """
    Two-way lookup between irregular singular and plural forms.

    Both sides are stored lowercased. Adding a pair whose plural is already
    known (he/they, then she/they) repoints the plural at the newest singular.
    """

    def __init__(self):
        self.singular_to_plural: dict[str, str] = {}
        self.plural_to_singular: dict[str, str] = {}

    def __len__(self) -> int:
        return len(self.singular_to_plural)

    def add(self, singular: str, plural: str) -> None:
        if not isinstance(singular, str) or not isinstance(plural, str):
            raise InvalidRuleError(
                f"Irregular forms must be strings, got {singular!r} / {plural!r}"
            )

        singular = singular.lower()
        plural = plural.lower()
        self.singular_to_plural[singular] = plural
        self.plural_to_singular[plural] = singular
        logger.debug(f"Registered irregular pair: {singular!r} <-> {plural!r}")

    def to_plural(self, word: str) -> Optional[str]:
        return self.singular_to_plural.get(word.lower())

    def to_singular(self, word: str) -> Optional[str]:
        return self.plural_to_singular.get(word.lower())

    def is_known_singular(self, word: str) -> bool:
        return word.lower() in self.singular_to_plural

    def is_known_plural(self, word: str) -> bool:
        return word.lower() in self.plural_to_singular
