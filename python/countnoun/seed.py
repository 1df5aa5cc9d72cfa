"""
Loads the built-in tables from countnoun.constants into an Inflector.
"""

import logging
from typing import TYPE_CHECKING

from countnoun.constants import (
    IRREGULAR_RULES,
    PLURAL_RULES,
    SINGULAR_RULES,
    UNCOUNTABLE_RULES,
)

if TYPE_CHECKING:
    from countnoun.engine import Inflector

logger = logging.getLogger("countnoun.seed")


def load_seed_rules(inflector: "Inflector") -> None:
    """
    Register every built-in table, in priority order.

    Irregulars first, then plural rules, singular rules and finally the
    uncountables. Uncountable families go last so their identity rules beat
    the suffix rules they overlap with ("sheep" vs the catch-all "s").
    """
    for singular, plural in IRREGULAR_RULES:
        inflector.add_irregular_rule(singular, plural)

    for pattern, template in PLURAL_RULES:
        inflector.add_plural_rule(pattern, template)

    for pattern, template in SINGULAR_RULES:
        inflector.add_singular_rule(pattern, template)

    for word_or_pattern in UNCOUNTABLE_RULES:
        inflector.add_uncountable_rule(word_or_pattern)

    logger.debug(f"Seeded {inflector!r}")
