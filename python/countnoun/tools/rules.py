"""
Rule registration tool.
"""

import logging
import re
from typing import Optional

from countnoun import get_default_inflector
from countnoun.exceptions import InvalidRuleError

logger = logging.getLogger("countnoun.tools")

RULE_KINDS = ("plural", "singular", "irregular", "uncountable")


async def add_rule(
    kind: str,
    pattern: str,
    replacement: Optional[str] = None,
    regex: bool = False,
) -> str:
    """
    Teach the inflector a new rule. New rules win over every existing one.

    Args:
        kind: "plural", "singular", "irregular" or "uncountable"
        pattern: Word or regex to match. For "irregular" this is the singular.
        replacement: Replacement template ($0 = whole match, $1.. = groups).
            For "irregular" this is the plural. Not used for "uncountable".
        regex: Treat ``pattern`` as a case-insensitive regex (suffix rules,
            uncountable families) instead of a whole word.

    Returns:
        Confirmation, or "Error: ..." when the rule cannot be registered

    Examples:
        add_rule("plural", "gex$", "gexii", regex=True)
        add_rule("irregular", "cactus", "cacti")
        add_rule("uncountable", "ware$", regex=True)
    """
    if kind not in RULE_KINDS:
        return f"Error: kind must be one of {', '.join(RULE_KINDS)}"

    if kind in ("plural", "singular", "irregular") and replacement is None:
        return f"Error: {kind} rules need a replacement"

    inflector = get_default_inflector()

    try:
        if kind == "irregular":
            inflector.add_irregular_rule(pattern, replacement)
            logger.info(f"Added irregular rule: {pattern!r} <-> {replacement!r}")
            return f"Added irregular pair: {pattern.lower()} <-> {replacement.lower()}"

        rule_pattern = pattern
        if regex:
            try:
                rule_pattern = re.compile(pattern, re.IGNORECASE)
            except re.error as e:
                raise InvalidRuleError(f"Invalid rule pattern {pattern!r}: {e}") from e

        if kind == "uncountable":
            inflector.add_uncountable_rule(rule_pattern)
            logger.info(f"Added uncountable rule: {pattern!r}")
            return f"Added uncountable rule: {pattern}"

        if kind == "plural":
            inflector.add_plural_rule(rule_pattern, replacement)
        else:
            inflector.add_singular_rule(rule_pattern, replacement)
    except InvalidRuleError as e:
        logger.warning(f"Rejected {kind} rule {pattern!r}: {e}")
        return f"Error: {e}"

    logger.info(f"Added {kind} rule: {pattern!r} -> {replacement!r}")
    return f"Added {kind} rule: {pattern} -> {replacement}"
