"""
Query tools: pluralize, singularize and form checks.
"""

import logging
from typing import Any, Optional

from countnoun import get_default_inflector
from countnoun.toon_utils import OUTPUT_FORMATS, create_toonable_result

logger = logging.getLogger("countnoun.tools")


async def pluralize_word(word: str, count: Optional[int] = None, inclusive: bool = False) -> str:
    """
    Inflect a word for a count, or return its plural.

    The casing of the input is kept ("Goose" -> "Geese", "BUS" -> "BUSES").

    Args:
        word: Word to inflect
        count: Quantity the word must agree with. 1 gives the singular, any
            other number the plural. Omit to always get the plural.
        inclusive: Prefix the count ("2 peaches"). Ignored without a count.

    Returns:
        The inflected word

    Examples:
        pluralize_word("peach") -> "peaches"
        pluralize_word("peach", count=1) -> "peach"
        pluralize_word("peach", count=2, inclusive=True) -> "2 peaches"
    """
    inflector = get_default_inflector()
    if count is None:
        return inflector.plural(word)
    return inflector.pluralize(word, count, inclusive)


async def singularize_word(word: str) -> str:
    """
    Return the singular form of a word, keeping its casing.

    Examples:
        singularize_word("geese") -> "goose"
        singularize_word("Buses") -> "Bus"
    """
    return get_default_inflector().singular(word)


def _format_forms_as_text(records: list[dict[str, Any]]) -> str:
    if not records:
        return "No words given."

    lines = []
    for record in records:
        if record["is_plural"] and record["is_singular"]:
            form = "invariant"
        elif record["is_plural"]:
            form = "plural"
        elif record["is_singular"]:
            form = "singular"
        else:
            form = "unknown"
        lines.append(
            f"{record['word']}: {form} (singular: {record['singular']}, plural: {record['plural']})"
        )
    return "\n".join(lines)


async def check_forms(words: list[str], output_format: str = "text") -> Any:
    """
    Report singular and plural forms for several words at once.

    Args:
        words: Words to check
        output_format: "text" (default, one line per word), "json", "toon",
            or "auto" (TOON for 20+ words)

    Returns:
        Text summary, TOON string, or a list of records with keys
        word, singular, plural, is_singular, is_plural
    """
    if output_format not in OUTPUT_FORMATS:
        return f"Error: output_format must be one of {', '.join(OUTPUT_FORMATS)}"

    inflector = get_default_inflector()
    records = [
        {
            "word": word,
            "singular": inflector.singular(word),
            "plural": inflector.plural(word),
            "is_singular": inflector.is_singular(word),
            "is_plural": inflector.is_plural(word),
        }
        for word in words
    ]
    logger.debug(f"check_forms: {len(records)} words, format={output_format}")

    return create_toonable_result(
        records,
        output_format=output_format,
        tool_name="check_forms",
        text_formatter=_format_forms_as_text,
    )
