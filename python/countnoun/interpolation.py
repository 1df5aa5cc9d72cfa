"""
Template expansion for rule replacements.

Templates reference capture groups positionally: ``$0`` is the whole match,
``$1`` to ``$99`` are the pattern's groups.
"""

import re
from typing import Optional, Sequence

PLACEHOLDER = re.compile(r"\$(\d{1,2})")


def interpolate(template: str, captures: Sequence[Optional[str]]) -> str:
    """
    Expand ``$N`` placeholders in ``template`` from ``captures``.

    Groups that did not participate in the match (``None``) and indices past
    the end of ``captures`` expand to the empty string.

    Examples:
        >>> interpolate("$1ies", ["fly", "fl"])
        'flies'
        >>> interpolate("$1$2ves", ["wolf", None, "wol"])
        'wolves'
    """

    def _expand(placeholder: re.Match) -> str:
        index = int(placeholder.group(1))
        if index < len(captures):
            return captures[index] or ""
        return ""

    return PLACEHOLDER.sub(_expand, template)


def match_captures(match: re.Match, source: Optional[str] = None) -> list[Optional[str]]:
    """
    Whole match followed by every capture group, in template index order.

    With ``source``, each capture is sliced out of ``source`` at the group's
    span instead of being read from the matched string. Matching runs on the
    lowercased word while templates are filled from the caller's original
    casing, and both strings share offsets.
    """
    if source is None:
        return [match.group(0), *match.groups()]

    captures: list[Optional[str]] = []
    for index in range(match.re.groups + 1):
        start, end = match.span(index)
        captures.append(source[start:end] if start != -1 else None)
    return captures
