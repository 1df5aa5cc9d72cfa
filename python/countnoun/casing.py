"""
Case restoration for inflected words.

Lookups and rule matching happen on lowercased text, so the computed
replacement has to be re-cased to look like the word the caller passed in.
"""


def restore_case(source: str, candidate: str) -> str:
    """
    Reapply the casing style of ``source`` onto ``candidate``.

    Styles recognised, in order:
    - identical text: returned as-is
    - all lower-case: ``candidate`` lower-cased
    - all upper-case: ``candidate`` upper-cased
    - leading capital: title-cased (first char upper, rest lower)
    - anything else (camelCase and friends): lower-cased

    Examples:
        >>> restore_case("Bus", "buses")
        'Buses'
        >>> restore_case("BUS", "buses")
        'BUSES'
        >>> restore_case("cHILD", "Children")
        'children'
    """
    if source == candidate:
        return candidate

    if source == source.lower():
        return candidate.lower()

    if source == source.upper():
        return candidate.upper()

    if source[0] == source[0].upper():
        return candidate[:1].upper() + candidate[1:].lower()

    return candidate.lower()
