"""
Built-in inflection tables.

Registration order is significant: rules registered later take priority over
rules registered earlier (see countnoun.rules). Tables are loaded in the
order irregulars, plural rules, singular rules, uncountables, and each table
is loaded top to bottom, so general rules sit at the top and special cases
below them.
"""

import re


def _ci(pattern: str) -> re.Pattern:
    return re.compile(pattern, re.IGNORECASE)


IRREGULAR_RULES = [
    # Pronouns
    ("I", "we"),
    ("me", "us"),
    ("he", "they"),
    ("she", "they"),
    ("them", "them"),
    ("myself", "ourselves"),
    ("yourself", "yourselves"),
    ("itself", "themselves"),
    ("herself", "themselves"),
    ("himself", "themselves"),
    ("themself", "themselves"),
    ("is", "are"),
    ("was", "were"),
    ("has", "have"),
    ("this", "these"),
    ("that", "those"),
    ("my", "our"),
    ("its", "their"),
    ("his", "their"),
    ("her", "their"),
    # Consonant + "o"
    ("echo", "echoes"),
    ("dingo", "dingoes"),
    ("volcano", "volcanoes"),
    ("tornado", "tornadoes"),
    ("torpedo", "torpedoes"),
    # -us
    ("genus", "genera"),
    ("viscus", "viscera"),
    # -ma
    ("stigma", "stigmata"),
    ("stoma", "stomata"),
    ("dogma", "dogmata"),
    ("lemma", "lemmata"),
    ("schema", "schemata"),
    ("anathema", "anathemata"),
    # Everything else
    ("ox", "oxen"),
    ("axe", "axes"),
    ("die", "dice"),
    ("yes", "yeses"),
    ("foot", "feet"),
    ("eave", "eaves"),
    ("goose", "geese"),
    ("tooth", "teeth"),
    ("quiz", "quizzes"),
    ("human", "humans"),
    ("proof", "proofs"),
    ("carve", "carves"),
    ("valve", "valves"),
    ("looey", "looies"),
    ("thief", "thieves"),
    ("groove", "grooves"),
    ("pickaxe", "pickaxes"),
    ("passerby", "passersby"),
]

PLURAL_RULES = [
    (_ci(r"s?$"), "s"),  # catch-all, lowest priority
    (_ci(r"[^\u0000-\u007F]$"), "$0"),
    (_ci(r"([^aeiou]ese)$"), "$1"),
    (_ci(r"(ax|test)is$"), "$1es"),
    (_ci(r"(alias|[^aou]us|t[lm]as|gas|ris)$"), "$1es"),
    (_ci(r"(e[mn]u)s?$"), "$1s"),
    (_ci(r"([^l]ias|[aeiou]las|[ejzr]as|[iu]am)$"), "$1"),
    (
        _ci(r"(alumn|syllab|vir|radi|nucle|fung|cact|stimul|termin|bacill|foc|uter|loc|strat)(?:us|i)$"),
        "$1i",
    ),
    (_ci(r"(alumn|alg|vertebr)(?:a|ae)$"), "$1ae"),
    (_ci(r"(seraph|cherub)(?:im)?$"), "$1im"),
    (_ci(r"(her|at|gr)o$"), "$1oes"),
    (
        _ci(
            r"(agend|addend|millenni|dat|extrem|bacteri|desiderat|strat|candelabr"
            r"|errat|ov|symposi|curricul|automat|quor)(?:a|um)$"
        ),
        "$1a",
    ),
    (
        _ci(
            r"(apheli|hyperbat|periheli|asyndet|noumen|phenomen|criteri|organ"
            r"|prolegomen|hedr|automat)(?:a|on)$"
        ),
        "$1a",
    ),
    (_ci(r"sis$"), "ses"),
    (_ci(r"(?:(kni|wi|li)fe|(ar|l|ea|eo|oa|hoo)f)$"), "$1$2ves"),
    (_ci(r"([^aeiouy]|qu)y$"), "$1ies"),
    (_ci(r"([^ch][ieo][ln])ey$"), "$1ies"),
    (_ci(r"(x|ch|ss|sh|zz)$"), "$1es"),
    (_ci(r"(matr|cod|mur|sil|vert|ind|append)(?:ix|ex)$"), "$1ices"),
    (_ci(r"\b((?:tit)?m|l)(?:ice|ouse)$"), "$1ice"),
    (_ci(r"(pe)(?:rson|ople)$"), "$1ople"),
    (_ci(r"(child)(?:ren)?$"), "$1ren"),
    (_ci(r"eaux$"), "$0"),
    (_ci(r"m[ae]n$"), "men"),
    ("thou", "you"),
]

SINGULAR_RULES = [
    (_ci(r"s$"), ""),  # catch-all, lowest priority
    (_ci(r"(ss)$"), "$1"),
    (_ci(r"(wi|kni|(?:after|half|high|low|mid|non|night|[^\w]|^)li)ves$"), "$1fe"),
    (_ci(r"(ar|(?:wo|[ae])l|[eo][ao])ves$"), "$1f"),
    (_ci(r"ies$"), "y"),
    (_ci(r"(dg|ss|ois|lk|ok|wn|mb|th|ch|ec|oal|is|ck|ix|sser|ts|wb)ies$"), "$1ie"),
    (
        _ci(
            r"\b(l|(?:neck|cross|hog|aun)?t|coll|faer|food|gen|goon|group|hipp|junk"
            r"|vegg|(?:pork)?p|charl|calor|cut)ies$"
        ),
        "$1ie",
    ),
    (_ci(r"\b(mon|smil)ies$"), "$1ey"),
    (_ci(r"\b((?:tit)?m|l)ice$"), "$1ouse"),
    (_ci(r"(seraph|cherub)im$"), "$1"),
    (
        _ci(
            r"(x|ch|ss|sh|zz|tto|go|cho|alias|[^aou]us|t[lm]as|gas|(?:her|at|gr)o"
            r"|[aeiou]ris)(?:es)?$"
        ),
        "$1",
    ),
    (_ci(r"(analy|diagno|parenthe|progno|synop|the|empha|cri|ne)(?:sis|ses)$"), "$1sis"),
    (_ci(r"(movie|twelve|abuse|e[mn]u)s$"), "$1"),
    (_ci(r"(test)(?:is|es)$"), "$1is"),
    (
        _ci(r"(alumn|syllab|vir|radi|nucle|fung|cact|stimul|termin|bacill|foc|uter|loc|strat)(?:us|i)$"),
        "$1us",
    ),
    (
        _ci(
            r"(agend|addend|millenni|dat|extrem|bacteri|desiderat|strat|candelabr"
            r"|errat|ov|symposi|curricul|quor)a$"
        ),
        "$1um",
    ),
    (
        _ci(
            r"(apheli|hyperbat|periheli|asyndet|noumen|phenomen|criteri|organ"
            r"|prolegomen|hedr|automat)a$"
        ),
        "$1on",
    ),
    (_ci(r"(alumn|alg|vertebr)ae$"), "$1a"),
    (_ci(r"(cod|mur|sil|vert|ind)ices$"), "$1ex"),
    (_ci(r"(matr|append)ices$"), "$1ix"),
    (_ci(r"(pe)(rson|ople)$"), "$1rson"),
    (_ci(r"(child)ren$"), "$1"),
    (_ci(r"(eau)x?$"), "$1"),
    (_ci(r"men$"), "man"),
]

UNCOUNTABLE_RULES = [
    # Singular words with no plural
    "adulthood",
    "advice",
    "agenda",
    "aid",
    "aircraft",
    "alcohol",
    "ammo",
    "analytics",
    "anime",
    "athletics",
    "audio",
    "bison",
    "blood",
    "bream",
    "buffalo",
    "butter",
    "carp",
    "cash",
    "chassis",
    "chess",
    "clothing",
    "cod",
    "commerce",
    "cooperation",
    "corps",
    "debris",
    "diabetes",
    "digestion",
    "elk",
    "energy",
    "equipment",
    "excretion",
    "expertise",
    "firmware",
    "flounder",
    "fun",
    "gallows",
    "garbage",
    "graffiti",
    "hardware",
    "headquarters",
    "health",
    "herpes",
    "highjinks",
    "homework",
    "housework",
    "information",
    "jeans",
    "justice",
    "kudos",
    "labour",
    "literature",
    "machinery",
    "mackerel",
    "mail",
    "media",
    "mews",
    "moose",
    "music",
    "mud",
    "manga",
    "news",
    "only",
    "personnel",
    "pike",
    "plankton",
    "pliers",
    "police",
    "pollution",
    "premises",
    "rain",
    "research",
    "rice",
    "salmon",
    "scissors",
    "series",
    "sewage",
    "shambles",
    "shrimp",
    "software",
    "staff",
    "swine",
    "tennis",
    "traffic",
    "transportation",
    "trout",
    "tuna",
    "wealth",
    "welfare",
    "whiting",
    "wildebeest",
    "wildlife",
    "you",
    # Families
    _ci(r"pok[eé]mon$"),
    _ci(r"[^aeiou]ese$"),  # "chinese", "japanese"
    _ci(r"deer$"),  # "deer", "reindeer"
    _ci(r"fish$"),  # "fish", "blowfish", "angelfish"
    _ci(r"measles$"),
    _ci(r"o[iu]s$"),  # "carnivorous"
    _ci(r"pox$"),  # "chickpox", "smallpox"
    _ci(r"sheep$"),
]
