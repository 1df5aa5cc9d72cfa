"""
Extra rules loaded from YAML.

Projects with domain vocabulary ("schema" -> "schemas", "regex" -> "regexes")
can keep it in a rules file instead of registering rules in code:

    irregular:
      - [cactus, cacti]
    uncountable:
      - equipment              # literal word
      - {regex: "ware$"}       # every word ending in "ware"
    plural:
      - [{regex: "gex$"}, "gexii"]
      - ["thou", "you"]        # plain string, matches the whole word
    singular:
      - [{regex: "gexii$"}, "gex"]

Sections are registered in the same order as the built-in tables (irregular,
plural, singular, uncountable). A file is validated completely before any of
its rules are registered, so a bad entry leaves the engine untouched.

Environment:
    COUNTNOUN_RULES_FILE: rules file applied to the default inflector and the
        MCP server's inflector at startup.
"""

import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional, Union

import yaml

from countnoun.exceptions import InvalidRuleError, RulesConfigError
from countnoun.rules import RulePattern, compile_rule

if TYPE_CHECKING:
    from countnoun.engine import Inflector

logger = logging.getLogger("countnoun.config")

RULES_FILE_ENV = "COUNTNOUN_RULES_FILE"

SECTIONS = ("irregular", "plural", "singular", "uncountable")

REGEX_FLAGS = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "x": re.VERBOSE,
}


@dataclass
class RuleSet:
    """Validated rules from one file, ready to register."""

    irregular: list[tuple[str, str]] = field(default_factory=list)
    plural: list[tuple[RulePattern, str]] = field(default_factory=list)
    singular: list[tuple[RulePattern, str]] = field(default_factory=list)
    uncountable: list[RulePattern] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.irregular) + len(self.plural) + len(self.singular) + len(self.uncountable)

    def apply(self, inflector: "Inflector") -> None:
        for singular, plural in self.irregular:
            inflector.add_irregular_rule(singular, plural)
        for pattern, template in self.plural:
            inflector.add_plural_rule(pattern, template)
        for pattern, template in self.singular:
            inflector.add_singular_rule(pattern, template)
        for word_or_pattern in self.uncountable:
            inflector.add_uncountable_rule(word_or_pattern)


def parse_pattern(entry: Any, where: str) -> RulePattern:
    """
    Convert a YAML pattern entry into something ``compile_rule`` accepts.

    Strings stay strings (whole-word match). Mappings with a ``regex`` key
    are compiled with ``flags`` (default ``"i"``). Either way the pattern is
    compiled here so errors surface while loading, not on first query.
    """
    if isinstance(entry, str):
        pattern: RulePattern = entry
    elif isinstance(entry, dict) and isinstance(entry.get("regex"), str):
        flags = 0
        for letter in str(entry.get("flags", "i")):
            if letter not in REGEX_FLAGS:
                raise RulesConfigError(f"{where}: unknown regex flag {letter!r}")
            flags |= REGEX_FLAGS[letter]
        try:
            pattern = re.compile(entry["regex"], flags)
        except re.error as e:
            raise RulesConfigError(f"{where}: invalid regex {entry['regex']!r}: {e}") from e
    else:
        raise RulesConfigError(f"{where}: expected a string or {{regex: ...}}, got {entry!r}")

    try:
        compile_rule(pattern)
    except InvalidRuleError as e:
        raise RulesConfigError(f"{where}: {e}") from e

    return pattern


def _parse_pair(entry: Any, where: str) -> tuple[Any, str]:
    if not isinstance(entry, (list, tuple)) or len(entry) != 2 or not isinstance(entry[1], str):
        raise RulesConfigError(f"{where}: expected a [pattern, replacement] pair, got {entry!r}")
    return entry[0], entry[1]


def parse_rules(data: Any, source: str = "<rules>") -> RuleSet:
    """
    Validate a parsed YAML document.

    Raises:
        RulesConfigError: unknown section, wrong shape, or invalid pattern.
    """
    if data is None:
        return RuleSet()

    if not isinstance(data, dict):
        raise RulesConfigError(f"{source}: top level must be a mapping of sections")

    unknown = set(data) - set(SECTIONS)
    if unknown:
        raise RulesConfigError(f"{source}: unknown sections {sorted(unknown)}")

    rule_set = RuleSet()

    for section in SECTIONS:
        entries = data.get(section) or []
        if not isinstance(entries, list):
            raise RulesConfigError(f"{source}: section {section!r} must be a list")

        for index, entry in enumerate(entries):
            where = f"{source}:{section}[{index}]"

            if section == "irregular":
                singular, plural = _parse_pair(entry, where)
                if not isinstance(singular, str):
                    raise RulesConfigError(f"{where}: singular form must be a string")
                rule_set.irregular.append((singular, plural))

            elif section == "uncountable":
                rule_set.uncountable.append(parse_pattern(entry, where))

            else:
                pattern, template = _parse_pair(entry, where)
                getattr(rule_set, section).append((parse_pattern(pattern, where), template))

    return rule_set


def load_rules_file(path: Union[str, Path]) -> RuleSet:
    """Read and validate a YAML rules file."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise RulesConfigError(f"Cannot read rules file {path}: {e}") from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise RulesConfigError(f"Invalid YAML in rules file {path}: {e}") from e

    rule_set = parse_rules(data, source=str(path))
    logger.info(f"Loaded {len(rule_set)} rules from {path}")
    return rule_set


def rules_file_from_env() -> Optional[Path]:
    value = os.environ.get(RULES_FILE_ENV, "").strip()
    return Path(value) if value else None


def apply_env_rules(inflector: "Inflector") -> Optional[Path]:
    """
    Apply the rules file named by COUNTNOUN_RULES_FILE, if set.

    Returns:
        The path that was applied, or None when the variable is unset.
    """
    path = rules_file_from_env()
    if path is None:
        return None

    try:
        rule_set = load_rules_file(path)
    except RulesConfigError as e:
        logger.error(f"Failed to load {RULES_FILE_ENV}: {e}")
        raise

    rule_set.apply(inflector)
    return path
