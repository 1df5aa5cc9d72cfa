"""
MCP tools exposing the inflection engine.
"""

from .inflect import check_forms, pluralize_word, singularize_word
from .rules import add_rule

__all__ = [
    "pluralize_word",
    "singularize_word",
    "check_forms",
    "add_rule",
]
