"""
Pytest configuration and fixtures for countnoun tests.
"""

import logging

import pytest

import countnoun
from countnoun import Inflector


@pytest.fixture
def inflector():
    """Fresh engine loaded with the built-in tables."""
    return Inflector()


@pytest.fixture
def bare_inflector():
    """Engine with no rules at all."""
    return Inflector(seed=False)


@pytest.fixture
def default_inflector(monkeypatch):
    """
    Isolated default engine for module-level functions and MCP tools.

    Rules registered through the shared API during a test are discarded
    afterwards.
    """
    monkeypatch.delenv("COUNTNOUN_RULES_FILE", raising=False)
    engine = Inflector()
    countnoun.set_default_inflector(engine)
    yield engine
    countnoun.set_default_inflector(None)


@pytest.fixture
def clean_countnoun_logger():
    """Remove handlers added to the "countnoun" logger during a test."""
    logger = logging.getLogger("countnoun")
    original_handlers = list(logger.handlers)
    original_level = logger.level
    yield logger
    for handler in list(logger.handlers):
        if handler not in original_handlers:
            handler.close()
            logger.removeHandler(handler)
    logger.setLevel(original_level)
