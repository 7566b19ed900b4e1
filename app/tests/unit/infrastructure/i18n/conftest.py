"""Feature-level fixtures for i18n system tests.

Provides registries, in-memory parsers and temporary language directories.
"""

import pytest

from infrastructure.i18n import ParserRegistry
from tests.factories.i18n import (
    DictParser,
    make_greeting_table,
    make_json_lang_dir,
    make_yaml_lang_dir,
)


@pytest.fixture
def registry():
    """Create a fresh registry for each test."""
    reg = ParserRegistry()
    yield reg
    reg.clear()


@pytest.fixture
def dict_parser():
    """In-memory parser over the greeting table."""
    return DictParser(make_greeting_table())


@pytest.fixture
def dict_registry(registry, dict_parser):
    """Registry with the in-memory parser registered as "json"."""
    registry.register("json", dict_parser)
    return registry


@pytest.fixture
def json_lang_dir(tmp_path):
    """Create a language directory with JSON files.

    Returns a directory structure like:
    - zh_cn/common.json
    - zh_cn/errors.json
    - en/common.json
    - en/errors.json
    """
    return make_json_lang_dir(tmp_path / "locales")


@pytest.fixture
def yaml_lang_dir(tmp_path):
    """Create a language directory with .yml and .yaml files."""
    return make_yaml_lang_dir(tmp_path / "yaml_locales")

