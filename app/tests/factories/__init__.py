"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    DictParser,
    FailingParser,
    SAMPLE_TRANSLATIONS,
    make_greeting_table,
    make_json_lang_dir,
    make_yaml_lang_dir,
)

__all__ = [
    "DictParser",
    "FailingParser",
    "SAMPLE_TRANSLATIONS",
    "make_greeting_table",
    "make_json_lang_dir",
    "make_yaml_lang_dir",
]
