"""Translation parsers.

- base: TranslationParser contract and CatalogParser directory loader
- json_parser: JSONParser for *.json language files
- yaml_parser: YAMLParser for *.yml / *.yaml language files
"""

from infrastructure.i18n.parsers.base import CatalogParser, TranslationParser
from infrastructure.i18n.parsers.json_parser import JSONParser
from infrastructure.i18n.parsers.yaml_parser import YAMLParser

__all__ = [
    "TranslationParser",
    "CatalogParser",
    "JSONParser",
    "YAMLParser",
]
