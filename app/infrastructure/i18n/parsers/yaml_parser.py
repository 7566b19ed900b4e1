"""YAML translation parser."""

from pathlib import Path
from typing import Any

import yaml

from infrastructure.i18n.exceptions import TranslationParseError
from infrastructure.i18n.parsers.base import CatalogParser
from infrastructure.logging import get_module_logger

logger = get_module_logger()

PARSER_NAME = "yaml"


class YAMLParser(CatalogParser):
    """Parser for YAML language files (.yml and .yaml).

    Files are read with yaml.safe_load; an empty file contributes nothing.
    """

    extensions = (".yml", ".yaml")

    def _decode(self, path: Path) -> Any:
        try:
            with open(path, "r", encoding="utf-8") as f:
                return yaml.safe_load(f)
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
            logger.error("yaml_parse_error", file=str(path), error=str(e))
            raise TranslationParseError(
                f"Failed to parse {path}: {e}", path=path
            ) from e
