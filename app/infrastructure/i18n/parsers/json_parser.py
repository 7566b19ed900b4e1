"""JSON translation parser."""

import json
from pathlib import Path
from typing import Any

from infrastructure.i18n.exceptions import TranslationParseError
from infrastructure.i18n.parsers.base import CatalogParser
from infrastructure.logging import get_module_logger

logger = get_module_logger()

PARSER_NAME = "json"


class JSONParser(CatalogParser):
    """Parser for JSON language files.

    Example layout:
        locales/zh_cn/common.json  ->  {"greeting": "你好"}
        locales/en/common.json     ->  {"greeting": "hello"}
    """

    extensions = (".json",)

    def _decode(self, path: Path) -> Any:
        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            logger.error("json_parse_error", file=str(path), error=str(e))
            raise TranslationParseError(
                f"Failed to parse {path}: {e}", path=path
            ) from e
