"""Translation parser interface and shared catalog implementation.

Defines the contract every translation parser honors and a base class that
implements directory scanning and key lookup for file-based parsers.
"""

import copy
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from infrastructure.i18n.exceptions import TranslationParseError
from infrastructure.i18n.models import I18nOptions, KEY_SEPARATOR, TranslationValue
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class TranslationParser(ABC):
    """Abstract base for translation parsers.

    A parser decodes language files in one format and answers key lookups.
    The I18n facade pushes its configuration with set_options(), calls
    parse() once per configuration, then forwards every lookup.

    Lookup contract:
        - Keys are dot-separated paths into nested sections ("menu.file.open").
        - load() returns an EMPTY value for a missing key.
        - load_with_default() substitutes the defaults for a missing key.
        - load_by_lang() returns "" for a missing key or language.
        - Reads never mutate the parsed tables.

    Several facades may share one parser, so load() and load_with_default()
    take the language as a keyword argument; ``None`` means the
    ``default_lang`` of the options last pushed with set_options().
    """

    @abstractmethod
    def set_options(self, options: I18nOptions) -> None:
        """Receive the facade configuration.

        The options supply the language directory, the file-as-key flag and
        the fallback language for lookups that do not pass one.
        """
        pass

    @abstractmethod
    def parse(self) -> None:
        """Read and decode the language files.

        Raises:
            TranslationParseError: If the files cannot be read or decoded.
        """
        pass

    @abstractmethod
    def load(self, *keys: str, lang: Optional[str] = None) -> TranslationValue:
        """Resolve key segments for ``lang`` or the configured default language."""
        pass

    @abstractmethod
    def load_with_default(
        self, key: str, *default_val: str, lang: Optional[str] = None
    ) -> TranslationValue:
        """Resolve a key, substituting the defaults when it is missing."""
        pass

    @abstractmethod
    def load_by_lang(self, key: str, lang: str) -> str:
        """Resolve a key for an explicit language, or "" when missing."""
        pass


def _deep_merge(target: Dict[str, Any], source: Dict[str, Any]) -> None:
    for key, value in source.items():
        if isinstance(value, dict) and isinstance(target.get(key), dict):
            _deep_merge(target[key], value)
        else:
            target[key] = value


class CatalogParser(TranslationParser):
    """Base for parsers reading one sub-directory per language.

    Expects a layout of <lang_directory>/<lang>/<name>.<ext>. Every file of a
    language is merged into one catalog; with ``enable_file_as_key`` each
    file is nested under its base name instead.

    Subclasses declare ``extensions`` and implement ``_decode``.

    Attributes:
        extensions: Lower-case file suffixes handled by the parser.
    """

    extensions: Tuple[str, ...] = ()

    def __init__(self):
        self._options = I18nOptions()
        self._catalogs: Dict[str, Dict[str, Any]] = {}

    @abstractmethod
    def _decode(self, path: Path) -> Any:
        """Decode a single language file.

        Raises:
            TranslationParseError: If the file cannot be read or decoded.
        """
        pass

    @property
    def options(self) -> I18nOptions:
        return self._options

    def set_options(self, options: I18nOptions) -> None:
        self._options = options

    def parse(self) -> None:
        """Load every language directory and replace the catalogs.

        The new catalogs are swapped in only after all files decoded, so a
        failed parse keeps the previous tables.

        Raises:
            TranslationParseError: If the language directory is missing or
                any file cannot be decoded.
        """
        directory = self._options.lang_directory
        if not directory:
            logger.error(
                "i18n_lang_directory_not_configured", parser=type(self).__name__
            )
            raise TranslationParseError("Language directory is not configured")

        root = Path(directory)
        if not root.is_dir():
            logger.error("i18n_lang_directory_not_found", lang_directory=str(root))
            raise TranslationParseError(
                f"Language directory not found: {root}", path=root
            )

        catalogs = {}
        for lang_dir in sorted(p for p in root.iterdir() if p.is_dir()):
            catalogs[lang_dir.name] = self._load_language(lang_dir)

        self._catalogs = catalogs
        logger.info(
            "i18n_catalogs_parsed",
            parser=type(self).__name__,
            lang_directory=str(root),
            langs=sorted(catalogs),
            file_as_key=self._options.enable_file_as_key,
        )

    def _load_language(self, lang_dir: Path) -> Dict[str, Any]:
        catalog: Dict[str, Any] = {}
        files = sorted(
            f
            for f in lang_dir.iterdir()
            if f.is_file() and f.suffix.lower() in self.extensions
        )

        for path in files:
            data = self._decode(path)
            if data is None:
                data = {}
            if not isinstance(data, dict):
                logger.error(
                    "i18n_invalid_file_format", file=str(path), expected="dict"
                )
                raise TranslationParseError(
                    f"Top level of {path} must be a mapping", path=path
                )

            if self._options.enable_file_as_key:
                _deep_merge(catalog, {path.stem: data})
            else:
                _deep_merge(catalog, data)

        logger.debug("i18n_language_loaded", lang=lang_dir.name, file_count=len(files))
        return catalog

    def available_langs(self) -> List[str]:
        """Get the languages found by the last parse, sorted."""
        return sorted(self._catalogs)

    def _resolve(self, key: str, lang: str) -> Optional[Any]:
        node: Any = self._catalogs.get(lang)
        if node is None or not key:
            return None

        for segment in key.split(KEY_SEPARATOR):
            if isinstance(node, dict) and segment in node:
                node = node[segment]
            elif isinstance(node, list) and segment.isdigit():
                index = int(segment)
                if index >= len(node):
                    return None
                node = node[index]
            else:
                return None
        return node

    def _value(self, raw: Any) -> TranslationValue:
        # Nested sections are copied so callers cannot edit the catalogs
        if isinstance(raw, (dict, list)):
            raw = copy.deepcopy(raw)
        return TranslationValue.from_raw(raw)

    def load(self, *keys: str, lang: Optional[str] = None) -> TranslationValue:
        key = KEY_SEPARATOR.join(keys)
        return self._value(self._resolve(key, lang or self._options.default_lang))

    def load_with_default(
        self, key: str, *default_val: str, lang: Optional[str] = None
    ) -> TranslationValue:
        raw = self._resolve(key, lang or self._options.default_lang)
        if raw is None:
            return TranslationValue.from_defaults(default_val)
        return self._value(raw)

    def load_by_lang(self, key: str, lang: str) -> str:
        return TranslationValue.from_raw(self._resolve(key, lang)).as_string() or ""
