"""I18n facade for configuration, parser initialization and lookups.

Application code talks to an I18n instance only; the instance selects a
parser from the registry by name and forwards every lookup to it.
"""

import dataclasses
from typing import Optional

from infrastructure.i18n.exceptions import ParserNotRegisteredError
from infrastructure.i18n.models import (
    DEFAULT_LANG,
    DEFAULT_PARSER,
    I18nOptions,
    Option,
    TranslationValue,
    default_lang,
    default_parser,
)
from infrastructure.i18n.parsers.base import TranslationParser
from infrastructure.i18n.registry import ParserRegistry, get_parser_registry
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class I18n:
    """Translation lookup facade.

    Owns the configuration, drives the selected parser's parse, and forwards
    lookups. Every lookup resolves the parser by its configured name, so a
    parser re-registered under the same name is used from the next call on.
    Such a replacement must already be configured and parsed by whoever
    registers it.

    Lookups always pass this instance's current language to the parser, so
    several I18n instances can share one registry and keep their own
    language.

    Configuration changes (configure(), lang()) are not synchronized with
    lookups. Configure fully at startup before issuing concurrent lookups.

    Usage:
        registry = ParserRegistry()
        registry.register("json", JSONParser())

        i18n = I18n(
            lang_directory("locales"),
            default_lang("en"),
            registry=registry,
        )
        i18n.load("menu", "file").as_string()
        i18n.load_with_default("missing.key", "fallback")
        i18n.load_by_lang("menu.file", "zh_cn")

    Attributes:
        registry: ParserRegistry parsers are resolved from.
    """

    def __init__(self, *options: Option, registry: Optional[ParserRegistry] = None):
        """Initialize and configure the facade.

        Args:
            *options: Option callables applied in order.
            registry: Parser registry (default: the global registry).

        Raises:
            ParserNotRegisteredError: If the selected parser is not registered.
            TranslationParseError: If the parser cannot parse its files.
        """
        self.registry = registry or get_parser_registry()
        self._options = I18nOptions()
        self._configured: Optional[TranslationParser] = None
        self.configure(*options)

    def configure(self, *options: Option) -> None:
        """Apply options on top of the current configuration and re-parse.

        Later options override earlier ones for the same field. Empty parser
        and language fall back to "json" and "zh_cn". The new configuration
        is committed only once the parser has parsed successfully.

        Args:
            *options: Option callables applied in order.

        Raises:
            ParserNotRegisteredError: If the selected parser is not registered.
            TranslationParseError: Propagated unchanged from the parser.
        """
        opts = dataclasses.replace(self._options)
        for option in options:
            option(opts)

        if not opts.default_parser:
            default_parser(DEFAULT_PARSER)(opts)
        if not opts.default_lang:
            default_lang(DEFAULT_LANG)(opts)

        parser = self.registry.get(opts.default_parser)
        if parser is None:
            logger.error(
                "i18n_parser_not_registered",
                parser=opts.default_parser,
                registered=self.registry.names(),
            )
            raise ParserNotRegisteredError(opts.default_parser)

        parser.set_options(opts)
        try:
            parser.parse()
        except Exception as e:
            logger.error(
                "i18n_parse_failed",
                parser=opts.default_parser,
                lang_directory=opts.lang_directory,
                error=str(e),
            )
            if parser is self._configured:
                parser.set_options(self._options)
            raise

        self._options = opts
        self._configured = parser
        logger.info(
            "i18n_configured",
            parser=opts.default_parser,
            default_lang=opts.default_lang,
            lang_directory=opts.lang_directory,
            file_as_key=opts.enable_file_as_key,
        )

    def _parser(self) -> TranslationParser:
        parser = self.registry.get(self._options.default_parser)
        if parser is None:
            logger.error(
                "i18n_parser_not_registered", parser=self._options.default_parser
            )
            raise ParserNotRegisteredError(self._options.default_parser)
        return parser

    def load(self, *keys: str) -> TranslationValue:
        """Resolve key segments for the current default language.

        Segments are joined into one dotted path: load("menu", "file") and
        load("menu.file") are the same lookup.

        Returns:
            TranslationValue; EMPTY when the key is missing.

        Raises:
            ParserNotRegisteredError: If the configured parser is gone.
        """
        return self._parser().load(*keys, lang=self._options.default_lang)

    def load_with_default(self, key: str, *default_val: str) -> TranslationValue:
        """Resolve a key, substituting default_val when it is missing.

        Raises:
            ParserNotRegisteredError: If the configured parser is gone.
        """
        return self._parser().load_with_default(
            key, *default_val, lang=self._options.default_lang
        )

    def load_by_lang(self, key: str, lang: str) -> str:
        """Resolve a key for an explicit language.

        Returns:
            The translated string, or "" when the key or language is missing.

        Raises:
            ParserNotRegisteredError: If the configured parser is gone.
        """
        return self._parser().load_by_lang(key, lang)

    def lang(self, lang: str) -> None:
        """Switch the default language without re-parsing."""
        self._options.default_lang = lang
        logger.debug("i18n_lang_changed", lang=lang)

    @property
    def current_lang(self) -> str:
        return self._options.default_lang

    @property
    def options(self) -> I18nOptions:
        """Copy of the committed configuration."""
        return dataclasses.replace(self._options)
