"""i18n system - translation lookup with pluggable parsers.

Loads language files from a directory and resolves dotted keys to localized
values for a configured or explicitly requested language.

Main components:
- registry: ParserRegistry mapping parser names to parser instances
- parsers: TranslationParser contract, JSONParser and YAMLParser
- models: I18nOptions, option callables, TranslationValue
- service: I18n facade for configuration and lookups
- factory: builtin parser registration, settings wiring, shared instance
"""

from infrastructure.i18n.exceptions import (
    I18nError,
    ParserNotRegisteredError,
    TranslationParseError,
)
from infrastructure.i18n.models import (
    I18nOptions,
    Option,
    TranslationValue,
    ValueKind,
    cache_directory,
    default_lang,
    default_parser,
    enable_file_as_key,
    lang_directory,
)
from infrastructure.i18n.parsers import (
    CatalogParser,
    JSONParser,
    TranslationParser,
    YAMLParser,
)
from infrastructure.i18n.registry import (
    ParserRegistry,
    get_parser_registry,
    register_parser,
)
from infrastructure.i18n.service import I18n
from infrastructure.i18n.factory import (
    create_i18n,
    new_i18n,
    options_from_settings,
    register_builtin_parsers,
    reset_i18n,
)

__all__ = [
    "I18nError",
    "ParserNotRegisteredError",
    "TranslationParseError",
    "I18nOptions",
    "Option",
    "TranslationValue",
    "ValueKind",
    "cache_directory",
    "default_lang",
    "default_parser",
    "enable_file_as_key",
    "lang_directory",
    "TranslationParser",
    "CatalogParser",
    "JSONParser",
    "YAMLParser",
    "ParserRegistry",
    "get_parser_registry",
    "register_parser",
    "I18n",
    "create_i18n",
    "new_i18n",
    "options_from_settings",
    "register_builtin_parsers",
    "reset_i18n",
]
