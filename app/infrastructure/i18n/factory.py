"""Factory functions for creating i18n components.

Provides builtin parser registration, settings wiring, and the process-wide
shared I18n instance.
"""

import threading
from typing import List, Optional

from infrastructure.configuration import I18nSettings, Settings
from infrastructure.configuration import settings as default_settings
from infrastructure.i18n import models
from infrastructure.i18n.models import Option
from infrastructure.i18n.parsers.json_parser import PARSER_NAME as JSON_PARSER
from infrastructure.i18n.parsers.json_parser import JSONParser
from infrastructure.i18n.parsers.yaml_parser import PARSER_NAME as YAML_PARSER
from infrastructure.i18n.parsers.yaml_parser import YAMLParser
from infrastructure.i18n.registry import ParserRegistry, get_parser_registry
from infrastructure.i18n.service import I18n
from infrastructure.logging import get_module_logger

logger = get_module_logger()

_shared_i18n: Optional[I18n] = None
_shared_i18n_lock = threading.Lock()


def register_builtin_parsers(
    registry: Optional[ParserRegistry] = None,
    replace: bool = False,
) -> ParserRegistry:
    """Register the JSON and YAML parsers.

    Names that already have a parser are left alone unless ``replace`` is
    set, so parsers configured by an existing I18n stay in place.

    Args:
        registry: Target registry (default: the global registry).
        replace: Overwrite parsers already registered under the same names.

    Returns:
        The registry the parsers were registered in.
    """
    registry = registry or get_parser_registry()
    for name, parser_class in ((JSON_PARSER, JSONParser), (YAML_PARSER, YAMLParser)):
        if replace:
            registry.register(name, parser_class())
        elif not registry.register_if_absent(name, parser_class()):
            logger.debug("i18n_builtin_parser_kept", name=name)
    return registry


def options_from_settings(i18n_settings: I18nSettings) -> List[Option]:
    """Translate I18nSettings into option callables.

    The cache directory option is applied before the parser option, so the
    configured parser name is the one that sticks.
    """
    options: List[Option] = []
    if i18n_settings.cache_directory:
        options.append(models.cache_directory(i18n_settings.cache_directory))
    options.extend(
        [
            models.default_parser(i18n_settings.parser),
            models.default_lang(i18n_settings.default_lang),
            models.lang_directory(i18n_settings.lang_directory),
            models.enable_file_as_key(i18n_settings.file_as_key),
        ]
    )
    return options


def create_i18n(
    settings: Optional[Settings] = None,
    registry: Optional[ParserRegistry] = None,
) -> I18n:
    """Create and configure an I18n instance from settings.

    Registers the builtin parsers in the registry first.

    Args:
        settings: Settings instance (default: the module-level singleton).
        registry: Parser registry (default: the global registry).

    Returns:
        I18n: Configured instance

    Raises:
        ParserNotRegisteredError: If I18N_PARSER names an unknown parser.
        TranslationParseError: If the language files cannot be parsed.

    Usage:
        # Use environment configuration
        i18n = create_i18n()

        # Explicit settings
        i18n = create_i18n(Settings(i18n=I18nSettings(I18N_LANG_DIRECTORY="locales")))
    """
    settings = settings or default_settings

    registry = register_builtin_parsers(registry)
    i18n = I18n(*options_from_settings(settings.i18n), registry=registry)
    logger.info(
        "i18n_created_from_settings",
        parser=i18n.options.default_parser,
        lang_directory=i18n.options.lang_directory,
    )
    return i18n


def new_i18n(*options: Option, registry: Optional[ParserRegistry] = None) -> I18n:
    """Get the process-wide I18n, creating it on first call.

    The first successful call creates the instance; every later call applies
    its options to that same instance and re-parses, which changes the
    configuration for the whole process. ``registry`` selects the registry
    when the instance is created; later calls may omit it or pass the same
    one.

    Concurrent first callers all receive the same fully configured instance.

    Raises:
        ValueError: If a different registry is passed once the instance exists.
        ParserNotRegisteredError: If the selected parser is not registered.
        TranslationParseError: If the parser cannot parse its files.
    """
    global _shared_i18n

    with _shared_i18n_lock:
        if _shared_i18n is None:
            _shared_i18n = I18n(*options, registry=registry)
            logger.debug("shared_i18n_initialized")
        else:
            if registry is not None and registry is not _shared_i18n.registry:
                logger.error("shared_i18n_registry_mismatch")
                raise ValueError(
                    "The shared I18n already uses a different parser registry"
                )
            _shared_i18n.configure(*options)
        return _shared_i18n


def reset_i18n() -> None:
    """Drop the process-wide I18n.

    Primarily used for testing.
    """
    global _shared_i18n

    with _shared_i18n_lock:
        _shared_i18n = None
