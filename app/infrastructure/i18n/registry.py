"""Translation parser registry for managing registered parsers.

Provides thread-safe registration and retrieval of translation parsers.
"""

import threading
from typing import Dict, List, Optional

from infrastructure.i18n.parsers.base import TranslationParser
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class ParserRegistry:
    """Thread-safe registry for translation parsers.

    Maps a parser name ("json", "yaml", ...) to the parser instance that
    decodes language files in that format. The I18n facade looks parsers up
    by name on every call, so re-registering a name swaps the implementation
    for all later lookups.

    Registering an existing name replaces the previous parser. Registration
    may race with lookups during startup; each operation holds the lock for
    its own duration only.

    Attributes:
        _parsers: Dict mapping parser name to TranslationParser instances.
        _lock: Threading lock for thread-safe operations.
    """

    def __init__(self):
        """Initialize the registry with empty parser dict and lock."""
        self._parsers: Dict[str, TranslationParser] = {}
        self._lock = threading.Lock()

    def register(self, name: str, parser: TranslationParser) -> None:
        """Register a parser under a name, replacing any previous one.

        Args:
            name: Parser name used in configuration (e.g. "json").
            parser: TranslationParser instance.
        """
        with self._lock:
            replaced = name in self._parsers
            self._parsers[name] = parser

        logger.info(
            "i18n_parser_registered",
            name=name,
            parser=type(parser).__name__,
            replaced=replaced,
        )

    def register_if_absent(self, name: str, parser: TranslationParser) -> bool:
        """Register a parser only when the name is still free.

        Args:
            name: Parser name used in configuration.
            parser: TranslationParser instance.

        Returns:
            True if the parser was registered, False if the name was taken.
        """
        with self._lock:
            if name in self._parsers:
                return False
            self._parsers[name] = parser

        logger.info(
            "i18n_parser_registered",
            name=name,
            parser=type(parser).__name__,
            replaced=False,
        )
        return True

    def unregister(self, name: str) -> Optional[TranslationParser]:
        """Remove a parser.

        Args:
            name: Parser name.

        Returns:
            The removed parser, or None if nothing was registered.
        """
        with self._lock:
            parser = self._parsers.pop(name, None)

        if parser is not None:
            logger.info("i18n_parser_unregistered", name=name)
        return parser

    def get(self, name: str) -> Optional[TranslationParser]:
        """Get a parser by name.

        Args:
            name: Parser name.

        Returns:
            TranslationParser instance if registered, None otherwise.
        """
        with self._lock:
            return self._parsers.get(name)

    def has_parser(self, name: str) -> bool:
        with self._lock:
            return name in self._parsers

    def names(self) -> List[str]:
        """Get the names of all registered parsers, sorted."""
        with self._lock:
            return sorted(self._parsers)

    def count(self) -> int:
        with self._lock:
            return len(self._parsers)

    def clear(self) -> None:
        """Remove all registered parsers.

        Primarily used for testing.
        """
        with self._lock:
            self._parsers.clear()
        logger.debug("i18n_parser_registry_cleared")


# Global registry instance
_global_registry: Optional[ParserRegistry] = None
_global_registry_lock = threading.Lock()


def get_parser_registry() -> ParserRegistry:
    """Get the global parser registry singleton.

    Thread-safe singleton pattern. Creates the registry on first call.

    Returns:
        Global ParserRegistry instance.
    """
    global _global_registry

    if _global_registry is None:
        with _global_registry_lock:
            # Double-check locking pattern
            if _global_registry is None:
                _global_registry = ParserRegistry()
                logger.debug("global_parser_registry_initialized")

    return _global_registry


def register_parser(
    name: str,
    parser: TranslationParser,
    registry: Optional[ParserRegistry] = None,
) -> None:
    """Register a parser during application startup.

    Args:
        name: Parser name used in configuration.
        parser: TranslationParser instance.
        registry: Target registry (default: the global registry).
    """
    (registry or get_parser_registry()).register(name, parser)
