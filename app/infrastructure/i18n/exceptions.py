"""Custom exceptions for the translation lookup system.

Provides specialized exceptions for parser registration and parse failures.
Lookup misses never raise; they degrade to empty or default values.
"""

from pathlib import Path
from typing import Optional, Union


class I18nError(Exception):
    """Base exception for all translation lookup errors.

    Example:
        try:
            i18n = I18n(default_parser("toml"))
        except I18nError as e:
            logger.error("i18n_setup_failed", error=str(e))
    """

    pass


class ParserNotRegisteredError(I18nError):
    """Raised when no parser is registered under the requested name.

    Signals a misconfigured process: either the parser was never registered
    at startup or the configured name is misspelled.

    Example:
        >>> I18n(default_parser("toml"))
        Traceback (most recent call last):
        ...
        ParserNotRegisteredError: No registered parser: 'toml'
    """

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"No registered parser: '{name}'")


class TranslationParseError(I18nError):
    """Raised when a parser cannot read or decode its language files.

    Attributes:
        path: The offending file or directory, when known.
    """

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        self.path = str(path) if path is not None else None
        super().__init__(message)
