"""Translation models for the i18n system.

Defines the configuration snapshot handed to parsers, the option callables
that build it, and the value variant returned by lookups.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Sequence

DEFAULT_PARSER = "json"
DEFAULT_LANG = "zh_cn"
KEY_SEPARATOR = "."


@dataclass
class I18nOptions:
    """Configuration shared between the I18n facade and the active parser.

    Attributes:
        default_parser: Name of the registered parser to use.
        default_lang: Language used when a lookup does not name one.
        lang_directory: Directory holding one sub-directory per language.
        cache_directory: Cache directory for parsed catalogs.
        enable_file_as_key: Use each file's base name as the top-level key.
    """

    default_parser: str = ""
    default_lang: str = ""
    lang_directory: str = ""
    cache_directory: str = ""
    enable_file_as_key: bool = False


Option = Callable[[I18nOptions], None]


def default_parser(name: str) -> Option:
    """Select the registered parser by name."""

    def apply(opts: I18nOptions) -> None:
        opts.default_parser = name

    return apply


def default_lang(lang: str) -> Option:
    """Set the language used when a lookup does not name one."""

    def apply(opts: I18nOptions) -> None:
        opts.default_lang = lang

    return apply


def lang_directory(path: str) -> Option:
    """Set the directory holding one sub-directory per language."""

    def apply(opts: I18nOptions) -> None:
        opts.lang_directory = str(path)

    return apply


def cache_directory(path: str) -> Option:
    """Set the cache directory for parsed catalogs.

    Note: this writes ``default_parser``, not ``cache_directory``. The
    behavior is kept as observed until its owners confirm the intent, so
    applying it after ``default_parser()`` replaces the parser name.
    """

    def apply(opts: I18nOptions) -> None:
        opts.default_parser = str(path)

    return apply


def enable_file_as_key(enabled: bool) -> Option:
    """Use each language file's base name as the top-level key segment."""

    def apply(opts: I18nOptions) -> None:
        opts.enable_file_as_key = enabled

    return apply


class ValueKind(str, Enum):
    """Shape of a looked up translation value."""

    STRING = "string"
    MAPPING = "mapping"
    LIST = "list"
    EMPTY = "empty"


@dataclass(frozen=True)
class TranslationValue:
    """Result of a key lookup.

    Translation files may hold plain strings, nested sections or lists, so
    the lookup result carries a ``kind`` tag that callers branch on instead
    of inspecting ``value`` blindly.

    Attributes:
        kind: ValueKind describing ``value``.
        value: The raw value (str, dict, list) or None when EMPTY.
    """

    kind: ValueKind
    value: Any = None

    @classmethod
    def empty(cls) -> "TranslationValue":
        return cls(kind=ValueKind.EMPTY)

    @classmethod
    def from_raw(cls, raw: Any) -> "TranslationValue":
        """Wrap a raw catalog value.

        Scalars other than strings are stored as their string form, with
        booleans spelled as in the source files ("true", "false").

        Args:
            raw: Value taken from a parsed catalog.

        Returns:
            TranslationValue tagged with the matching ValueKind.
        """
        if raw is None:
            return cls.empty()
        if isinstance(raw, str):
            return cls(kind=ValueKind.STRING, value=raw)
        if isinstance(raw, dict):
            return cls(kind=ValueKind.MAPPING, value=raw)
        if isinstance(raw, (list, tuple)):
            return cls(kind=ValueKind.LIST, value=list(raw))
        if isinstance(raw, bool):
            return cls(kind=ValueKind.STRING, value="true" if raw else "false")
        return cls(kind=ValueKind.STRING, value=str(raw))

    @classmethod
    def from_defaults(cls, defaults: Sequence[str]) -> "TranslationValue":
        """Build the value substituted for a missing key.

        One default yields a STRING, several yield a LIST, none yields EMPTY.
        """
        if not defaults:
            return cls.empty()
        if len(defaults) == 1:
            return cls(kind=ValueKind.STRING, value=defaults[0])
        return cls(kind=ValueKind.LIST, value=list(defaults))

    @property
    def is_empty(self) -> bool:
        return self.kind == ValueKind.EMPTY

    def as_string(self) -> Optional[str]:
        """Return the value if it is a string, None otherwise."""
        return self.value if self.kind == ValueKind.STRING else None

    def as_mapping(self) -> Optional[Dict[str, Any]]:
        """Return the value if it is a nested section, None otherwise."""
        return self.value if self.kind == ValueKind.MAPPING else None

    def as_list(self) -> Optional[List[Any]]:
        """Return the value if it is a list, None otherwise."""
        return self.value if self.kind == ValueKind.LIST else None

    def __str__(self) -> str:
        if self.kind == ValueKind.EMPTY:
            return ""
        return str(self.value)
