"""Infrastructure configuration module - public API.

Centralized configuration management using Pydantic BaseSettings.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Translation lookup settings class

Example:
    ```python
    from infrastructure.configuration import settings

    parser_name = settings.i18n.parser
    lang_dir = settings.i18n.lang_directory
    ```
"""

from infrastructure.configuration.settings import Settings, settings
from infrastructure.configuration.infrastructure.i18n import I18nSettings

__all__ = ["Settings", "settings", "I18nSettings"]
