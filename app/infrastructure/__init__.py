"""Infrastructure modules for the translation lookup library.

Centralized infrastructure components:
- configuration: Settings management (settings, I18nSettings)
- logging: Structured logging (configure_logging, get_module_logger)
- i18n: Parser registry, translation parsers and the I18n facade
"""

# Configuration
from infrastructure.configuration import settings

# Logging
from infrastructure.logging import get_module_logger

__all__ = [
    # Configuration
    "settings",
    # Logging
    "get_module_logger",
]
