"""Translation lookup infrastructure settings."""

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class I18nSettings(InfrastructureSettings):
    """Translation lookup configuration.

    Selects which registered parser decodes the language files and where
    those files live.

    Environment Variables:
        I18N_PARSER: Name of the registered parser to use (default: json)
        I18N_DEFAULT_LANG: Language used when none is requested (default: zh_cn)
        I18N_LANG_DIRECTORY: Directory holding one sub-directory per language
        I18N_CACHE_DIRECTORY: Cache directory for parsed catalogs
        I18N_FILE_AS_KEY: Use each file's base name as the top-level key

    Layout of I18N_LANG_DIRECTORY:
        locales/
            zh_cn/
                common.json
                errors.json
            en/
                common.json

    Example:
        ```python
        from infrastructure.configuration import settings

        if settings.i18n.file_as_key:
            # keys look like "common.greeting"
            ...
        ```
    """

    parser: str = Field(
        default="json",
        alias="I18N_PARSER",
        description="Name of the registered translation parser",
    )
    default_lang: str = Field(
        default="zh_cn",
        alias="I18N_DEFAULT_LANG",
        description="Language used when a lookup does not name one",
    )
    lang_directory: str = Field(
        default="",
        alias="I18N_LANG_DIRECTORY",
        description="Directory with one sub-directory per language",
    )
    cache_directory: str = Field(
        default="",
        alias="I18N_CACHE_DIRECTORY",
        description="Cache directory for parsed catalogs",
    )
    file_as_key: bool = Field(
        default=False,
        alias="I18N_FILE_AS_KEY",
        description="Use each file's base name as the top-level key segment",
    )
