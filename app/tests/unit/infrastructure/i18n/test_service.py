"""Tests for infrastructure.i18n.service module."""

import pytest

from infrastructure.i18n import (
    I18n,
    JSONParser,
    ParserNotRegisteredError,
    TranslationParseError,
    ValueKind,
    cache_directory,
    default_lang,
    default_parser,
    enable_file_as_key,
    lang_directory,
)
from tests.factories.i18n import DictParser, FailingParser, make_greeting_table


@pytest.mark.unit
class TestI18nConfiguration:
    """Tests for I18n construction and configure()."""

    def test_defaults_applied(self, dict_registry):
        """Without options the parser is "json" and the language "zh_cn"."""
        i18n = I18n(registry=dict_registry)
        assert i18n.options.default_parser == "json"
        assert i18n.current_lang == "zh_cn"

    def test_options_pushed_to_parser_and_parsed(self, dict_registry, dict_parser):
        i18n = I18n(default_lang("en"), registry=dict_registry)
        assert dict_parser.options.default_lang == "en"
        assert dict_parser.parse_count == 1
        assert i18n.current_lang == "en"

    def test_last_option_wins(self, dict_registry):
        i18n = I18n(default_lang("en"), default_lang("fr"), registry=dict_registry)
        assert i18n.current_lang == "fr"

    def test_unregistered_parser_raises(self, registry):
        with pytest.raises(ParserNotRegisteredError) as exc_info:
            I18n(default_parser("toml"), registry=registry)
        assert exc_info.value.name == "toml"
        assert "No registered parser" in str(exc_info.value)

    def test_cache_directory_option_breaks_parser_lookup(self, dict_registry):
        """The cache directory value ends up as the parser name."""
        with pytest.raises(ParserNotRegisteredError) as exc_info:
            I18n(cache_directory("/tmp/cache"), registry=dict_registry)
        assert exc_info.value.name == "/tmp/cache"

    def test_failed_configure_leaves_no_partial_state(self, dict_registry):
        """An unregistered parser does not change the committed configuration."""
        i18n = I18n(default_lang("en"), registry=dict_registry)

        with pytest.raises(ParserNotRegisteredError):
            i18n.configure(default_parser("toml"), default_lang("fr"))

        assert i18n.options.default_parser == "json"
        assert i18n.current_lang == "en"

        i18n.configure()
        assert i18n.options.default_parser == "json"
        assert i18n.current_lang == "en"
        assert i18n.load("greeting").as_string() == "hello"

    def test_parse_error_propagates_unchanged(self, registry):
        parser = FailingParser()
        registry.register("json", parser)

        with pytest.raises(TranslationParseError) as exc_info:
            I18n(registry=registry)
        assert exc_info.value.path == "broken.json"

    def test_failed_switch_keeps_active_parser(self, dict_registry, dict_parser):
        """Switching to a parser that fails to parse keeps the current one."""
        i18n = I18n(default_lang("en"), registry=dict_registry)
        dict_registry.register("broken", FailingParser())

        with pytest.raises(TranslationParseError):
            i18n.configure(default_parser("broken"))

        assert i18n.options.default_parser == "json"
        assert i18n.load("greeting").as_string() == "hello"
        assert dict_parser.options.default_lang == "en"

    def test_failed_reparse_restores_parser_options(self, registry):
        """A failed re-parse hands the committed options back to the parser."""
        parser = DictParser(make_greeting_table())
        registry.register("json", parser)
        i18n = I18n(default_lang("en"), registry=registry)

        def fail():
            raise TranslationParseError("broken language file")

        parser.parse = fail
        with pytest.raises(TranslationParseError):
            i18n.configure(default_lang("fr"))

        assert parser.options.default_lang == "en"
        assert i18n.current_lang == "en"
        assert i18n.load("greeting").as_string() == "hello"

    def test_reconfigure_reparses(self, dict_registry, dict_parser):
        """configure() applies on top of the current options and re-parses."""
        i18n = I18n(default_lang("en"), registry=dict_registry)
        i18n.configure(enable_file_as_key(True))

        assert dict_parser.parse_count == 2
        assert i18n.current_lang == "en"
        assert i18n.options.enable_file_as_key is True

    def test_options_returns_copy(self, dict_registry):
        i18n = I18n(registry=dict_registry)
        i18n.options.default_lang = "fr"
        assert i18n.current_lang == "zh_cn"


@pytest.mark.unit
class TestI18nLookups:
    """Tests for I18n lookup forwarding."""

    @pytest.fixture
    def i18n(self, dict_registry):
        return I18n(default_lang("zh_cn"), registry=dict_registry)

    def test_greeting_scenario(self, i18n):
        """Default language, switched language and unknown language."""
        assert i18n.load("greeting").as_string() == "你好"

        i18n.lang("en")
        assert i18n.load("greeting").as_string() == "hello"

        assert i18n.load_by_lang("greeting", "fr") == ""

    def test_load_by_lang_other_language_only(self, i18n):
        """A key present only in another language yields an empty string."""
        assert i18n.load_by_lang("farewell", "en") == ""
        assert i18n.load_by_lang("farewell", "zh_cn") == "再见"

    def test_load_with_default(self, i18n):
        value = i18n.load_with_default("missing.key", "fallback")
        assert value.as_string() == "fallback"
        assert i18n.load_with_default("greeting", "fallback").as_string() == "你好"

    def test_load_missing_is_empty(self, i18n):
        value = i18n.load("missing.key")
        assert value.kind == ValueKind.EMPTY
        assert str(value) == ""

    def test_lang_switch_stays_with_its_facade(self, i18n, dict_registry):
        """Configuring another facade on the same registry leaves this one alone."""
        other = I18n(default_lang("en"), registry=dict_registry)

        assert i18n.load("greeting").as_string() == "你好"
        assert other.load("greeting").as_string() == "hello"
        assert i18n.load_with_default("farewell", "bye").as_string() == "再见"
        assert other.load_with_default("farewell", "bye").as_string() == "bye"

    def test_lang_does_not_reparse(self, i18n, dict_parser):
        i18n.lang("en")
        assert dict_parser.parse_count == 1
        assert i18n.current_lang == "en"

    def test_repeated_lookups_are_identical(self, i18n):
        assert i18n.load("greeting") == i18n.load("greeting")
        assert i18n.load_with_default("missing", "x") == i18n.load_with_default(
            "missing", "x"
        )
        assert i18n.load_by_lang("greeting", "en") == i18n.load_by_lang(
            "greeting", "en"
        )

    def test_reregistered_parser_used_on_next_lookup(self, i18n, dict_registry):
        """Lookups resolve the parser by name on every call."""
        replacement = DictParser({"greeting": {"zh_cn": "您好"}})
        replacement.set_options(i18n.options)
        dict_registry.register("json", replacement)

        assert i18n.load("greeting").as_string() == "您好"

    def test_lookup_with_unregistered_parser_raises(self, i18n, dict_registry):
        dict_registry.clear()

        with pytest.raises(ParserNotRegisteredError):
            i18n.load("greeting")
        with pytest.raises(ParserNotRegisteredError):
            i18n.load_with_default("greeting", "x")
        with pytest.raises(ParserNotRegisteredError):
            i18n.load_by_lang("greeting", "en")


@pytest.mark.unit
class TestI18nWithJSONFiles:
    """End-to-end tests with the JSON parser."""

    def test_file_backed_lookups(self, registry, json_lang_dir):
        registry.register("json", JSONParser())
        i18n = I18n(
            lang_directory(json_lang_dir),
            enable_file_as_key(True),
            registry=registry,
        )

        assert i18n.load("common", "greeting").as_string() == "你好"
        assert i18n.load_by_lang("errors.not_found", "en") == "Not found"

        i18n.lang("en")
        assert i18n.load("common.menu.file").as_string() == "File"
        assert i18n.load_with_default("common.missing", "n/a").as_string() == "n/a"

    def test_facades_keep_their_own_language(self, registry, json_lang_dir):
        """Two I18n instances sharing one parser each use their own language."""
        registry.register("json", JSONParser())
        zh = I18n(
            lang_directory(json_lang_dir), default_lang("zh_cn"), registry=registry
        )
        en = I18n(lang_directory(json_lang_dir), default_lang("en"), registry=registry)

        assert zh.load("greeting").as_string() == "你好"
        assert en.load("greeting").as_string() == "hello"
        assert zh.load_with_default("menu.file", "x").as_string() == "文件"
        assert en.load_with_default("menu.file", "x").as_string() == "File"

        zh.lang("en")
        en.lang("zh_cn")
        assert zh.load("greeting").as_string() == "hello"
        assert en.load("greeting").as_string() == "你好"

    def test_missing_directory_fails_setup(self, registry, tmp_path):
        registry.register("json", JSONParser())
        with pytest.raises(TranslationParseError):
            I18n(lang_directory(tmp_path / "missing"), registry=registry)
