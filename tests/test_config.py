import logging

import pytest

from logfilters import config as config_module
from logfilters.config import LoggerConfig, get_default_config, set_default_config
from logfilters.event import LogEvent
from logfilters.filtering import (
    DenyAllFilter,
    Filter,
    FilterConfig,
    FilterEngine,
    FilterResult,
    LogLevelMatchFilter,
    LogLevelRangeFilter,
    MDCMatchFilter,
    NDCMatchFilter,
    StringMatchFilter,
    create_filter,
)
from logfilters.filtering.properties import (
    get_bool,
    get_property,
    get_property_subset,
    parse_bool,
)


class TestProperties:
    def test_parse_bool(self):
        assert parse_bool("true") is True
        assert parse_bool("TRUE") is True
        assert parse_bool(" False ") is False
        assert parse_bool("1") is True
        assert parse_bool("0") is False
        assert parse_bool("maybe") is None

    def test_get_bool_defaults(self, caplog):
        assert get_bool({}, "AcceptOnMatch", True) is True
        with caplog.at_level(logging.WARNING):
            assert get_bool({"AcceptOnMatch": "nope"}, "AcceptOnMatch", True) is True
        assert "Cannot parse AcceptOnMatch" in caplog.text

    def test_keys_are_case_sensitive(self):
        assert get_bool({"acceptonmatch": "false"}, "AcceptOnMatch", True) is True
        assert get_property({"stringtomatch": "x"}, "StringToMatch") == ""

    def test_property_subset(self):
        props = {"filters.1": "DenyAll", "filters.1.Key": "v", "other": "x"}
        assert get_property_subset(props, "filters.") == {"1": "DenyAll", "1.Key": "v"}


class TestBindingDefaults:
    def test_defaults(self):
        level_match = LogLevelMatchFilter.from_properties({})
        assert level_match.log_level_to_match is None
        assert level_match.accept_on_match is True

        level_range = LogLevelRangeFilter.from_properties({})
        assert level_range.log_level_min is None
        assert level_range.log_level_max is None

        ndc = NDCMatchFilter.from_properties({})
        assert ndc.neutral_on_empty is True
        assert ndc.ndc_to_match == ""

        mdc = MDCMatchFilter.from_properties({"NeutralOnEmpty": "false"})
        assert mdc.neutral_on_empty is False
        assert mdc.accept_on_match is True


class TestFilterConfig:
    def test_from_properties(self):
        config = FilterConfig.from_properties(
            {
                "filters.10": "DenyAll",
                "filters.2": "LogLevelMatchFilter",
                "filters.2.LogLevelToMatch": "ERROR",
                "filters.1": "StringMatch",
                "filters.1.StringToMatch": "secret",
                "filters.1.AcceptOnMatch": "false",
            }
        )
        assert [type(f) for f in config.filters] == [
            StringMatchFilter,
            LogLevelMatchFilter,
            DenyAllFilter,
        ]
        assert config.filters[0].string_to_match == "secret"
        assert config.filters[0].accept_on_match is False
        assert config.filters[1].log_level_to_match == logging.ERROR
        assert [type(f) for f in config.build_chain()] == [type(f) for f in config.filters]

    def test_zero_padded_indices(self):
        config = FilterConfig.from_properties(
            {
                "filters.02": "DenyAll",
                "filters.01": "LogLevelMatch",
                "filters.01.LogLevelToMatch": "ERROR",
            }
        )
        assert [type(f) for f in config.filters] == [LogLevelMatchFilter, DenyAllFilter]
        assert config.filters[0].log_level_to_match == logging.ERROR

    def test_non_decimal_indices_ignored(self):
        config = FilterConfig.from_properties(
            {"filters.\u00b2": "DenyAll", "filters.x": "DenyAll", "filters.1": "StringMatch"}
        )
        assert [type(f) for f in config.filters] == [StringMatchFilter]

    def test_shared_filter_in_two_configs(self):
        shared = StringMatchFilter("secret", False)
        allowlist = FilterEngine(FilterConfig.create_allowlist_config(shared))
        errors = FilterEngine(FilterConfig(filters=[shared, LogLevelMatchFilter("ERROR")]))

        assert shared.next is None
        assert [type(f) for f in allowlist.head] == [StringMatchFilter, DenyAllFilter]
        assert [type(f) for f in errors.head] == [StringMatchFilter, LogLevelMatchFilter]

        boom = LogEvent(logger_name="test", level=logging.ERROR, message="boom")
        assert errors.decide(boom) is FilterResult.ACCEPT
        assert allowlist.decide(boom) is FilterResult.DENY

    def test_linked_filter_rejected(self):
        head = Filter.chain(StringMatchFilter("x"), DenyAllFilter())
        with pytest.raises(ValueError, match="already linked"):
            FilterConfig(filters=[head]).build_chain()

    def test_unknown_kind(self):
        with pytest.raises(ValueError, match="Unknown filter kind"):
            FilterConfig.from_properties({"filters.1": "RegexFilter"})

    def test_qualified_kind_name(self):
        filter_obj = create_filter("spi::LogLevelRangeFilter", {"LogLevelMin": "WARN"})
        assert isinstance(filter_obj, LogLevelRangeFilter)
        assert filter_obj.log_level_min == logging.WARNING

    def test_function_filter_not_bindable(self):
        with pytest.raises(ValueError):
            create_filter("FunctionFilter", {})

    def test_allowlist_config(self):
        config = FilterConfig.create_allowlist_config(LogLevelMatchFilter("ERROR"))
        assert isinstance(config.filters[-1], DenyAllFilter)

    def test_level_range_config(self):
        config = FilterConfig.create_level_range_config("WARN")
        assert config.filters[0].log_level_min == logging.WARNING
        assert config.collect_metrics is False


def test_logger_config_defaults():
    config = LoggerConfig()
    assert config.log_level == "INFO"
    assert config.filter_config is None


def test_logger_config_from_env(monkeypatch):
    monkeypatch.setenv("LOGFILTERS_LEVEL", "DEBUG")
    monkeypatch.setenv("LOGFILTERS_FILTERING", "true")
    monkeypatch.setenv("LOGFILTERS_COLLECT_METRICS", "false")
    monkeypatch.setenv("LOGFILTERS_FILTERS_1", "LogLevelRange")
    monkeypatch.setenv("LOGFILTERS_FILTERS_1_LogLevelMin", "WARN")
    monkeypatch.setenv("LOGFILTERS_FILTERS_1_AcceptOnMatch", "false")
    monkeypatch.setenv("LOGFILTERS_FILTERS_2", "MDCMatch")
    monkeypatch.setenv("LOGFILTERS_FILTERS_2_MDCKeyToMatch", "tenant")
    monkeypatch.setenv("LOGFILTERS_FILTERS_2_MDCValueToMatch", "acme")

    config = LoggerConfig.from_env()
    assert config.log_level == "DEBUG"
    assert config.filter_config.collect_metrics is False

    range_filter, mdc_filter = config.filter_config.filters
    assert range_filter.log_level_min == logging.WARNING
    assert range_filter.accept_on_match is False
    assert mdc_filter.mdc_key_to_match == "tenant"
    assert mdc_filter.mdc_value_to_match == "acme"


def test_logger_config_from_env_filtering_disabled(monkeypatch):
    monkeypatch.delenv("LOGFILTERS_FILTERING", raising=False)
    monkeypatch.setenv("LOGFILTERS_FILTERS_1", "DenyAll")
    assert LoggerConfig.from_env().filter_config is None


def test_get_default_config(monkeypatch):
    monkeypatch.setattr(config_module, "_default_config", None)
    config = get_default_config()
    assert isinstance(config, LoggerConfig)


def test_set_default_config(monkeypatch):
    monkeypatch.setattr(config_module, "_default_config", None)
    custom_config = LoggerConfig(log_level="ERROR")
    set_default_config(custom_config)

    config = get_default_config()
    assert config.log_level == "ERROR"
