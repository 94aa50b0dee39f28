import logging

from logfilters.config import LoggerConfig
from logfilters.context import mdc_context
from logfilters.filtering import (
    ChainFilter,
    FilterConfig,
    MDCMatchFilter,
    StringMatchFilter,
)
from logfilters.logger import (
    clear_filter_engines,
    get_filter_metrics,
    get_logger,
    reset_filter_metrics,
)


def _drop_logger(name):
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    for filter_obj in list(logger.filters):
        logger.removeFilter(filter_obj)


def test_get_logger_without_filtering(capsys):
    config = LoggerConfig(log_level="DEBUG")
    logger = get_logger("logfilters.tests.plain", config)
    try:
        assert logger.level == logging.DEBUG
        assert not any(isinstance(f, ChainFilter) for f in logger.filters)
        logger.debug("hello")
        assert "hello" in capsys.readouterr().out
        assert get_filter_metrics(config) is None
    finally:
        _drop_logger("logfilters.tests.plain")


def test_get_logger_applies_chain(capsys):
    config = LoggerConfig(
        log_level="INFO",
        filter_config=FilterConfig.create_allowlist_config(
            MDCMatchFilter("tenant", "acme"),
        ),
    )
    logger = get_logger("logfilters.tests.filtered", config)
    try:
        logger.info("no tenant")
        with mdc_context(tenant="acme"):
            logger.info("acme tenant")
        with mdc_context(tenant="globex"):
            logger.info("globex tenant")

        out = capsys.readouterr().out
        assert "acme tenant" in out
        assert "no tenant" not in out
        assert "globex tenant" not in out

        metrics = get_filter_metrics(config)
        assert metrics["summary"] == {"total_evaluated": 3, "accepted": 1, "denied": 2}

        reset_filter_metrics(config)
        assert get_filter_metrics(config)["summary"]["total_evaluated"] == 0
    finally:
        _drop_logger("logfilters.tests.filtered")


def test_get_logger_reuses_existing_handlers():
    config = LoggerConfig(
        filter_config=FilterConfig(filters=[StringMatchFilter("x", False)])
    )
    try:
        first = get_logger("logfilters.tests.reuse", config)
        second = get_logger("logfilters.tests.reuse", config)
        assert first is second
        assert len(first.handlers) == 1
        assert len(first.filters) == 1
    finally:
        _drop_logger("logfilters.tests.reuse")


def test_unknown_level_falls_back_to_info():
    try:
        logger = get_logger("logfilters.tests.level", LoggerConfig(log_level="LOUD"))
        assert logger.level == logging.INFO
    finally:
        _drop_logger("logfilters.tests.level")


def test_clear_filter_engines():
    config = LoggerConfig(filter_config=FilterConfig(filters=[StringMatchFilter("x", False)]))
    try:
        logger = get_logger("logfilters.tests.clear", config)
        logger.info("counted")
        assert get_filter_metrics(config)["summary"]["total_evaluated"] == 1

        clear_filter_engines()
        assert get_filter_metrics(config) is None
    finally:
        _drop_logger("logfilters.tests.clear")
