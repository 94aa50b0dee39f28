import pytest

from logfilters.context import clear_mdc, clear_ndc
from logfilters.event import LogEvent
from logfilters.levels import DEBUG, ERROR, FATAL, INFO, WARN


@pytest.fixture(autouse=True)
def clean_diagnostic_context():
    """Every test starts and ends with empty NDC/MDC"""
    clear_ndc()
    clear_mdc()
    yield
    clear_ndc()
    clear_mdc()


def make_event(level=INFO, message="info log message", **kwargs):
    return LogEvent(logger_name="test", level=level, message=message, **kwargs)


@pytest.fixture
def events():
    return {
        "debug": make_event(DEBUG, "debug log message"),
        "info": make_event(INFO, "info log message"),
        "empty": make_event(INFO, ""),
        "warn": make_event(WARN, "warn log message"),
        "error": make_event(ERROR, "error log message"),
        "fatal": make_event(FATAL, "fatal log message"),
    }
