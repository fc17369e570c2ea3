# tests/test_logging_config.py
import logging

import pytest
import structlog

from envsugar import (
    ConfigurationError,
    EnvAccessor,
    EnvironmentWriteError,
    EnvLogLevel,
    MemoryEnvironment,
    RequiredVariableError,
    configure_structlog,
    get_logger,
    is_configured,
    load_logging_config,
)


def test_default_level_is_info():
    config = load_logging_config(environ=MemoryEnvironment())
    assert config.log_level is EnvLogLevel.INFO
    assert config.level_int == logging.INFO


def test_level_is_case_insensitive():
    config = load_logging_config(environ=MemoryEnvironment({"ENVSUGAR_LOG_LEVEL": " debug "}))
    assert config.level_value == "DEBUG"


def test_custom_key():
    config = load_logging_config("MY_LEVEL", environ=MemoryEnvironment({"MY_LEVEL": "ERROR"}))
    assert config.level_int == logging.ERROR


def test_unknown_level_raises():
    with pytest.raises(ConfigurationError) as exc_info:
        load_logging_config(environ=MemoryEnvironment({"ENVSUGAR_LOG_LEVEL": "loud"}))
    assert "DEBUG, INFO, WARNING, ERROR, CRITICAL" in str(exc_info.value)


def test_configure_reads_level_from_environment(reset_logging, monkeypatch):
    monkeypatch.setenv("ENVSUGAR_LOG_LEVEL", "warning")
    configure_structlog()
    assert is_configured()
    assert structlog.get_config()["wrapper_class"] is structlog.make_filtering_bound_logger(
        logging.WARNING
    )


def test_configure_can_be_called_again_with_another_level(reset_logging):
    configure_structlog(logging.INFO)
    configure_structlog(logging.DEBUG)
    assert structlog.get_config()["wrapper_class"] is structlog.make_filtering_bound_logger(
        logging.DEBUG
    )


def test_configure_with_unknown_level_raises(reset_logging, monkeypatch):
    monkeypatch.setenv("ENVSUGAR_LOG_LEVEL", "loud")
    with pytest.raises(ConfigurationError):
        configure_structlog()


def test_get_logger_does_not_configure_structlog(reset_logging):
    assert get_logger("test") is not None
    assert not is_configured()


class TestHostConfiguration:
    """The library logs through the host's structlog setup and leaves it alone."""

    @pytest.fixture
    def host_processors(self, reset_logging):
        processors = [structlog.processors.JSONRenderer()]
        structlog.configure(processors=processors)
        return processors

    def test_verbose_check_keeps_host_processors(self, host_processors):
        before = structlog.get_config()["processors"]
        environ = MemoryEnvironment({"P_X": "1"})
        EnvAccessor(environ).check("p", "x", verbose=True)
        EnvAccessor(environ).check("p", "y", "default", verbose=True)
        assert structlog.get_config()["processors"] == before
        assert before[-1] is host_processors[-1]

    def test_write_failure_keeps_host_processors(self, host_processors):
        before = structlog.get_config()["processors"]
        with pytest.raises(EnvironmentWriteError):
            EnvAccessor(MemoryEnvironment()).check("", "bad=key", "v")
        assert structlog.get_config()["processors"] == before


class TestInvalidLogLevel:
    """An unknown ENVSUGAR_LOG_LEVEL never changes what check raises."""

    @pytest.fixture(autouse=True)
    def loud_level(self, reset_logging, monkeypatch):
        monkeypatch.setenv("ENVSUGAR_LOG_LEVEL", "loud")

    def test_verbose_check_on_set_variable_succeeds(self):
        environ = MemoryEnvironment({"P_X": "1"})
        assert EnvAccessor(environ).check("p", "x", verbose=True) is None

    def test_write_failure_raises_write_error(self):
        with pytest.raises(EnvironmentWriteError):
            EnvAccessor(MemoryEnvironment()).check("", "bad=key", "v")

    def test_missing_required_raises_required_error(self):
        with pytest.raises(RequiredVariableError):
            EnvAccessor(MemoryEnvironment()).check("p", "x", required=True, verbose=True)
