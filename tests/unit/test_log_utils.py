"""Unit tests for logging configuration."""

import io
import json
import logging
import logging.config
from unittest.mock import Mock

import pytest

from sludge.common import log_utils
from sludge.models import ParamGroup
from sludge.store import ParameterStore


@pytest.fixture
def dict_config(monkeypatch):
    """Capture dictConfig calls without replacing the test session's handlers."""
    mock = Mock()
    monkeypatch.setattr(log_utils.logging.config, "dictConfig", mock)
    return mock


@pytest.fixture
def root_level():
    """Restore the root log level after the test."""
    root = logging.getLogger()
    level = root.level
    yield root
    root.setLevel(level)


def test_dev_config_by_default(dict_config, monkeypatch, root_level):
    """Test the text format config is loaded outside JSON mode."""
    monkeypatch.delenv("SLUDGE_LOG_FORMAT", raising=False)

    log_utils.configure_logging()

    config = dict_config.call_args[0][0]
    assert config["formatters"]["simple"]["format"].startswith("%(asctime)s")


def test_json_config(dict_config, monkeypatch, root_level):
    """Test SLUDGE_LOG_FORMAT=json selects the structured config."""
    monkeypatch.setenv("SLUDGE_LOG_FORMAT", "json")

    log_utils.configure_logging()

    config = dict_config.call_args[0][0]
    assert "json" in config["formatters"]


def test_level_override(dict_config, root_level):
    """Test an explicit level overrides the file's root level."""
    log_utils.configure_logging("debug")

    assert root_level.level == logging.DEBUG


@pytest.fixture
def json_log_stream():
    """Attach the packaged JSON formatter to the sludge logger, capturing its output."""
    config = log_utils.load_logging_config(use_json=True)
    formatter_config = dict(config["formatters"]["json"])
    factory = logging.config.BaseConfigurator({}).resolve(formatter_config.pop("()"))

    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(factory(**formatter_config))
    logger = logging.getLogger("sludge")
    level = logger.level
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    yield stream
    logger.removeHandler(handler)
    logger.setLevel(level)


def test_json_lines_escape_user_input(json_log_stream):
    """Test every JSON log line parses, even with quotes and newlines in form input."""
    store = ParameterStore()
    store.on_field_change(ParamGroup.BIOMASS, "fcr", '1.3 "approx"')
    store.on_field_change(ParamGroup.MIXTURE, "ts_sludge", "2\\n\nkg")
    store.set_target_biomass("5000 \"kg\"\n")

    lines = json_log_stream.getvalue().splitlines()

    assert len(lines) == 3
    records = [json.loads(line) for line in lines]
    assert records[0]["logger"] == "sludge.store"
    assert records[0]["level"] == "DEBUG"
    assert "timestamp" in records[0]
    assert records[0]["message"] == "Set biomass.fcr=1.3 (raw '1.3 \"approx\"')"
