"""Tests for structured logging functionality."""

from __future__ import annotations

import json
import logging
import logging.handlers
import sys

import pytest

from fincalc.config import BaseConfig
from fincalc.devtools import dev_log, in_dev_mode
from fincalc.logging_config import JSONFormatter, get_logger, setup_logging
from fincalc.services.debts import snowball_payoff


def _record(**overrides) -> logging.LogRecord:
    record = logging.LogRecord(
        name=overrides.pop("name", "test.logger"),
        level=overrides.pop("level", logging.INFO),
        pathname="test.py",
        lineno=42,
        msg=overrides.pop("msg", "Test message"),
        args=(),
        exc_info=overrides.pop("exc_info", None),
    )
    record.module = "test_module"
    record.funcName = "test_function"
    for key, value in overrides.items():
        setattr(record, key, value)
    return record


def test_json_formatter():
    """JSONFormatter emits only the core fields for a plain record."""
    log_data = json.loads(JSONFormatter().format(_record()))

    assert set(log_data) == {"timestamp", "level", "logger", "message", "location"}
    assert log_data["level"] == "INFO"
    assert log_data["logger"] == "test.logger"
    assert log_data["message"] == "Test message"
    assert log_data["location"] == "test_module.test_function:42"


def test_json_formatter_with_exception():
    """Exception type, message and traceback are top-level fields."""
    try:
        raise ValueError("Test error")
    except ValueError:
        exc_info = sys.exc_info()

    log_data = json.loads(
        JSONFormatter().format(_record(level=logging.ERROR, msg="Error occurred", exc_info=exc_info))
    )

    assert log_data["error"] == "ValueError"
    assert log_data["error_message"] == "Test error"
    assert "Traceback" in log_data["traceback"]


def test_json_formatter_flattens_extra_fields():
    """Fields passed through extra sit beside the core fields."""
    log_data = json.loads(JSONFormatter().format(_record(strategy="Avalanche", months=42)))

    assert log_data["strategy"] == "Avalanche"
    assert log_data["months"] == 42
    assert "extra" not in log_data


def test_json_formatter_prefixes_clashing_keys():
    """An extra key named like a core field does not overwrite it."""
    log_data = json.loads(JSONFormatter().format(_record(level_hint="x", location="Denver")))

    assert log_data["location"] == "test_module.test_function:42"
    assert log_data["extra_location"] == "Denver"
    assert log_data["level_hint"] == "x"


def test_json_formatter_rounds_floats():
    """Floats, including nested ones, are rounded to the configured digits."""
    formatter = JSONFormatter(float_digits=2)
    log_data = json.loads(
        formatter.format(_record(interest=1234.56789, context={"rate": 6.54321, "months": [1.001]}))
    )

    assert log_data["interest"] == 1234.57
    assert log_data["context"] == {"rate": 6.54, "months": [1.0]}


def test_setup_logging(tmp_path):
    """Logging setup creates a rotating JSON log under DATA_DIR."""
    config = BaseConfig()
    config.DATA_DIR = str(tmp_path)
    config.DEV_MODE = False

    logger = setup_logging(config)

    assert logger.name == "fincalc"
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 2  # Console + File

    log_file = tmp_path / "logs" / "fincalc.log"
    assert log_file.exists()

    logger.warning("Test warning message")
    for handler in logger.handlers:
        handler.flush()

    lines = [line for line in log_file.read_text().splitlines() if line.strip()]
    assert len(lines) >= 2  # startup message plus the warning
    for line in lines:
        entry = json.loads(line)
        assert {"timestamp", "level", "message"} <= set(entry)
    assert json.loads(lines[0])["dev_mode"] is False


def test_setup_logging_twice_does_not_duplicate_handlers(tmp_path):
    """Calling setup twice replaces the handlers instead of stacking them."""
    config = BaseConfig()
    config.DATA_DIR = str(tmp_path)

    setup_logging(config)
    logger = setup_logging(config)

    assert len(logger.handlers) == 2


def test_get_logger():
    """get_logger namespaces loggers under the package."""
    logger1 = get_logger("module1")
    logger2 = get_logger("module2")

    assert logger1.name == "fincalc.module1"
    assert logger2.name == "fincalc.module2"
    assert logger1 != logger2
    assert get_logger("fincalc.services.debts").name == "fincalc.services.debts"


@pytest.mark.parametrize("dev_mode", [True, False])
def test_logging_levels_by_mode(tmp_path, dev_mode):
    """Console logging level adjusts based on dev mode."""
    config = BaseConfig()
    config.DATA_DIR = str(tmp_path)
    config.DEV_MODE = dev_mode

    logger = setup_logging(config)

    console_handler = None
    for handler in logger.handlers:
        if isinstance(handler, logging.StreamHandler) and not isinstance(
            handler, logging.handlers.RotatingFileHandler
        ):
            console_handler = handler
            break

    assert console_handler is not None
    expected_level = logging.INFO if dev_mode else logging.WARNING
    assert console_handler.level == expected_level


def test_capped_simulation_logs_warning(caplog, debt_factory):
    """A payoff that hits the month cap logs a warning."""
    debt = debt_factory(balance=10000.0, annual_rate=24.0, minimum_payment=150.0)

    with caplog.at_level(logging.WARNING, logger="fincalc"):
        snowball_payoff([debt], 0.0)

    assert any("cap" in record.getMessage().lower() for record in caplog.records)


class TestDevLog:
    """Dev-mode diagnostics."""

    def test_silent_outside_dev_mode(self, test_config, capsys):
        """Nothing is printed when dev mode is off."""
        assert not in_dev_mode(test_config)
        dev_log(test_config, "Validation failed", context={"field": "rate"})

        assert capsys.readouterr().err == ""

    def test_prints_context_in_dev_mode(self, test_config, capsys, caplog):
        """Dev mode echoes to stderr and records a debug entry."""
        test_config.DEV_MODE = True

        with caplog.at_level(logging.DEBUG, logger="fincalc"):
            dev_log(test_config, "Validation failed", context={"field": "rate", "value": 1234.5})

        err = capsys.readouterr().err
        assert "[dev] Validation failed (field=rate value=1,234.50)" in err
        assert caplog.records[-1].context == {"field": "rate", "value": 1234.5}

    def test_no_config_is_not_dev_mode(self):
        """A missing config never enables dev mode."""
        assert in_dev_mode(None) is False
