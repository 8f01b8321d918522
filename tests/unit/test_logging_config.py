# tests/unit/test_logging_config.py

import json
import sys
import logging

import pytest

from chronicle_e2e.core import logging_config

pytestmark = pytest.mark.unit


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def _record(pathname="/repo/chronicle_e2e/page_objects/login_page.py", level=logging.INFO, msg="hello", **extra):
    record = logging.LogRecord("chronicle_e2e.page_objects.LoginPage", level, pathname, 12, msg, None, None,
                               func="enter_email")
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_emits_standard_fields():
    output = json.loads(logging_config.JsonFormatter().format(_record()))

    assert output["level"] == "INFO"
    assert output["message"] == "hello"
    assert output["module"] == "chronicle_e2e.page_objects.LoginPage"
    assert output["funcName"] == "enter_email"
    assert output["lineno"] == 12
    assert output["component"] == "page-object"


def test_json_formatter_merges_extra_context():
    record = _record(extra_context={"scenario": "Login with valid credentials"})

    output = json.loads(logging_config.JsonFormatter().format(record))

    assert output["scenario"] == "Login with valid credentials"


def test_json_formatter_includes_exception():
    try:
        raise RuntimeError("Save button is disabled")
    except RuntimeError:
        record = _record(level=logging.ERROR, exc_info=sys.exc_info())

    output = json.loads(logging_config.JsonFormatter().format(record))

    assert "Save button is disabled" in output["exc_info"]


@pytest.mark.parametrize("pathname, component", [
    ("/repo/chronicle_e2e/steps/login_steps.py", "step"),
    ("/repo/chronicle_e2e/utils/wait_helpers.py", "helper"),
    ("/repo/chronicle_e2e/core/browser_manager.py", "browser"),
    ("/repo/tests/conftest.py", "runner"),
    ("C:\\repo\\chronicle_e2e\\page_objects\\roi_page.py", "page-object"),
    ("/repo/chronicle_e2e/config/config.py", "suite"),
])
def test_component_for_groups_by_layer(pathname, component):
    assert logging_config._component_for(pathname) == component


def test_console_formatter_highlights_success():
    line = logging_config.ConsoleFormatter().format(_record(level=logging_config.SUCCESS, msg="Logged in"))

    assert line.startswith(logging_config.ConsoleFormatter.GREEN)
    assert "[SUCCESS]" in line
    assert "[chronicle_e2e.page_objects.LoginPage] Logged in" in line


def test_success_logs_at_success_level(caplog):
    log = logging.getLogger("chronicle_e2e.test")

    with caplog.at_level(logging.INFO, logger="chronicle_e2e.test"):
        logging_config.success(log, "Scenario Passed: login")

    assert caplog.records[-1].levelno == logging_config.SUCCESS
    assert caplog.records[-1].levelname == "SUCCESS"


@pytest.mark.parametrize("log_format, formatter", [
    ("json", logging_config.JsonFormatter),
    ("text", logging_config.ConsoleFormatter),
])
def test_setup_logging_picks_formatter(monkeypatch, restore_root_logger, log_format, formatter):
    monkeypatch.setenv("LOG_FORMAT", log_format)
    monkeypatch.setenv("LOG_LEVEL", "debug")

    logging_config.setup_logging()

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, formatter)
    assert logging.getLogger("selenium").level == logging.WARNING
