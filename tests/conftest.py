# tests/conftest.py

import logging
import os

import pytest
from selenium.common.exceptions import WebDriverException

from chronicle_e2e.config import config as suite_config
from chronicle_e2e.core.browser_manager import BrowserManager, sanitize_name, timestamp
from chronicle_e2e.core.logging_config import setup_logging, success
from chronicle_e2e.steps.context import ScenarioContext

logger = logging.getLogger(__name__)


def pytest_addoption(parser):
    parser.addoption(
        "--run-e2e",
        action="store_true",
        default=False,
        help="Run live browser scenarios against the configured Chronicle deployment",
    )


def pytest_configure(config):
    setup_logging()


def pytest_collection_modifyitems(config, items):
    if config.getoption("--run-e2e") or suite_config.RUN_E2E:
        return
    skip_e2e = pytest.mark.skip(reason="live scenario: pass --run-e2e or set RUN_E2E=true")
    for item in items:
        if "e2e" in item.keywords:
            item.add_marker(skip_e2e)


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    outcome = yield
    report = outcome.get_result()
    if report.when != "call" or "e2e" not in item.keywords:
        return

    if report.passed:
        success(logger, f"Scenario Passed: {item.name}")
        return

    logger.error(f"Scenario Failed: {item.name}")
    driver = item.funcargs.get("driver")
    if driver is None:
        return
    try:
        logger.error(f"Current URL: {driver.current_url}")
        os.makedirs(suite_config.SCREENSHOT_DIR, exist_ok=True)
        path = os.path.join(
            suite_config.SCREENSHOT_DIR, f"FAILED_{sanitize_name(item.name)}_{timestamp()}.png"
        )
        driver.save_screenshot(path)
        logger.info(f"Failure screenshot saved: {path}")
    except WebDriverException as e:
        logger.warning(f"Could not capture failure screenshot: {e.msg}")


@pytest.fixture(scope="session")
def browser_manager():
    """One browser for the whole run; quit at the end of the session."""
    manager = BrowserManager.get_instance()
    yield manager
    manager.close_browser()


@pytest.fixture
def driver(request, browser_manager):
    """Fresh browser session (cookies and storage cleared) for every scenario."""
    logger.info(f"Starting Scenario: {request.node.name}")
    yield browser_manager.initialize_browser(request.node.name)
    browser_manager.close_context()


@pytest.fixture
def context(request, driver):
    return ScenarioContext(driver, name=request.node.name)
