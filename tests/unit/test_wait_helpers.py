# tests/unit/test_wait_helpers.py

import re
import time

import pytest
from unittest.mock import MagicMock, call

from selenium.common.exceptions import NoSuchElementException, WebDriverException

from chronicle_e2e.config.config import DEFAULT_RETRIES, DEFAULT_RETRY_DELAY
from chronicle_e2e.utils import wait_helpers

pytestmark = pytest.mark.unit


@pytest.fixture
def mock_driver():
    driver = MagicMock()
    driver.current_url = "https://staging.chronicle.rip/customer-organization/Astana/plots"
    return driver


# --- retry ---

def test_retry_returns_first_success():
    # Arrange: fail twice, then succeed
    action = MagicMock(side_effect=[ValueError("one"), ValueError("two"), "done"])

    # Act
    result = wait_helpers.retry(action, retries=3, delay=0)

    # Assert
    assert result == "done"
    assert action.call_count == 3


def test_retry_raises_last_error_when_attempts_used_up():
    action = MagicMock(side_effect=[ValueError("first"), ValueError("last")])

    with pytest.raises(ValueError, match="last"):
        wait_helpers.retry(action, retries=2, delay=0)


def test_retry_stops_when_should_retry_vetoes():
    action = MagicMock(side_effect=KeyError("fatal"))

    with pytest.raises(KeyError):
        wait_helpers.retry(action, retries=5, delay=0, should_retry=lambda e: not isinstance(e, KeyError))

    assert action.call_count == 1


def test_retry_reports_attempts_to_on_retry():
    action = MagicMock(side_effect=[RuntimeError("flaky"), 42])
    on_retry = MagicMock()

    assert wait_helpers.retry(action, retries=2, delay=0, on_retry=on_retry) == 42
    on_retry.assert_called_once()
    attempt, error = on_retry.call_args[0]
    assert attempt == 1
    assert isinstance(error, RuntimeError)


@pytest.mark.parametrize("retries", [0, -1])
def test_retry_rejects_non_positive_retries(retries):
    action = MagicMock(return_value="ok")

    with pytest.raises(ValueError, match="retries must be at least 1"):
        wait_helpers.retry(action, retries=retries, delay=0)

    action.assert_not_called()


def test_retry_sleeps_between_attempts_only(no_sleep):
    # Arrange: every attempt fails
    action = MagicMock(side_effect=RuntimeError("down"))

    # Act
    with pytest.raises(RuntimeError):
        wait_helpers.retry(action, retries=3, delay=2)

    # Assert: no pause after the last attempt
    assert action.call_count == 3
    assert no_sleep.call_args_list == [call(2), call(2)]


def test_retry_defaults_to_three_attempts_one_second_apart(no_sleep):
    action = MagicMock(side_effect=RuntimeError("down"))

    with pytest.raises(RuntimeError):
        wait_helpers.retry(action)

    assert action.call_count == DEFAULT_RETRIES == 3
    assert no_sleep.call_args_list == [call(DEFAULT_RETRY_DELAY)] * 2
    assert DEFAULT_RETRY_DELAY == 1


# --- poll_until / wait_for_any ---

def test_poll_until_true_once_condition_passes():
    checks = iter([False, False, True])

    assert wait_helpers.poll_until(lambda: next(checks), timeout=2, interval=0.01) is True


def test_poll_until_treats_errors_as_not_yet():
    calls = {"count": 0}

    def condition():
        calls["count"] += 1
        if calls["count"] < 3:
            raise NoSuchElementException("not rendered")
        return True

    assert wait_helpers.poll_until(condition, timeout=2, interval=0.01) is True


def test_poll_until_false_on_timeout():
    assert wait_helpers.poll_until(lambda: False, timeout=0.05, interval=0.01) is False


def test_wait_for_any_returns_name_of_first_passing_condition():
    conditions = [("dialog", lambda: False), ("toast", lambda: True)]

    assert wait_helpers.wait_for_any(conditions, timeout=1, interval=0.01) == "toast"


def test_wait_for_any_returns_none_on_timeout():
    assert wait_helpers.wait_for_any([("never", lambda: False)], timeout=0.05, interval=0.01) is None


# --- with_timeout ---

def test_with_timeout_returns_result():
    assert wait_helpers.with_timeout(lambda: "ok", timeout=1) == "ok"


def test_with_timeout_reraises_action_error():
    def failing():
        raise ValueError("boom")

    with pytest.raises(ValueError, match="boom"):
        wait_helpers.with_timeout(failing, timeout=1)


def test_with_timeout_raises_timeout_error():
    with pytest.raises(TimeoutError, match="too slow"):
        wait_helpers.with_timeout(lambda: time.sleep(1), timeout=0.05, error_message="too slow")


# --- URL waits ---

def test_wait_for_url_accepts_substring(mock_driver):
    assert wait_helpers.wait_for_url(mock_driver, "/plots", timeout=0.5) is True


def test_wait_for_url_accepts_compiled_regex(mock_driver):
    assert wait_helpers.wait_for_url(mock_driver, re.compile(r"customer-organization/\w+"), timeout=0.5) is True


def test_wait_for_url_false_when_never_matched(mock_driver):
    assert wait_helpers.wait_for_url(mock_driver, "/sales", timeout=0.3) is False


def test_navigate_safely_opens_url_and_waits_for_document(mock_driver):
    mock_driver.execute_script.return_value = "complete"

    wait_helpers.navigate_safely(mock_driver, "https://staging.chronicle.rip/login")

    mock_driver.get.assert_called_once_with("https://staging.chronicle.rip/login")
    mock_driver.execute_script.assert_called_with("return document.readyState")


# --- Element helpers ---

def test_is_displayed_false_when_missing(mock_driver):
    mock_driver.find_element.side_effect = NoSuchElementException("gone")

    assert wait_helpers.is_displayed(mock_driver, ("css selector", "#missing")) is False


def test_click_with_retry_gives_up_after_retries(mock_driver, mocker):
    mocker.patch.object(wait_helpers, "WebDriverWait").return_value.until.side_effect = WebDriverException("covered")

    assert wait_helpers.click_with_retry(mock_driver, ("css selector", "button"), retries=2, delay=0) is False


def test_click_with_retry_pauses_between_attempts(mock_driver, mocker, no_sleep):
    mocker.patch.object(wait_helpers, "WebDriverWait").return_value.until.side_effect = WebDriverException("covered")

    assert wait_helpers.click_with_retry(mock_driver, ("css selector", "button"), retries=3, delay=1.5) is False
    assert no_sleep.call_args_list == [call(1.5), call(1.5)]


def test_fill_with_retry_pauses_half_a_second(mock_driver, mocker, no_sleep):
    element = MagicMock()
    element.get_attribute.side_effect = ["Jo", "John"]
    mocker.patch.object(wait_helpers, "WebDriverWait").return_value.until.return_value = element

    assert wait_helpers.fill_with_retry(mock_driver, ("css selector", "input"), "John", retries=3) is True
    assert no_sleep.call_args_list == [call(0.5)]


def test_fill_with_retry_verifies_value(mock_driver, mocker):
    element = MagicMock()
    element.get_attribute.return_value = "John"
    mocker.patch.object(wait_helpers, "WebDriverWait").return_value.until.return_value = element

    assert wait_helpers.fill_with_retry(mock_driver, ("css selector", "input"), "John") is True
    element.clear.assert_called_once()
    element.send_keys.assert_called_once_with("John")


def test_wait_for_text_matches_case_insensitively(mock_driver):
    element = MagicMock()
    element.text = "Sandiaga Uno Salahuddin"
    element.is_displayed.return_value = True
    mock_driver.find_elements.return_value = [element]

    assert wait_helpers.wait_for_text(mock_driver, ("css selector", "p"), "sandiaga uno", timeout=0.5) is True
    assert wait_helpers.wait_for_text(mock_driver, ("css selector", "p"), "sandiaga uno", timeout=0.3,
                                      exact=True) is False


# --- wait_for_element ---

def test_wait_for_element_returns_visible_element(mock_driver):
    element = MagicMock()
    element.is_displayed.return_value = True
    mock_driver.find_element.return_value = element

    assert wait_helpers.wait_for_element(mock_driver, ("css selector", "h1"), timeout=0.5) is element


def test_wait_for_element_none_when_missing(mock_driver):
    mock_driver.find_element.side_effect = NoSuchElementException("gone")

    assert wait_helpers.wait_for_element(mock_driver, ("css selector", "h1"), timeout=0.3, state="attached") is None


def test_wait_for_element_hidden_returns_none(mock_driver):
    mock_driver.find_element.side_effect = NoSuchElementException("gone")

    assert wait_helpers.wait_for_element(mock_driver, ("css selector", ".spinner"), timeout=0.5, state="hidden") is None
