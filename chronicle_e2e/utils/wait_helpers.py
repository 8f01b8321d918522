# chronicle_e2e/utils/wait_helpers.py

import logging
import re
import threading
import time
from typing import Callable, Iterable, Optional, Pattern, Tuple, TypeVar, Union

from selenium.common.exceptions import (
    NoSuchElementException,
    StaleElementReferenceException,
    TimeoutException,
    WebDriverException,
)
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import WebDriverWait

from chronicle_e2e.config.config import (
    DEFAULT_POLL_INTERVAL,
    DEFAULT_RETRIES,
    DEFAULT_RETRY_DELAY,
    DEFAULT_WAIT_TIMEOUT,
    WAIT_FOR_ELEMENT,
    WAIT_FOR_NETWORK_IDLE,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")
Locator = Tuple[str, str]


def wait_for_element_visible(driver: WebDriver, locator: tuple, timeout: float = DEFAULT_WAIT_TIMEOUT):
    """Waits for an element to be visible on the page."""
    try:
        element = WebDriverWait(driver, timeout).until(
            EC.visibility_of_element_located(locator)
        )
        return element
    except TimeoutException:
        logger.error(f"Timeout waiting for element located by {locator} to be visible.")
        raise


def wait_for_element_clickable(driver: WebDriver, locator: tuple, timeout: float = DEFAULT_WAIT_TIMEOUT):
    """Waits for an element to be clickable on the page."""
    try:
        element = WebDriverWait(driver, timeout).until(
            EC.element_to_be_clickable(locator)
        )
        return element
    except TimeoutException:
        logger.error(f"Timeout waiting for element located by {locator} to be clickable.")
        raise


def wait_for_text_in_element(driver: WebDriver, locator: tuple, text: str, timeout: float = DEFAULT_WAIT_TIMEOUT):
    """Waits for specific text to be present in an element."""
    try:
        WebDriverWait(driver, timeout).until(
            EC.text_to_be_present_in_element(locator, text)
        )
    except TimeoutException:
        logger.error(f"Timeout waiting for text '{text}' in element located by {locator}.")
        raise


def wait_for_element_not_present(driver: WebDriver, locator: tuple, timeout: float = DEFAULT_WAIT_TIMEOUT):
    """Waits for an element to no longer be present in the DOM."""
    try:
        WebDriverWait(driver, timeout).until(
            EC.invisibility_of_element_located(locator)  # not present or not visible
        )
    except TimeoutException:
        logger.error(f"Timeout waiting for element located by {locator} to disappear or become invisible.")
        raise


def sleep(seconds: float):
    time.sleep(seconds)


# --- Navigation ---

def wait_for_document_ready(driver: WebDriver, timeout: float = DEFAULT_WAIT_TIMEOUT) -> bool:
    try:
        WebDriverWait(driver, timeout).until(
            lambda d: d.execute_script("return document.readyState") == "complete"
        )
        return True
    except TimeoutException:
        logger.info("Document not fully loaded within timeout, page is usable")
        return False


def navigate_safely(driver: WebDriver, url: str, wait_for_ready: bool = True,
                    timeout: float = WAIT_FOR_NETWORK_IDLE):
    """Opens `url`; a slow document load is logged, not raised."""
    logger.info(f"Navigating to: {url}")
    driver.get(url)
    if wait_for_ready:
        wait_for_document_ready(driver, timeout)


def _url_matches(current_url: str, pattern: Union[str, Pattern]) -> bool:
    if isinstance(pattern, str):
        return pattern in current_url
    return pattern.search(current_url) is not None


def wait_for_url(driver: WebDriver, pattern: Union[str, Pattern], timeout: float = DEFAULT_WAIT_TIMEOUT) -> bool:
    """True once the current URL contains `pattern` (str) or matches it (compiled regex)."""
    try:
        WebDriverWait(driver, timeout).until(lambda d: _url_matches(d.current_url, pattern))
        return True
    except TimeoutException:
        logger.warning(f"URL pattern {getattr(pattern, 'pattern', pattern)} not matched within timeout")
        return False


# --- Elements ---

_STATE_CONDITIONS = {
    "visible": EC.visibility_of_element_located,
    "attached": EC.presence_of_element_located,
}


def wait_for_element(driver: WebDriver, locator: Locator, timeout: float = DEFAULT_WAIT_TIMEOUT,
                     state: str = "visible") -> Optional[WebElement]:
    """
    Waits for `locator` to reach `state` ("visible", "attached" or "hidden").

    Returns the element (None for "hidden"), or None when the wait times out.
    """
    try:
        if state == "hidden":
            WebDriverWait(driver, timeout).until(EC.invisibility_of_element_located(locator))
            return None
        return WebDriverWait(driver, timeout).until(_STATE_CONDITIONS[state](locator))
    except TimeoutException:
        logger.warning(f"Element not {state}: {locator}")
        return None


def click_with_retry(driver: WebDriver, locator: Locator, retries: int = DEFAULT_RETRIES,
                     timeout: float = WAIT_FOR_ELEMENT, delay: float = DEFAULT_RETRY_DELAY) -> bool:
    for attempt in range(1, retries + 1):
        try:
            logger.info(f"Click attempt {attempt}/{retries}: {locator}")
            WebDriverWait(driver, timeout).until(EC.element_to_be_clickable(locator)).click()
            logger.info(f"Click successful: {locator}")
            return True
        except WebDriverException as e:
            logger.warning(f"Click attempt {attempt} failed: {e.__class__.__name__}")
            if attempt < retries:
                time.sleep(delay)

    logger.error(f"All {retries} click attempts failed for: {locator}")
    return False


def fill_with_retry(driver: WebDriver, locator: Locator, value: str, retries: int = DEFAULT_RETRIES,
                    timeout: float = WAIT_FOR_ELEMENT, verify: bool = True) -> bool:
    for attempt in range(1, retries + 1):
        try:
            logger.info(f"Fill attempt {attempt}/{retries}: {locator}")
            element = WebDriverWait(driver, timeout).until(EC.visibility_of_element_located(locator))
            element.clear()
            element.send_keys(value)

            if verify:
                actual = element.get_attribute("value")
                if actual != value:
                    raise ValueError(f'Value mismatch: expected "{value}", got "{actual}"')

            logger.info(f"Fill successful: {locator}")
            return True
        except (WebDriverException, ValueError) as e:
            logger.warning(f"Fill attempt {attempt} failed: {e}")
            if attempt < retries:
                time.sleep(0.5)

    logger.error(f"All {retries} fill attempts failed for: {locator}")
    return False


def wait_for_text(driver: WebDriver, locator: Locator, text: str, timeout: float = DEFAULT_WAIT_TIMEOUT,
                  exact: bool = False) -> bool:
    """True once any element matching `locator` shows `text` (case-insensitive unless exact)."""

    def has_text(d):
        for element in d.find_elements(*locator):
            try:
                content = element.text
                if not element.is_displayed():
                    continue
            except StaleElementReferenceException:
                continue
            if exact and text in content:
                return True
            if not exact and re.search(re.escape(text), content, re.IGNORECASE):
                return True
        return False

    try:
        WebDriverWait(driver, timeout).until(has_text)
        return True
    except TimeoutException:
        logger.warning(f'Text "{text}" not found in {locator}')
        return False


def is_displayed(driver: WebDriver, locator: Locator) -> bool:
    """Immediate visibility check of the first match, without waiting."""
    try:
        return driver.find_element(*locator).is_displayed()
    except (NoSuchElementException, StaleElementReferenceException):
        return False


# --- Generic control flow ---

def retry(action: Callable[[], T], retries: int = DEFAULT_RETRIES, delay: float = DEFAULT_RETRY_DELAY,
          should_retry: Optional[Callable[[Exception], bool]] = None,
          on_retry: Optional[Callable[[int, Exception], None]] = None) -> T:
    """
    Calls `action` until it succeeds, at most `retries` times.

    `should_retry` can veto another attempt for a given error, in which case
    that error is raised immediately. The last error is raised once all
    attempts are used up.
    """
    if retries < 1:
        raise ValueError(f"retries must be at least 1, got {retries}")

    last_error: Optional[Exception] = None
    for attempt in range(1, retries + 1):
        try:
            return action()
        except Exception as e:
            last_error = e
            if should_retry is not None and not should_retry(e):
                raise

            if on_retry is not None:
                on_retry(attempt, e)
            else:
                logger.warning(f"Attempt {attempt}/{retries} failed: {e}")

            if attempt < retries:
                time.sleep(delay)

    raise last_error


def poll_until(condition: Callable[[], bool], timeout: float = DEFAULT_WAIT_TIMEOUT,
               interval: float = DEFAULT_POLL_INTERVAL, description: str = "condition") -> bool:
    """Polls `condition` every `interval` seconds; errors count as "not yet"."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        try:
            if condition():
                logger.info(f"Poll successful: {description}")
                return True
        except Exception as e:
            logger.debug(f"Poll check for {description} raised {e.__class__.__name__}")
        time.sleep(interval)

    logger.warning(f"Poll timeout: {description}")
    return False


def wait_for_any(conditions: Iterable[Tuple[str, Callable[[], bool]]], timeout: float = DEFAULT_WAIT_TIMEOUT,
                 interval: float = DEFAULT_POLL_INTERVAL) -> Optional[str]:
    """Returns the name of the first (name, check) pair that passes, or None on timeout."""
    conditions = list(conditions)
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        for name, check in conditions:
            try:
                if check():
                    logger.info(f"Condition met: {name}")
                    return name
            except Exception as e:
                logger.debug(f"Condition {name} raised {e.__class__.__name__}")
        time.sleep(interval)

    logger.warning("No conditions met within timeout")
    return None


def with_timeout(action: Callable[[], T], timeout: float = DEFAULT_WAIT_TIMEOUT,
                 error_message: Optional[str] = None) -> T:
    """
    Runs `action` in a worker thread and gives up after `timeout` seconds.

    The worker is not killed on timeout; it finishes in the background.
    """
    outcome = {}

    def run():
        try:
            outcome["result"] = action()
        except BaseException as e:
            outcome["error"] = e

    worker = threading.Thread(target=run, daemon=True)
    worker.start()
    worker.join(timeout)

    if worker.is_alive():
        raise TimeoutError(error_message or f"Operation timed out after {timeout}s")
    if "error" in outcome:
        raise outcome["error"]
    return outcome["result"]
