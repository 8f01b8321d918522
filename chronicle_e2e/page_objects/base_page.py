# chronicle_e2e/page_objects/base_page.py

import logging
import os
import re
import time
from typing import Iterable, List, Optional, Pattern, Union

from selenium.common.exceptions import (
    NoSuchElementException,
    StaleElementReferenceException,
    TimeoutException,
    WebDriverException,
)
from selenium.webdriver.common.action_chains import ActionChains
from selenium.webdriver.common.keys import Keys
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import WebDriverWait

from chronicle_e2e.config.config import DEFAULT_WAIT_TIMEOUT, SCREENSHOT_DIR, SLOW_MO, WAIT_FOR_ELEMENT
from chronicle_e2e.core.browser_manager import sanitize_name, timestamp
from chronicle_e2e.locators.common import option_containing, option_exact
from chronicle_e2e.utils.wait_helpers import (
    wait_for_document_ready,
    wait_for_element_clickable,
    wait_for_element_not_present,
    wait_for_element_visible,
    wait_for_text_in_element,
)

logger = logging.getLogger(__name__)


class BasePage:
    """Base class for all Page Objects."""

    def __init__(self, driver: WebDriver):
        self.driver = driver
        self.wait = WebDriverWait(driver, DEFAULT_WAIT_TIMEOUT)  # Common wait object
        self.logger = logging.getLogger(f"{__name__.rsplit('.', 1)[0]}.{type(self).__name__}")

    def open(self, url: str):
        """Navigates to a given URL."""
        self.driver.get(url)
        wait_for_document_ready(self.driver)
        self.logger.info(f"Navigated to {url}")

    def find_element(self, locator: tuple):
        """Finds an element using a locator."""
        return self.driver.find_element(*locator)

    def find_elements(self, locator: tuple):
        """Finds multiple elements using a locator."""
        return self.driver.find_elements(*locator)

    def wait_until_visible(self, locator: tuple, timeout: float = DEFAULT_WAIT_TIMEOUT):
        return wait_for_element_visible(self.driver, locator, timeout)

    def wait_until_clickable(self, locator: tuple, timeout: float = DEFAULT_WAIT_TIMEOUT):
        return wait_for_element_clickable(self.driver, locator, timeout)

    def wait_until_text_in_element(self, locator: tuple, text: str, timeout: float = DEFAULT_WAIT_TIMEOUT):
        wait_for_text_in_element(self.driver, locator, text, timeout)

    def wait_until_not_present(self, locator: tuple, timeout: float = DEFAULT_WAIT_TIMEOUT):
        wait_for_element_not_present(self.driver, locator, timeout)

    # --- Interactions ---

    def _slow_mo(self):
        if SLOW_MO > 0:
            time.sleep(SLOW_MO / 1000)

    def click_element(self, locator: tuple, timeout: float = DEFAULT_WAIT_TIMEOUT) -> WebElement:
        element = self.wait_until_clickable(locator, timeout)
        element.click()
        self._slow_mo()
        return element

    def js_click(self, target: Union[tuple, WebElement]):
        """Clicks through JavaScript, past overlays that intercept a normal click."""
        element = self.find_element(target) if isinstance(target, tuple) else target
        self.driver.execute_script("arguments[0].click();", element)
        self._slow_mo()

    def fill_input(self, locator: tuple, value: str, timeout: float = DEFAULT_WAIT_TIMEOUT) -> WebElement:
        """Replaces the content of an input. Angular inputs sometimes ignore clear(), so select-all is the fallback."""
        element = self.wait_until_visible(locator, timeout)
        self.replace_value(element, value)
        self._slow_mo()
        return element

    @staticmethod
    def replace_value(element: WebElement, value: str):
        element.clear()
        if element.get_attribute("value"):
            element.send_keys(Keys.CONTROL, "a")
            element.send_keys(Keys.BACKSPACE)
        element.send_keys(value)

    def type_slowly(self, locator: tuple, text: str, delay: float = 0.05) -> WebElement:
        """Types one character at a time for inputs with per-keystroke autocomplete."""
        element = self.wait_until_visible(locator)
        for char in text:
            element.send_keys(char)
            time.sleep(delay)
        return element

    def get_text(self, locator: tuple, timeout: float = DEFAULT_WAIT_TIMEOUT) -> str:
        return self.wait_until_visible(locator, timeout).text.strip()

    def get_input_value(self, locator: tuple, timeout: float = DEFAULT_WAIT_TIMEOUT) -> str:
        return self.wait_until_visible(locator, timeout).get_attribute("value") or ""

    def select_mat_option(self, dropdown: tuple, option_text: str, exact: bool = True,
                          timeout: float = WAIT_FOR_ELEMENT):
        """Opens a mat-select and picks the option with the given text."""
        self.click_element(dropdown, timeout)
        option = option_exact(option_text) if exact else option_containing(option_text)
        self.click_element(option, timeout)
        self.logger.info(f"Selected option: {option_text}")

    def hover_element(self, locator: tuple):
        element = self.wait_until_visible(locator)
        ActionChains(self.driver).move_to_element(element).perform()

    def press_key(self, key: str = Keys.ESCAPE):
        ActionChains(self.driver).send_keys(key).perform()

    def pause(self, seconds: float):
        time.sleep(seconds)

    # --- Queries ---

    def is_element_visible(self, locator: tuple, timeout: float = 0) -> bool:
        """Visibility probe; never raises."""
        if timeout <= 0:
            try:
                return self.find_element(locator).is_displayed()
            except (NoSuchElementException, StaleElementReferenceException):
                return False
        try:
            WebDriverWait(self.driver, timeout).until(EC.visibility_of_element_located(locator))
            return True
        except TimeoutException:
            return False

    def wait_for_element_hidden(self, locator: tuple, timeout: float = DEFAULT_WAIT_TIMEOUT):
        self.wait_until_not_present(locator, timeout)

    def visible_elements(self, locator: tuple) -> List[WebElement]:
        visible = []
        for element in self.find_elements(locator):
            try:
                if element.is_displayed():
                    visible.append(element)
            except StaleElementReferenceException:
                continue
        return visible

    def visible_texts(self, locator: tuple) -> List[str]:
        return [element.text.strip() for element in self.visible_elements(locator)]

    def find_first_visible(self, locators: Iterable[tuple], timeout: float = WAIT_FOR_ELEMENT) -> WebElement:
        """
        First visible element among several candidate locators.

        The app renders the same control differently on public and
        logged-in pages; callers list the variants in order of preference.
        """
        locators = list(locators)

        def first_visible(_):
            for candidate in locators:
                for element in self.visible_elements(candidate):
                    return element
            return False

        try:
            return WebDriverWait(self.driver, timeout).until(first_visible)
        except TimeoutException:
            raise NoSuchElementException(f"None of the locators became visible: {locators}")

    def get_title(self) -> str:
        return self.driver.title

    def get_url(self) -> str:
        return self.driver.current_url

    def wait_for_url_contains(self, fragment: str, timeout: float = DEFAULT_WAIT_TIMEOUT):
        try:
            WebDriverWait(self.driver, timeout).until(EC.url_contains(fragment))
        except TimeoutException:
            self.logger.error(f"URL did not contain '{fragment}' within {timeout}s (at {self.driver.current_url})")
            raise

    def wait_for_url_matches(self, pattern: Union[str, Pattern], timeout: float = DEFAULT_WAIT_TIMEOUT):
        regex = re.compile(pattern) if isinstance(pattern, str) else pattern
        try:
            WebDriverWait(self.driver, timeout).until(lambda d: regex.search(d.current_url))
        except TimeoutException:
            self.logger.error(f"URL did not match '{regex.pattern}' within {timeout}s (at {self.driver.current_url})")
            raise

    def take_screenshot(self, name: Optional[str] = None) -> Optional[str]:
        os.makedirs(SCREENSHOT_DIR, exist_ok=True)
        path = os.path.join(SCREENSHOT_DIR, f"{sanitize_name(name)}_{timestamp()}.png")
        try:
            self.driver.save_screenshot(path)
        except WebDriverException as e:
            self.logger.error(f"Screenshot failed: {e.msg}")
            return None
        self.logger.info(f"Screenshot saved: {path}")
        return path
