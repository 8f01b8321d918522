# chronicle_e2e/page_objects/login_page.py

import time
from typing import Optional

from selenium.common.exceptions import NoSuchElementException, TimeoutException

from chronicle_e2e.config.config import BASE_URL, WAIT_FOR_LOGIN_REDIRECT
from chronicle_e2e.core.logging_config import success
from chronicle_e2e.data.test_data import LOGIN_DATA
from chronicle_e2e.locators import login_locators as locators
from chronicle_e2e.utils.network_helper import wait_for_api_requests_complete

from .base_page import BasePage


class LoginPage(BasePage):
    """Page Object for the Chronicle login screen."""

    def navigate(self):
        self.logger.info(f"Navigating to login page (BASE_URL: {BASE_URL})")
        self.open(f"{BASE_URL}{locators.LOGIN_PATH}")

    def _fill_readonly_input(self, locator: tuple, value: str):
        # The inputs are readonly until they receive focus
        self.click_element(locator)
        time.sleep(0.2)
        self.fill_input(locator, value)

    def enter_email(self, email: str):
        self.logger.info(f"Entering email: {email}")
        self._fill_readonly_input(locators.EMAIL_INPUT, email)

    def enter_password(self, password: str):
        self.logger.info("Entering password")
        self._fill_readonly_input(locators.PASSWORD_INPUT, password)

    def click_login_button(self):
        self.logger.info("Clicking login button")
        self.wait_until_visible(locators.LOGIN_BUTTON).click()

    def is_login_button_enabled(self) -> bool:
        button = self.wait_until_visible(locators.LOGIN_BUTTON)
        return button.is_enabled() and button.get_attribute("disabled") is None

    def get_error_message(self) -> Optional[str]:
        if self.is_element_visible(locators.ERROR_MESSAGE, timeout=3):
            return self.find_element(locators.ERROR_MESSAGE).text
        self.logger.debug("No error message found")
        return None

    def wait_for_successful_login(self):
        self.logger.info("Waiting for successful login")
        self.wait_for_url_contains(locators.DASHBOARD_PATTERN, timeout=WAIT_FOR_LOGIN_REDIRECT)
        wait_for_api_requests_complete(self.driver, 5)
        success(self.logger, "Successfully logged in and dashboard loaded")

    def is_logged_in(self) -> bool:
        return locators.DASHBOARD_PATTERN in self.driver.current_url

    def _text_shown(self, text: str) -> Optional[str]:
        try:
            return self.wait_until_visible(locators.text_on_page(text), timeout=5).text
        except (TimeoutException, NoSuchElementException):
            self.logger.error(f'"{text}" not found on the page')
            return None

    def get_organization_name(self, expected: Optional[str] = None) -> Optional[str]:
        return self._text_shown(expected or LOGIN_DATA["valid"]["organization_name"])

    def get_user_email(self, expected: Optional[str] = None) -> Optional[str]:
        return self._text_shown(expected or LOGIN_DATA["valid"]["email"])

    def login(self, email: str, password: str):
        """Full login; used as a precondition by the other scenarios."""
        self.navigate()
        self.enter_email(email)
        self.enter_password(password)
        self.click_login_button()
        self.wait_for_successful_login()
