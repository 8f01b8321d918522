# chronicle_e2e/locators/login_locators.py

from selenium.webdriver.common.by import By

from chronicle_e2e.locators.common import by_test_id, element_with_text

EMAIL_INPUT = by_test_id("login-mat-form-field-input-mat-input-element")
PASSWORD_INPUT = by_test_id("login-mat-form-field-input-password")
LOGIN_BUTTON = by_test_id("login-login-screen-button-mat-focus-indicator")
ERROR_MESSAGE = by_test_id("login-snackbar-error-div-left")


def text_on_page(text: str) -> tuple:
    """Any div showing `text`; used for the organisation name and user email after login."""
    return element_with_text("div", text)


LOGIN_PATH = "/login"
DASHBOARD_PATTERN = "/customer-organization/"
