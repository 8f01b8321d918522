# chronicle_e2e/steps/login_steps.py

import logging

from chronicle_e2e.data.placeholders import replace_placeholders
from chronicle_e2e.data.test_data import LOGIN_DATA

from .context import ScenarioContext

logger = logging.getLogger(__name__)


def on_login_page(context: ScenarioContext):
    """Given I am on the Chronicle login page"""
    context.login_page.navigate()


def enter_email(context: ScenarioContext, email: str):
    """When I enter email {string}"""
    context.login_page.enter_email(replace_placeholders(email))


def enter_password(context: ScenarioContext, password: str):
    """When I enter password {string}"""
    context.login_page.enter_password(replace_placeholders(password))


def click_login_button(context: ScenarioContext):
    """When I click the login button"""
    context.login_page.click_login_button()


def should_be_logged_in(context: ScenarioContext):
    """Then I should be logged in successfully"""
    context.login_page.wait_for_successful_login()
    assert context.login_page.is_logged_in(), f"Not on the dashboard: {context.driver.current_url}"


def should_see_organization_name(context: ScenarioContext, expected: str):
    """Then I should see the organization name {string}"""
    expected = replace_placeholders(expected)
    name = context.login_page.get_organization_name(expected)
    assert name is not None and expected.lower() in name.lower(), f"Organization {expected!r} not shown"


def should_see_email(context: ScenarioContext, expected: str):
    """Then I should see my email {string}"""
    expected = replace_placeholders(expected)
    email = context.login_page.get_user_email(expected)
    assert email is not None and expected in email, f"Email {expected!r} not shown"


def should_see_error_message(context: ScenarioContext):
    """Then I should see an error message"""
    assert context.login_page.get_error_message(), "No login error message shown"


def login_button_disabled(context: ScenarioContext):
    """Then the login button should be disabled"""
    assert not context.login_page.is_login_button_enabled(), "Login button is enabled"


def logged_in_as_default_user(context: ScenarioContext):
    """Given I am logged in"""
    valid = LOGIN_DATA["valid"]
    logger.info(f"Logging in as {valid['email']}")
    context.login_page.login(valid["email"], valid["password"])
