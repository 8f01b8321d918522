# tests/unit/test_login_page.py

import pytest
from unittest.mock import MagicMock

from chronicle_e2e.config.config import BASE_URL
from chronicle_e2e.locators import login_locators
from chronicle_e2e.page_objects.login_page import LoginPage

pytestmark = pytest.mark.unit


@pytest.fixture
def mock_driver():
    driver = MagicMock()
    driver.current_url = f"{BASE_URL}/login"
    driver.execute_script.return_value = "complete"
    return driver


@pytest.fixture
def login_page(mock_driver, mocker):
    mocker.patch("chronicle_e2e.page_objects.login_page.time.sleep")
    return LoginPage(mock_driver)


def test_navigate_opens_login_path(login_page, mock_driver):
    login_page.navigate()

    mock_driver.get.assert_called_once_with(f"{BASE_URL}{login_locators.LOGIN_PATH}")


def test_enter_email_focuses_readonly_input_first(login_page, mocker):
    click = mocker.patch.object(login_page, "click_element")
    fill = mocker.patch.object(login_page, "fill_input")

    login_page.enter_email("faris@chronicle.rip")

    click.assert_called_once_with(login_locators.EMAIL_INPUT)
    fill.assert_called_once_with(login_locators.EMAIL_INPUT, "faris@chronicle.rip")


def test_login_button_disabled_attribute(login_page, mocker):
    button = MagicMock()
    button.is_enabled.return_value = True
    button.get_attribute.return_value = "true"
    mocker.patch.object(login_page, "wait_until_visible", return_value=button)

    assert login_page.is_login_button_enabled() is False


def test_get_error_message_none_when_absent(login_page, mocker):
    mocker.patch.object(login_page, "is_element_visible", return_value=False)

    assert login_page.get_error_message() is None


def test_is_logged_in_checks_dashboard_url(login_page, mock_driver):
    assert login_page.is_logged_in() is False

    mock_driver.current_url = f"{BASE_URL}/customer-organization/Astana_Tegal_Gundul"
    assert login_page.is_logged_in() is True


def test_login_runs_full_flow(login_page, mocker):
    calls = []
    for name in ("navigate", "enter_email", "enter_password", "click_login_button", "wait_for_successful_login"):
        mocker.patch.object(login_page, name, side_effect=lambda *args, name=name: calls.append(name))

    login_page.login("faris@chronicle.rip", "12345")

    assert calls == ["navigate", "enter_email", "enter_password", "click_login_button",
                     "wait_for_successful_login"]
