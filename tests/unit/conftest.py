# tests/unit/conftest.py

import time

import pytest
from unittest.mock import MagicMock

from chronicle_e2e.config.config import BASE_URL


@pytest.fixture
def mock_driver():
    """WebDriver stand-in; tests set `current_url` and element lookups as needed."""
    driver = MagicMock()
    driver.current_url = f"{BASE_URL}/customer-organization/Astana_Tegal_Gundul"
    driver.find_elements.return_value = []
    return driver


@pytest.fixture
def no_sleep(mocker):
    """Page objects pause with fixed sleeps; skip them."""
    return mocker.patch.object(time, "sleep")


@pytest.fixture
def make_element():
    """Factory for WebElement stand-ins with text, visibility and attributes."""
    def make(text="", displayed=True, enabled=True, **attributes):
        element = MagicMock()
        element.text = text
        element.is_displayed.return_value = displayed
        element.is_enabled.return_value = enabled
        element.get_attribute.side_effect = lambda name: attributes.get(name)
        return element
    return make
