# chronicle_e2e/page_objects/search_page.py

import re
import time
from typing import Optional
from urllib.parse import quote

from selenium.common.exceptions import TimeoutException

from chronicle_e2e.config.config import BASE_URL
from chronicle_e2e.locators import search_box_locators as locators
from chronicle_e2e.locators.common import TAB_LIST, tab_named, text_containing
from chronicle_e2e.utils.wait_helpers import wait_for_document_ready, wait_for_url

from .base_page import BasePage


def pick_cemetery_result(texts, cemetery_name: str) -> Optional[int]:
    """
    Index of the search result to click for `cemetery_name`.

    Prefers a match without "us" in it (the staging data has a US twin of
    most cemeteries), falling back to the first match.
    """
    wanted = cemetery_name.lower()
    matches = [index for index, text in enumerate(texts) if wanted in text.lower()]
    for index in matches:
        if "us" not in texts[index].lower():
            return index
    return matches[0] if matches else None


class HomePage(BasePage):
    """Public landing page with the cemetery search box."""

    def open_home(self):
        self.open(f"{BASE_URL}/")

    def select_cemetery_for_public_search(self, cemetery_name: str):
        time.sleep(3)
        self.click_element(locators.PUBLIC_SEARCH_INPUT)
        self.fill_input(locators.PUBLIC_SEARCH_INPUT, cemetery_name)
        time.sleep(2)

        results = self.find_elements(locators.CEMETERY_RESULT_ITEMS)
        index = pick_cemetery_result([result.text for result in results], cemetery_name)
        if index is None:
            raise RuntimeError(f"Cemetery '{cemetery_name}' not found in search results")
        results[index].click()

        expected = cemetery_name.replace(" ", "_")
        if not wait_for_url(self.driver, expected, timeout=15):
            raise RuntimeError(f"Did not navigate to cemetery page for '{cemetery_name}'")
        time.sleep(2)
        self.logger.info(f"Selected cemetery: {cemetery_name}, now at: {self.driver.current_url}")


class SearchPage(HomePage):
    """Header search box, for anonymous and logged-in users."""

    def search_global(self, query: str, logged_in: bool = True):
        if not logged_in:
            wait_for_document_ready(self.driver)
            time.sleep(2)
        search_input = self.wait_until_visible(locators.GLOBAL_SEARCH_INPUT, timeout=10)
        search_input.click()
        self.fill_input(locators.GLOBAL_SEARCH_INPUT, query)
        # Results come from a debounced API call
        time.sleep(3)
        if logged_in:
            self.wait_until_visible(locators.PERSON_RESULT_ITEMS, timeout=10)
        self.logger.info(f"Searched for: {query}")

    def is_message_visible(self, message: str, timeout: float = 5) -> bool:
        return self.is_element_visible(text_containing(message), timeout)

    def result_has_roi_holder(self, plot_name: str) -> bool:
        """True when the result for `plot_name` shows the person's "(ROI Holder)" role."""
        try:
            item = self.wait_until_visible(locators.person_result_with_text(plot_name), timeout=5)
        except TimeoutException:
            self.logger.error(f"No search result with plot {plot_name}")
            return False
        text = item.text
        return plot_name in text and re.search(re.escape(locators.ROI_HOLDER_ROLE), text, re.IGNORECASE) is not None

    def open_result_roi_tab(self, plot_name: str):
        self.click_element(locators.person_result_with_text(plot_name))
        if not wait_for_url(self.driver, quote(plot_name), timeout=10):
            raise RuntimeError(f"Plot page for {plot_name} did not open")
        wait_for_document_ready(self.driver)
        self.wait_until_visible(TAB_LIST, timeout=8)

        roi_tab = self.click_element(tab_named("ROI"), timeout=5)
        time.sleep(0.5)
        if roi_tab.get_attribute("aria-selected") != "true":
            self.logger.info("ROI tab not selected, clicking again...")
            roi_tab.click()
            time.sleep(0.5)

        time.sleep(2)
        self.logger.info(f"Opened search result {plot_name}, now at: {self.driver.current_url}")
