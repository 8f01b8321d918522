# chronicle_e2e/page_objects/advance_search_page.py

import time

from selenium.common.exceptions import TimeoutException
from selenium.webdriver.common.keys import Keys

from chronicle_e2e.config.config import BASE_URL
from chronicle_e2e.core.logging_config import success
from chronicle_e2e.locators import advance_search_locators as locators
from chronicle_e2e.locators.common import option_exact
from chronicle_e2e.utils.wait_helpers import poll_until

from .base_page import BasePage

HOME_URL = f"{BASE_URL}/"


class AdvanceSearchPage(BasePage):
    """
    Page Object for the advanced plot search dialog and its results sidebar.

    The dialog is reachable both from the public home page and from the
    logged-in toolbar; the two differ only in a few locators, selected with
    `public`.
    """

    def open_home(self):
        self.open(HOME_URL)
        time.sleep(3)
        success(self.logger, "Chronicle home page loaded")

    def click_advanced_search_button(self, public: bool = False):
        self.logger.info("Clicking Advanced search button")
        if public:
            self.click_element(locators.ADVANCED_BUTTON_PUBLIC)
        else:
            button = self.wait_until_visible(locators.ADVANCED_BUTTON, timeout=10)
            # Disabled while the cemetery list loads
            if not poll_until(button.is_enabled, timeout=15, interval=0.5, description="Advanced button enabled"):
                raise RuntimeError("Advanced search button did not become enabled within timeout")
            button.click()
        time.sleep(1)
        success(self.logger, "Advanced search dialog opened")

    def select_cemetery(self, cemetery_name: str):
        self.logger.info(f"Selecting cemetery: {cemetery_name}")
        self.click_element(locators.CEMETERIES_COMBOBOX)
        time.sleep(0.5)
        self.click_element(option_exact(cemetery_name))
        time.sleep(0.5)
        # The open dropdown covers the Plot tab
        self.press_key(Keys.ESCAPE)
        time.sleep(0.3)

    def select_plot_tab(self):
        time.sleep(1)
        self.click_element(locators.PLOT_TAB_BUTTON)
        time.sleep(0.5)

    def select_section(self, section: str):
        self.logger.info(f"Selecting section: {section}")
        self.click_element(locators.SECTION_COMBOBOX)
        time.sleep(0.5)
        self.click_element(option_exact(section))
        time.sleep(0.5)

    def select_row(self, row: str):
        self.logger.info(f"Selecting row: {row}")
        self.click_element(locators.ROW_COMBOBOX)
        time.sleep(0.5)
        self.click_element(option_exact(row))
        time.sleep(0.5)

    def enter_plot_number(self, number: str, public: bool = False):
        self.logger.info(f"Entering plot number: {number}")
        field = locators.NUMBER_INPUT_PUBLIC if public else locators.NUMBER_INPUT
        self.click_element(field)
        time.sleep(0.3)
        self.fill_input(field, number)
        time.sleep(0.5)

    def click_search(self):
        self.logger.info("Clicking Search button in advanced search")
        self.click_element(locators.SEARCH_BUTTON)
        self.wait_for_url_contains(locators.RESULTS_PATH, timeout=10)
        time.sleep(3)

    def search_plot(self, cemetery_name: str, section: str, row: str, number: str, public: bool = False):
        self.click_advanced_search_button(public=public)
        self.select_cemetery(cemetery_name)
        self.select_plot_tab()
        self.select_section(section)
        self.select_row(row)
        self.enter_plot_number(number, public=public)
        self.click_search()

    # --- Results sidebar ---

    def is_on_results_page(self) -> bool:
        return locators.RESULTS_PATH in self.driver.current_url

    def has_results_information(self) -> bool:
        return (self.is_element_visible(locators.RESULTS_HEADING, timeout=10)
                and self.is_element_visible(locators.RESULTS_SUBHEADING, timeout=5))

    def get_plot_detail_text(self) -> str:
        return self.get_text(locators.PLOT_DETAIL_TEXT, timeout=10)

    def get_cemetery_name(self) -> str:
        return self.get_text(locators.CEMETERY_NAME_TEXT, timeout=10)

    def verify_search_results_contain(self, plot_id: str):
        self.wait_until_visible(locators.RESULTS_HEADING, timeout=10)
        self.wait_until_visible(locators.RESULT_LIST, timeout=10)
        self.wait_until_visible(locators.result_with_text(plot_id), timeout=5)
        success(self.logger, f"Search results contain {plot_id}")

    def click_plot_from_results(self, plot_id: str):
        self.click_element(locators.result_with_text(plot_id))
        self.wait_for_url_contains("/plots/", timeout=10)
        time.sleep(3)

    def verify_plot_sidebar(self, plot_id: str):
        self.wait_until_visible(locators.plot_sidebar_heading(plot_id), timeout=10)
        self.wait_until_visible(locators.SIDEBAR_EDIT_BUTTON, timeout=10)

    def close_search(self):
        self.logger.info("Clicking close advance search button")
        self.click_element(locators.CLOSE_BUTTON)
        self.wait.until(lambda d: d.current_url == HOME_URL)
        time.sleep(1.5)
        success(self.logger, "Advance search closed, navigated to home page")

    def is_on_home_page(self) -> bool:
        return self.driver.current_url == HOME_URL

    def is_results_sidebar_hidden(self) -> bool:
        try:
            for locator in (locators.RESULTS_HEADING, locators.RESULTS_SUBHEADING, locators.PLOT_DETAIL_TEXT):
                self.wait_for_element_hidden(locator, timeout=5)
        except TimeoutException:
            return False
        return True
