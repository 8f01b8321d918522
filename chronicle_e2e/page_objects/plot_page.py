# chronicle_e2e/page_objects/plot_page.py

import re
import time
from typing import Iterable, List
from urllib.parse import quote

from selenium.common.exceptions import WebDriverException

from chronicle_e2e.config.config import BASE_URL
from chronicle_e2e.core.logging_config import success
from chronicle_e2e.data.test_data import CEMETERY
from chronicle_e2e.locators import roi_locators as locators
from chronicle_e2e.locators.common import button_with_text, text_containing
from chronicle_e2e.utils.wait_helpers import navigate_safely

from .base_page import BasePage

VACANT_PLOT_PATTERN = re.compile(r"^\w+\s+\w+\s+\d+\s+Vacant$")

# innerText of every element that reads like "A B 3 Vacant"
_VACANT_TEXTS_SCRIPT = """
const pattern = new RegExp(arguments[0]);
return Array.from(document.querySelectorAll('body *'))
    .map(e => (e.innerText || '').trim())
    .filter(t => pattern.test(t));
"""


def vacant_plot_names(texts: Iterable[str]) -> List[str]:
    """Plot names from list entries such as "A B 3 Vacant", in page order, without duplicates."""
    names = []
    for text in texts:
        text = text.strip()
        if VACANT_PLOT_PATTERN.match(text):
            name = re.sub(r"\s*Vacant\s*$", "", text).strip()
            if name not in names:
                names.append(name)
    return names


def add_roi_url(plot_name: str, cemetery: str = CEMETERY) -> str:
    organization = cemetery.replace(" ", "_")
    return f"{BASE_URL}/customer-organization/{organization}/{quote(plot_name)}{locators.ADD_ROI_PATH}"


class PlotPage(BasePage):
    """Plots list of the logged-in dashboard and the plot detail sidebar."""

    def click_see_all_plots(self):
        self.logger.info('Clicking "See all Plots" button')
        self.click_element(locators.SEE_ALL_PLOTS_BUTTON)
        self.wait_for_url_contains(locators.PLOTS_LIST_PATH, timeout=10)
        success(self.logger, "Navigated to plots list page")

    def open_filter(self):
        self.click_element(locators.FILTER_BUTTON)
        time.sleep(1)

    def select_vacant_filter(self):
        self.click_element(locators.VACANT_FILTER_OPTION)

    def apply_filter(self):
        self.click_element(locators.FILTER_DONE_BUTTON)
        time.sleep(2)
        success(self.logger, "Filter applied")

    def expand_section(self, section: str):
        self.logger.info(f"Expanding section {section.upper()}")
        self.click_element(locators.section_toggle(section))
        time.sleep(1)

    def select_plot(self, plot_name: str):
        """Opens a plot from the list, trying the "<name> Vacant" entry, then any text match, then a button."""
        self.logger.info(f"Selecting plot: {plot_name}")
        time.sleep(2)
        strategies = (
            locators.text_exact(f"{plot_name} Vacant"),
            text_containing(plot_name),
            button_with_text(plot_name, ignore_case=False),
        )
        for locator in strategies:
            try:
                self.click_element(locator, timeout=5)
                break
            except WebDriverException as e:
                self.logger.info(f"Plot locator {locator[1]} failed: {e.__class__.__name__}")
        else:
            raise RuntimeError(f"Plot {plot_name} not found in the list")

        self.wait_for_url_contains(locators.PLOT_DETAIL_PATTERN, timeout=10)
        success(self.logger, f"Plot {plot_name} selected")

    def get_first_vacant_plot_name(self) -> str:
        time.sleep(3)
        texts = self.driver.execute_script(_VACANT_TEXTS_SCRIPT, VACANT_PLOT_PATTERN.pattern) or []
        names = vacant_plot_names(texts)
        if not names:
            raise RuntimeError("No vacant plots found in the list")
        self.logger.info(f"Found first vacant plot: {names[0]}")
        return names[0]

    def select_first_vacant_plot(self) -> str:
        plot_name = self.get_first_vacant_plot_name()
        self.click_element(locators.text_exact(f"{plot_name} Vacant"))
        time.sleep(3)
        return plot_name

    def navigate_to_add_roi(self, plot_name: str):
        url = add_roi_url(plot_name)
        self.logger.info(f"Navigating directly to add ROI page for plot: {plot_name}")
        navigate_safely(self.driver, url)
        # The ROI form initialises slowly after a cold navigation
        time.sleep(7)

    def get_plot_status(self) -> str:
        status = self.wait_until_visible(locators.PLOT_STATUS_BADGE).text.strip()
        self.logger.info(f"Current plot status: {status}")
        return status

    def verify_status_changed(self, expected_status: str) -> bool:
        current = self.get_plot_status()
        if current.upper() == expected_status.upper():
            success(self.logger, f"Plot status verified: {current}")
            return True
        self.logger.info(f"Status mismatch - Expected: {expected_status}, Got: {current}")
        return False
