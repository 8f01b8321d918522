# chronicle_e2e/page_objects/interment_page.py

import time
from typing import Dict, Optional

from selenium.common.exceptions import TimeoutException

from chronicle_e2e.config.config import WAIT_FOR_SAVE_REDIRECT
from chronicle_e2e.core.logging_config import success
from chronicle_e2e.data.test_data import IntermentData
from chronicle_e2e.locators import interment_locators as locators

from .base_page import BasePage

# Optional deceased person fields a scenario table may add
OPTIONAL_FIELDS = {
    "title": locators.TITLE,
    "age": locators.AGE,
    "cause_of_death": locators.CAUSE_OF_DEATH,
    "occupation": locators.OCCUPATION,
}


class IntermentPage(BasePage):
    """Page Object for the add/edit interment form and the INTERMENTS tab."""

    def click_add_interment(self):
        button = self.wait_until_visible(locators.ADD_INTERMENT_BUTTON, timeout=15)
        time.sleep(1)
        button.click()
        try:
            self.wait_for_url_contains(locators.ADD_INTERMENT_PATH, timeout=15)
        except TimeoutException:
            current_url = self.driver.current_url
            if locators.MANAGE_PATH not in current_url:
                raise RuntimeError(f"Failed to navigate to Add Interment form. Current URL: {current_url}")
            self.logger.info(f"On a manage page ({current_url}), proceeding...")
        time.sleep(3)
        success(self.logger, "Add Interment form loaded")

    def _fill_focused(self, locator: tuple, value: str):
        self.click_element(locator, timeout=10)
        self.fill_input(locator, value)
        time.sleep(0.5)

    def fill_interment_form(self, data: IntermentData, optional: Optional[Dict[str, str]] = None):
        self.logger.info("Filling interment form")
        time.sleep(3)
        self._fill_focused(locators.FIRST_NAME, data.first_name)
        self._fill_focused(locators.LAST_NAME, data.last_name)

        if data.middle_name:
            self.fill_input(locators.MIDDLE_NAME, data.middle_name)
        if data.date_of_birth:
            self.fill_input(locators.DATE_OF_BIRTH, data.date_of_birth)
        if data.date_of_death:
            self.fill_input(locators.DATE_OF_DEATH, data.date_of_death)
        for key, value in (optional or {}).items():
            if value and key in OPTIONAL_FIELDS:
                self.logger.info(f"Filling {key}: {value}")
                self.fill_input(OPTIONAL_FIELDS[key], value)

        # Interment details sit below the fold
        self.driver.execute_script("window.scrollTo(0, 400)")
        time.sleep(0.5)
        self.select_interment_type(data.interment_type)

        depth = (optional or {}).get("interment_depth")
        if depth:
            self.fill_input(locators.INTERMENT_DEPTH, depth)
        if data.interment_date:
            self.fill_input(locators.INTERMENT_DATE, data.interment_date)
        success(self.logger, "Interment form filled")

    def select_interment_type(self, interment_type: str):
        self.logger.info(f"Selecting interment type: {interment_type}")
        self.click_element(locators.INTERMENT_TYPE_DROPDOWN)
        time.sleep(0.5)
        self.click_element(locators.interment_type_option(interment_type))
        time.sleep(0.5)

    def save_interment(self):
        self.click_element(locators.SAVE_BUTTON)
        self.wait_for_url_contains("/plots/", timeout=WAIT_FOR_SAVE_REDIRECT)
        time.sleep(3)
        success(self.logger, "Interment saved and redirected to plot detail")

    def _is_tab_selected(self) -> bool:
        return self.find_element(locators.INTERMENTS_TAB).get_attribute("aria-selected") == "true"

    def click_interments_tab(self):
        tab = self.wait_until_visible(locators.INTERMENTS_TAB, timeout=10)
        time.sleep(0.5)
        tab.click()
        time.sleep(2)
        if not self._is_tab_selected():
            self.logger.info("Retrying tab click...")
            self.find_element(locators.INTERMENTS_TAB).click()
            time.sleep(2)
        # Interment cards render after the tab animation
        time.sleep(3)

    def verify_deceased_in_tab(self, full_name: str):
        self.wait_until_visible(locators.INTERMENTS_TAB, timeout=10)
        if self._is_tab_selected():
            time.sleep(2)
        else:
            self.click_interments_tab()
        time.sleep(3)
        self.wait_until_visible(locators.deceased_name_heading(full_name), timeout=20)
        success(self.logger, f'Deceased "{full_name}" found in INTERMENTS tab')

    def verify_interment_type(self, interment_type: str):
        self.wait_until_visible(locators.interment_type_label(interment_type), timeout=5)

    def add_interment_applicant(self):
        self.click_element(locators.ADD_INTERMENT_APPLICANT_BUTTON)
        time.sleep(1)

    def add_next_of_kin(self):
        self.click_element(locators.ADD_NEXT_OF_KIN_BUTTON)
        time.sleep(1)

    def click_edit_interment(self):
        button = self.wait_until_visible(locators.EDIT_INTERMENT_BUTTON, timeout=15)
        time.sleep(1)
        button.click()
        try:
            self.wait_for_url_contains(locators.EDIT_INTERMENT_PATH, timeout=15)
        except TimeoutException:
            current_url = self.driver.current_url
            if "/manage/edit/" not in current_url:
                raise RuntimeError(f"Failed to navigate to Edit form. Current URL: {current_url}")
        time.sleep(3)
        success(self.logger, "Edit Interment form loaded")

    def update_interment_form(self, first_name: str = "", last_name: str = "",
                              middle_name: Optional[str] = None, interment_type: str = ""):
        """
        Overwrites the given fields on the edit form.

        Replacing both names also clears the middle name so the heading
        shows exactly "<first> <last>".
        """
        self.click_element(locators.DECEASED_PERSON_SECTION)
        time.sleep(1)

        if first_name:
            self._fill_focused(locators.FIRST_NAME, first_name)
        if last_name:
            self._fill_focused(locators.LAST_NAME, last_name)

        if first_name and last_name:
            self._fill_focused(locators.MIDDLE_NAME, "")
        elif middle_name is not None:
            self._fill_focused(locators.MIDDLE_NAME, middle_name)

        if interment_type:
            self.click_element(locators.INTERMENT_DETAILS_SECTION)
            time.sleep(1)
            self.select_interment_type(interment_type)
        success(self.logger, "Interment form updated")
