# chronicle_e2e/page_objects/person_page.py

import time
from typing import Iterable, List, Tuple

from selenium.common.exceptions import TimeoutException
from selenium.webdriver.common.keys import Keys
from selenium.webdriver.support.ui import WebDriverWait

from chronicle_e2e.config.config import BASE_URL, WAIT_FOR_LOGIN_REDIRECT
from chronicle_e2e.core.logging_config import success
from chronicle_e2e.data.test_data import PersonData
from chronicle_e2e.locators import person_locators as locators
from chronicle_e2e.utils.network_helper import network_checkpoint, wait_for_api_endpoint
from chronicle_e2e.utils.wait_helpers import navigate_safely

from .base_page import BasePage

# PersonData attribute -> (locator, label), in form order
FORM_FIELDS = (
    ("middle_name", locators.MIDDLE_NAME_INPUT, "Middle Name"),
    ("title", locators.TITLE_INPUT, "Title"),
    ("phone_m", locators.PHONE_MOBILE_INPUT, "Phone Mobile"),
    ("phone_h", locators.PHONE_HOME_INPUT, "Phone Home"),
    ("phone_o", locators.PHONE_OFFICE_INPUT, "Phone Office"),
    ("email", locators.EMAIL_INPUT, "Email"),
    ("address", locators.ADDRESS_INPUT, "Address"),
    ("city", locators.CITY_INPUT, "City"),
    ("state", locators.STATE_INPUT, "State"),
    ("country", locators.COUNTRY_INPUT, "Country"),
    ("post_code", locators.POST_CODE_INPUT, "Post Code"),
    ("note", locators.NOTES_INPUT, "Note"),
)

# Empty grid cells render as "--"
EMPTY_CELL = "--"


def row_name(first_name: str, last_name: str) -> str:
    return f"{(first_name or '').strip()} {(last_name or '').strip()}".strip()


def listed_names(rows: Iterable[Tuple[str, str]]) -> List[str]:
    """Full names of the data rows, skipping rows with no name."""
    names = []
    for first, last in rows:
        name = row_name(first, last)
        if name and name != EMPTY_CELL:
            names.append(name)
    return names


class PersonPage(BasePage):
    """Page Object for the PERSONS tab of the advance table and the person form."""

    def navigate_to_advance_table(self):
        navigate_safely(self.driver, f"{BASE_URL}{locators.ADVANCE_TABLE_PATH}")
        self.logger.info("Advance table page loaded")

    def navigate_to_person_tab(self):
        self.logger.info("Navigating to PERSONS tab")
        self.click_element(locators.PERSON_TAB, timeout=WAIT_FOR_LOGIN_REDIRECT)
        time.sleep(1)
        self.logger.info("PERSONS tab clicked successfully")

    def click_add_person(self):
        self.click_element(locators.ADD_PERSON_BUTTON, timeout=15)
        self.wait_for_url_contains(locators.ADD_PERSON_PATTERN, timeout=15)
        self.logger.info("Navigated to add person form")

    # --- Form ---

    def _fill_field(self, locator: tuple, value: str, field_name: str):
        self.logger.info(f"Filling {field_name}: {value}")
        self.fill_input(locator, value, timeout=10)
        time.sleep(0.3)

    def _select_gender(self, gender: str):
        self.logger.info(f"Selecting gender: {gender}")
        self.select_mat_option(locators.GENDER_DROPDOWN, gender, exact=True)

    def fill_person_form(self, data: PersonData):
        self.logger.info("Filling person form with data")
        self._fill_field(locators.FIRST_NAME_INPUT, data.first_name, "First Name")
        self._fill_field(locators.LAST_NAME_INPUT, data.last_name, "Last Name")
        if data.gender:
            self._select_gender(data.gender)
        for attribute, locator, label in FORM_FIELDS:
            value = getattr(data, attribute)
            if value:
                self._fill_field(locator, value, label)
        success(self.logger, "Person form filled successfully")

    def _save_button(self, locator: tuple):
        button = self.wait_until_visible(locator, timeout=10)
        text = button.text.strip()
        self.logger.info(f'Button text: "{text}"')
        if "save" not in text.lower():
            self.logger.error(f'Button text is not "Save", found: "{text}". Aborting click.')
            raise RuntimeError(f'Expected Save button but found: "{text}"')
        return button

    def _wait_for_persons_table(self):
        self.wait_for_url_contains(locators.PERSONS_TABLE_PATTERN, timeout=20)
        self.logger.info("Person saved successfully, navigated back to persons table")
        time.sleep(2)

    def click_save(self):
        """Saves the add or edit form, whichever the current URL shows."""
        url = self.driver.current_url
        if locators.EDIT_PERSON_PATTERN in url:
            self.logger.info("Detected edit context, using edit save button")
            self.click_save_edit()
        else:
            if locators.ADD_PERSON_PATTERN.rstrip("/") not in url:
                self.logger.warning(f"Unknown context URL: {url}, defaulting to add save button")
            self.click_save_add()

    def click_save_add(self):
        self._save_button(locators.SAVE_ADD_BUTTON).click()
        self._wait_for_persons_table()

    def click_save_edit(self):
        errors = [text for text in self.visible_texts(locators.VALIDATION_ERRORS) if text]
        if errors:
            self.logger.warning(f"Form has validation errors: {errors}")

        button = self._save_button(locators.SAVE_EDIT_BUTTON)
        if not button.is_enabled():
            self.logger.error("Save button is disabled! Cannot save.")
            raise RuntimeError("Save button is disabled")

        since = network_checkpoint(self.driver)
        button.click()
        self.logger.info("Save button clicked")
        if not wait_for_api_endpoint(self.driver, locators.PERSON_API_PATTERN, timeout=15, since=since, optional=True):
            self.logger.warning("No save API call seen - form might think there are no changes")
        self._wait_for_persons_table()

    # --- Grid ---

    def _wait_for_grid_rows(self, timeout: float = 10):
        try:
            self.wait_until_not_present(locators.GRID_PROGRESS, timeout=25)
        except TimeoutException:
            self.logger.info("Loading indicator still present, reading the grid anyway")
        WebDriverWait(self.driver, timeout).until(lambda d: len(d.find_elements(*locators.GRID_ROWS)) >= 2)

    def _row_cells(self, row) -> Tuple[str, str]:
        cells = row.find_elements(*locators.GRID_CELLS)
        if len(cells) <= locators.LAST_NAME_CELL:
            return "", ""
        return cells[locators.FIRST_NAME_CELL].text, cells[locators.LAST_NAME_CELL].text

    def get_first_row_person_name(self) -> str:
        self._wait_for_grid_rows()
        rows = self.find_elements(locators.GRID_ROWS)
        self.logger.info(f"Grid rows - Total: {len(rows)}")
        name = row_name(*self._row_cells(rows[1]))
        self.logger.info(f"First row person name: {name}")
        return name

    def verify_person_in_first_row(self, expected_name: str):
        actual = self.get_first_row_person_name()
        if actual != expected_name:
            raise AssertionError(f'Expected "{expected_name}" in the first row, found "{actual}"')
        success(self.logger, f"Person verified successfully in first row: {actual}")

    def click_first_row(self):
        self._wait_for_grid_rows()
        self.find_elements(locators.GRID_ROWS)[1].click()
        time.sleep(1)

    # --- Filter ---

    def click_filter_button(self):
        self.click_element(locators.FILTER_BUTTON, timeout=10)
        time.sleep(0.5)

    def fill_filter_form(self, first_name: str, last_name: str):
        self.logger.info(f"Filling filter form with: {first_name} {last_name}")
        self.fill_input(locators.FILTER_FIRST_NAME_INPUT, first_name, timeout=10)
        self.fill_input(locators.FILTER_LAST_NAME_INPUT, last_name)

    def apply_filter(self):
        self.click_element(locators.FILTER_APPLY_BUTTON, timeout=5)
        self.logger.info("Filter applied, waiting for table to reload")
        time.sleep(3)

    # --- Edit / delete ---

    def click_edit_button(self):
        self.click_element(locators.EDIT_BUTTON, timeout=10)
        time.sleep(1)

    def edit_person_last_name(self, new_last_name: str):
        url = self.driver.current_url
        if locators.EDIT_PERSON_PATTERN not in url:
            raise RuntimeError(f"Not on person edit page: {url}")

        current = self.get_input_value(locators.LAST_NAME_INPUT, timeout=10)
        self.logger.info(f'Current last name value: "{current}"')
        self.click_element(locators.LAST_NAME_INPUT)
        time.sleep(0.2)
        self.fill_input(locators.LAST_NAME_INPUT, "")
        self.type_slowly(locators.LAST_NAME_INPUT, new_last_name)
        # Blur to run the form validation
        self.find_element(locators.LAST_NAME_INPUT).send_keys(Keys.TAB)
        time.sleep(0.5)

        actual = self.get_input_value(locators.LAST_NAME_INPUT)
        if actual != new_last_name:
            raise RuntimeError(f'Failed to set last name. Expected "{new_last_name}" but got "{actual}"')
        success(self.logger, f"Last name updated successfully to: {new_last_name}")

    def click_delete(self):
        self.click_element(locators.DELETE_BUTTON, timeout=10)
        time.sleep(1)
        self.logger.info("Delete button clicked, waiting for confirmation dialog")

    def confirm_delete(self):
        self.wait_until_visible(locators.CONFIRM_DIALOG, timeout=5)
        # The dialog's button shares the label with the toolbar's; the last one is the dialog's
        buttons = self.visible_elements(locators.DELETE_BUTTON)
        if not buttons:
            raise RuntimeError("Confirm delete button not found")
        since = network_checkpoint(self.driver)
        buttons[-1].click()
        self.logger.info("Confirm delete button clicked")

        if not wait_for_api_endpoint(self.driver, locators.PERSON_DELETE_API, timeout=15, since=since, optional=True):
            self.logger.warning("Delete API call timeout or error")
        self.wait_for_url_contains("persons", timeout=20)
        time.sleep(2)
        self.logger.info("Navigated back to persons table after deletion")

    def get_all_person_names(self) -> List[str]:
        rows = self.find_elements(locators.GRID_ROWS)[1:]
        return listed_names(self._row_cells(row) for row in rows)

    def verify_person_not_in_list(self, name: str):
        # A reload drops any active filter
        self.driver.refresh()
        time.sleep(2)
        try:
            self.wait_until_not_present(locators.GRID_PROGRESS, timeout=15)
        except TimeoutException:
            self.logger.info("Loading indicator still present")
        time.sleep(1)

        names = self.get_all_person_names()
        self.logger.info(f"Found {len(names)} persons in the table")
        if name in names:
            raise RuntimeError(f'Person "{name}" is still in the list after deletion!')
        success(self.logger, f'Person "{name}" is NOT in the list (deleted successfully)')
