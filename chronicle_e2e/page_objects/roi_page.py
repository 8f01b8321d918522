# chronicle_e2e/page_objects/roi_page.py

import time
from typing import Iterable, Optional

from selenium.common.exceptions import NoSuchElementException, TimeoutException, WebDriverException
from selenium.webdriver.common.by import By

from chronicle_e2e.config.config import WAIT_FOR_SAVE_REDIRECT
from chronicle_e2e.core.logging_config import success
from chronicle_e2e.data.test_data import RoiData, RoiPersonData
from chronicle_e2e.locators import roi_locators as locators
from chronicle_e2e.locators.common import option_exact, text_containing

from .base_page import BasePage

_FEE_FIELDS = (locators.FEE_INPUT, locators.FEE_INPUT_BY_LABEL, locators.FEE_INPUT_FALLBACK)
_CERTIFICATE_FIELDS = (locators.CERTIFICATE_INPUT, locators.CERTIFICATE_INPUT_BY_LABEL,
                       locators.CERTIFICATE_INPUT_FALLBACK)
_NOTES_FIELDS = (locators.NOTES_BY_LABEL, locators.NOTES_TEXTAREA)


class RoiPage(BasePage):
    """
    Page Object for the ROI (right of interment) form and the ROI tab of a plot.

    The add and edit forms share fields but not test ids, so most fields
    are located through an ordered list of candidates.
    """

    def click_add_roi(self):
        self.logger.info("Clicking Add ROI button")
        try:
            self.click_element(locators.ADD_ROI_BUTTON, timeout=5)
        except TimeoutException:
            self.logger.info('Trying fallback selector: button with text "Add ROI"')
            self.click_element(locators.ADD_ROI_BUTTON_BY_TEXT)
        time.sleep(3)
        self.logger.info(f"Current URL after click: {self.driver.current_url}")

    def is_edit_mode(self) -> bool:
        return "/edit/" in self.driver.current_url

    def _fill_first_available(self, candidates: Iterable[tuple], value: str, timeout: float = 5):
        for locator in candidates:
            if self.is_element_visible(locator, timeout=timeout):
                self.fill_input(locator, value, timeout=timeout)
                return
            self.logger.debug(f"Field not found with {locator[1]}, trying next")
        raise NoSuchElementException(f"No field accepted the value {value!r}")

    def _read_first_available(self, candidates: Iterable[tuple], timeout: float = 3) -> Optional[str]:
        for locator in candidates:
            if self.is_element_visible(locator, timeout=timeout):
                return self.get_input_value(locator, timeout=timeout)
        return None

    def _select_nth(self, index: int, option_text: str):
        selects = self.find_elements(locators.FORM_SELECTS)
        if len(selects) <= index:
            raise RuntimeError(f"Expected at least {index + 1} dropdowns on the ROI form, found {len(selects)}")
        selects[index].click()
        time.sleep(1)
        self.click_element(option_exact(option_text))
        time.sleep(0.5)

    def fill_roi_form(self, roi: RoiData, payment_date: str = ""):
        self.logger.info("Filling ROI form")
        edit_mode = self.is_edit_mode()
        try:
            self.wait_until_visible(locators.FORM_SELECTS if edit_mode else locators.ROI_FORM_TITLE, timeout=10)
        except TimeoutException:
            raise RuntimeError(f"ROI form failed to load ({'edit' if edit_mode else 'add'} mode)")
        time.sleep(2)

        if roi.right_type:
            self.logger.info(f"Selecting Right Type: {roi.right_type}")
            self._select_nth(1, roi.right_type)
        if roi.term_of_right:
            self.logger.info(f"Selecting Term of Right: {roi.term_of_right}")
            self._select_nth(2, roi.term_of_right)
        if roi.fee:
            self.logger.info(f"Entering fee: {roi.fee}")
            self._fill_first_available(_FEE_FIELDS, roi.fee)
        if payment_date:
            self.fill_input(locators.PAYMENT_DATE_INPUT, payment_date)
        if roi.certificate_number:
            self.logger.info(f"Entering certificate number: {roi.certificate_number}")
            self._fill_first_available(_CERTIFICATE_FIELDS, roi.certificate_number)
        if roi.notes:
            self.logger.info(f"Entering notes: {roi.notes}")
            self._fill_first_available(_NOTES_FIELDS, roi.notes)

        success(self.logger, "ROI form filled successfully")

    def _fill_person(self, person: RoiPersonData, in_dialog: bool):
        first, last, email = (
            (locators.PERSON_FIRST_NAME_TEXTBOX, locators.PERSON_LAST_NAME_TEXTBOX, locators.PERSON_EMAIL_TEXTBOX)
            if in_dialog else
            (locators.PERSON_FIRST_NAME_INPUT, locators.PERSON_LAST_NAME_INPUT, locators.PERSON_EMAIL_INPUT)
        )
        self.fill_input(first, person.first_name)
        self.fill_input(last, person.last_name)
        if person.phone:
            self.fill_input(locators.PERSON_PHONE_INPUT, person.phone)
        if person.email:
            self.fill_input(email, person.email)
        self.click_element(locators.PERSON_ADD_BUTTON)
        time.sleep(1)

    def add_roi_holder(self, holder: RoiPersonData):
        self.logger.info(f"Adding ROI holder {holder.full_name}")
        self.click_element(locators.ADD_ROI_HOLDER_BUTTON)
        time.sleep(1)
        self._fill_person(holder, in_dialog=False)
        success(self.logger, "ROI holder person added successfully")

    def add_roi_applicant(self, applicant: RoiPersonData):
        self.logger.info(f"Adding ROI applicant {applicant.full_name}")
        # A just-saved holder leaves a toast over the button
        time.sleep(1.5)
        self.js_click(locators.ADD_ROI_APPLICANT_BUTTON)
        time.sleep(1.5)
        # Once a holder exists the applicant opens in a dialog, otherwise inline
        in_dialog = bool(self.find_elements(locators.PERSON_FIRST_NAME_TEXTBOX))
        self._fill_person(applicant, in_dialog=in_dialog)
        success(self.logger, "ROI applicant person added successfully")

    def save_roi(self):
        self.logger.info("Saving ROI")
        for locator in (locators.SAVE_BUTTON, locators.SAVE_BUTTON_BY_TEXT, locators.SAVE_BUTTON_ANY):
            try:
                self.click_element(locator, timeout=5)
                break
            except TimeoutException:
                self.logger.debug(f"Save button not found with {locator[1]}")
        else:
            raise RuntimeError("Save button not found on the ROI form")

        self.wait_for_url_contains(locators.PLOT_DETAIL_PATTERN, timeout=WAIT_FOR_SAVE_REDIRECT)
        # Plot status refreshes after the redirect
        time.sleep(2)
        success(self.logger, "ROI saved successfully")

    def click_roi_tab(self):
        self.click_element(locators.ROI_TAB)
        time.sleep(1)

    def click_edit_roi(self):
        time.sleep(2)
        try:
            self.click_element(locators.EDIT_ROI_BUTTON, timeout=5)
        except TimeoutException:
            raise RuntimeError("Failed to click EDIT ROI button")
        time.sleep(3)
        self.logger.info(f"Current URL after click: {self.driver.current_url}")

    def verify_roi_person(self, person_name: str, person_type: str) -> bool:
        """True when `person_name` is shown with the holder or applicant label in the ROI tab."""
        self.click_roi_tab()
        label = locators.ROI_HOLDER_LABEL if person_type == "holder" else locators.ROI_APPLICANT_LABEL

        cards = []
        for element in self.find_elements(text_containing(person_name)):
            try:
                cards.append(element.find_element(By.XPATH, "..").text)
            except WebDriverException:
                continue
        if not cards:
            self.logger.info(f'ROI {person_type} not found: "{person_name}"')
            return False

        for card_text in cards:
            if label in card_text:
                success(self.logger, f'ROI {person_type} verified: "{person_name}" with label "{label}"')
                return True

        self.logger.info(f'"{person_name}" found but none of {len(cards)} card(s) has label "{label}"')
        return False

    def verify_roi_holder_and_applicant(self, holder_name: str, applicant_name: str) -> bool:
        holder_ok = self.verify_roi_person(holder_name, "holder")
        applicant_ok = self.verify_roi_person(applicant_name, "applicant")
        if not (holder_ok and applicant_ok):
            self.logger.info(f"Verification failed - Holder: {holder_ok}, Applicant: {applicant_ok}")
        return holder_ok and applicant_ok

    def verify_fee_in_form(self, expected_fee: str) -> bool:
        time.sleep(2)
        actual = self._read_first_available(_FEE_FIELDS)
        if actual != expected_fee:
            self.logger.info(f"Fee mismatch - Expected: {expected_fee}, Got: {actual}")
        return actual == expected_fee

    def verify_certificate_in_form(self, expected_certificate: str) -> bool:
        actual = self._read_first_available(_CERTIFICATE_FIELDS)
        if actual != expected_certificate:
            self.logger.info(f"Certificate mismatch - Expected: {expected_certificate}, Got: {actual}")
        return actual == expected_certificate

    def verify_notes_in_form(self, expected_notes: str) -> bool:
        actual = self._read_first_available(_NOTES_FIELDS)
        if actual is not None:
            actual = actual.strip()
        if actual != expected_notes:
            self.logger.info(f'Notes mismatch - Expected: "{expected_notes}", Got: "{actual}"')
        return actual == expected_notes

    # --- Activity notes on the plot sidebar ---

    def add_activity_note(self, note: str):
        self.fill_input(locators.ACTIVITY_NOTES_INPUT, note)
        self.click_element(locators.ACTIVITY_NOTES_SEND_BUTTON)
        self.wait_until_visible(locators.activity_note_text(note))
        self.logger.info(f"Activity note added: {note}")

    def edit_activity_note(self, new_note: str):
        self.click_element(locators.ACTIVITY_NOTE_MENU)
        self.click_element(locators.ACTIVITY_NOTE_EDIT_MENU_ITEM)
        self.fill_input(locators.ACTIVITY_NOTE_EDIT_TEXTAREA, new_note)
        self.click_element(locators.ACTIVITY_NOTE_EDIT_SAVE_BUTTON)
        self.wait_until_visible(locators.activity_note_text(new_note))
        self.logger.info(f"Activity note updated: {new_note}")

    def has_activity_note(self, note: str, timeout: float = 5) -> bool:
        return self.is_element_visible(locators.activity_note_text(note), timeout)
