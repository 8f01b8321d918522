# chronicle_e2e/page_objects/request_sales_form_page.py

import re
import time
from typing import Optional
from urllib.parse import quote

from selenium.common.exceptions import TimeoutException, WebDriverException
from selenium.webdriver.common.action_chains import ActionChains

from chronicle_e2e.core.logging_config import success
from chronicle_e2e.data.test_data import REQUEST_SALES_FORM_DATA, IntermentData, RoiData, RoiPersonData
from chronicle_e2e.locators import request_sales_form_locators as locators
from chronicle_e2e.locators.common import ANY_OPTION
from chronicle_e2e.utils.network_helper import wait_for_api_requests_complete
from chronicle_e2e.utils.wait_helpers import navigate_safely

from .base_page import BasePage

_FOR_SALE_SUFFIX = re.compile(r"\s*FOR\s*SALES?.*$", re.IGNORECASE | re.DOTALL)

# Sections of the purchase form, in order, as their headings read
FORM_SECTIONS = ("Description", "ROI Applicant", "ROI", "Terms", "Signature")


def clean_plot_name(text: Optional[str]) -> str:
    """ "B A 1FOR SALE" or "B A 1 For Sale" -> "B A 1"."""
    return _FOR_SALE_SUFFIX.sub("", text or "").strip()


def cemetery_base_url(sell_plots_url: str) -> str:
    return sell_plots_url.replace("/sell-plots", "")


def plot_url(plot_name: str, sell_plots_url: Optional[str] = None) -> str:
    base = cemetery_base_url(sell_plots_url or REQUEST_SALES_FORM_DATA["cemetery"]["sell_plots_url"])
    return f"{base}/plots/{quote(plot_name, safe='')}"


def purchase_url(plot_name: str, kind: str = "Pre-need", sell_plots_url: Optional[str] = None) -> str:
    return f"{plot_url(plot_name, sell_plots_url)}/purchase/{kind}"


def find_plot_name(texts) -> Optional[str]:
    """First heading text that reads like a plot name ("A B 1")."""
    for text in texts:
        if text and re.search(r"[A-Z]\s+[A-Z]\s+\d+", text):
            return text
    return None


class RequestSalesFormPage(BasePage):
    """
    Public "request to buy" flow: sell-plots page, plot details, and the
    pre-need / at-need purchase form with its expandable sections.
    """

    def __init__(self, driver, data: Optional[dict] = None):
        super().__init__(driver)
        self.data = data or REQUEST_SALES_FORM_DATA

    # --- Navigation ---

    def navigate_to_sell_plots_page(self):
        url = self.data["cemetery"]["sell_plots_url"]
        self.logger.info(f"Navigating to sell plots page: {url}")
        navigate_safely(self.driver, url)
        wait_for_api_requests_complete(self.driver, timeout=15)
        success(self.logger, "Successfully loaded sell plots page")

    def expand_section(self, section_name: str):
        self.logger.info(f"Expanding section: {section_name}")
        self.click_element(locators.section_toggle(section_name))
        time.sleep(1)

    # --- Plot selection ---

    def _for_sale_plots(self):
        return [element for element in self.visible_elements(locators.PLOT_LIST_ITEMS)
                if locators.FOR_SALE_PLOT_PATTERN.search(element.text)]

    def find_plot_with_purchase_option(self, attempts: int = 5) -> str:
        """Opens "For Sale" plots one by one until one offers Request to Buy; returns its name."""
        count = len(self._for_sale_plots())
        self.logger.info(f'Found {count} plots with "For Sale" status')
        if count == 0:
            raise RuntimeError('No plots found with "For Sale" status. Make sure section is expanded.')

        for index in range(min(count, attempts)):
            try:
                # The list re-renders after every back navigation
                element = self._for_sale_plots()[index]
                plot_name = clean_plot_name(element.text)
                self.logger.info(f"Checking plot {index + 1}/{count}: {plot_name}")
                element.click()
                self.wait_for_url_contains("/plots/", timeout=15)
                wait_for_api_requests_complete(self.driver, timeout=10)

                if self.is_element_visible(locators.REQUEST_TO_BUY_BUTTON, timeout=3):
                    success(self.logger, f"Found plot with Request to Buy button: {plot_name}")
                    return plot_name

                buttons = [text for text in self.visible_texts(locators.ALL_BUTTONS) if text]
                self.logger.info(f"Plot {plot_name} buttons: {buttons}")
                self.driver.back()
                wait_for_api_requests_complete(self.driver, timeout=10)
                time.sleep(1)
            except (IndexError, WebDriverException) as e:
                self.logger.info(f"Error checking plot {index + 1}: {e.__class__.__name__}")
        raise RuntimeError("No plot found with Request to Buy button after checking available plots")

    def click_first_plot(self) -> str:
        time.sleep(2)
        plot_name = ""
        plots = self._for_sale_plots()
        if plots:
            plot_name = clean_plot_name(plots[0].text)
            self.logger.info(f"Found plot by status: {plot_name}")
            plots[0].click()
        else:
            named = [element for element in self.visible_elements(locators.PLOT_LIST_ITEMS)
                     if locators.PLOT_NAME_PATTERN.match(element.text.strip())]
            target = named[0] if named else self.wait_until_visible(locators.SELL_PLOTS_ITEMS, timeout=5)
            plot_name = target.text.split("\n")[0].strip()
            self.logger.info(f"Found plot by {'name' if named else 'test id'}: {plot_name}")
            target.click()

        self.wait_for_url_contains("plots/", timeout=15)
        wait_for_api_requests_complete(self.driver, timeout=10)
        return plot_name

    def click_plot(self, plot_name: str):
        self.click_element(locators.plot_list_item(plot_name))
        wait_for_api_requests_complete(self.driver, timeout=10)
        self.logger.info(f"Navigated to plot details: {plot_name}")

    # --- Plot details ---

    def get_plot_name(self) -> str:
        text = self.find_element(locators.PLOT_NAME).text
        plot_name = clean_plot_name(text)
        self.logger.info(f"Current plot name: {text} -> Cleaned: {plot_name}")
        return plot_name

    def get_cemetery_name(self) -> str:
        return self.find_element(locators.PLOT_CEMETERY).text.strip()

    def verify_request_to_buy_button_visible(self) -> bool:
        if self.is_element_visible(locators.REQUEST_TO_BUY_BUTTON, timeout=5):
            return True
        self.logger.info(f"Available buttons: {self.visible_texts(locators.ALL_BUTTONS)}")
        return False

    # --- Request to buy ---

    def navigate_to_pre_need_purchase_form(self, plot_name: str):
        url = purchase_url(plot_name, "Pre-need", self.data["cemetery"]["sell_plots_url"])
        self.logger.info(f"Navigating directly to purchase form: {url}")
        navigate_safely(self.driver, url)
        wait_for_api_requests_complete(self.driver, timeout=15)

    def click_request_to_buy(self, plot_name: Optional[str] = None):
        """Opens the Request to Buy menu; with `plot_name`, reloads the plot page first."""
        if plot_name:
            self.logger.info(f"Re-navigating to plot {plot_name} before clicking")
            navigate_safely(self.driver, plot_url(plot_name, self.data["cemetery"]["sell_plots_url"]))
            if not wait_for_api_requests_complete(self.driver, timeout=15):
                self.logger.info("Network idle timeout reached, continuing anyway")
            time.sleep(2)

        self.click_element(locators.REQUEST_TO_BUY_BUTTON)
        time.sleep(0.5)
        self.wait_until_visible(locators.PRE_NEED_OPTION, timeout=10)
        self.logger.info("Request menu opened")

    def select_pre_need_purchase(self):
        self.click_element(locators.PRE_NEED_OPTION)
        self.wait_until_visible(locators.PRE_NEED_HEADING, timeout=30)
        self.logger.info("Navigated to purchase form")

    def select_at_need_purchase(self):
        self.click_element(locators.AT_NEED_OPTION)
        try:
            self.wait_until_visible(locators.AT_NEED_HEADING, timeout=10)
        except TimeoutException:
            self.logger.warning("At-need form heading not found, continuing anyway")
        self.logger.info("Navigated to At-need purchase form")

    def is_on_request_form(self) -> bool:
        return locators.PURCHASE_URL_PATTERN.search(self.driver.current_url) is not None

    # --- Form sections ---

    def _continue(self, section: str, locator: tuple = locators.CONTINUE_BUTTON):
        self.logger.info(f"Continuing from {section} section")
        buttons = self.visible_elements(locator)
        if not buttons:
            self.click_element(locator)
        else:
            buttons[0].click()
        time.sleep(0.5)

    def continue_description_section(self):
        self._continue("description", locators.DESCRIPTION_CONTINUE_BUTTON)

    def continue_roi_applicant_section(self):
        self._continue("ROI Applicant")

    def continue_interment_details_section(self):
        self._continue("Interment Details")

    def continue_roi_section(self):
        self._continue("ROI")

    def continue_terms_section(self):
        self._continue("terms")

    def continue_signature_section(self):
        self._continue("signature")

    def fill_roi_applicant_form(self, applicant: Optional[RoiPersonData] = None):
        """Pre-need applicant; the form only exposes generated mat-input ids."""
        applicant = applicant or self.data["applicant"]
        self.logger.info("Filling ROI Applicant form (Pre-need)")
        time.sleep(1)
        self.fill_input(locators.APPLICANT_FIRST_NAME, applicant.first_name)
        self.fill_input(locators.APPLICANT_LAST_NAME, applicant.last_name)
        self.fill_input(locators.APPLICANT_EMAIL, applicant.email)
        success(self.logger, "ROI Applicant form filled successfully (Pre-need)")

    def fill_interment_details_form(self, details: Optional[IntermentData] = None):
        details = details or self.data["interment_details"]
        self.logger.info(f"Filling deceased name: {details.first_name} {details.last_name}")
        time.sleep(1)
        self.fill_input(locators.DECEASED_FIRST_NAME, details.first_name)
        self.fill_input(locators.DECEASED_LAST_NAME, details.last_name)
        optional = (
            (locators.DECEASED_MIDDLE_NAME, details.middle_name),
            (locators.DATE_OF_BIRTH, details.date_of_birth),
            (locators.DATE_OF_DEATH, details.date_of_death),
            (locators.PLACE_OF_DEATH, details.place_of_death),
            (locators.INTERMENT_DATE, details.interment_date),
            (locators.INTERMENT_TIME, details.interment_time),
            (locators.FUNERAL_DIRECTOR, details.funeral_director),
        )
        for locator, value in optional:
            if value:
                self.fill_input(locator, value)
        success(self.logger, "Interment Details form filled successfully")

    def _select_option_containing(self, dropdown: tuple, text: str, label: str) -> bool:
        if not self.is_element_visible(dropdown, timeout=2):
            self.logger.warning(f"Could not find {label} input - might be optional or hidden")
            return False
        self.click_element(dropdown)
        time.sleep(0.5)
        matching = [option for option in self.visible_elements(ANY_OPTION) if text.lower() in option.text.lower()]
        if not matching:
            self.logger.warning(f"No {label} option contains {text!r}")
            return False
        matching[0].click()
        self.logger.info(f"Selected {label}: {text}")
        time.sleep(0.5)
        return True

    def fill_roi_form(self, roi: Optional[RoiData] = None):
        """Right type and term of right; the section is optional on some cemeteries, so misses only warn."""
        roi = roi or self.data["roi"]
        self.logger.info("Filling ROI form")
        time.sleep(2)
        try:
            collapsed = self.visible_elements(locators.ROI_PANEL_COLLAPSED)
            if collapsed:
                self.logger.info("ROI section is collapsed, expanding it...")
                collapsed[0].click()
                time.sleep(1)
            if (self._select_option_containing(locators.RIGHT_TYPE_SELECT, roi.right_type, "Right Type")
                    and self._select_option_containing(locators.TERM_OF_RIGHT_SELECT, roi.term_of_right,
                                                       "Term of Right")):
                success(self.logger, "ROI form filled successfully")
        except WebDriverException as e:
            self.logger.error(f"Error filling ROI form: {e.__class__.__name__}")
            self.logger.warning("Continuing without filling ROI form (might be optional)")

    def agree_to_terms(self):
        self.click_element(locators.TERMS_CHECKBOX)
        time.sleep(0.3)
        self.logger.info("Terms agreed")

    def add_signature(self):
        """Draws a stroke on the signature pad when the form shows one."""
        pads = self.visible_elements(locators.SIGNATURE_PAD)
        if not pads:
            self.logger.info("No signature pad shown, skipping signature")
            return
        pad = pads[0]
        (ActionChains(self.driver)
         .move_to_element_with_offset(pad, -40, 0)
         .click_and_hold()
         .move_by_offset(40, 10)
         .move_by_offset(40, -10)
         .release()
         .perform())
        self.logger.info("Signature drawn")

    def validate_form_summary(self, expected_plot_name: str):
        time.sleep(2)
        headings = self.visible_texts(locators.SUMMARY_HEADINGS)
        self.logger.info(f"Headings: {headings}")
        found = find_plot_name(headings)
        self.logger.info(f"Found plot name in form: {found}")
        if not found or expected_plot_name not in found:
            raise AssertionError(f"Plot name validation failed. Expected: {expected_plot_name}, Found: {found}")
        success(self.logger, "Form summary validated successfully")

    # --- Submission ---

    def _log_form_state(self):
        for section in FORM_SECTIONS:
            visible = bool(self.visible_elements(locators.section_heading(section)))
            self.logger.info(f'Section "{section}": {"visible" if visible else "not visible"}')

        fields = self.find_elements(locators.FORM_FIELDS)
        self.logger.info(f"Total form fields found: {len(fields)}")
        for index, field in enumerate(fields):
            label = (field.get_attribute("name") or field.get_attribute("placeholder")
                     or field.get_attribute("aria-label") or f"field-{index}")
            value = field.get_attribute("value") or ""
            required = field.get_attribute("required") is not None
            invalid = field.get_attribute("aria-invalid") == "true"
            if required or invalid or not value:
                self.logger.info(f'Field [{index}]: "{label}" | value: "{value}" | required: {required} '
                                 f"| invalid: {invalid} | visible: {field.is_displayed()}")
            if required and not value and field.is_displayed():
                self.logger.error(f'Required field EMPTY: "{label}"')

    def submit_request(self):
        time.sleep(2)
        self.logger.info(f"Current URL before submit: {self.driver.current_url}")
        button = self.wait_until_visible(locators.SUBMIT_BUTTON, timeout=10)
        if not button.is_enabled():
            self.logger.error("Submit button is DISABLED - form validation incomplete")
            self._log_form_state()
            raise RuntimeError("Submit button is disabled - form validation incomplete. Check required fields above.")
        button.click()
        self.logger.info("Submit button clicked")

    # --- Confirmation ---

    def verify_confirmation_dialog(self, timeout: float = 10) -> bool:
        try:
            self.find_first_visible(locators.DIALOG_CANDIDATES, timeout=timeout)
        except WebDriverException:
            headings = self.visible_texts(locators.SUMMARY_HEADINGS)
            self.logger.info(f"Confirmation dialog not found; headings on page: {headings}")
            return False
        success(self.logger, "Confirmation dialog displayed")
        return True

    def verify_success_message(self) -> bool:
        if not self.is_element_visible(locators.SUCCESS_MESSAGE, timeout=5):
            return False
        text = self.find_element(locators.SUCCESS_MESSAGE).text
        self.logger.info(f"Success message: {text}")
        return "Request was sent" in text

    def get_confirmation_plot_name(self) -> str:
        names = self.find_elements(locators.DIALOG_PLOT_NAME)
        return names[-1].text.strip() if names else ""

    def get_confirmation_cemetery_name(self) -> str:
        names = self.find_elements(locators.DIALOG_CEMETERY)
        return names[0].text.strip() if names else ""
