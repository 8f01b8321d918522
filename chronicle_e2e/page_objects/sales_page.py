# chronicle_e2e/page_objects/sales_page.py

import re
import time
from typing import Iterable, List, Optional

from selenium.common.exceptions import TimeoutException
from selenium.webdriver.common.keys import Keys

from chronicle_e2e.core.logging_config import success
from chronicle_e2e.data.test_data import SaleData, SaleItem, SaleSummary
from chronicle_e2e.locators import sales_locators as locators
from chronicle_e2e.utils.network_helper import network_checkpoint, wait_for_api_endpoint
from chronicle_e2e.utils.wait_helpers import poll_until

from .base_page import BasePage

# Each item row has an item and a plot combobox; the owner select comes first
ITEM_SELECT_OFFSET = 1
PLOT_SELECT_OFFSET = 2
SELECTS_PER_ROW = 2

# Row 1 keeps its quantity input apart, so the shared calculator inputs start
# with row 1's price and discount, then qty/price/discount for each later row
FIRST_ROW_SHARED_INPUTS = 2
SHARED_INPUTS_PER_ROW = 3


def extract_summary_values(texts: Iterable[str]) -> SaleSummary:
    """Subtotal, discount, VAT and total from the summary texts, in that order."""
    values = [re.sub(r"\s+", "", text) for text in texts if locators.MONEY_PATTERN.match(text.strip())]
    values += ["$0.00"] * (4 - len(values))
    return SaleSummary(subtotal=values[0], discount=values[1], vat=values[2], total=values[3])


def calculator_indices(row: int) -> List[Optional[int]]:
    """Positions of qty, price and discount among the shared calculator inputs (qty is None on row 0)."""
    if row == 0:
        return [None, 0, 1]
    start = FIRST_ROW_SHARED_INPUTS + (row - 1) * SHARED_INPUTS_PER_ROW
    return [start, start + 1, start + 2]


def pick_plot_option(options: List[str], plot_name: str) -> Optional[int]:
    """
    Index of the option to pick for `plot_name`.

    An option reading exactly the plot name, or the name followed by its
    status, is preferred unless it is occupied; an occupied match is the
    fallback since the plot field is required.
    """
    prefix = f"{plot_name} "
    stripped = [option.strip() for option in options]
    for index, text in enumerate(stripped):
        if (text == plot_name or text.startswith(prefix)) and "Occupied" not in text:
            return index
    for index, text in enumerate(stripped):
        if text.startswith(prefix):
            return index
    return None


def purchaser_matches(cell_text: str, expected: str) -> bool:
    """The list truncates long names ("Linda Rodr...")."""
    cell_text, expected = cell_text.strip(), expected.strip()
    shown = re.sub(r"\.\.\.$", "", cell_text)
    return bool(cell_text) and (expected in cell_text or shown in expected)


class SalesPage(BasePage):
    """Page Object for the sales invoice list and the create sale form."""

    # --- List ---

    def navigate_to_sales(self):
        self.logger.info("Navigating to Sales page")
        self.click_element(locators.SALES_MENU_BUTTON)
        self.wait_until_visible(locators.SALES_TABLE, timeout=10)

    def validate_sales_table_loaded(self):
        self.wait_until_visible(locators.SALES_TABLE, timeout=10)
        self.logger.info("Sales table is visible")

    def get_sales_count(self) -> int:
        count = len(self.find_elements(locators.SALES_TABLE_ROWS))
        self.logger.info(f"Sales table has {count} rows")
        return count

    def click_create_sale(self):
        self.click_element(locators.CREATE_SALE_BUTTON)
        time.sleep(1)

    # --- Header fields ---

    def _fill(self, locator: tuple, value: str, label: str):
        self.logger.info(f"Filling {label}: {value}")
        self.fill_input(locator, value, timeout=10)
        time.sleep(0.5)

    def fill_reference(self, reference: str):
        self._fill(locators.REFERENCE_INPUT, reference, "reference")

    def fill_issue_date(self, issue_date: str):
        self._fill(locators.ISSUE_DATE_INPUT, issue_date, "issue date")

    def fill_due_date(self, due_date: str):
        self._fill(locators.DUE_DATE_INPUT, due_date, "due date")

    def fill_note(self, note: str):
        self._fill(locators.NOTE_TEXTAREA, note, "note")

    def select_owner(self, owner_name: Optional[str] = None):
        """Picks `owner_name`, or the first owner when none is given."""
        self.logger.info(f"Selecting owner: {owner_name or 'first available'}")
        owner = self.wait_until_visible(locators.OWNER_SELECT, timeout=10)
        self.logger.info(f'Owner value before selection: "{owner.text.strip()}"')
        owner.click()
        time.sleep(1.5)
        self.wait_until_visible(locators.OPTIONS, timeout=5)

        options = self.visible_elements(locators.OPTIONS)
        self.logger.info(f"Available owner options: {[option.text.strip() for option in options]}")
        if owner_name:
            options = [option for option in options if owner_name in option.text] or options
        options[0].click()
        time.sleep(2)
        # mat-select only marks the form dirty on a change event
        self.driver.execute_script(
            "arguments[0].dispatchEvent(new Event('change', {bubbles: true}));",
            self.find_element(locators.OWNER_SELECT),
        )
        time.sleep(0.5)

        value = self.find_element(locators.OWNER_SELECT).text.strip()
        self.logger.info(f'Owner value after selection: "{value}"')
        if not value or value == "Owner":
            self.logger.error("Owner selection may have failed - combobox still shows empty or placeholder text")

    # --- Purchaser ---

    def click_add_purchaser(self):
        self.click_element(locators.ADD_PURCHASER_BUTTON, timeout=10)
        time.sleep(2)

    def add_new_purchaser(self, first_name: str, last_name: str, email: str):
        self.logger.info(f"Adding new purchaser: {first_name} {last_name}")
        try:
            self.wait_until_visible(locators.ADD_PERSON_DIALOG, timeout=10)
            time.sleep(1)
            self._fill(locators.PURCHASER_FIRST_NAME_INPUT, first_name, "first name")
            self._fill(locators.PURCHASER_LAST_NAME_INPUT, last_name, "last name")
            self._fill(locators.PURCHASER_EMAIL_INPUT, email, "email")
            time.sleep(1)
            self.click_element(locators.ADD_PERSON_BUTTON)
            time.sleep(2)
        except TimeoutException as e:
            self.logger.error(f"Failed to add purchaser: {e.msg}")
            raise RuntimeError(f"Could not add purchaser: {first_name} {last_name}") from e
        success(self.logger, f"Successfully added purchaser: {first_name} {last_name}")

    # --- Items ---

    def _description_buttons(self):
        return self.find_elements(locators.ADD_DESCRIPTION_BUTTONS)

    def click_add_item(self):
        before = len(self._description_buttons())
        self.logger.info(f'Current "Add description" buttons: {before}')
        # A closing overlay can still cover the button
        time.sleep(1.5)
        self.js_click(locators.ADD_ITEM_BUTTON)
        if poll_until(lambda: len(self._description_buttons()) > before, timeout=10, interval=0.5,
                      description="new item row"):
            time.sleep(1)
        else:
            self.logger.warning("New item row may not be fully ready, continuing anyway")

    def _visible_options(self):
        self.wait_until_visible(locators.OPTIONS, timeout=5)
        return self.visible_elements(locators.OPTIONS)

    def _select_item(self, row: int, description: str):
        index = ITEM_SELECT_OFFSET + row * SELECTS_PER_ROW
        self.logger.info(f"  - Selecting item: {description} (combobox index: {index})")
        self.find_elements(locators.MAT_SELECTS)[index].click()
        time.sleep(1.5)
        self.fill_input(locators.DROPDOWN_SEARCH_INPUT, description, timeout=5)
        time.sleep(1.5)

        options = self._visible_options()
        texts = [option.text.strip() for option in options]
        self.logger.info(f"Available item options: {texts}")
        matching = [option for option, text in zip(options, texts) if description in text]
        if not matching:
            self.logger.error(f'Item "{description}" not found in dropdown. Available: {texts}')
            self.press_key(Keys.ESCAPE)
            raise RuntimeError(f'Item "{description}" not found in item dropdown')
        matching[0].click()
        time.sleep(2)

        shown = self.find_elements(locators.MAT_SELECTS)[index].text
        if description not in shown:
            self.logger.error(f'Item selection may have failed - combobox shows "{shown}" instead of "{description}"')

    def _select_plot(self, row: int, plot_name: str):
        index = PLOT_SELECT_OFFSET + row * SELECTS_PER_ROW
        self.logger.info(f"  - Selecting plot: {plot_name} (combobox index: {index})")
        since = network_checkpoint(self.driver)
        self.find_elements(locators.MAT_SELECTS)[index].click()
        time.sleep(2)
        search_inputs = self.visible_elements(locators.PLOT_SEARCH_INPUT)
        if not search_inputs:
            raise RuntimeError("Plot search input did not appear")
        search = search_inputs[-1]
        search.clear()
        search.send_keys(plot_name)
        time.sleep(1)
        if not wait_for_api_endpoint(self.driver, locators.PLOT_SEARCH_API, timeout=10, since=since, optional=True):
            self.logger.info("Plot search API not called (data may be cached), continuing...")

        options = self._visible_options()
        texts = [option.text.strip() for option in options]
        self.logger.info(f"Available plot options: {texts}")
        choice = pick_plot_option(texts, plot_name)
        if choice is None:
            self.logger.error(f'Cannot find plot "{plot_name}" in options. Available: {texts}')
            self.press_key(Keys.ESCAPE)
            time.sleep(1)
            return
        if "Occupied" in texts[choice]:
            self.logger.warning(f'Plot "{plot_name}" is occupied, but selecting it anyway: {texts[choice]}')
        options[choice].click()
        time.sleep(2)

    def _fill_number(self, element, value, label: str):
        self.replace_value(element, str(value))
        time.sleep(0.3)
        self.logger.info(f"  - {label}: {value}")

    def fill_item_details(self, row: int, item: SaleItem):
        self.logger.info(f"Filling item {row + 1}: {item.description}")
        time.sleep(1.5)
        self._select_item(row, item.description)
        # Price may auto-fill from the item
        time.sleep(1.5)
        if item.related_plot:
            self._select_plot(row, item.related_plot)

        shared = self.find_elements(locators.CALCULATOR_INPUTS)
        qty_index, price_index, discount_index = calculator_indices(row)
        if qty_index is None:
            quantity = self.find_element(locators.QUANTITY_INPUT_FIRST_ROW)
        else:
            self.logger.info(f"Row {row + 1} input indices: qty={qty_index}, price={price_index}, "
                             f"discount={discount_index}")
            quantity = shared[qty_index]
        self._fill_number(quantity, item.quantity, "Quantity")
        self._fill_number(shared[price_index], item.price, "Price")
        self._fill_number(shared[discount_index], item.discount, "Discount")
        time.sleep(0.8)
        success(self.logger, f"Item {row + 1} filled successfully")

    def _row_ready(self, row: int) -> bool:
        buttons = self._description_buttons()
        return len(buttons) > row and buttons[row].is_displayed()

    def add_items(self, items: List[SaleItem]):
        self.logger.info(f"Adding {len(items)} items to sale")
        for row, item in enumerate(items):
            if row > 0:
                self.click_add_item()
                if not poll_until(lambda: self._row_ready(row), timeout=15, interval=0.5,
                                  description=f"item row {row + 1}"):
                    raise RuntimeError(f"New item row {row + 1} did not appear or is not ready")
                time.sleep(2)
            self.fill_item_details(row, item)

    # --- Summary ---

    def get_sale_summary(self) -> SaleSummary:
        time.sleep(2)
        texts = [element.text for element in self.find_elements(locators.SUMMARY_TEXTS)]
        summary = extract_summary_values(texts)
        self.logger.info(f"Sale Summary: {summary}")
        return summary

    def validate_sale_summary(self, expected: SaleSummary):
        actual = self.get_sale_summary()
        self.logger.info(f"Expected: {expected}")
        assert actual == expected, f"Sale summary mismatch. Expected {expected}, got {actual}"
        success(self.logger, "Sale summary validation passed")

    # --- Submission ---

    def click_create(self):
        time.sleep(1)
        buttons = self.find_elements(locators.CREATE_BUTTON)
        if not buttons:
            self.logger.error("CREATE button not found")
            raise RuntimeError("CREATE button not found on page")
        button = buttons[0]
        self.logger.info(f"CREATE button visible: {button.is_displayed()}, enabled: {button.is_enabled()}")
        if not button.is_enabled():
            self.logger.warning("CREATE button is disabled - checking form validation")
            errors = [text for text in self.visible_texts(locators.VALIDATION_ERRORS) if text]
            if errors:
                self.logger.error(f"Form validation errors: {errors}")

        self.wait_until_visible(locators.CREATE_BUTTON, timeout=10)
        self.logger.info(f"URL before CREATE click: {self.driver.current_url}")
        since = network_checkpoint(self.driver)
        self.js_click(locators.CREATE_BUTTON)
        time.sleep(1.5)

        if self.is_element_visible(locators.CONFIRM_DIALOG):
            self.logger.info("Confirmation dialog appeared")
            self.click_element(locators.DIALOG_CREATE_BUTTON, timeout=5)
        else:
            self.logger.warning("No confirmation dialog appeared, proceeding...")

        wait_for_api_endpoint(self.driver, locators.INVOICES_API, timeout=30, since=since)
        self.wait_for_url_matches(locators.SALES_LIST_URL, timeout=15)
        self.logger.info("Navigated back to sales list page")
        if not wait_for_api_endpoint(self.driver, locators.INVOICE_LIST_API, timeout=20, since=since, optional=True):
            self.logger.warning("Invoice list API timeout, but will proceed with table validation")
        self.wait_until_visible(locators.SALES_TABLE, timeout=10)
        success(self.logger, "Sale created")

    def click_save(self):
        self.click_element(locators.SAVE_BUTTON)
        time.sleep(3)

    def click_cancel(self):
        self.click_element(locators.CANCEL_BUTTON)

    def validate_purchaser_in_table(self, expected_name: str):
        self.wait_until_visible(locators.SALES_TABLE, timeout=10)
        cells = self.find_elements(locators.FIRST_ROW_CELLS)
        shown = cells[2].text.strip() if len(cells) > 2 else ""
        if not purchaser_matches(shown, expected_name):
            self.logger.error(f'Purchaser name mismatch. Expected to contain: "{expected_name}", Found: "{shown}"')
            raise RuntimeError(f'Purchaser name mismatch. Expected to contain: "{expected_name}", Found: "{shown}"')
        success(self.logger, f"Purchaser name validated: {shown}")

    def create_sale(self, sale: SaleData):
        """Fills the whole form from `sale`; does not submit it."""
        self.fill_reference(sale.reference)
        if sale.issue_date:
            self.fill_issue_date(sale.issue_date)
        if sale.due_date:
            self.fill_due_date(sale.due_date)
        if sale.note:
            self.fill_note(sale.note)
        self.select_owner(sale.owner or None)
        purchaser = sale.purchaser
        if purchaser:
            self.click_add_purchaser()
            if purchaser.first_name and purchaser.last_name and purchaser.email:
                self.add_new_purchaser(purchaser.first_name, purchaser.last_name, purchaser.email)
        self.add_items(sale.items)
        self.logger.info("Sale creation form completed")
