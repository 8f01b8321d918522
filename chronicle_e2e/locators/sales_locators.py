# chronicle_e2e/locators/sales_locators.py

import re

from selenium.webdriver.common.by import By

from chronicle_e2e.locators.common import button_with_text, by_test_id

# Navigation and list
SALES_MENU_BUTTON = (By.XPATH, '//a[normalize-space(.)="Sales"] | //button[normalize-space(.)="Sales"]')
SALES_TABLE = (By.CSS_SELECTOR, "table")
SALES_TABLE_ROWS = (By.CSS_SELECTOR, "table tbody tr")
FIRST_ROW_CELLS = (By.CSS_SELECTOR, "table tbody tr:first-child td")
CREATE_SALE_BUTTON = button_with_text("CREATE SALE", ignore_case=False)

# Sale form
REFERENCE_INPUT = (By.CSS_SELECTOR, 'input[formcontrolname="reference"], input[placeholder*="Reference"]')
ISSUE_DATE_INPUT = (By.CSS_SELECTOR, 'input[formcontrolname="issue_date"], input[placeholder*="Issue"]')
DUE_DATE_INPUT = (By.CSS_SELECTOR, 'input[formcontrolname="due_date"], input[placeholder*="Due"]')
NOTE_TEXTAREA = (By.CSS_SELECTOR, 'textarea[formcontrolname="note"], textarea')
OWNER_SELECT = (By.CSS_SELECTOR, 'mat-select[formcontrolname="owner"]')
MAT_SELECTS = (By.CSS_SELECTOR, "mat-select")
OPTIONS = (By.CSS_SELECTOR, '[role="option"], mat-option')

# Purchaser
ADD_PURCHASER_BUTTON = button_with_text("ADD PURCHASER", ignore_case=False)
ADD_PERSON_DIALOG = (By.CSS_SELECTOR, 'mat-dialog-container, [role="dialog"]')
PURCHASER_FIRST_NAME_INPUT = (By.CSS_SELECTOR, '[role="dialog"] input[formcontrolname="first_name"]')
PURCHASER_LAST_NAME_INPUT = (By.CSS_SELECTOR, '[role="dialog"] input[formcontrolname="last_name"]')
PURCHASER_EMAIL_INPUT = (By.CSS_SELECTOR, '[role="dialog"] input[formcontrolname="email"]')
ADD_PERSON_BUTTON = (By.XPATH, '//*[@role="dialog" or self::mat-dialog-container]//button[normalize-space(.)="ADD"]')

# Items
ADD_ITEM_BUTTON = button_with_text("ADD ITEM", ignore_case=False)
ADD_DESCRIPTION_BUTTONS = button_with_text("Add description", ignore_case=False)
DROPDOWN_SEARCH_INPUT = (By.CSS_SELECTOR, '.cdk-overlay-container input[type="text"]')
PLOT_SEARCH_INPUT = (By.CSS_SELECTOR,
                     '.cdk-overlay-container input[placeholder*="typing"], .cdk-overlay-container input[type="text"]')
# Row 1 quantity has its own test id; every other numeric input shares the second one
QUANTITY_INPUT_FIRST_ROW = by_test_id("sales-calculator-input")
CALCULATOR_INPUTS = by_test_id("sales-calculator-input-0")

# Summary sits two levels above the ADD ITEM button; leaf divs only, parents repeat their children's text
SUMMARY_TEXTS = (By.XPATH, '//button[contains(., "ADD ITEM")]/../..//div[not(.//div)]')

# Submission
CREATE_BUTTON = (By.XPATH, '//button[normalize-space(.)="CREATE"]')
SAVE_BUTTON = (By.XPATH, '//button[normalize-space(.)="SAVE"]')
CANCEL_BUTTON = (By.XPATH, '//button[normalize-space(.)="CANCEL"]')
CONFIRM_DIALOG = (By.CSS_SELECTOR, 'mat-dialog-container, [role="dialog"]')
DIALOG_CREATE_BUTTON = (By.XPATH,
                        '(//*[@role="dialog" or self::mat-dialog-container]//button[contains(., "CREATE")])[1]')
VALIDATION_ERRORS = (By.CSS_SELECTOR, '.mat-error, .error, [class*="error"]')

INVOICES_API = "/api/v1/invoices/"
INVOICE_LIST_API = "/api/v1/invoices?page="
PLOT_SEARCH_API = "/v2/search/plots-records-persons"
SALES_LIST_URL = re.compile(r"/sales$|/sales\?|/sales-table")
MONEY_PATTERN = re.compile(r"^\$[\d,]+\.\d{2}")
