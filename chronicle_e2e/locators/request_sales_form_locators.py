# chronicle_e2e/locators/request_sales_form_locators.py

import re

from selenium.webdriver.common.by import By

from chronicle_e2e.locators.common import button_with_text, contains_text_ci, element_with_text, xpath_literal

# Sell plots page
PLOT_LIST_ITEMS = (By.CSS_SELECTOR, '[role="listitem"]')
SELL_PLOTS_ITEMS = (By.CSS_SELECTOR, '[data-testid*="sell-plots"]')


def section_toggle(section_name: str) -> tuple:
    slug = re.sub(r"\s+", "-", section_name.lower())
    return (By.CSS_SELECTOR, f'button[data-testid*="toggle-{slug}"]')


def plot_list_item(plot_name: str) -> tuple:
    return (By.XPATH, f"//*[@role='listitem'][contains(., {xpath_literal(plot_name)})]")


# Plot details
PLOT_NAME = (By.CSS_SELECTOR, "h1, h3")
PLOT_CEMETERY = (By.CSS_SELECTOR, "p")
REQUEST_TO_BUY_BUTTON = button_with_text("request to buy")
ALL_BUTTONS = (By.TAG_NAME, "button")

# Request menu
PRE_NEED_OPTION = (By.XPATH, '//*[@role="menuitem"][contains(., "Pre-need plot purchase")]')
AT_NEED_OPTION = (By.XPATH, '//*[@role="menuitem"][contains(., "At-need plot purchase")]')

# Purchase form
PRE_NEED_HEADING = element_with_text("h1", "Pre-need Plot Purchase")
AT_NEED_HEADING = (By.XPATH, '//h1[contains(., "At-need") or contains(., "Plot Purchase")]')
CONTINUE_BUTTON = button_with_text("continue")
DESCRIPTION_CONTINUE_BUTTON = button_with_text("CONTINUE", ignore_case=False)

# ROI applicant; the app only exposes generated ids here
APPLICANT_FIRST_NAME = (By.CSS_SELECTOR, "#mat-input-0")
APPLICANT_LAST_NAME = (By.CSS_SELECTOR, "#mat-input-1")
APPLICANT_EMAIL = (By.CSS_SELECTOR, "#mat-input-6")


def input_with_placeholder(placeholder: str, control_name: str = None) -> tuple:
    selector = f'input[placeholder*="{placeholder}"]'
    if control_name:
        selector += f', input[formcontrolname="{control_name}"]'
    return (By.CSS_SELECTOR, selector)


# Interment details (at-need only)
DECEASED_FIRST_NAME = input_with_placeholder("First Name", "firstName")
DECEASED_LAST_NAME = input_with_placeholder("Last Name", "lastName")
DECEASED_MIDDLE_NAME = input_with_placeholder("Middle Name", "middleName")
DATE_OF_BIRTH = input_with_placeholder("Date of Birth")
DATE_OF_DEATH = input_with_placeholder("Date of Death")
PLACE_OF_DEATH = input_with_placeholder("Place of Death")
INTERMENT_DATE = input_with_placeholder("Date of Interment")
INTERMENT_TIME = input_with_placeholder("Time of Interment")
FUNERAL_DIRECTOR = input_with_placeholder("Funeral Director")

# ROI
ROI_PANEL_COLLAPSED = (By.XPATH,
                       '//mat-expansion-panel[contains(., "ROI")]'
                       '//mat-expansion-panel-header[@aria-expanded="false"]')
RIGHT_TYPE_SELECT = (By.XPATH,
                     '//mat-select[@formcontrolname="rightType"]'
                     f' | //*[(@role="combobox" or self::mat-select)][{contains_text_ci("right type")}'
                     f' or {contains_text_ci("right type", "@placeholder")}]')
TERM_OF_RIGHT_SELECT = (By.XPATH,
                        '//mat-select[@formcontrolname="termOfRight"]'
                        f' | //*[(@role="combobox" or self::mat-select)][{contains_text_ci("term")}'
                        f' or {contains_text_ci("term", "@placeholder")}]')

# Terms and signature
TERMS_CHECKBOX = (By.CSS_SELECTOR, ".mat-checkbox-inner-container")
SIGNATURE_PAD = (By.CSS_SELECTOR, "signature-pad canvas, canvas")

# Summary and submission
SUMMARY_HEADINGS = (By.CSS_SELECTOR, "h1, h3")
SUBMIT_BUTTON = button_with_text("SUBMIT A REQUEST", ignore_case=False)
FORM_FIELDS = (By.CSS_SELECTOR, "form input, form textarea, form mat-select")

# Confirmation dialog
DIALOG_CANDIDATES = (
    (By.CSS_SELECTOR, '[role="dialog"]'),
    (By.CSS_SELECTOR, "mat-dialog-container"),
    (By.CSS_SELECTOR, ".mat-dialog-container"),
    (By.CSS_SELECTOR, ".cdk-overlay-pane"),
)
SUCCESS_MESSAGE = element_with_text("h3", "Request was sent")
DIALOG_PLOT_NAME = (By.CSS_SELECTOR, '[role="dialog"] h3')
DIALOG_CEMETERY = (By.CSS_SELECTOR, '[role="dialog"] p')

# "A A 1 For Sale", as rendered in the section plot list
FOR_SALE_PLOT_PATTERN = re.compile(r"[A-Z]\s+[A-Z]\s+\d+\s+For Sale", re.IGNORECASE)
PLOT_NAME_PATTERN = re.compile(r"^[A-Z]\s+[A-Z]\s+\d+")
PURCHASE_URL_PATTERN = re.compile(r"/purchase/(Pre-need|At-need)")


def section_heading(section: str) -> tuple:
    return (By.XPATH, f"//*[self::h1 or self::h2 or self::h3 or self::h4][{contains_text_ci(section)}]")
