# chronicle_e2e/locators/person_locators.py

from selenium.webdriver.common.by import By

from chronicle_e2e.locators.common import button_with_text, by_test_id

# Navigation
PERSON_TAB = by_test_id("content-wrapper-a-3")
ADD_PERSON_BUTTON = by_test_id("content-wrapper-button-add-plot")


def form_input(control_name: str) -> tuple:
    return (By.CSS_SELECTOR, f'input[formcontrolname="{control_name}"]')


# Person form
FIRST_NAME_INPUT = form_input("first_name")
LAST_NAME_INPUT = form_input("last_name")
MIDDLE_NAME_INPUT = form_input("middle_name")
TITLE_INPUT = form_input("title")
GENDER_DROPDOWN = (By.CSS_SELECTOR, 'mat-select[formcontrolname="gender"]')
PHONE_MOBILE_INPUT = form_input("mobile")
PHONE_HOME_INPUT = form_input("home")
PHONE_OFFICE_INPUT = form_input("business")
EMAIL_INPUT = form_input("email")
ADDRESS_INPUT = form_input("street")
CITY_INPUT = form_input("suburb")
STATE_INPUT = form_input("state")
COUNTRY_INPUT = form_input("country")
POST_CODE_INPUT = form_input("postcode")
NOTES_INPUT = form_input("notes")

# Toolbar. Add and edit pages put "save" at different positions.
SAVE_ADD_BUTTON = (By.CSS_SELECTOR, 'button[data-testid="toolbar-manage-button-toolbar-button-1"]')
SAVE_EDIT_BUTTON = (By.CSS_SELECTOR, 'button[data-testid="toolbar-manage-button-toolbar-button-2"]')
CANCEL_BUTTON = (By.CSS_SELECTOR, 'button[data-testid="toolbar-manage-button-toolbar-button"]')
DELETE_BUTTON = button_with_text("Delete", ignore_case=False)
CONFIRM_DIALOG = (By.CSS_SELECTOR, 'mat-dialog-container, [role="dialog"]')

# Filter
FILTER_BUTTON = button_with_text("Filter", ignore_case=False)
FILTER_FIRST_NAME_INPUT = FIRST_NAME_INPUT
FILTER_LAST_NAME_INPUT = LAST_NAME_INPUT
FILTER_APPLY_BUTTON = button_with_text("Apply", ignore_case=False)

# Grid; row 1 is the header
GRID_ROWS = (By.CSS_SELECTOR, '[role="grid"] [role="row"]')
GRID_CELLS = (By.CSS_SELECTOR, '[role="gridcell"]')
GRID_PROGRESS = (By.CSS_SELECTOR, '[role="grid"] [role="progressbar"], [role="grid"] mat-progress-bar')
# Cell positions within a data row
FIRST_NAME_CELL = 1
LAST_NAME_CELL = 3

VALIDATION_ERRORS = (By.CSS_SELECTOR, "mat-error, .mat-error")

EDIT_BUTTON = (By.XPATH, '//button[normalize-space(.)="Edit" or normalize-space(.)="EDIT"]')

# URLs
ADVANCE_TABLE_PATH = "/customer-organization/advance-table?tab=plots"
PERSONS_TABLE_PATTERN = "advance-table?tab=persons"
ADD_PERSON_PATTERN = "/manage/add/person/"
EDIT_PERSON_PATTERN = "/manage/edit/person"
PERSON_API_PATTERN = "/person/"
PERSON_DELETE_API = "/customer-organization/person"
