# chronicle_e2e/locators/interment_locators.py

from selenium.webdriver.common.by import By

from chronicle_e2e.locators.common import button_with_text, by_test_id, xpath_literal

ADD_INTERMENT_BUTTON = by_test_id("plot-details-edit-button-add-interment-btn")

# Form toolbar
SAVE_BUTTON = button_with_text("save")
CANCEL_BUTTON = button_with_text("cancel")

# Deceased person
FIRST_NAME = (By.CSS_SELECTOR, 'input[aria-label="First name"]')
LAST_NAME = (By.CSS_SELECTOR, 'input[aria-label="Last name"]')
MIDDLE_NAME = (By.CSS_SELECTOR, 'input[aria-label="Middle name"]')
TITLE = (By.CSS_SELECTOR, 'input[aria-label="Title"]')
GENDER_DROPDOWN = (By.CSS_SELECTOR, 'mat-select[aria-label="Gender"]')
DATE_OF_BIRTH = (By.CSS_SELECTOR, 'input[aria-label="Date of Birth"]')
DATE_OF_DEATH = (By.CSS_SELECTOR, 'input[aria-label="Date of Death"]')
AGE = (By.CSS_SELECTOR, 'input[aria-label="Age"]')
CAUSE_OF_DEATH = (By.CSS_SELECTOR, 'input[aria-label="Cause of death"]')
OCCUPATION = (By.CSS_SELECTOR, 'input[aria-label="Occupation"]')

# Interment details
INTERMENT_TYPE_DROPDOWN = (By.CSS_SELECTOR, 'mat-select[aria-label="Interment type"]')
INTERMENT_DEPTH = (By.CSS_SELECTOR, 'input[aria-label="Interment depth"]')
INTERMENT_DATE = (By.CSS_SELECTOR, 'input[aria-label="Interment Date"]')

# Right sidebar, related people
ADD_INTERMENT_APPLICANT_BUTTON = button_with_text("Interment applicant", ignore_case=False)
ADD_NEXT_OF_KIN_BUTTON = button_with_text("Next of kin", ignore_case=False)

# Plot detail page after save
INTERMENTS_TAB = (By.XPATH, '//*[@aria-label="INTERMENTS" or (@role="tab" and contains(., "INTERMENTS"))]')
EDIT_INTERMENT_BUTTON = (By.XPATH,
                         '//*[@data-testid="interment-item-button-edit-interment"]'
                         ' | //button[contains(., "Edit interment")]')


def interment_type_option(interment_type: str) -> tuple:
    return (By.XPATH, f"//mat-option[contains(., {xpath_literal(interment_type)})]")


def deceased_name_heading(name: str) -> tuple:
    return (By.XPATH, f"//h3[contains(., {xpath_literal(name)})]")


def interment_type_label(interment_type: str) -> tuple:
    return (By.XPATH, f"//p[contains(., {xpath_literal(interment_type)})]")


ADD_INTERMENT_PATH = "/manage/add/interment"
MANAGE_PATH = "/manage/"

# Section switches on the edit form
DECEASED_PERSON_SECTION = (By.XPATH, '//button[normalize-space(.)="Deceased person" or @aria-label="Deceased person"]')
INTERMENT_DETAILS_SECTION = (By.XPATH,
                             '//button[normalize-space(.)="Interment details" or @aria-label="Interment details"]')
EDIT_INTERMENT_PATH = "/manage/edit/interment/"
