# chronicle_e2e/locators/roi_locators.py

from selenium.webdriver.common.by import By

from chronicle_e2e.locators.common import button_with_text, by_test_id, contains_text_ci, text_containing, xpath_literal

# Dashboard
SEE_ALL_PLOTS_BUTTON = by_test_id("plots-statistic-a-button")

# Plot list filter
FILTER_BUTTON = by_test_id("shared-all-plots-button-filter")
VACANT_FILTER_OPTION = by_test_id("statuses-div-control-button")
FILTER_DONE_BUTTON = by_test_id("filter-button-submit-button")
PLOT_LIST_ITEMS = (By.CSS_SELECTOR, '[role="listitem"], mat-list-item, li')


def section_toggle(section: str) -> tuple:
    return by_test_id(f"shared-all-plots-button-toggle-{section.lower()}-0")


def text_exact(text: str) -> tuple:
    return (By.XPATH, f"//*[normalize-space(text())={xpath_literal(text)}]")


# Plot detail
PLOT_STATUS = ("VACANT", "RESERVED", "OCCUPIED")
PLOT_STATUS_BADGE = (By.XPATH, "//span[" + " or ".join(f'contains(., "{status}")' for status in PLOT_STATUS) + "]")
ADD_ROI_BUTTON = by_test_id("plot-details-edit-button-add-roi-btn")
ADD_ROI_BUTTON_BY_TEXT = button_with_text("add roi")
ROI_TAB = (By.XPATH, '//*[@role="tab"][normalize-space(.)="ROI" or @aria-label="ROI"]')
EDIT_ROI_BUTTON = button_with_text("EDIT ROI", ignore_case=False)

# ROI form
ROI_FORM_TITLE = by_test_id("roi-form-h1-title-0")
CANCEL_BUTTON = by_test_id("toolbar-manage-button-toolbar-button")
SAVE_BUTTON = by_test_id("toolbar-manage-button-toolbar-button-2")
SAVE_BUTTON_BY_TEXT = (By.XPATH, '//button[normalize-space(.)="SAVE" or normalize-space(.)="Save"]')
SAVE_BUTTON_ANY = button_with_text("save")
# Event type, right type, term of right, in that order
FORM_SELECTS = (By.CSS_SELECTOR, "mat-select")
FEE_INPUT = by_test_id("roi-form-input-number-0")
FEE_INPUT_FALLBACK = (By.CSS_SELECTOR, 'input[type="number"]')
PAYMENT_DATE_INPUT = by_test_id("roi-form-input-0")
CERTIFICATE_INPUT = by_test_id("roi-form-input-text-0")
CERTIFICATE_INPUT_FALLBACK = (By.CSS_SELECTOR, 'input[placeholder*="Certificate"], input[aria-label*="Certificate"]')
NOTES_TEXTAREA = (By.CSS_SELECTOR, 'textarea[aria-label*="Note"], textarea[placeholder*="Note"], textarea')


def labelled_field(label: str, tag: str = "input") -> tuple:
    """Form field whose aria-label or placeholder mentions `label`, ignoring case."""
    return (By.XPATH, f"//{tag}[{contains_text_ci(label, '@aria-label')} or {contains_text_ci(label, '@placeholder')}]")


FEE_INPUT_BY_LABEL = labelled_field("fee")
CERTIFICATE_INPUT_BY_LABEL = labelled_field("certificate")
NOTES_BY_LABEL = labelled_field("notes", tag="textarea")

# Roles
ADD_ROI_HOLDER_BUTTON = (By.CSS_SELECTOR,
                         '[data-testid="roi-form-div-roiholders-0"] [data-testid="plus-item-button-plus-button-0"]')
ADD_ROI_APPLICANT_BUTTON = (By.CSS_SELECTOR,
                            '[data-testid="roi-form-div-roiapplicant-1"] [data-testid="plus-item-button-plus-button-0"]')

# Person dialog (holder and applicant share it)
PERSON_FIRST_NAME_INPUT = by_test_id("autocomplete-wrapper-input")
PERSON_LAST_NAME_INPUT = by_test_id("autocomplete-wrapper-input-0")
PERSON_FIRST_NAME_TEXTBOX = (By.XPATH, '//*[@role="dialog" or self::mat-dialog-container]'
                                       '//input[@aria-label="First name" or @placeholder="First name"]')
PERSON_LAST_NAME_TEXTBOX = (By.XPATH, '//*[@role="dialog" or self::mat-dialog-container]'
                                      '//input[@aria-label="Last name" or @placeholder="Last name"]')
PERSON_PHONE_INPUT = (By.CSS_SELECTOR, 'input[placeholder="Phone (mobile)"]')
PERSON_EMAIL_INPUT = by_test_id("form-person-component-input-email")
PERSON_EMAIL_TEXTBOX = (By.XPATH, '//*[@role="dialog" or self::mat-dialog-container]'
                                   '//input[@aria-label="E-mail" or @placeholder="E-mail"]')
PERSON_ADD_BUTTON = (By.XPATH, '//*[@role="dialog" or self::mat-dialog-container]//button[normalize-space(translate(., "ADD", "add"))="add"]')

ROI_HOLDER_LABEL = "ROI HOLDER"
ROI_APPLICANT_LABEL = "ROI APPLICANT"

# Activity notes
ACTIVITY_NOTES_INPUT = by_test_id("user-log-activity-textarea-add-notes")
ACTIVITY_NOTES_SEND_BUTTON = (By.CSS_SELECTOR, '[data-testid="user-log-activity-div-input-note-container"] mat-icon')
ACTIVITY_NOTE_MENU = (By.CSS_SELECTOR, ".mat-icon.mat-menu-trigger")
ACTIVITY_NOTE_EDIT_MENU_ITEM = (By.XPATH, '//*[@role="menuitem"][contains(., "Edit")]')
ACTIVITY_NOTE_EDIT_TEXTAREA = (By.CSS_SELECTOR, "textarea")
ACTIVITY_NOTE_EDIT_SAVE_BUTTON = (By.CSS_SELECTOR, 'mat-icon[svgicon="check-edit"]')


def activity_note_text(note: str) -> tuple:
    return text_containing(note)


# URLs
PLOTS_LIST_PATH = "/plots"
PLOT_DETAIL_PATTERN = "/plots/"
ADD_ROI_PATH = "/manage/add/roi"
