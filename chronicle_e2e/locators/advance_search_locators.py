# chronicle_e2e/locators/advance_search_locators.py

from selenium.webdriver.common.by import By

from chronicle_e2e.locators.common import button_with_text, by_test_id, combobox_named, element_with_text

# Home page toolbar. The public page labels the button with aria-label,
# the logged-in toolbar only with its text.
ADVANCED_BUTTON_PUBLIC = (By.CSS_SELECTOR, 'button[aria-label="ADVANCED"]')
ADVANCED_BUTTON = (By.XPATH, '//button[contains(., "Advanced") or @aria-label="ADVANCED"]')

# Dialog
CEMETERIES_COMBOBOX = combobox_named("Cemeteries")
PLOT_TAB_BUTTON = (By.CSS_SELECTOR, 'button[aria-label="Plot"]')
# The section combobox is labelled "Number" in the app
SECTION_COMBOBOX = combobox_named("Number")
ROW_COMBOBOX = combobox_named("Row")
NUMBER_INPUT_PUBLIC = (By.CSS_SELECTOR, 'input[data-testid="mat-form-field-input-12"]')
NUMBER_INPUT = by_test_id("filter-section-row-input-12")
SEARCH_BUTTON = button_with_text("SEARCH", ignore_case=False)

# Results
RESULTS_PATH = "/search/advance"
RESULTS_HEADING = element_with_text("h3", "plots found")
RESULTS_SUBHEADING = element_with_text("p", "cemeteries")
RESULT_LIST = by_test_id("advance-search-result-div-search-list")
PLOT_DETAIL_TEXT = (By.CSS_SELECTOR,
                    'div[data-testid="search-advance-advance-search-result-div-content-title"] > span:first-child')
CEMETERY_NAME_TEXT = (By.CSS_SELECTOR,
                      'div[data-testid="search-advance-advance-search-result-div-content-title"] > span:last-child')
CLOSE_BUTTON = (By.CSS_SELECTOR,
                'button[data-testid="search-advance-advance-search-result-button-close-advance-search"]')

# Plot sidebar after clicking a result
SIDEBAR_EDIT_BUTTON = (By.XPATH, '//button[normalize-space(.)="Edit" or contains(., "EDIT")]')


def plot_sidebar_heading(plot_id: str) -> tuple:
    return (By.XPATH, f'//h1[contains(., "{plot_id}")]')


def result_with_text(text: str) -> tuple:
    return (By.XPATH, f'//*[@data-testid="advance-search-result-div-search-list"]//*[contains(text(), "{text}")]')
