# chronicle_e2e/locators/search_box_locators.py

from selenium.webdriver.common.by import By

from chronicle_e2e.locators.common import by_test_id, contains_text_ci, xpath_literal

PUBLIC_SEARCH_INPUT = by_test_id("autocomplete-base-routing-input-autocomplete-search-input")
# Header search box, logged in or not
GLOBAL_SEARCH_INPUT = (By.XPATH,
                       f"(//input[@type='text'][{contains_text_ci('search', '@placeholder')}]"
                       f" | //input[{contains_text_ci('search', '@data-testid')}])[1]")
CEMETERY_RESULT_ITEMS = (By.CSS_SELECTOR, "cl-search-cemetery-item")
PERSON_RESULT_ITEMS = (By.CSS_SELECTOR, "cl-search-person-item")


def person_result_with_text(text: str) -> tuple:
    return (By.XPATH, f"//cl-search-person-item[contains(., {xpath_literal(text)})]")


ROI_HOLDER_ROLE = "(ROI Holder)"
