# chronicle_e2e/locators/common.py

from selenium.webdriver.common.by import By

_UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_LOWER = "abcdefghijklmnopqrstuvwxyz"


def xpath_literal(text: str) -> str:
    """Quotes `text` for use inside an XPath expression."""
    if '"' not in text:
        return f'"{text}"'
    if "'" not in text:
        return f"'{text}'"
    parts = text.split('"')
    return "concat(" + ', \'"\', '.join(f'"{part}"' for part in parts) + ")"


def contains_text_ci(text: str, node: str = ".") -> str:
    """XPath predicate body: `node` contains `text`, ignoring case."""
    return f"contains(translate({node}, '{_UPPER}', '{_LOWER}'), {xpath_literal(text.lower())})"


def button_with_text(text: str, ignore_case: bool = True) -> tuple:
    if ignore_case:
        return (By.XPATH, f"//button[{contains_text_ci(text)}]")
    return (By.XPATH, f"//button[contains(., {xpath_literal(text)})]")


def element_with_text(tag: str, text: str) -> tuple:
    return (By.XPATH, f"//{tag}[contains(., {xpath_literal(text)})]")


def option_exact(name: str) -> tuple:
    """Dropdown option whose visible text is exactly `name`."""
    return (By.XPATH,
            f"//*[@role='option' or self::mat-option][normalize-space(.)={xpath_literal(name)}]")


def option_containing(text: str) -> tuple:
    return (By.XPATH, f"//*[@role='option' or self::mat-option][{contains_text_ci(text)}]")


def combobox_named(name: str) -> tuple:
    """Combobox by accessible name (aria-label, or a mat-form-field label)."""
    literal = xpath_literal(name)
    return (By.XPATH,
            f"//*[(@role='combobox' or self::mat-select)]"
            f"[@aria-label={literal} or ancestor::mat-form-field[.//mat-label[normalize-space(.)={literal}]]]")


TEST_ID = "data-testid"


def by_test_id(test_id: str) -> tuple:
    return (By.CSS_SELECTOR, f'[{TEST_ID}="{test_id}"]')


ANY_OPTION = (By.CSS_SELECTOR, 'mat-option, [role="option"]')
TAB_LIST = (By.CSS_SELECTOR, '[role="tablist"]')


def tab_named(name: str) -> tuple:
    literal = xpath_literal(name)
    return (By.XPATH, f"//*[@role='tab'][@aria-label={literal} or normalize-space(.)={literal}]")


def text_containing(text: str) -> tuple:
    """Innermost element whose own text node contains `text`."""
    return (By.XPATH, f"//*[not(self::script)][contains(text(), {xpath_literal(text)})]")
